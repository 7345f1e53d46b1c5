"""Tests for the Spritz hash accumulator."""

import copy
import random

import pytest

from pyspritz import spritz

from .util import random_split_bytes

MESSAGES = [b"", b"a", b"ABC", bytes(range(256)) * 3]


@pytest.mark.parametrize("message", MESSAGES, ids=lambda m: f"msg{len(m)}")
def test_chunk_independence(message):
    """Writing chunks in order equals writing the whole message once."""
    expected = spritz.digest(message, 32)
    rng = random.Random(len(message))
    for _ in range(5):
        h = spritz.new_hash(32)
        for chunk in random_split_bytes(message, rng):
            h.write(chunk)
        assert h.sum() == expected


def test_empty_message_digest():
    h = spritz.new_hash(32)
    assert h.write(b"") == 0
    first = h.sum(b"")
    assert len(first) == 32
    assert h.sum(b"") == first


def test_sum_is_repeatable():
    h = spritz.new_hash(16)
    h.write(b"some data")
    assert h.sum() == h.sum() == h.digest()


def test_write_after_sum():
    """sum() must not perturb the absorbed history."""
    h = spritz.new_hash(32)
    h.write(b"first part, ")
    h.sum()
    h.write(b"second part")
    assert h.sum() == spritz.digest(b"first part, second part", 32)


def test_sum_appends_to_prefix():
    h = spritz.new_hash(8)
    h.write(b"x")
    d = h.sum()
    assert h.sum(b"prefix:") == b"prefix:" + d
    assert h.sum(bytearray(b"\x00")) == b"\x00" + d


def test_reset_equivalence():
    h = spritz.new_hash(24)
    h.write(b"garbage that should be forgotten")
    h.reset()
    assert h.bytes_in == 0
    assert h.digest_size() == 24
    h.write(b"message")
    assert h.sum() == spritz.digest(b"message", 24)


@pytest.mark.parametrize("size", [0, 1, 7, 32, 64, 255, 256, 300])
def test_digest_size(size):
    h = spritz.new_hash(size)
    h.write(b"ABC")
    assert h.digest_size() == size
    assert h.block_size() == 1
    assert len(h.sum()) == size


def test_zero_size_digest_is_empty():
    assert spritz.digest(b"anything", 0) == b""
    assert spritz.new_hash(0).sum(b"p") == b"p"


def test_size_is_domain_separated():
    """A shorter digest is not a prefix of a longer one."""
    assert spritz.digest(b"ABC", 32)[:16] != spritz.digest(b"ABC", 16)


def test_large_sizes_not_folded_to_a_byte():
    """Sizes 16 and 272 share a low nibble yet absorb different high parts."""
    assert spritz.digest(b"ABC", 272)[:16] != spritz.digest(b"ABC", 16)


def test_message_sensitivity():
    assert spritz.digest(b"ABC") != spritz.digest(b"ABD")
    assert spritz.digest(b"") != spritz.digest(b"\x00")


def test_clone_is_independent():
    h = spritz.new_hash(32)
    h.write(b"common ")
    c = h.clone()
    c.write(b"branch")
    assert h.sum() == spritz.digest(b"common ", 32)
    assert c.sum() == spritz.digest(b"common branch", 32)
    assert copy.deepcopy(h).sum() == h.sum()
    assert h.copy().bytes_in == len(b"common ")


def test_update_alias():
    h = spritz.new_hash()
    h.update(b"ABC")
    assert h.digest() == spritz.digest(b"ABC", spritz.DIGESTBYTES)
    assert h.hexdigest() == h.digest().hex()


def test_accepts_buffer_types():
    data = b"buffer types"
    expected = spritz.digest(data)
    for buf in (bytearray(data), memoryview(data)):
        h = spritz.new_hash()
        assert h.write(buf) == len(data)
        assert h.sum() == expected
