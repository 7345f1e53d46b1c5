"""Spritz stream cipher and hash.

Stream usage:
    st = new_stream(key)
    ct = st.update(message)      # or st.transform(dst, src)

Hash usage:
    h = new_hash(32)
    h.write(data)
    tag = h.sum()                # does not disturb h; keep writing if needed
"""

from __future__ import annotations

from ._state import DEFAULT_N, State
from .util import Buffer, output_buffer, written_view

BLOCKBYTES = 1
DIGESTBYTES = 32
N = DEFAULT_N


def _check_size(size) -> int:
    if not isinstance(size, int) or isinstance(size, bool):
        raise TypeError("size must be an int")
    if size < 0:
        raise ValueError("size must be non-negative")
    return size


class Stream:
    """Spritz keystream generator.

    The keystream is continuous for the life of the instance: feeding data in
    several chunks gives the same result as one call on the concatenation.
    """

    __slots__ = ("_st", "_bytes_out")

    def __init__(self, key: Buffer) -> None:
        """Create a stream from ``key`` (any length, including empty)."""
        self._st = State(N)
        self._st.key_setup(memoryview(key).cast("B"))
        self._bytes_out = 0

    @property
    def bytes_out(self) -> int:
        """Total keystream bytes consumed so far."""
        return self._bytes_out

    def transform(self, destination: Buffer, source: Buffer) -> None:
        """XOR ``source`` with the keystream into ``destination``.

        ``destination`` and ``source`` may be the same buffer.

        Raises:
            TypeError: If destination is shorter than source.
        """
        src = memoryview(source).cast("B")
        dst = memoryview(destination).cast("B")
        if len(dst) < len(src):
            raise TypeError("destination length must be at least len(source)")
        drip = self._st.drip
        for idx, b in enumerate(src):
            dst[idx] = b ^ drip()
        self._bytes_out += len(src)

    def update(self, data: Buffer, into: Buffer | None = None) -> bytearray | memoryview:
        """Encrypt (or decrypt) a chunk.

        Args:
            data: Input bytes.
            into: Optional destination buffer; must be >= len(data).

        Returns:
            The output as bytearray if into not provided, memoryview of into otherwise.

        Raises:
            TypeError: If destination buffer is too small.
        """
        length = len(memoryview(data).cast("B"))
        out = output_buffer(length, into, "len(data)")
        self.transform(out, data)
        return written_view(out, into, length)

    def keystream(self, length: int) -> bytearray:
        """Return the next ``length`` raw keystream bytes."""
        if length < 0:
            raise ValueError("length must be non-negative")
        out = bytearray(length)
        self.transform(out, bytes(length))
        return out


class Hash:
    """Spritz hash accumulator with a fixed output size.

    ``sum()`` works on a copy of the state, so it can be called any number of
    times and interleaved with further ``write()`` calls.

    The digest size is absorbed as a single value for domain separation, the
    same way message bytes are absorbed and without truncation to a byte.
    With the 256-entry state its low nibble is ``size % 16`` and its high part
    ``size // 16`` selects swap partner ``(128 + size // 16) % 256``. Two
    sizes therefore feed identical separation input only when they agree
    modulo 4096, and sizes that large differ in output length anyway.
    """

    __slots__ = ("_st", "_size", "_bytes_in")

    def __init__(self, size: int = DIGESTBYTES) -> None:
        """Create an accumulator producing ``size`` byte digests.

        Raises:
            TypeError: If size is not an int.
            ValueError: If size is negative.
        """
        self._size = _check_size(size)
        self._st = State(N)
        self._bytes_in = 0

    @property
    def bytes_in(self) -> int:
        """Total message bytes written since construction or reset()."""
        return self._bytes_in

    def clone(self) -> Hash:
        """Return an independent accumulator with the same absorbed history."""
        other = Hash.__new__(Hash)
        other._size = self._size
        other._st = self._st.clone()
        other._bytes_in = self._bytes_in
        return other

    copy = clone

    def __deepcopy__(self, memo=None) -> Hash:
        return self.clone()

    def reset(self) -> None:
        """Return to the just-constructed condition, keeping the size."""
        self._st.initialize(N)
        self._bytes_in = 0

    def write(self, data: Buffer) -> int:
        """Absorb ``data`` and return the number of bytes consumed."""
        mv = memoryview(data).cast("B")
        self._st.absorb(mv)
        self._bytes_in += len(mv)
        return len(mv)

    def update(self, data: Buffer) -> None:
        self.write(data)

    def sum(self, prefix: Buffer | None = None) -> bytes:
        """Return ``prefix`` followed by the digest of everything written."""
        st = self._st.clone()
        st.absorb_stop()
        st.absorb_value(self._size)
        out = bytes(st.squeeze(self._size))
        return out if prefix is None else bytes(prefix) + out

    def digest(self) -> bytes:
        return self.sum()

    def hexdigest(self) -> str:
        return self.sum().hex()

    def block_size(self) -> int:
        return BLOCKBYTES

    def digest_size(self) -> int:
        return self._size


def new_stream(key: Buffer) -> Stream:
    """Create a Spritz stream cipher keyed with ``key``."""
    return Stream(key)


def new_hash(size: int = DIGESTBYTES) -> Hash:
    """Create a Spritz hash accumulator producing ``size`` byte digests."""
    return Hash(size)


def stream(
    key: Buffer,
    length: int | None = None,
    *,
    into: Buffer | None = None,
) -> bytearray | memoryview:
    """Generate raw keystream bytes.

    Args:
        key: Key (any length).
        length: Number of bytes to generate (required if into is None).
        into: Buffer to write the keystream into (default: bytearray created).

    Returns:
        Keystream as bytearray if into not provided, memoryview of into otherwise.

    Raises:
        TypeError: If neither length nor into is provided, or into is too short.
        ValueError: If length is negative.
    """
    if length is not None and length < 0:
        raise ValueError("length must be non-negative")
    if into is None:
        if length is None:
            raise TypeError("provide either into or length")
        out = bytearray(length)
    else:
        out = memoryview(into).cast("B")
        if length is None:
            length = len(out)
        elif len(out) < length:
            raise TypeError("into length must be at least length")
    Stream(key).transform(out, bytes(length))
    return written_view(out, into, length)


def encrypt(
    key: Buffer,
    message: Buffer,
    *,
    into: Buffer | None = None,
) -> bytearray | memoryview:
    """XOR ``message`` with the keystream for ``key``.

    Returns:
        Ciphertext as bytearray if into not provided, memoryview of into otherwise.

    Raises:
        TypeError: If into is too short.
    """
    return Stream(key).update(message, into)


def decrypt(
    key: Buffer,
    ct: Buffer,
    *,
    into: Buffer | None = None,
) -> bytearray | memoryview:
    """Inverse of encrypt(); XOR with the same keystream."""
    return Stream(key).update(ct, into)


def digest(data: Buffer, size: int = DIGESTBYTES) -> bytes:
    """Compute a ``size`` byte Spritz hash of ``data`` in one shot."""
    h = Hash(size)
    h.write(data)
    return h.sum()


__all__ = [
    # constants
    "BLOCKBYTES",
    "DIGESTBYTES",
    "N",
    # one-shot functions
    "stream",
    "encrypt",
    "decrypt",
    "digest",
    "new_stream",
    "new_hash",
    # incremental classes
    "Stream",
    "Hash",
]
