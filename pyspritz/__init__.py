"""Pure Python Spritz stream cipher and hash."""

from .spritz import (
    BLOCKBYTES,
    DIGESTBYTES,
    Hash,
    Stream,
    decrypt,
    digest,
    encrypt,
    new_hash,
    new_stream,
    stream,
)

__all__ = [
    "BLOCKBYTES",
    "DIGESTBYTES",
    "Hash",
    "Stream",
    "decrypt",
    "digest",
    "encrypt",
    "new_hash",
    "new_stream",
    "stream",
]
