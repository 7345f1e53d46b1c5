"""Utility helpers for pyspritz.

Output buffers follow one convention across the API: a fresh bytearray when
the caller passes nothing, otherwise the caller's buffer, which must be large
enough. Results written into a caller buffer are returned as a memoryview of
the written prefix.
"""

from __future__ import annotations

from collections.abc import Buffer

__all__ = ["Buffer", "output_buffer", "written_view"]


def output_buffer(length: int, into: Buffer | None, what: str = "length"):
    """Return a writable buffer of at least ``length`` bytes.

    Raises:
        TypeError: If ``into`` is shorter than ``length``.
    """
    if into is None:
        return bytearray(length)
    out = memoryview(into).cast("B")
    if len(out) < length:
        raise TypeError(f"into length must be at least {what}")
    return out


def written_view(out, into: Buffer | None, length: int):
    """Shape a result the way the public functions return it."""
    return out if into is None else memoryview(out)[:length]
