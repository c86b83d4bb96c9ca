"""Byte-buffer helpers: zeroing, allocation, search, comparison and copying.

Buffers are ``bytearray`` objects; functions that change a buffer do so in
place and return it where that is useful.
"""

from __future__ import annotations

from typing import Optional


def _check_length(name: str, n: int) -> None:
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")


def _check_span(buf, start: int, n: int) -> None:
    if start < 0 or start + n > len(buf):
        raise IndexError(
            f"span of {n} bytes at offset {start} exceeds buffer of {len(buf)}"
        )


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    _check_length("n", n)
    _check_span(buf, 0, n)
    buf[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    _check_length("count", count)
    _check_length("size", size)
    return bytearray(count * size)


def realloc(data: Optional[bytes], old_size: int, new_size: int) -> bytearray:
    """Return a new zero-filled buffer of ``new_size`` bytes.

    The first ``min(old_size, new_size)`` bytes of ``data`` are copied over;
    ``data`` may be None, in which case nothing is copied.
    """
    _check_length("old_size", old_size)
    new = calloc(new_size, 1)
    if data is not None:
        copy_size = min(old_size, new_size)
        _check_span(data, 0, copy_size)
        new[:copy_size] = data[:copy_size]
    return new


def memchr(data: bytes, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` within ``data[:n]``, or None."""
    _check_length("n", n)
    _check_span(data, 0, n)
    index = data.find(bytes([c & 0xFF]), 0, n)
    return None if index == -1 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch."""
    _check_length("n", n)
    _check_span(a, 0, n)
    _check_span(b, 0, n)
    for left, right in zip(a[:n], b[:n]):
        if left != right:
            return left - right
    return 0


def memcpy(dst: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into the start of ``dst``."""
    _check_length("n", n)
    _check_span(src, 0, n)
    _check_span(dst, 0, n)
    dst[:n] = src[:n]
    return dst


def memmove(buf: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Move ``length`` bytes inside ``buf`` from offset ``src`` to ``dst``.

    Overlapping regions are handled correctly.
    """
    _check_length("length", length)
    _check_span(buf, src, length)
    _check_span(buf, dst, length)
    if dst != src:
        buf[dst:dst + length] = bytes(buf[src:src + length])
    return buf


def memset(buf: bytearray, c: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with the byte value of ``c``."""
    _check_length("length", length)
    _check_span(buf, 0, length)
    buf[:length] = bytes([c & 0xFF]) * length
    return buf