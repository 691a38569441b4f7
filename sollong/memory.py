"""Byte-buffer operations over bytearray and bytes-like objects."""

from __future__ import annotations

from typing import Optional

SIZE_MAX = 2**64 - 1


def _check_count(n: int, *lengths: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for length in lengths:
        if n > length:
            raise ValueError(f"byte count {n} exceeds buffer length {length}")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with value (taken modulo 256)."""
    _check_count(n, len(buf))
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first n bytes of buf."""
    memset(buf, 0, n)


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first n bytes of src to the start of dest."""
    _check_count(n, len(dest), len(src))
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes inside buf from offset src to offset dest; overlap is safe."""
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buf) - dest, len(buf) - src)
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memchr(data: bytes, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to value within n bytes, or None."""
    _check_count(n, len(data))
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare n bytes; return the difference of the first unequal pair, else 0."""
    _check_count(n, len(a), len(b))
    return next((x - y for x, y in zip(a[:n], b[:n]) if x != y), 0)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of nmemb * size bytes.

    Raises MemoryError when the product would overflow a machine size.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if size != 0 and nmemb > SIZE_MAX // size:
        raise MemoryError("requested allocation size overflows")
    return bytearray(nmemb * size)