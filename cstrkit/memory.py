"""Byte-buffer operations: fill, copy, search, compare and zeroed allocation.

Buffers are any objects supporting the buffer protocol; writable
destinations are typically :class:`bytearray` or writable :class:`memoryview`
slices. Requests that would reach past the end of a buffer raise
:class:`ValueError`.
"""

from __future__ import annotations

from typing import Optional, Union

ReadableBuffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]

SIZE_MAX = 2**64 - 1


def _check_count(count: int, *buffers: ReadableBuffer) -> None:
    if count < 0:
        raise ValueError(f"byte count must not be negative, got {count}")
    for buf in buffers:
        if count > len(buf):
            raise ValueError(f"byte count {count} exceeds buffer of {len(buf)} bytes")


def memset(buffer: WritableBuffer, value: int, count: int) -> WritableBuffer:
    """Set the first *count* bytes of *buffer* to the low byte of *value*.

    Returns *buffer*.
    """
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: WritableBuffer, count: int) -> None:
    """Set the first *count* bytes of *buffer* to zero."""
    memset(buffer, 0, count)


def _copy(dest: WritableBuffer, src: ReadableBuffer, n: int) -> None:
    _check_count(n, dest, src)
    # Snapshot the source first so overlapping views of one buffer copy correctly.
    dest[:n] = bytes(src[:n])


def memcpy(
    dest: Optional[WritableBuffer], src: Optional[ReadableBuffer], n: int
) -> Optional[WritableBuffer]:
    """Copy *n* bytes from *src* into the start of *dest* and return *dest*.

    When both buffers are None nothing happens and None is returned.
    """
    if dest is None and src is None:
        return dest
    if dest is None or src is None:
        raise TypeError("memcpy needs both a destination and a source buffer")
    _copy(dest, src, n)
    return dest


def memmove(
    dest: Optional[WritableBuffer], src: Optional[ReadableBuffer], n: int
) -> Optional[WritableBuffer]:
    """Copy *n* bytes from *src* into *dest*, correct even when they overlap.

    Returns *dest*, or None when both buffers are None.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memmove needs both a destination and a source buffer")
    _copy(dest, src, n)
    return dest


def memchr(data: ReadableBuffer, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to the low byte of *value*
    among the first *n* bytes of *data*, or None if there is none.
    """
    _check_count(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Compare the first *n* bytes of *a* and *b*.

    Returns the difference between the first pair of differing bytes, taken
    as unsigned values, or 0 if the ranges are equal.
    """
    _check_count(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(n: int, size: int) -> bytearray:
    """Return a zero-filled buffer of *n* elements of *size* bytes each.

    Raises OverflowError when the total size does not fit in a 64-bit size.
    """
    if n < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if size != 0 and n > SIZE_MAX // size:
        raise OverflowError(f"{n} elements of {size} bytes overflow the size range")
    return bytearray(n * size)