"""Byte-buffer helpers operating on mutable byte sequences."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]

SIZE_MAX = 2**64 - 1


def _check_length(length: int, *buffers: ReadableBuffer) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for buffer in buffers:
        if length > len(buffer):
            raise ValueError(
                f"length {length} exceeds buffer of size {len(buffer)}"
            )


def memset(buffer: Buffer, value: int, length: int) -> Buffer:
    """Fill the first ``length`` bytes with ``value`` truncated to a byte."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: Buffer, length: int) -> None:
    """Set the first ``length`` bytes to zero."""
    memset(buffer, 0, length)


def memcpy(dst: Buffer, src: ReadableBuffer, length: int) -> Buffer:
    """Copy ``length`` bytes from ``src`` into the start of ``dst``."""
    _check_length(length, dst, src)
    dst[:length] = bytes(src[:length])
    return dst


def memmove(buffer: Buffer, dst_offset: int, src_offset: int, length: int) -> Buffer:
    """Move ``length`` bytes inside ``buffer``; the two regions may overlap."""
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_length(length)
    if max(dst_offset, src_offset) + length > len(buffer):
        raise ValueError("region extends past the end of the buffer")
    chunk = bytes(buffer[src_offset:src_offset + length])
    buffer[dst_offset:dst_offset + length] = chunk
    return buffer


def memchr(buffer: ReadableBuffer, value: int, length: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` or None."""
    _check_length(length, buffer)
    target = value & 0xFF
    return next(
        (index for index, byte in enumerate(buffer[:length]) if byte == target),
        None,
    )


def memcmp(first: ReadableBuffer, second: ReadableBuffer, length: int) -> int:
    """Compare ``length`` bytes; return the difference of the first mismatch."""
    _check_length(length, first, second)
    for a, b in zip(first[:length], second[:length]):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray()
    if count > SIZE_MAX // size:
        raise OverflowError("allocation size overflows")
    return bytearray(count * size)