"""Byte-buffer helpers working on bytes and bytearray objects."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_length(length: int, *buffers: bytes | bytearray) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for buf in buffers:
        if length > len(buf):
            raise ValueError(f"length {length} exceeds buffer of size {len(buf)}")


def bzero(buffer: bytearray, length: int) -> None:
    """Set the first ``length`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises MemoryError when the product would overflow the size type.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count != 0 and size > SIZE_MAX // count:
        raise MemoryError(f"{count} * {size} bytes overflows")
    return bytearray(count * size)


def memchr(data: bytes | bytearray, value: int, length: int) -> int | None:
    """Index of the first byte equal to ``value`` within ``length`` bytes, or None."""
    _check_length(length, data)
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(left: bytes | bytearray, right: bytes | bytearray, length: int) -> int:
    """Difference of the first differing bytes within ``length``, else 0."""
    _check_length(length, left, right)
    for a, b in zip(left[:length], right[:length]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, length: int) -> bytearray:
    """Copy ``length`` bytes from ``src`` to the start of ``dest``."""
    _check_length(length, dest, src)
    dest[:length] = src[:length]
    return dest


def memmove(buffer: bytearray, dest: int, src: int, length: int) -> bytearray:
    """Copy ``length`` bytes inside ``buffer`` from offset ``src`` to ``dest``.

    Overlapping regions are handled correctly.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length(length)
    if max(dest, src) + length > len(buffer):
        raise ValueError("region extends past the end of the buffer")
    buffer[dest : dest + length] = bytes(buffer[src : src + length])
    return buffer


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buffer`` with ``value & 0xFF``."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer