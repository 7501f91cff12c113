"""Byte-buffer helpers over bytes and bytearray objects."""

from __future__ import annotations

from typing import Union

ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: ReadableBuffer, offset: int = 0) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    for buf in buffers:
        if offset + n > len(buf):
            raise ValueError("byte count exceeds buffer length")


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first ``n`` bytes of ``buf``."""
    return memset(buf, 0, n)


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``value``."""
    _check_count(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def memcpy(dest: bytearray, src: ReadableBuffer, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``dest`` from ``src_offset`` to ``dest_offset``.

    Overlapping regions are handled correctly.
    """
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, dest, offset=max(dest_offset, src_offset))
    dest[dest_offset : dest_offset + n] = bytes(dest[src_offset : src_offset + n])
    return dest


def memchr(buf: ReadableBuffer, value: int, n: int) -> int | None:
    """Index of the first byte equal to the low byte of ``value`` within ``n`` bytes."""
    _check_count(n, buf)
    index = bytes(buf[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(b1: ReadableBuffer, b2: ReadableBuffer, n: int) -> int:
    """Compare ``n`` bytes; returns the difference at the first mismatch, else 0."""
    _check_count(n, b1, b2)
    for left, right in zip(bytes(b1[:n]), bytes(b2[:n])):
        if left != right:
            return left - right
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count`` items of ``size`` bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)