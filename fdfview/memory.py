"""Byte-buffer helpers: filling, copying, searching and comparing."""

from __future__ import annotations

from collections.abc import Sequence


def _check_span(name: str, n: int, *buffers: Sequence[int]) -> None:
    if n < 0:
        raise ValueError(f"{name}: length must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(
                f"{name}: length {n} exceeds buffer of size {len(buffer)}"
            )


def memset(buffer: bytearray, c: int, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buffer`` to ``c`` (taken modulo 256).

    The buffer is changed in place and returned.
    """
    _check_span("memset", length, buffer)
    buffer[:length] = bytes([c & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero, in place."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer holding ``count`` items of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("calloc: count and size must not be negative")
    return bytearray(count * size)


def memchr(data: Sequence[int], c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` among the first ``n``.

    ``c`` is taken modulo 256. Returns None when no such byte exists.
    """
    _check_span("memchr", n, data)
    target = c & 0xFF
    return next((i for i, byte in enumerate(data[:n]) if byte == target), None)


def memcmp(a: Sequence[int], b: Sequence[int], n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first pair of bytes that differ, or 0 when
    the spans are equal or ``n`` is 0.
    """
    _check_span("memcmp", n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dst: bytearray, src: Sequence[int], n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``.

    ``dst`` is changed in place and returned.
    """
    _check_span("memcpy", n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buffer: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Copy ``length`` bytes within ``buffer`` from offset ``src`` to ``dst``.

    Overlapping regions are handled correctly. The buffer is changed in place
    and returned.
    """
    if length < 0 or dst < 0 or src < 0:
        raise ValueError("memmove: offsets and length must not be negative")
    if dst + length > len(buffer) or src + length > len(buffer):
        raise ValueError("memmove: region lies outside the buffer")
    buffer[dst:dst + length] = bytes(buffer[src:src + length])
    return buffer