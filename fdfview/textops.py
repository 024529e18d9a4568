"""Splitting, joining, trimming, slicing and mapping of text."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [part for part in s.split(sep) if part]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("substr: start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(i, ch) for i, ch in enumerate(s))


def striteri(
    buffer: MutableSequence[str], func: Callable[[int, str], str | None]
) -> None:
    """Call ``func(index, char)`` on each element of ``buffer`` in place.

    A returned character replaces the element; None leaves it as it was.
    """
    for i, ch in enumerate(buffer):
        replacement = func(i, ch)
        if replacement is not None:
            buffer[i] = replacement