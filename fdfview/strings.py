"""Searching, measuring, comparing and bounded copying of text.

Positions are returned as indices into the text; a missing match is None.
A NUL character ends a string for the functions that measure or compare,
as it does for C strings.
"""

from __future__ import annotations

_NUL = "\0"


def _as_char(c: str | int) -> str:
    """Normalise ``c`` to a single character; integers are taken modulo 256."""
    if isinstance(c, int):
        return chr(c % 256)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _terminated(s: str) -> str:
    """Return ``s`` up to, not including, its first NUL character."""
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def strchr(s: str, c: str | int) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the end of the string.
    """
    ch = _as_char(c)
    text = _terminated(s)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: str | int) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the end of the string.
    """
    ch = _as_char(c)
    text = _terminated(s)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its first NUL character."""
    return "".join(_terminated(s))


def strlen(s: str) -> int:
    """Return the number of characters before the first NUL in ``s``."""
    return len(_terminated(s))


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of ``s1`` and ``s2``.

    Returns the difference of the first differing code points, with the end
    of a string counting as 0, or 0 when the compared spans are equal.
    """
    if n < 0:
        raise ValueError(f"strncmp: count must not be negative, got {n}")
    a_text, b_text = _terminated(s1), _terminated(s2)
    for i in range(n):
        a = ord(a_text[i]) if i < len(a_text) else 0
        b = ord(b_text[i]) if i < len(b_text) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    if length < 0:
        raise ValueError(f"strnstr: length must not be negative, got {length}")
    needle_text = _terminated(needle)
    if not needle_text:
        return 0
    index = _terminated(haystack).find(needle_text, 0, length)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a destination of ``size`` characters, NUL included.

    Returns the copied text, at most ``size - 1`` characters long (empty when
    ``size`` is 0), and the full length of ``src``, which shows truncation.
    """
    if size < 0:
        raise ValueError(f"strlcpy: size must not be negative, got {size}")
    text = _terminated(src)
    if size == 0:
        return "", len(text)
    return text[: size - 1], len(text)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a destination of ``size`` characters.

    Returns the resulting text and the length it tried to create. When
    ``dst`` already fills ``size``, it is returned unchanged together with
    ``size + len(src)``.
    """
    if size < 0:
        raise ValueError(f"strlcat: size must not be negative, got {size}")
    head, tail = _terminated(dst), _terminated(src)
    if len(head) >= size:
        return head, size + len(tail)
    room = size - len(head) - 1
    return head + tail[:room], len(head) + len(tail)