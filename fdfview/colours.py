"""Colour strings and their packed RGBA values."""

from __future__ import annotations

from fdfview.strings import strncmp

_MASK32 = 0xFFFFFFFF
_OPAQUE = 255


def _hex_digit(ch: str) -> int | None:
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "A" <= ch <= "F":
        return ord(ch) - ord("A") + 10
    if "a" <= ch <= "f":
        return ord(ch) - ord("a") + 10
    return None


def rgb_int(text: str) -> int:
    """Read all hex digits of ``text`` as one number; other characters are skipped."""
    value = 0
    for ch in text:
        digit = _hex_digit(ch)
        if digit is not None:
            value = (value * 16 + digit) & _MASK32
    return value


def _opaque(rgb: int) -> int:
    return ((rgb << 8) + _OPAQUE) & _MASK32


def hex_to_int(text: str) -> int:
    """Turn an ``RRGGBB`` string into an opaque ``0xRRGGBBAA`` value.

    Only the first six characters are looked at.
    """
    return _opaque(rgb_int(text[:6]))


def average_colour(colour_a: str, colour_b: str) -> int:
    """Average two colour strings channel by channel into an opaque value.

    Channels are taken two characters at a time for as long as both strings
    have characters, up to three channels; the averages round down.
    """
    value = 0
    for i in range(0, 6, 2):
        if i >= len(colour_a) or i >= len(colour_b):
            break
        channel = (rgb_int(colour_a[i:i + 2]) + rgb_int(colour_b[i:i + 2])) // 2
        value = ((value << 8) | channel) & _MASK32
    return _opaque(value)


def line_colour(colour_a: str, colour_b: str) -> int:
    """Colour of a line joining points with colours ``colour_a`` and ``colour_b``."""
    if strncmp(colour_a, colour_b, 8) == 0:
        return hex_to_int(colour_a)
    return average_colour(colour_a, colour_b)