"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

_WHITESPACE = " \t\v\n\r\f"
_INT_BITS = 32


def isalnum(c: int) -> bool:
    """Return True if the code point ``c`` is an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isalpha(c: int) -> bool:
    """Return True if the code point ``c`` is an ASCII letter."""
    return ord("A") <= c <= ord("Z") or ord("a") <= c <= ord("z")


def isascii(c: int) -> bool:
    """Return True if ``c`` lies in the 7-bit ASCII range."""
    return 0 <= c <= 127


def isdigit(c: int) -> bool:
    """Return True if the code point ``c`` is an ASCII decimal digit."""
    return ord("0") <= c <= ord("9")


def isprint(c: int) -> bool:
    """Return True if ``c`` is a printable ASCII character, space included."""
    return 32 <= c <= 126


def tolower(c: int) -> int:
    """Map an ASCII upper-case code point to lower case; others pass through."""
    if ord("A") <= c <= ord("Z"):
        return c + 32
    return c


def toupper(c: int) -> int:
    """Map an ASCII lower-case code point to upper case; others pass through."""
    if ord("a") <= c <= ord("z"):
        return c - 32
    return c


def _wrap_int(value: int) -> int:
    """Wrap ``value`` into the range of a signed 32-bit integer."""
    modulus = 1 << _INT_BITS
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library does.

    Leading whitespace is skipped, one optional sign is accepted, and digits
    are consumed until the first non-digit. Text without digits gives 0.
    The result wraps to a signed 32-bit integer.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] == "-":
        sign = -1
        stripped = stripped[1:]
    elif stripped[:1] == "+":
        stripped = stripped[1:]
    number = 0
    for ch in stripped:
        if not "0" <= ch <= "9":
            break
        number = number * 10 + (ord(ch) - ord("0"))
    return _wrap_int(number * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of the integer ``n``."""
    return str(int(n))