"""Plain conversions and splitting without length limits on the input."""

from __future__ import annotations

from minishparse import convert, strings

_SPACES = " \n\t\v\f\r"


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def atoi(text: str) -> int:
    """Read a 32-bit integer from the start of ``text``.

    Leading whitespace and one sign are allowed; reading stops at the first
    non-digit.  Overflow wraps around as a 32-bit integer.
    """
    rest = text.lstrip(_SPACES)
    negative = rest.startswith("-")
    if rest[:1] in ("+", "-") and rest:
        rest = rest[1:]
    value = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        value = _wrap32(value * 10 + ord(char) - 48)
    return _wrap32(-value) if negative else value


def itoa(n: int) -> str:
    """Render ``n``, taken as a 32-bit signed integer, in decimal."""
    return convert.itoa(n)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty fields."""
    return strings.split(text, sep)