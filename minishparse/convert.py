"""Conversions between decimal text and fixed-width integers."""

from __future__ import annotations

from minishparse.charclass import is_digit, is_space

_MAX_INDEX = 18


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed integer of ``bits`` bits, two's complement."""
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _parse(text: str, bits: int) -> int:
    value = 0
    negative = False
    signs = 0
    for index, char in enumerate(text):
        if is_digit(char):
            value = _wrap(value * 10 + (ord(char) - 48), bits)
        elif value == 0 and char in "+-":
            signs += 1
            if signs >= 2:
                break
            if char == "-":
                negative = True
        elif value == 0 and is_space(char):
            pass
        else:
            break
        if index > _MAX_INDEX:
            return 0 if negative else -1
    return _wrap(-value, bits) if negative else value


def atoi(text: str) -> int:
    """Read a 32-bit integer from the start of ``text``.

    Whitespace and a single sign may appear while nothing but zeros has been
    read.  Reading stops at the first other character.  Once more than 19
    characters have been consumed the result is 0 for a negative number and
    -1 otherwise.  Values that overflow wrap around as 32-bit integers.
    """
    return _parse(text, 32)


def atoi_long(text: str) -> int:
    """Same as :func:`atoi`, with 64-bit arithmetic."""
    return _parse(text, 64)


def itoa(n: int) -> str:
    """Render ``n``, taken as a 32-bit signed integer, in decimal."""
    return str(_wrap(n, 32))