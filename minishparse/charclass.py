"""ASCII character classification and case mapping used by the parser.

Every predicate accepts either a one-character string or an integer code.
"""

from __future__ import annotations

SPACE_CHARS = "\t\v\f\r\n "


def _code(char: str | int) -> int:
    """Return the integer code of ``char``."""
    if isinstance(char, int):
        return char
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return ord(char)
    raise TypeError(f"expected a str or int, got {type(char).__name__}")


def is_lower(char: str | int) -> bool:
    """True for the ASCII letters ``a`` to ``z``."""
    return 97 <= _code(char) <= 122


def is_upper(char: str | int) -> bool:
    """True for the ASCII letters ``A`` to ``Z``."""
    return 65 <= _code(char) <= 90


def is_alpha(char: str | int) -> bool:
    """True for an ASCII letter of either case."""
    return is_lower(char) or is_upper(char)


def is_digit(char: str | int) -> bool:
    """True for the ASCII digits ``0`` to ``9``."""
    return 48 <= _code(char) <= 57


def is_alnum(char: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(char) or is_digit(char)


def is_ascii(char: str | int) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(char) <= 127


def is_print(char: str | int) -> bool:
    """True for visible ASCII characters; the space does not count."""
    return 32 < _code(char) < 127


def is_space(char: str | int) -> bool:
    """True for tab, vertical tab, form feed, carriage return, newline and space."""
    code = _code(char)
    return any(code == ord(space) for space in SPACE_CHARS)


def to_lower(char: str | int) -> str | int:
    """Lower-case an ASCII capital; anything else comes back unchanged."""
    if not is_upper(char):
        return char
    lowered = _code(char) + 32
    return chr(lowered) if isinstance(char, str) else lowered


def to_upper(char: str | int) -> str | int:
    """Upper-case an ASCII small letter; anything else comes back unchanged."""
    if not is_lower(char):
        return char
    raised = _code(char) - 32
    return chr(raised) if isinstance(char, str) else raised


def all_numeric(text: str) -> bool:
    """True when ``text`` holds only digits and spaces."""
    return all(is_digit(char) or char == " " for char in text)


def is_blank(text: str) -> bool:
    """True when ``text`` holds no visible character."""
    return not any(is_print(char) for char in text)