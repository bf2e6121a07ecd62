"""Quote removal, backslash escapes and ``$`` variable expansion of words."""

from __future__ import annotations

import os
from collections.abc import Mapping

from minishparse.charclass import is_alpha, is_blank
from minishparse.convert import itoa

ESCAPABLE = "\\$'\""
ESCAPABLE_IN_DOUBLE_QUOTES = "\\\"$"


class IncompleteInputError(ValueError):
    """The input ends inside a quote, after a pipe or on a lone backslash."""

    def __init__(self, message: str = "syntax error: unexpected end of file") -> None:
        super().__init__(message)


def _at(text: str, index: int) -> str:
    return text[index] if 0 <= index < len(text) else ""


def _escaped(text: str, index: int) -> bool:
    return index > 0 and text[index - 1] == "\\"


def _starts_variable(text: str, pos: int) -> bool:
    following = _at(text, pos + 1)
    return (
        text[pos] == "$"
        and not _escaped(text, pos)
        and following != ""
        and (is_alpha(following) or following == "?")
    )


def _escapes(text: str, pos: int, escapable: str) -> bool:
    following = _at(text, pos + 1)
    return text[pos] == "\\" and following != "" and following in escapable


def find_next_quote(text: str, start: int, quote: str) -> int:
    """Index of the first ``quote`` after ``start`` not preceded by a backslash, or -1."""
    for index, char in enumerate(text[start + 1:], start + 1):
        if char == quote and not _escaped(text, index):
            return index
    return -1


def find_open_quote(text: str, pos: int, quote: str) -> int:
    """Index of the last unescaped ``quote`` before ``pos``, or -1."""
    for index in range(min(pos, len(text)) - 1, -1, -1):
        if text[index] == quote and not _escaped(text, index):
            return index
    return -1


def cut_char(text: str, pos: int) -> str:
    """``text`` without the character at ``pos``."""
    if not 0 <= pos < len(text):
        raise IndexError(f"position {pos} outside a string of length {len(text)}")
    return text[:pos] + text[pos + 1:]


def expand_variable(
    text: str,
    index: int,
    last_status: int = 0,
    environ: Mapping[str, str] | None = None,
) -> tuple[str, int]:
    """Replace the ``$`` reference at ``index`` by its value.

    A name is made of letters and underscores.  ``$?`` stands for
    ``last_status``.  An unset variable is removed.  Returns the new text and
    the index just past the inserted value.
    """
    if environ is None:
        environ = os.environ
    if _at(text, index) != "$":
        raise ValueError(f"no '$' at index {index}")
    end = index + 1
    value: str | None
    if _at(text, end) == "?":
        value = itoa(last_status)
        end += 1
    else:
        while _at(text, end) and (is_alpha(text[end]) or text[end] == "_"):
            end += 1
        value = environ.get(text[index + 1:end])
    if value is None:
        return text[:index] + text[end:], index
    return text[:index] + value + text[end:], index + len(value)


def expand_in_double_quotes(
    text: str,
    index: int,
    last_status: int = 0,
    environ: Mapping[str, str] | None = None,
) -> tuple[str, int]:
    """Expand variables and escapes inside the double quote opening at ``index``.

    Inside double quotes a backslash escapes only ``\\``, ``"`` and ``$``.
    The quotes stay in place.  Returns the new text and the index of the
    closing quote.
    """
    if _at(text, index) != '"':
        raise ValueError(f"no double quote at index {index}")
    pos = index + 1
    while pos < len(text):
        if text[pos] == '"':
            return text, pos
        if _starts_variable(text, pos):
            text, pos = expand_variable(text, pos, last_status, environ)
        elif _escapes(text, pos, ESCAPABLE_IN_DOUBLE_QUOTES):
            text = cut_char(text, pos)
            pos += 1
        else:
            pos += 1
    raise IncompleteInputError()


def release_quotes(
    text: str,
    last_status: int = 0,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Remove quotes from a word, expanding variables and escapes outside single quotes."""
    pos = 0
    while pos < len(text):
        char = text[pos]
        if char == "'" and not _escaped(text, pos):
            close = find_next_quote(text, pos, "'")
            if close < 0:
                raise IncompleteInputError()
            text = text[:pos] + text[pos + 1:close] + text[close + 1:]
            pos = close - 1
        elif char == '"' and not _escaped(text, pos):
            text, close = expand_in_double_quotes(text, pos, last_status, environ)
            text = text[:pos] + text[pos + 1:close] + text[close + 1:]
            pos = close - 1
        elif _starts_variable(text, pos):
            text, pos = expand_variable(text, pos, last_status, environ)
        elif _escapes(text, pos, ESCAPABLE):
            text = cut_char(text, pos)
            pos += 1
        else:
            pos += 1
    return text


def check_complete(text: str) -> str:
    """Check that ``text`` is a finished command line and return it cleaned.

    A backslash before a character it cannot escape is dropped.  Raises
    :class:`IncompleteInputError` for an unclosed quote, a pipe followed by
    nothing visible, or an odd trailing backslash.
    """
    slashes = 0
    pos = 0
    while pos < len(text):
        following = _at(text, pos + 1)
        if (
            text[pos] == "\\"
            and following != ""
            and following not in ESCAPABLE
            and not _escaped(text, pos)
        ):
            text = cut_char(text, pos)
        char = text[pos]
        if char == "\\":
            slashes += 1
        if char in "'\"" and not _escaped(text, pos):
            close = find_next_quote(text, pos, char)
            if close < 0:
                raise IncompleteInputError()
            pos = close
        elif char == "|" and is_blank(text[pos + 1:]):
            raise IncompleteInputError()
        elif slashes % 2 and char == "\\" and pos + 1 == len(text):
            raise IncompleteInputError()
        pos += 1
    return text