"""Splitting a command line into words and finding its command separators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Separator(Enum):
    """What follows a command on the line."""

    REDIRECT = ">"
    PIPE = "|"
    BACK_REDIRECT = "<"
    DOUBLE_REDIRECT = ">>"
    SEMICOLON = ";"
    NONE = ""


@dataclass(frozen=True)
class Delimiter:
    """A separator found at ``position`` in the line."""

    separator: Separator
    position: int

    @property
    def end(self) -> int:
        """Index just past the separator's characters."""
        return self.position + len(self.separator.value)


def _opens_or_closes(text: str, index: int) -> bool:
    return text[index] == '"' and not (index > 0 and text[index - 1] == "\\")


def split_out_quotes(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep`` outside double quotes, dropping empty words.

    Quotes are kept in the words; a backslash before a quote stops it from
    opening or closing a quoted part.
    """
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"expected a single separator character, got {sep!r}")
    words: list[str] = []
    current: list[str] = []
    quoted = False
    for index, char in enumerate(text):
        if char == sep and not quoted:
            if current:
                words.append("".join(current))
                current = []
            continue
        if _opens_or_closes(text, index):
            quoted = not quoted
        current.append(char)
    if current:
        words.append("".join(current))
    return words


def find_delimiters(text: str) -> list[Delimiter]:
    """Pipes and redirections outside double quotes, in order.

    ``>>`` counts as one separator; ``<<`` is not a separator.
    """
    found: list[Delimiter] = []
    quoted = False
    pos = 0
    while pos < len(text):
        char = text[pos]
        following = text[pos + 1:pos + 2]
        if _opens_or_closes(text, pos):
            quoted = not quoted
        elif not quoted:
            if char == "|":
                found.append(Delimiter(Separator.PIPE, pos))
            elif char == "<":
                if following == "<":
                    pos += 1
                else:
                    found.append(Delimiter(Separator.BACK_REDIRECT, pos))
            elif char == ">":
                if following == ">":
                    found.append(Delimiter(Separator.DOUBLE_REDIRECT, pos))
                    pos += 1
                else:
                    found.append(Delimiter(Separator.REDIRECT, pos))
        pos += 1
    return found