"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

from minishparse.convert import itoa


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: str, stream: TextIO | None = None) -> None:
    """Write the single character ``char`` to ``stream`` (stdout by default)."""
    if not isinstance(char, str):
        raise TypeError(f"expected a str, got {type(char).__name__}")
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _target(stream).write(char)


def put_str(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text`` to ``stream``; nothing is written for None."""
    if text is None:
        return
    _target(stream).write(text)


def put_endl(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline; nothing is written for None."""
    if text is None:
        return
    _target(stream).write(text + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write ``n``, taken as a 32-bit signed integer, in decimal."""
    _target(stream).write(itoa(n))