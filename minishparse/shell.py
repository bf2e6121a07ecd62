"""The interactive read loop: prompt, read a line, remember it."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator

PROMPT = "bash: "

KEY_UP = "\x1b[A"
KEY_OPTION_UP = "\x1b[1;3A"
KEY_OPTION_DOWN = "\x1b[1;3B"
KEY_SHIFT_UP = "\x1b[1;2A"
KEY_SHIFT_DOWN = "\x1b[1;2B"
KEY_CTRL_UP = "\x1b[1;5A"
KEY_CTRL_DOWN = "\x1b[1;5B"


def _prompted_lines(prompt: str) -> Iterator[str]:
    """Lines typed at ``prompt`` until end of input."""
    while True:
        try:
            yield input(prompt)
        except EOFError:
            return


def read_loop(lines: Iterable[str], history: list[str] | None = None) -> list[str]:
    """Consume ``lines``, appending every non-empty one to ``history``."""
    if history is None:
        history = []
    for line in lines:
        if line:
            history.append(line)
    return history


def main(argv: list[str] | None = None) -> int:
    """Prompt for lines until end of input and keep them in a history."""
    if sys.stdin.isatty():
        try:
            import readline  # noqa: F401  line editing and history for input()
        except ImportError:
            pass
    read_loop(_prompted_lines(PROMPT), [])
    return 0