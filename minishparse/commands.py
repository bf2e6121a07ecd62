"""Breaking a command line into commands and expanding their words."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from minishparse.expand import check_complete, release_quotes
from minishparse.splitting import Separator, find_delimiters, split_out_quotes


@dataclass
class Command:
    """One command of a line: its name, arguments and what follows it."""

    name: str | None = None
    args: list[str] = field(default_factory=list)
    next_separator: Separator = Separator.NONE
    exit_status: int = 0


def _command(segment: str, separator: Separator) -> Command:
    name, *args = split_out_quotes(segment, " ") or [None]
    return Command(name, args, separator)


def split_commands(text: str) -> list[Command]:
    """Cut ``text`` at its separators into commands; words keep their quotes."""
    commands = []
    start = 0
    for delimiter in find_delimiters(text):
        commands.append(_command(text[start:delimiter.position], delimiter.separator))
        start = delimiter.end
    commands.append(_command(text[start:], Separator.NONE))
    return commands


def _expand_word(word: str, status: int, environ: Mapping[str, str] | None) -> str:
    return release_quotes(check_complete(word), status, environ)


def parse(text: str, environ: Mapping[str, str] | None = None) -> list[Command]:
    """Parse a command line into commands with quotes and variables resolved.

    Raises :class:`~minishparse.expand.IncompleteInputError` when the line is
    unfinished.
    """
    commands = split_commands(check_complete(text))
    status = commands[-1].exit_status
    for command in commands:
        if command.name is not None:
            command.name = _expand_word(command.name, status, environ)
        command.args = [_expand_word(arg, status, environ) for arg in command.args]
    return commands


def format_commands(commands: Iterable[Command]) -> str:
    """One line per command: name, arguments and the following separator."""
    lines = []
    for command in commands:
        parts = [command.name or "", *command.args, command.next_separator.value]
        lines.append(" ".join(part for part in parts if part))
    return "\n".join(lines)