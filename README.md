# minishparse

Parsing for a small interactive shell. It splits a command line on pipes and
redirections, takes quotes off, expands `$NAME` and `$?`, and reports input
that ends part-way through a quote, after a trailing pipe or on a lone
backslash.

## Install

```
pip install .
pip install ".[test]"   # with pytest
```

## Command line

```
minishparse
```

This starts a prompt loop with the prompt `bash: `. Each non-empty line is
added to the session history, with line editing when the terminal supports
it. End the session with end-of-file (Ctrl-D).

## Library use

```python
from minishparse.commands import parse, format_commands

commands = parse('echo "hello $USER" | grep hello > out.txt', {"USER": "alice"})
print(format_commands(commands))
# echo hello alice |
# grep hello >
# out.txt
```

`parse(text, environ=None)` returns a list of `Command` objects. Each has a
`name`, a list of `args`, an `exit_status`, and `next_separator`, a
`Separator` member telling what follows it: `PIPE`, `REDIRECT` (`>`),
`DOUBLE_REDIRECT` (`>>`), `BACK_REDIRECT` (`<`) or `NONE`. Variables are
looked up in `environ`, or in `os.environ` when it is not given. Input that is
not complete raises `minishparse.expand.IncompleteInputError`, a `ValueError`.

`split_commands(text)` does the same cutting without expanding anything, and
`format_commands(commands)` renders commands one per line.

Lower-level pieces:

- `minishparse.expand` – `release_quotes`, `expand_variable`,
  `expand_in_double_quotes`, `check_complete`, `find_next_quote`,
  `find_open_quote`, `cut_char`
- `minishparse.splitting` – `split_out_quotes`, `find_delimiters`, and the
  `Separator` and `Delimiter` types
- `minishparse.lines` – `LineReader` (whose `next_line()` returns a line and
  whether a newline ended it) and `read_lines(stream, buffer_size)`, for
  reading text or binary streams line by line in fixed-size chunks
- `minishparse.strings`, `minishparse.bounded`, `minishparse.classic` –
  C-style string helpers (`strncmp`, `strnstr`, `strlcpy`, `strlcat`,
  `strtrim`, `substr`, `split` and others) returning indices and new strings
- `minishparse.charclass` – ASCII character tests and case mapping
- `minishparse.convert` – `atoi`, `atoi_long` and `itoa` with fixed-width
  wrap-around
- `minishparse.linkedlist` – `LinkedList` and `Node`
- `minishparse.output` – `put_char`, `put_str`, `put_endl`, `put_nbr` writing
  to a text stream (stdout by default)

## What it does not do

The `minishparse` command only reads lines and keeps them in its history; it
does not parse them or run them. Nothing in the package executes commands,
opens files for redirections or connects pipes: `parse` describes a command
line and leaves acting on it to the caller. The `;` separator exists as
`Separator.SEMICOLON` but is never produced by `find_delimiters`.

## Tests

```
pytest
```