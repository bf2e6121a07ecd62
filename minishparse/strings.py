"""String helpers with the bounded-copy and search rules the parser relies on.

Positions are returned as indices rather than references.  Searches that can
match the terminating NUL of a C string treat ``"\\0"`` as matching at
``len(text)``.
"""

from __future__ import annotations

from collections.abc import Callable

NUL = "\0"


def _require_char(char: str) -> str:
    if not isinstance(char, str):
        raise TypeError(f"expected a str, got {type(char).__name__}")
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def _code_at(text: str, index: int) -> int:
    """Code of ``text[index]``, or 0 past the end, as a C string reads."""
    return ord(text[index]) if index < len(text) else 0


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty fields."""
    _require_char(sep)
    return [word for word in text.split(sep) if word]


def strchr(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``, or None.

    ``"\\0"`` matches the end of the string.
    """
    _require_char(char)
    if char == NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``, or None.

    ``"\\0"`` matches the end of the string.
    """
    _require_char(char)
    if char == NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def char_index(text: str | None, char: str) -> int:
    """Index of the first ``char`` in ``text``; -1 if absent or ``text`` is None.

    Unlike :func:`strchr`, the end of the string never matches.
    """
    _require_char(char)
    if text is None or char == NUL:
        return -1
    return text.find(char)


def strcmp(first: str, second: str) -> int:
    """Difference of the first pair of differing character codes, else 0."""
    return strncmp(first, second, max(len(first), len(second)) + 1)


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters the way :func:`strcmp` does."""
    if n < 0:
        raise ValueError("n must not be negative")
    for index in range(n):
        left = _code_at(first, index)
        right = _code_at(second, index)
        if left != right:
            return left - right
        if left == 0:
            return 0
    return 0


def strnstr(haystack: str, needle: str, size: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``size`` characters.

    An empty needle is found at index 0.  Returns None when absent.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    window = haystack[:size]
    index = window.find(needle)
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Strip characters of ``charset`` from both ends of ``text``.

    A one-character ``text`` always trims to the empty string.
    """
    if len(text) <= 1:
        return ""
    start = 0
    while start < len(text) and text[start] in charset:
        start += 1
    end = len(text) - 1
    while end > start and text[end] in charset:
        end -= 1
    return text[start:end + 1]


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives the empty string.
    """
    if start < 0:
        raise ValueError("start must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """The concatenation of ``first`` and ``second``."""
    if first is None or second is None:
        raise TypeError("strjoin needs two strings")
    return first + second


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Apply ``func(index, char)`` to every character and join the results."""
    return "".join(func(index, char) for index, char in enumerate(text))


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the NUL.

    Returns the copied text and the full length of ``src``.  A size of zero
    copies nothing.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create: the sum of
    both lengths, or ``size + len(src)`` when ``size`` is below ``len(dst)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size < len(dst):
        wanted = size + len(src)
    else:
        wanted = len(src) + len(dst)
    room = max(0, size - 1 - len(dst))
    return dst + src[:room], wanted