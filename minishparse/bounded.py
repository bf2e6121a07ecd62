"""Bounded string comparison, search, copy, concatenation and trimming.

Strings are read as C strings: an embedded ``"\\0"`` ends them.
"""

from __future__ import annotations

NUL = "\0"


def _c_string(text: str) -> str:
    """``text`` up to, not including, its first NUL."""
    return text.partition(NUL)[0]


def _code_at(text: str, index: int) -> int:
    """Code of ``text[index]``, or 0 past the end."""
    return ord(text[index]) if index < len(text) else 0


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; return -1, 0 or 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    for index in range(n):
        left = _code_at(first, index)
        right = _code_at(second, index)
        if left != right:
            return 1 if left > right else -1
        if left == 0:
            return 0
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0 whatever the length.  Returns None
    when the needle does not occur in that window.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    needle = _c_string(needle)
    if not needle:
        return 0
    index = _c_string(haystack)[:length].find(needle)
    return None if index < 0 else index


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and ``min(size, len(dst)) + len(src)``.
    Nothing is appended when ``size`` does not exceed ``len(dst)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dst = _c_string(dst)
    src = _c_string(src)
    result = dst
    if size > len(dst):
        result = dst + src[:size - 1 - len(dst)]
    return result, min(size, len(dst)) + len(src)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the NUL.

    Returns the copied text and the full length of ``src``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    src = _c_string(src)
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strtrim(text: str, charset: str) -> str:
    """Strip every character of ``charset`` from both ends of ``text``."""
    if not isinstance(text, str) or not isinstance(charset, str):
        raise TypeError("strtrim needs two strings")
    return text.strip(charset)