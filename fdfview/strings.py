"""String helpers: splitting, searching, comparing, bounded copies and mapping.

Searches return an index into the string, or None when nothing is found.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Tuple

_SKIPPED = " \t\n"


def _single_char(name: str, c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"{name} must be a single character, got {c!r}")


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def count_words(text: str, delim: str) -> int:
    """Count the runs of characters in ``text`` that are not ``delim``."""
    _single_char("delim", delim)
    return sum(1 for part in text.split(delim) if part)


def split(text: str, delim: str) -> List[str]:
    """Split ``text`` into words separated by ``delim``.

    Spaces, tabs and newlines in front of a word are skipped; a word runs up
    to the next ``delim`` or the end of the text, so other whitespace inside
    or at the end of a word (such as a trailing newline) is kept. Empty words
    are dropped.
    """
    _single_char("delim", delim)
    words: List[str] = []
    pos = 0
    end = len(text)
    while pos < end:
        while pos < end and (text[pos] in _SKIPPED or text[pos] == delim):
            pos += 1
        if pos >= end:
            break
        stop = text.find(delim, pos)
        if stop == -1:
            stop = end
        words.append(text[pos:stop])
        pos = stop
    return words


def strchr(s: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``s``.

    Searching for the NUL character finds the end of the string.
    """
    _single_char("c", c)
    index = s.find(c)
    if index == -1:
        return len(s) if c == "\0" else None
    return index


def strrchr(s: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``s``.

    Searching for the NUL character finds the end of the string.
    """
    _single_char("c", c)
    if c == "\0":
        return len(s)
    index = s.rfind(c)
    return None if index == -1 else index


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    _non_negative("length", length)
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index == -1 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the code points at the first mismatch, a
    missing character counting as 0, or 0 when the compared parts are equal.
    """
    _non_negative("n", n)
    for i in range(min(n, max(len(s1), len(s2)))):
        left = ord(s1[i]) if i < len(s1) else 0
        right = ord(s2[i]) if i < len(s2) else 0
        if left != right:
            return left - right
    return 0


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a destination that holds ``size`` characters.

    One place is kept for the terminator, so at most ``size - 1`` characters
    are copied. Returns the copied text and the length of ``src``; with a
    size of 0 nothing is copied.
    """
    _non_negative("size", size)
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a destination of ``size`` characters.

    Returns the resulting text and the length the full result would have had.
    If ``size`` is 0 the length of ``src`` is returned; if ``size`` is not
    larger than ``dst``, ``dst`` is left as it is and ``size + len(src)`` is
    returned.
    """
    _non_negative("size", size)
    if size == 0:
        return dst, len(src)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` from ``start``.

    A start past the end gives the empty string.
    """
    _non_negative("start", start)
    _non_negative("length", length)
    if start > len(s):
        return ""
    return s[start:start + length]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(i, ch) for i, ch in enumerate(s))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]) -> None:
    """Call ``func(index, char)`` on each element of ``chars`` in place.

    When ``func`` returns a value other than None, it replaces the element.
    """
    for i, ch in enumerate(chars):
        replacement = func(i, ch)
        if replacement is not None:
            chars[i] = replacement