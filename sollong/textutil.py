"""String helpers with C-library semantics, expressed over Python ``str``.

Positions are returned as indices instead of pointers, and ``None`` stands
for "not found". A NUL character ends a string, as it does in C.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional, Union

CharLike = Union[str, int]

_NUL = "\0"


def _as_char(c: CharLike) -> str:
    """Turn a one-character string or a character code into a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def _terminated(s: str) -> str:
    """Return s up to, not including, its first NUL character."""
    cut = s.find(_NUL)
    return s if cut < 0 else s[:cut]


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of c in s, or None.

    Searching for NUL finds the terminator, at index ``len(s)``.
    """
    text = _terminated(s)
    ch = _as_char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of c in s, or None.

    Searching for NUL finds the terminator, at index ``len(s)``.
    """
    text = _terminated(s)
    ch = _as_char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters.

    Returns the difference of the first unequal character codes, with the
    end of a string counting as code 0; returns 0 when the prefixes match.
    """
    _check_size(n, "n")
    left = _terminated(s1)[:n]
    right = _terminated(s2)[:n]
    for a, b in zip_longest(left, right, fillvalue=_NUL):
        if a != b or a == _NUL:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of needle within the first ``length`` characters of haystack.

    An empty needle is found at index 0; a needle that does not fit
    entirely inside the window is not found.
    """
    _check_size(length, "length")
    needle = _terminated(needle)
    if not needle:
        return 0
    index = _terminated(haystack)[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of ``size`` characters including the terminator.

    Returns the copied text and the full length of src; a caller can detect
    truncation by comparing the two.
    """
    _check_size(size, "size")
    text = _terminated(src)
    copied = text[: size - 1] if size > 0 else ""
    return copied, len(text)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dest inside a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create. When the
    buffer is no larger than dest, dest is left as it is and the returned
    length is ``len(src) + size``.
    """
    _check_size(size, "size")
    head = _terminated(dest)
    tail = _terminated(src)
    if size <= len(head):
        return head, len(tail) + size
    room = size - 1 - len(head)
    return head + tail[:room], len(head) + len(tail)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of s from index ``start``.

    A start at or past the end gives an empty string.
    """
    _check_size(start, "start")
    _check_size(length, "length")
    text = _terminated(s)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return _terminated(s1) + _terminated(s2)


def strtrim(s: str, charset: str) -> str:
    """Remove characters in charset from both ends of s."""
    return _terminated(s).strip(_terminated(charset))


def split(s: str, sep: CharLike) -> list[str]:
    """Split s on the separator character, dropping empty pieces."""
    separator = _as_char(sep)
    text = _terminated(s)
    if separator == _NUL:
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(_terminated(s)))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace every element of chars in place with ``func(index, char)``."""
    for index, ch in enumerate(list(chars)):
        chars[index] = func(index, ch)