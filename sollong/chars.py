"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

_SPACE_CODES = frozenset({ord(" "), *range(9, 14)})


def _code(c: CharLike) -> int:
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return c


def is_alpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _convert_case(c: CharLike, low: str, high: str, delta: int) -> CharLike:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    return _convert_case(c, "a", "z", -32)


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    return _convert_case(c, "A", "Z", 32)


def atoi(text: str) -> int:
    """Parse a leading decimal integer, as the C library does.

    Leading whitespace is skipped, one optional sign is accepted, and
    parsing stops at the first non-digit. Text without digits gives 0.
    """
    pos = 0
    length = len(text)
    while pos < length and ord(text[pos]) in _SPACE_CODES:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    for ch in text[pos:]:
        if not is_digit(ch):
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return sign * result


def itoa(n: int) -> str:
    """Render an integer in decimal, with a leading '-' when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    digits = []
    value = abs(n)
    while True:
        value, digit = divmod(value, 10)
        digits.append(chr(ord("0") + digit))
        if value == 0:
            break
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))