"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

_INT_BITS = 32
_LONG_BITS = 64


def _code(c: CharLike) -> int:
    """Return the integer code of a one-character string or an integer."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer, not bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError(f"expected a character or an integer, not {type(c).__name__}")


def isalpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def isalnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def isspace(c: CharLike) -> bool:
    """True for space or a character from tab to carriage return."""
    code = _code(c)
    return code == ord(" ") or 9 <= code <= 13


def _convert_case(c: CharLike, low: str, high: str, delta: int) -> CharLike:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def toupper(c: CharLike) -> CharLike:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    return _convert_case(c, "a", "z", -32)


def tolower(c: CharLike) -> CharLike:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    return _convert_case(c, "A", "Z", 32)


def _wrap(value: int, bits: int) -> int:
    """Reduce value to a two's-complement integer of the given width."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _parse_integer(text: str, bits: int) -> int:
    pos = 0
    length = len(text)
    while pos < length and isspace(text[pos]):
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and isdigit(text[pos]):
        pos += 1
    digits = text[start:pos]
    value = int(digits) if digits else 0
    return _wrap(sign * value, bits)


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does, as a 32-bit int.

    Leading whitespace is skipped, one sign is accepted, parsing stops at the
    first non-digit, and text without digits gives 0.
    """
    return _parse_integer(text, _INT_BITS)


def atol(text: str) -> int:
    """Parse a leading decimal integer like atoi, as a 64-bit long."""
    return _parse_integer(text, _LONG_BITS)


def itoa(n: int) -> str:
    """Return the decimal text of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, not {type(n).__name__}")
    return str(n)