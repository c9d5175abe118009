"""Parsing of floor and ceiling colour lines."""

from __future__ import annotations

from typing import List

from .charutils import atoi, isdigit, isspace
from .errors import WARNING_INVALID_COLOR, CubError
from .strutils import split, strtrim

_TRIM = " \t\v\f\r\n\b"


def convert_rgb(r: int, g: int, b: int) -> int:
    """Pack red, green and blue into a 32-bit RGBA value with full alpha."""
    return (r << 24 | g << 16 | b << 8 | 255) & 0xFFFFFFFF


def _prefix_end(rgb_color: str, key: str) -> int:
    """Index of the first character that is neither whitespace nor key."""
    pos = 0
    while pos < len(rgb_color) and (isspace(rgb_color[pos]) or rgb_color[pos] == key):
        pos += 1
    return pos


def _check_prefix(rgb_color: str, key: str) -> None:
    prefix = rgb_color[:_prefix_end(rgb_color, key)]
    keys = prefix.count(key)
    spaces = sum(1 for ch in prefix if isspace(ch))
    if keys != 1 or spaces < 1:
        raise CubError(WARNING_INVALID_COLOR)


def split_rgb(rgb_color: str, key: str) -> List[str]:
    """Return the three trimmed components of a colour line.

    Leading whitespace and key characters are skipped, the rest is split on
    commas with empty pieces dropped. Every piece must hold a digit and there
    must be exactly three of them.
    """
    body = rgb_color[_prefix_end(rgb_color, key):]
    pieces = [strtrim(piece, _TRIM) for piece in split(body, ",")]
    for piece in pieces:
        if piece.startswith("\n") or (piece and isspace(piece[0])):
            raise CubError(WARNING_INVALID_COLOR)
        if not any(isdigit(ch) for ch in piece):
            raise CubError(WARNING_INVALID_COLOR)
    if len(pieces) != 3:
        raise CubError(WARNING_INVALID_COLOR)
    return pieces


def parse_rgb(rgb_color: str, key: str) -> int:
    """Parse a line such as 'F 220,100,0' into a packed RGBA value.

    The key must appear once, followed by at least one whitespace character,
    and each component must be digits only with a value from 0 to 255.
    """
    _check_prefix(rgb_color, key)
    values = []
    for piece in split_rgb(rgb_color, key):
        if not all(isdigit(ch) for ch in piece):
            raise CubError(WARNING_INVALID_COLOR)
        value = atoi(piece)
        if not 0 <= value <= 255:
            raise CubError(WARNING_INVALID_COLOR)
        values.append(value)
    return convert_rgb(*values)