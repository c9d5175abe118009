"""Reading the texture and colour header of a scene file."""

from __future__ import annotations

import os
from typing import Optional

from .charutils import isspace
from .colors import parse_rgb
from .errors import (
    WARNING_DUP_COLOR,
    WARNING_DUP_TEXTURE,
    WARNING_INVALID_FILE,
    WARNING_TEXTURE,
    CubError,
)
from .scene import SceneData

_WHITESPACE = " \t\n\v\f\r"
_TEXTURE_KEYS = {"NO": "no", "SO": "so", "WE": "we", "EA": "ea"}


def check_path(path: str) -> bool:
    """True if path can be opened for reading."""
    try:
        fd = os.open(path, os.O_RDONLY)
    except (OSError, ValueError):
        return False
    os.close(fd)
    return True


def check_spaces(text: str, mode: str) -> None:
    """Require whitespace right after the mode key at the start of text."""
    pos = len(mode) if text.startswith(mode) else 0
    if pos < len(text) and isspace(text[pos]):
        return
    raise CubError(WARNING_TEXTURE)


def trim_path(text: str) -> str:
    """Return the first word of text; only whitespace may follow it."""
    end = 0
    while end < len(text) and not isspace(text[end]):
        end += 1
    if text[end:].lstrip(_WHITESPACE):
        raise CubError(WARNING_TEXTURE)
    return text[:end]


def copy_texture_path(current: Optional[str], text: str, mode: str) -> str:
    """Return the path of a texture line such as 'NO ./north.xpm'.

    Raises CubError if the texture was already set, the key is not followed
    by whitespace or appears more than once, or the file cannot be opened.
    """
    if current is not None:
        raise CubError(WARNING_DUP_TEXTURE)
    check_spaces(text, mode)
    pos = 0
    keys = 0
    while pos < len(text) and (isspace(text[pos]) or text.startswith(mode, pos)):
        if text.startswith(mode, pos):
            keys += 1
            pos += len(mode)
        else:
            pos += 1
    path = trim_path(text[pos:])
    if not check_path(path) or keys != 1:
        raise CubError(WARNING_TEXTURE)
    return path


class HeaderReader:
    """Feed header lines one at a time into a SceneData."""

    def __init__(self, data: Optional[SceneData] = None) -> None:
        self.data = data if data is not None else SceneData()
        self._floor_count = 0
        self._ceiling_count = 0

    def _count_colors(self, text: str) -> None:
        if text.startswith("F"):
            self._floor_count += 1
        if text.startswith("C"):
            self._ceiling_count += 1
        if self._floor_count == 1 and self._ceiling_count == 1:
            self.data.colors = True
        if self._floor_count > 1 or self._ceiling_count > 1:
            raise CubError(WARNING_DUP_COLOR)

    def feed(self, line: str) -> bool:
        """Process one raw header line; return True once the header is complete."""
        text = line.lstrip(_WHITESPACE)
        data = self.data
        key = text[:2]
        if key in _TEXTURE_KEYS:
            attr = _TEXTURE_KEYS[key]
            setattr(data, attr, copy_texture_path(getattr(data, attr), text, key))
        elif text.startswith("F"):
            data.floor = parse_rgb(text, "F")
        elif text.startswith("C"):
            data.ceiling = parse_rgb(text, "C")
        elif text and text[0] != "\n":
            raise CubError(WARNING_INVALID_FILE)
        self._count_colors(text)
        data.size_textures += 1
        return data.textures_complete()