"""Data collected from a scene file while it is parsed."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .errors import WARNING_INVALID, WARNING_PLAYER, CubError

WIDTH = 800
HEIGHT = 600
ROTATE_LEFT = -0.5
ROTATE_RIGHT = 0.5
TEXTURE_WIDTH = 64
TEXTURE_HEIGHT = 64


@dataclass
class SceneData:
    """Texture paths, colours, map rows and player start of a scene."""

    no: Optional[str] = None
    so: Optional[str] = None
    we: Optional[str] = None
    ea: Optional[str] = None
    map: List[str] = field(default_factory=list)
    colors: bool = False
    floor: int = 0
    ceiling: int = 0
    size_textures: int = 0
    lines: int = 0
    columns: int = 0
    x_player: int = 0
    y_player: int = 0
    pov_player: Optional[str] = None

    def textures_complete(self) -> bool:
        """True once all four textures and both colours have been read."""
        return bool(self.no and self.so and self.we and self.ea and self.colors)


@dataclass
class MapValidation:
    """Counts of invalid characters and player starts found in a map."""

    invalid: int = 0
    player: int = 0

    def check(self) -> None:
        """Raise CubError unless the map has no invalid character and one player."""
        if self.invalid != 0:
            raise CubError(WARNING_INVALID)
        if self.player != 1:
            raise CubError(WARNING_PLAYER)