"""Error type and messages for scene-file validation."""

from __future__ import annotations

RED = "\033[31m"
RST = "\033[0m"

WARNING_ARGS = "Error: Number of arguments is invalid.\n"
WARNING_EXT = "Error: The map file must be .cub\n"
WARNING_PLAYER = "Error: Invalid player.\n"
WARNING_INVALID = "Error: Invalid character in map.\n"
WARNING_EMPTY_LINE = "Error: Empty line.\n"
WARNING_OPEN_MAP = "Error: Map is open.\n"
WARNING_TEXTURE = "Error: Invalid texture path.\n"
WARNING_DUP_COLOR = "Error: Duplicated color.\n"
WARNING_DUP_TEXTURE = "Error: Duplicated texture.\n"
WARNING_INVALID_FILE = "Error: Invalid file.\n"
WARNING_INVALID_COLOR = "Error: Invalid RGB color.\n"
WARNING_EDGE_MAP = "Error: Map is not surrounded by walls.\n"
WARNING_MAP = "Error: Invalid map.\n"
WARNING_MAP_SIZE = "Error: Invalid map size.\n"
WARNING_OPEN_FILE = "Error: open file.\n"


class CubError(Exception):
    """Raised when a scene file or its arguments are invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def format_error(message: str) -> str:
    """Return message wrapped in the terminal colour codes used for errors."""
    return f"{RED}{message}{RST}"