"""Reading, normalising and validating the map part of a scene file."""

from __future__ import annotations

from typing import Iterable, List

from .errors import WARNING_EDGE_MAP, WARNING_MAP, CubError
from .scene import MapValidation, SceneData

TAB_WIDTH = 4
PADDING = "2"

_PLAYERS = "NSEW"
_ALLOWED = " NSEW01\0\n"
_OPEN = " " + PADDING


def read_map_lines(lines: Iterable[str], header_size: int) -> List[str]:
    """Return the map rows that follow the first header_size lines.

    Blank lines before the map are skipped, and blank lines after it are
    allowed, but a non-blank line after a blank one inside the map is an error.
    """
    rows: List[str] = []
    in_map = False
    ended = False
    for index, line in enumerate(lines):
        if line.startswith("\n"):
            if in_map:
                ended = True
            continue
        if ended:
            raise CubError(WARNING_MAP)
        if index >= header_size:
            rows.append(line)
            in_map = True
    return rows


def replace_tabs(line: str) -> str:
    """Replace every tab in line by four spaces."""
    return line.replace("\t", " " * TAB_WIDTH)


def expand_tabs(rows: Iterable[str]) -> List[str]:
    """Return rows with their tabs replaced by spaces."""
    return [replace_tabs(row) for row in rows]


def check_invalid_char(c: str) -> bool:
    """True if c may appear in a map row."""
    return c in _ALLOWED or 9 <= ord(c) <= 13


def analyze_map_content(data: SceneData) -> MapValidation:
    """Count invalid characters and players in data.map.

    The last player found sets the player position and direction of data.
    """
    validation = MapValidation()
    for y, row in enumerate(data.map):
        for x, ch in enumerate(row):
            if not check_invalid_char(ch):
                validation.invalid += 1
            elif ch in _PLAYERS:
                validation.player += 1
                data.pov_player = ch
                data.y_player = y
                data.x_player = x
    return validation


def get_max_columns(rows: Iterable[str]) -> int:
    """Width of the widest row, its final character (the newline) not counted."""
    return max((len(row) - 1 for row in rows), default=0)


def pad_map(rows: Iterable[str], columns: int) -> List[str]:
    """Drop the final character of each row and pad it to columns with '2'."""
    return [row[: len(row) - 1].ljust(columns, PADDING) for row in rows]


def _is_open(grid: List[str], y: int, x: int) -> bool:
    return grid[y][x] in _OPEN


def check_sides(data: SceneData, line: int, col: int) -> bool:
    """True if the cell is inside the map and no side neighbour is open."""
    grid = data.map
    if line <= 0 or line >= data.lines or col <= 0 or col >= data.columns:
        return False
    if _is_open(grid, line - 1, col):
        return False
    if line + 1 < data.lines and _is_open(grid, line + 1, col):
        return False
    if _is_open(grid, line, col - 1):
        return False
    if col + 1 < data.columns and _is_open(grid, line, col + 1):
        return False
    return True


def check_diagonals(data: SceneData, line: int, col: int) -> bool:
    """True if no diagonal neighbour of the cell is open."""
    grid = data.map
    up = line > 0
    down = line + 1 < data.lines
    left = col > 0
    right = col + 1 < data.columns
    if up and left and _is_open(grid, line - 1, col - 1):
        return False
    if down and left and _is_open(grid, line + 1, col - 1):
        return False
    if up and right and _is_open(grid, line - 1, col + 1):
        return False
    if down and right and _is_open(grid, line + 1, col + 1):
        return False
    return True


def _count_len(row: str) -> int:
    index = row.find(PADDING)
    return len(row) if index < 0 else index


def surrounded_by_walls(data: SceneData) -> None:
    """Pad data.map and raise CubError if a floor or player cell is not enclosed."""
    data.map = pad_map(data.map, data.columns)
    grid = data.map
    for y, row in enumerate(grid):
        edge = _count_len(row) - 1
        for x, ch in enumerate(row):
            if ch != "0" and ch not in _PLAYERS:
                continue
            if y in (0, data.lines - 1) or x in (0, edge):
                raise CubError(WARNING_EDGE_MAP)
            if not check_sides(data, y, x) or not check_diagonals(data, y, x):
                raise CubError(WARNING_EDGE_MAP)