"""Parsing and validating a whole scene file, and the command that runs it."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from .errors import (
    WARNING_ARGS,
    WARNING_EXT,
    WARNING_INVALID_FILE,
    WARNING_MAP_SIZE,
    WARNING_OPEN_FILE,
    CubError,
    format_error,
)
from .linereader import read_lines
from .mapgrid import (
    analyze_map_content,
    expand_tabs,
    get_max_columns,
    read_map_lines,
    surrounded_by_walls,
)
from .scene import SceneData
from .textures import HeaderReader

EXTENSION = ".cub"


def check_arguments(argv: Sequence[str]) -> str:
    """Require exactly one argument, the scene file, and return it."""
    if len(argv) != 1:
        raise CubError(WARNING_ARGS)
    return argv[0]


def check_extension(map_file: str) -> str:
    """Require the text after the last '.' of map_file to be 'cub'."""
    dot = map_file.rfind(".")
    if dot < 0 or map_file[dot:] != EXTENSION:
        raise CubError(WARNING_EXT)
    return map_file


def _read_file(map_file: str) -> List[str]:
    try:
        return read_lines(map_file)
    except IsADirectoryError:
        raise CubError(WARNING_INVALID_FILE) from None
    except OSError:
        raise CubError(WARNING_OPEN_FILE) from None


def data_processing(map_file: str, data: SceneData) -> SceneData:
    """Read the header and the raw map rows of map_file into data."""
    lines = _read_file(map_file)
    reader = HeaderReader(data)
    for index, line in enumerate(lines):
        if reader.feed(line):
            consumed = index + 1
            break
    else:
        raise CubError(WARNING_INVALID_FILE)
    if consumed >= len(lines):
        raise CubError(WARNING_MAP_SIZE)
    data.map = read_map_lines(lines, data.size_textures)
    data.columns = get_max_columns(data.map)
    data.lines = len(data.map)
    return data


def parse(map_file: str) -> SceneData:
    """Parse and validate a scene file; raise CubError if it is invalid."""
    check_extension(map_file)
    data = data_processing(map_file, SceneData())
    data.map = expand_tabs(data.map)
    analyze_map_content(data).check()
    surrounded_by_walls(data)
    return data


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Validate the scene file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        map_file = check_arguments(args)
    except CubError as err:
        sys.stdout.write(err.message)
        return 1
    try:
        parse(map_file)
    except CubError as err:
        sys.stderr.write(format_error(err.message))
        return 1
    sys.stdout.write("PARSING OK\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())