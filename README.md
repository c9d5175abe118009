# cubparse

`cubparse` reads and validates `.cub` scene files. These are the map files
used by small raycasting games. A scene file holds four wall texture paths,
a floor colour, a ceiling colour, and a grid map. The map is made of walls,
empty floor and a single player start.

## Scene file format

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png

F 220,100,0
C 225,30,0

        1111111111
        1000000001
111111111000N00001
100000000000000001
111111111111111111
```

The following rules are checked:

- The file name must end in `.cub`.
- Each of `NO`, `SO`, `WE` and `EA` appears once. The key is followed by
  whitespace. The path is a single word with only whitespace after it, and
  it names a file that can be opened for reading.
- `F` and `C` appear once each. The key is followed by whitespace, then by
  three comma separated numbers made only of digits, each from 0 to 255.
  Colours are packed as `0xRRGGBBFF`.
- Any other non-blank line in the header is an error.
- The map holds only these characters:
  - `0`, `1` and spaces;
  - tab to carriage-return whitespace;
  - exactly one of `N`, `S`, `E`, `W`.
- Tabs in the map are expanded to four spaces.
- The map has no blank line inside it. Blank lines after it are allowed.
- Every `0` and every player cell is enclosed by walls. It may not touch a
  space or the edge of the map, diagonals included.

## Command line

```
cubparse path/to/scene.cub
```

Exactly one argument is expected. Otherwise the command prints
`Error: Number of arguments is invalid.` and exits with status 1.

On success it prints `PARSING OK` and exits with status 0.

On any other failure it writes a red message to standard error and exits
with status 1. An example of such a message is
`Error: Map is not surrounded by walls.`

## Library use

```python
from cubparse.parser import parse
from cubparse.errors import CubError

try:
    data = parse("maps/level.cub")
except CubError as exc:
    print(exc.message, end="")
else:
    print(data.no, hex(data.floor), data.x_player, data.y_player, data.pov_player)
```

`parse` returns a `cubparse.scene.SceneData` with these fields:

- `no`, `so`, `we`, `ea`: the texture paths.
- `floor`, `ceiling`: the packed colours.
- `map`: the map rows, with their newlines dropped and padded with `2` to the
  width of the widest row.
- `lines`, `columns`: the size of the map.
- `x_player`, `y_player`, `pov_player`: the player's column, row and facing
  letter.

Each error is raised as `cubparse.errors.CubError`. Its `message` is one of
the `WARNING_*` texts in `cubparse.errors`.

The separate steps can also be called on their own:

- `cubparse.parser`: `check_arguments`, `check_extension`, `data_processing`
  and `main`.
- `cubparse.colors`: `parse_rgb`, `split_rgb` and `convert_rgb`.
- `cubparse.textures`: `HeaderReader` (feed it header lines one at a time),
  `copy_texture_path` and `check_path`.
- `cubparse.mapgrid`: `read_map_lines`, `expand_tabs`,
  `analyze_map_content`, `pad_map` and `surrounded_by_walls`.
- `cubparse.scene`: `MapValidation.check()`.

The package also ships small helpers:

- `cubparse.charutils`: character classification, plus C-style `atoi` and
  `atol`.
- `cubparse.strutils`: string routines with C semantics, returning indices.
- `cubparse.memutils`: byte buffer routines.
- `cubparse.linkedlist`: a singly linked list.
- `cubparse.output`: writing to streams and a small `format_printf`/`printf`.
- `cubparse.linereader`: a buffered `LineReader` and `read_lines`.

## What it does not do

`cubparse` only checks scene files. It does not open a window and does not
render or raycast. It does not load or decode textures; it only checks that
each texture file can be opened. It does not handle player movement or
input.

## Tests

```
pip install -e .[test]
pytest
```