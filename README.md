# bermap

Load and check `.ber` tile maps, the plain-text grids used by small
"collect everything, then reach the exit" puzzle games.

A `.ber` map is a rectangle of characters, one row per line:

| Tile | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | empty floor  |
| `P`  | player start |
| `E`  | exit         |
| `C`  | collectible  |

```
1111111
1P0C0E1
1111111
```

## Installation

```
pip install .
```

Python 3.10 or later is needed. The package has no dependencies outside
the standard library.

## What counts as a valid map

`bermap.reach.validate(grid)` runs these checks in order and returns
`True` only if all of them pass:

1. exactly one player tile `P`;
2. every row holds only `E`, `P`, `C`, `0` and `1` before its newline;
3. all rows have the same length, and the map is not square
   (row lengths count the trailing newline, so a last row without a
   newline fails this check);
4. the first and last rows, and the first and last column of every row,
   are walls;
5. exactly one exit tile `E`;
6. a flood fill from the player reaches the exit and leaves no
   collectible unvisited;
7. at least one collectible.

## Using the library

A grid is a sequence of rows, each a string (or sequence of
characters) normally ending in `"\n"`, as `load_map` returns them.

`bermap.mapfile` reads files and checks shape and contents:

- `read_lines(path)` yields the lines of a map file one at a time,
  each keeping its newline; `load_map(path)` returns them as a list;
  `count_lines(path)` returns how many there are. They raise `MapError`
  when the file cannot be opened.
- `name_valid(name)` tells whether a file name ends in `.ber`.
- `count_tile(grid, tile)` counts a tile anywhere in the grid;
  `player_count(grid)`, `exit_count(grid)` and `item_count(grid)` count
  `P`, `E` and `C`.
- `has_valid_elements(grid)`, `is_rectangular(grid)` and
  `is_closed(grid)` return `True` or `False` for checks 2, 3 and 4 above.

`bermap.reach` handles reachability:

- `find_tile(grid, tile)` returns the `(y, x)` position of the first
  occurrence of a tile, or `None`.
- `flood_fill(grid, y, x)` returns a new grid, as a list of strings, in
  which every cell reachable from `(y, x)` without crossing a wall is
  replaced by `V`. The grid passed in is not changed.
- `items_left(grid)` tells whether any `C` remains.
- `exit_reachable(grid)` tells whether the player can reach the exit
  and every collectible.
- `validate(grid)` runs every check listed above.

```python
from bermap.mapfile import MapError, load_map, name_valid
from bermap.reach import validate

path = "map.ber"
if name_valid(path):
    try:
        print(validate(load_map(path)))
    except MapError as exc:
        print(exc)
```

## Command line

Installing the package provides the `bermap` command:

```
bermap [path] [--full]
```

It loads `path` (by default `map.ber` in the current directory) and
prints `0` if the map passes the check and `1` if it does not, with no
trailing newline. By default only the tile check (`has_valid_elements`)
is run; `--full` runs every check through `validate`. If the file cannot
be opened, the error goes to standard error and the command exits with
status 1.

## What the package does not do

It only reads and checks maps. It does not draw a map, open a window,
take keyboard input or let anyone play the game.

## Running the tests

```
pip install .[test]
pytest
```