"""Reading ``.ber`` map files and checking their shape and contents."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from os import PathLike
from typing import Union

Row = Union[str, Sequence[str]]
Grid = Sequence[Row]
PathType = Union[str, "PathLike[str]"]

MAP_SUFFIX = ".ber"
ALLOWED_TILES = frozenset("EPC01")
WALL = "1"
PLAYER = "P"
EXIT = "E"
ITEM = "C"


class MapError(Exception):
    """Raised when a map file cannot be read."""


def read_lines(path: PathType) -> Iterator[str]:
    """Yield the lines of a map file one by one, each keeping its newline."""
    try:
        handle = open(path, encoding="utf-8", newline="")
    except OSError as exc:
        raise MapError(f"cannot open map file {path!s}: {exc.strerror}") from exc
    with handle:
        yield from _split_keeping_newlines(handle)


def _split_keeping_newlines(chunks: Iterable[str]) -> Iterator[str]:
    pending = ""
    for chunk in chunks:
        pending += chunk
        while "\n" in pending:
            line, pending = pending.split("\n", 1)
            yield line + "\n"
    if pending:
        yield pending


def load_map(path: PathType) -> list[str]:
    """Return every line of the map file, newlines kept."""
    return list(read_lines(path))


def count_lines(path: PathType) -> int:
    """Return the number of lines in the map file."""
    return sum(1 for _ in read_lines(path))


def name_valid(name: str) -> bool:
    """Tell whether a file name carries the ``.ber`` suffix."""
    return name.endswith(MAP_SUFFIX)


def count_tile(grid: Grid, tile: str) -> int:
    """Count how often a tile appears anywhere in the grid."""
    return sum(sum(1 for cell in row if cell == tile) for row in grid)


def player_count(grid: Grid) -> int:
    """Number of player start tiles."""
    return count_tile(grid, PLAYER)


def exit_count(grid: Grid) -> int:
    """Number of exit tiles."""
    return count_tile(grid, EXIT)


def item_count(grid: Grid) -> int:
    """Number of collectible tiles."""
    return count_tile(grid, ITEM)


def _cells(row: Row) -> Iterator[str]:
    """Cells of a row up to, not including, its line break."""
    for cell in row:
        if cell == "\n":
            return
        yield cell


def has_valid_elements(grid: Grid) -> bool:
    """Tell whether every row holds only the allowed tiles before its newline."""
    return all(cell in ALLOWED_TILES for row in grid for cell in _cells(row))


def is_rectangular(grid: Grid) -> bool:
    """Tell whether all rows have one length and the map is not square.

    Row lengths include the trailing newline, so a last row lacking one
    makes the map fail this check.
    """
    width = len(grid[0]) if grid else 0
    if any(len(row) != width for row in grid):
        return False
    return len(grid) != width - 1


def is_closed(grid: Grid) -> bool:
    """Tell whether the map is enclosed by walls.

    Each row is taken to end with a newline, so the last playable column
    is the one just before it.
    """
    if not grid:
        return False
    top, bottom = grid[0], grid[-1]
    for column in range(len(top) - 1):
        if top[column] != WALL:
            return False
        if column >= len(bottom) or bottom[column] != WALL:
            return False
    for row in grid:
        if len(row) < 2:
            return False
        if row[0] != WALL or row[len(row) - 2] != WALL:
            return False
    return True