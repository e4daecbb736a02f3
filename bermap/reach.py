"""Reachability checks on a map grid and the full validation pass."""

from __future__ import annotations

from typing import Optional

from bermap.mapfile import (
    EXIT,
    ITEM,
    PLAYER,
    WALL,
    Grid,
    exit_count,
    has_valid_elements,
    is_closed,
    is_rectangular,
    item_count,
    player_count,
)

VISITED = "V"
_BARRIERS = frozenset({WALL, VISITED, "\n"})


def find_tile(grid: Grid, tile: str) -> Optional[tuple[int, int]]:
    """Return the ``(y, x)`` position of the first occurrence of a tile, or None."""
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell == tile:
                return y, x
    return None


def flood_fill(grid: Grid, y: int, x: int) -> list[str]:
    """Return a copy of the grid with every cell reachable from ``(y, x)`` marked ``V``.

    Walls and already visited cells stop the fill; the grid passed in is
    left untouched.
    """
    cells = [list(row) for row in grid]
    pending = [(y, x)]
    while pending:
        row, column = pending.pop()
        if not 0 <= row < len(cells) or not 0 <= column < len(cells[row]):
            continue
        if cells[row][column] in _BARRIERS:
            continue
        cells[row][column] = VISITED
        pending.extend(
            (
                (row + 1, column),
                (row - 1, column),
                (row, column + 1),
                (row, column - 1),
            )
        )
    return ["".join(row) for row in cells]


def items_left(grid: Grid) -> bool:
    """Tell whether any collectible remains in the grid."""
    return any(cell == ITEM for row in grid for cell in row)


def exit_reachable(grid: Grid) -> bool:
    """Tell whether the player can reach the exit and every collectible."""
    player = find_tile(grid, PLAYER)
    exit_position = find_tile(grid, EXIT)
    if player is None or exit_position is None:
        return False
    filled = flood_fill(grid, *player)
    exit_y, exit_x = exit_position
    return filled[exit_y][exit_x] == VISITED and not items_left(filled)


def validate(grid: Grid) -> bool:
    """Run every map check in order and tell whether the map is playable."""
    return (
        player_count(grid) == 1
        and has_valid_elements(grid)
        and is_rectangular(grid)
        and is_closed(grid)
        and exit_count(grid) == 1
        and exit_reachable(grid)
        and item_count(grid) >= 1
    )