"""Fixed treasure-hunt environment."""
from __future__ import annotations
from enum import IntEnum
from typing import NamedTuple
import numpy as np

GRID_SIZE = 7

# (row, column)
TREASURE_POSITIONS = ((1, 4), (2, 2), (3, 6), (4, 1), (5, 4))
PLAYER_START = (6, 3)

Grid = np.ndarray


class Tile(IntEnum):
    EMPTY = 0
    PLAYER_START = 1
    TREASURE = 2


class GridSurvey(NamedTuple):
    start_x: int
    start_y: int
    treasures: int


def build_environment() -> Grid:
    """Build the 7x7 layout, indexed ``grid[y, x]``.

    The returned array is read-only; the VM clones it for every run.
    """
    grid = np.full((GRID_SIZE, GRID_SIZE), Tile.EMPTY, dtype=np.uint8)
    for row, col in TREASURE_POSITIONS:
        grid[row, col] = Tile.TREASURE
    grid[PLAYER_START] = Tile.PLAYER_START
    grid.flags.writeable = False
    return grid


def survey_grid(grid: Grid) -> GridSurvey:
    """Locate the player start and count treasures in one scan."""
    start_x, start_y = 0, 0
    treasures = 0
    for y in range(grid.shape[0]):
        for x in range(grid.shape[1]):
            if grid[y, x] == Tile.PLAYER_START:
                start_x, start_y = x, y
            elif grid[y, x] == Tile.TREASURE:
                treasures += 1
    return GridSurvey(start_x=start_x, start_y=start_y, treasures=treasures)
