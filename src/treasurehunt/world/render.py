"""Console rendering of the grid and step traces."""
from __future__ import annotations
from typing import Iterable, Optional, Set, Tuple, TYPE_CHECKING
from rich.text import Text

from .grid import Grid, Tile

if TYPE_CHECKING:  # pragma: no cover
    from treasurehunt.substrates.digital.instruction_vm import Direction

TILE_GLYPHS = {Tile.EMPTY: "░", Tile.PLAYER_START: "P", Tile.TREASURE: "█"}
TILE_STYLES = {Tile.EMPTY: "dim", Tile.PLAYER_START: "bold cyan", Tile.TREASURE: "bold yellow"}


def format_trace(trace: Iterable[Direction]) -> str:
    return "".join(d.symbol for d in trace)


def visited_cells(trace: Iterable[Direction], start_x: int, start_y: int) -> Set[Tuple[int, int]]:
    x, y = start_x, start_y
    seen = set()
    for direction in trace:
        dx, dy = direction.delta
        x, y = x + dx, y + dy
        seen.add((x, y))
    return seen


def render_grid(grid: Grid, trace: Optional[Iterable[Direction]] = None) -> Text:
    """Render tiles as glyphs; cells visited by ``trace`` are highlighted."""
    path: Set[Tuple[int, int]] = set()
    if trace is not None:
        ys, xs = (grid == Tile.PLAYER_START).nonzero()
        if len(xs):
            path = visited_cells(trace, int(xs[0]), int(ys[0]))
    text = Text()
    for y in range(grid.shape[0]):
        for x in range(grid.shape[1]):
            tile = Tile(int(grid[y, x]))
            style = TILE_STYLES[tile]
            if (x, y) in path:
                style = f"{style} on green"
            text.append(TILE_GLYPHS[tile], style=style)
            text.append(" ")
        text.append("\n")
    return text
