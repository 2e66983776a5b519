from typing import Iterable, Iterator, Set, Tuple

from grid_pieces.grid import Grid
from grid_pieces.position import Position

Coord = Tuple[int, int]


def make_grid(present: Iterable[Coord] = (), width: int = 4, height: int = 4) -> Grid:
    """Small grid for tests with ``present`` cells marked."""
    return Grid.from_positions(
        [Position(row, col) for row, col in present], width=width, height=height
    )


def present_coords(grid: Grid) -> Set[Coord]:
    return {(p.row, p.col) for p in grid.present_positions()}


def all_positions(width: int = 4, height: int = 4) -> Iterator[Position]:
    for row in range(height):
        for col in range(width):
            yield Position(row, col)
