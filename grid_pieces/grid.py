"""Fixed-size occupancy grid.

The :class:`Grid` is a frozen value whose cells live in a persistent
``PVector`` of rows (``pyrsistent``). Marking a cell returns a *new* grid that
shares every untouched row with its predecessor, so the step engine can thread
grids through a movement chain without copying and without ever mutating a
grid a caller still holds.

Occupancy is append-only: cells only ever flip from ``VOID`` to ``PRESENT``.
"""

from dataclasses import dataclass, field, replace
from typing import Iterable

import numpy as np
from pyrsistent import pset, pvector
from pyrsistent.typing import PSet, PVector

from grid_pieces.config import GRID_HEIGHT, GRID_WIDTH, GridConfig
from grid_pieces.position import Position
from grid_pieces.types import Form


def _void_rows(width: int, height: int) -> PVector[PVector[Form]]:
    row: PVector[Form] = pvector([Form.VOID] * width)
    return pvector([row] * height)


@dataclass(frozen=True)
class Grid:
    """Immutable H x W occupancy map.

    Attributes:
        width (int): Number of columns.
        height (int): Number of rows.
        cells (PVector[PVector[Form]]): Row-major cells, ``cells[row][col]``.
            Left empty to build an all-``VOID`` grid; any nested sequence
            of ``Form`` is coerced to persistent rows.
    """

    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT
    cells: PVector[PVector[Form]] = field(default_factory=pvector)

    def __post_init__(self) -> None:
        GridConfig(self.width, self.height)  # validates dimensions
        if len(self.cells) == 0:
            object.__setattr__(self, "cells", _void_rows(self.width, self.height))
            return
        object.__setattr__(
            self, "cells", pvector(pvector(row) for row in self.cells)
        )
        if len(self.cells) != self.height or any(
            len(row) != self.width for row in self.cells
        ):
            raise ValueError(
                f"Cells do not match grid dimensions {self.width}x{self.height}"
            )

    @classmethod
    def empty(cls, width: int = GRID_WIDTH, height: int = GRID_HEIGHT) -> "Grid":
        """Return an all-``VOID`` grid."""
        return cls(width=width, height=height)

    @classmethod
    def from_config(cls, config: GridConfig) -> "Grid":
        return cls(width=config.width, height=config.height)

    @classmethod
    def from_positions(
        cls,
        positions: Iterable[Position],
        width: int = GRID_WIDTH,
        height: int = GRID_HEIGHT,
    ) -> "Grid":
        """Return a grid with exactly ``positions`` marked ``PRESENT``."""
        grid = cls.empty(width, height)
        for position in positions:
            grid = grid.set(position)
        return grid

    def in_bounds(self, pos: Position) -> bool:
        """Return True if ``pos`` lies within the grid rectangle."""
        return 0 <= pos.row < self.height and 0 <= pos.col < self.width

    def pos(self, pos: Position) -> Form:
        """Return the occupancy of ``pos`` without modifying the grid.

        Raises:
            IndexError: If ``pos`` is outside the grid.
        """
        self._check_bounds(pos)
        return self.cells[pos.row][pos.col]

    def set(self, pos: Position) -> "Grid":
        """Return a new grid with ``pos`` marked ``PRESENT``.

        Raises:
            IndexError: If ``pos`` is outside the grid.
        """
        self._check_bounds(pos)
        row = self.cells[pos.row].set(pos.col, Form.PRESENT)
        return replace(self, cells=self.cells.set(pos.row, row))

    def present_positions(self) -> PSet[Position]:
        """Return every ``PRESENT`` cell."""
        return pset(
            Position(row, col)
            for row, cells in enumerate(self.cells)
            for col, form in enumerate(cells)
            if form.is_present
        )

    def to_array(self) -> np.ndarray:
        """Return a ``(height, width)`` boolean array, True where ``PRESENT``."""
        return np.array(
            [[form.is_present for form in row] for row in self.cells], dtype=bool
        )

    def _check_bounds(self, pos: Position) -> None:
        if not self.in_bounds(pos):
            raise IndexError(
                f"Out of bounds: {(pos.row, pos.col)} for grid {self.width}x{self.height}"
            )
