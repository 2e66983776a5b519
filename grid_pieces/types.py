"""Common type aliases and enumerations.

``Direction`` is the closed set of unit movements a chain is built from and
``Form`` is the per-cell occupancy state stored in a :class:`Grid`.
"""

from enum import StrEnum, auto
from typing import Callable, Tuple

from grid_pieces.position import Position


class Form(StrEnum):
    """Occupancy of a single grid cell."""

    PRESENT = auto()
    VOID = auto()

    @property
    def is_present(self) -> bool:
        return self is Form.PRESENT


class Direction(StrEnum):
    """Unit movement applied by one step of a movement chain.

    Members:
        UP, DOWN, LEFT, RIGHT: Single cell moves.
        DIAGONAL_SKIP: Two cell horizontal jump to the right.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    DIAGONAL_SKIP = auto()


MovementChain = Tuple[Direction, ...]

# (position, height, width) -> True if the move would leave the grid
BoundsFn = Callable[[Position, int, int], bool]

Delta = Tuple[int, int]
