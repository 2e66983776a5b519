"""Per-direction movement rules.

Every :class:`~grid_pieces.types.Direction` is paired with

* a *bounds predicate* evaluated against the **current** position, answering
  "would this move leave the grid?", and
* a coordinate *delta* applied once the predicate passes.

Both halves live in one :class:`DirectionRule` so a direction can never have
one without the other. The predicates take the grid dimensions explicitly and
are evaluated against the ``Grid`` being stepped over, keeping them consistent
with the array they guard.
"""

from dataclasses import dataclass
from typing import Dict

from grid_pieces.grid import Grid
from grid_pieces.position import Position
from grid_pieces.types import BoundsFn, Delta, Direction


@dataclass(frozen=True)
class DirectionRule:
    """Bounds predicate and delta for a single direction.

    Attributes:
        violates_bounds: ``(position, height, width) -> bool``.
        delta: ``(d_row, d_col)`` added to the position on success.
    """

    violates_bounds: BoundsFn
    delta: Delta


def _up_blocked(pos: Position, height: int, width: int) -> bool:
    return pos.row == 0


def _down_blocked(pos: Position, height: int, width: int) -> bool:
    return pos.row == height - 1


def _left_blocked(pos: Position, height: int, width: int) -> bool:
    return pos.col == 0


def _right_blocked(pos: Position, height: int, width: int) -> bool:
    return pos.col == width - 1


def _diagonal_skip_blocked(pos: Position, height: int, width: int) -> bool:
    # Two-cell jump: col W-2 would land on W.
    return pos.col >= width - 2


DIRECTION_RULES: Dict[Direction, DirectionRule] = {
    Direction.UP: DirectionRule(_up_blocked, (-1, 0)),
    Direction.DOWN: DirectionRule(_down_blocked, (1, 0)),
    Direction.LEFT: DirectionRule(_left_blocked, (0, -1)),
    Direction.RIGHT: DirectionRule(_right_blocked, (0, 1)),
    Direction.DIAGONAL_SKIP: DirectionRule(_diagonal_skip_blocked, (0, 2)),
}
"""Registry of direction rules, one entry per ``Direction`` member."""


def violates_bounds(direction: Direction, pos: Position, grid: Grid) -> bool:
    """Return True if moving ``direction`` from ``pos`` would leave ``grid``."""
    return DIRECTION_RULES[direction].violates_bounds(pos, grid.height, grid.width)


def advance(direction: Direction, pos: Position) -> Position:
    """Return ``pos`` moved by the delta of ``direction`` (no bounds check)."""
    d_row, d_col = DIRECTION_RULES[direction].delta
    return pos.offset(d_row, d_col)
