"""Step engine.

Applies a single :class:`~grid_pieces.types.Direction` to a ``(grid, position)``
pair. The order of checks is fixed:

1. Bounds predicate against the *current* position.
2. Move to the destination via the direction's delta.
3. Occupancy of the destination.
4. Mark the destination ``PRESENT``.

Either check failing raises :class:`~grid_pieces.errors.CollisionError`. The
step is all-or-nothing: the input grid is a persistent value and is never
modified, and a new grid is only built once both checks pass.
"""

import logging
from typing import Tuple

from grid_pieces.directions import advance, violates_bounds
from grid_pieces.errors import CollisionError
from grid_pieces.grid import Grid
from grid_pieces.position import Position
from grid_pieces.types import Direction

logger = logging.getLogger(__name__)


def step(direction: Direction, grid: Grid, pos: Position) -> Tuple[Grid, Position]:
    """Move one step and occupy the destination cell.

    Args:
        direction (Direction): Movement to apply.
        grid (Grid): Grid to step over.
        pos (Position): Current cursor position (assumed in bounds).

    Returns:
        Tuple[Grid, Position]: New grid with the destination marked and the
            destination position.

    Raises:
        CollisionError: If the move leaves the grid or the destination is
            already occupied.
    """
    if violates_bounds(direction, pos, grid):
        logger.debug("%s from %s leaves the grid", direction, pos)
        raise CollisionError()

    destination = advance(direction, pos)
    if grid.pos(destination).is_present:
        logger.debug("%s from %s lands on occupied %s", direction, pos, destination)
        raise CollisionError()

    return grid.set(destination), destination
