"""Caller-facing placement helpers.

Rendering a piece assumes its starting cell is already occupied. These helpers
perform that setup so a caller only supplies a piece and a starting position.
"""

import logging
from typing import Tuple

from grid_pieces.errors import CollisionError
from grid_pieces.grid import Grid
from grid_pieces.pieces import Piece, render_piece
from grid_pieces.position import Position

logger = logging.getLogger(__name__)


def spawn(grid: Grid, start: Position) -> Grid:
    """Mark the starting cell of a piece.

    Raises:
        CollisionError: If ``start`` is outside the grid or already occupied.
    """
    if not grid.in_bounds(start) or grid.pos(start).is_present:
        logger.debug("Cannot spawn at %s", start)
        raise CollisionError()
    return grid.set(start)


def place_piece(piece: Piece, grid: Grid, start: Position) -> Tuple[Grid, Position]:
    """Spawn at ``start`` and render ``piece`` from there.

    Returns:
        Tuple[Grid, Position]: Grid with all cells of the piece marked and the
            position of its last cell.

    Raises:
        CollisionError: If the start cell or any step collides.
    """
    grid = spawn(grid, start)
    grid, last = render_piece(piece, grid, start)
    logger.debug("Placed %s from %s to %s", piece, start, last)
    return grid, last


def can_place(piece: Piece, grid: Grid, start: Position) -> bool:
    """Return True if :func:`place_piece` would succeed."""
    try:
        place_piece(piece, grid, start)
    except CollisionError:
        return False
    return True
