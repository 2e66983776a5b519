"""grid_pieces
=================

Place rigid multi-cell pieces onto a fixed-size occupancy grid by replaying a
short chain of unit moves, failing fast with :class:`CollisionError` on the
first move that leaves the grid or lands on an occupied cell.

Common imports are re-exported here::

    from grid_pieces import Grid, Position, Piece, place_piece

"""

from .chain import iter_render, render_chain, validate_chain
from .config import GRID_HEIGHT, GRID_WIDTH, MAX_CHAIN_LENGTH, GridConfig
from .directions import DIRECTION_RULES, DirectionRule, advance, violates_bounds
from .errors import CollisionError
from .grid import Grid
from .pieces import PIECE_CHAINS, Piece, piece_offsets, render_piece
from .placement import can_place, place_piece, spawn
from .position import Position
from .selector import PieceSelector, make_selector, random_piece
from .step import step
from .types import Direction, Form, MovementChain

__all__ = [
    # Config
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "MAX_CHAIN_LENGTH",
    "GridConfig",
    # Values
    "Direction",
    "Form",
    "Grid",
    "MovementChain",
    "Position",
    # Engine
    "CollisionError",
    "DIRECTION_RULES",
    "DirectionRule",
    "advance",
    "violates_bounds",
    "step",
    "iter_render",
    "render_chain",
    "validate_chain",
    # Pieces
    "PIECE_CHAINS",
    "Piece",
    "PieceSelector",
    "make_selector",
    "piece_offsets",
    "random_piece",
    "render_piece",
    # Placement
    "can_place",
    "place_piece",
    "spawn",
]
