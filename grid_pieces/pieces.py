"""Piece catalog.

Each :class:`Piece` is a fixed movement chain describing a tetromino-like
shape relative to a starting cell. The starting cell itself is not part of the
chain; callers mark it before rendering (see :mod:`grid_pieces.placement`).

=========== =================================
Piece       Chain
=========== =================================
SQUARE      UP, RIGHT, DOWN
LINE        DOWN, DOWN, DOWN
LEFT_TWIST  DOWN, RIGHT, DOWN
RIGHT_TWIST DOWN, LEFT, DOWN
PILE        DOWN, LEFT, DIAGONAL_SKIP
=========== =================================
"""

from enum import StrEnum, auto
from typing import List, Tuple

from pyrsistent import pmap
from pyrsistent.typing import PMap

from grid_pieces.chain import render_chain
from grid_pieces.directions import DIRECTION_RULES
from grid_pieces.grid import Grid
from grid_pieces.position import Position
from grid_pieces.types import Delta, Direction, MovementChain


class Piece(StrEnum):
    """The five catalog pieces."""

    SQUARE = auto()
    LINE = auto()
    LEFT_TWIST = auto()
    RIGHT_TWIST = auto()
    PILE = auto()

    @property
    def chain(self) -> MovementChain:
        return PIECE_CHAINS[self]


PIECE_CHAINS: PMap[Piece, MovementChain] = pmap(
    {
        Piece.SQUARE: (Direction.UP, Direction.RIGHT, Direction.DOWN),
        Piece.LINE: (Direction.DOWN, Direction.DOWN, Direction.DOWN),
        Piece.LEFT_TWIST: (Direction.DOWN, Direction.RIGHT, Direction.DOWN),
        Piece.RIGHT_TWIST: (Direction.DOWN, Direction.LEFT, Direction.DOWN),
        Piece.PILE: (Direction.DOWN, Direction.LEFT, Direction.DIAGONAL_SKIP),
    }
)


def render_piece(piece: Piece, grid: Grid, pos: Position) -> Tuple[Grid, Position]:
    """Render ``piece`` from ``pos``; same contract as :func:`render_chain`."""
    return render_chain(piece.chain, grid, pos)


def piece_offsets(piece: Piece) -> Tuple[Delta, ...]:
    """Relative ``(d_row, d_col)`` of every cell, starting cell first."""
    offsets: List[Delta] = [(0, 0)]
    for direction in piece.chain:
        d_row, d_col = DIRECTION_RULES[direction].delta
        last_row, last_col = offsets[-1]
        offsets.append((last_row + d_row, last_col + d_col))
    return tuple(offsets)
