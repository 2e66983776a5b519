"""Uniform random piece selection.

Selection is stateless: the random source is always injected, so tests (and
replays) pass a seeded ``random.Random`` and nothing touches the global
``random`` state.
"""

import random
from typing import Callable, Optional

from grid_pieces.pieces import Piece

PieceSelector = Callable[[], Piece]

_PIECES = list(Piece)


def random_piece(rng: random.Random) -> Piece:
    """Return one of the five pieces with equal probability drawn from ``rng``."""
    return rng.choice(_PIECES)


def make_selector(seed: Optional[int] = None) -> PieceSelector:
    """Return a zero-argument selector drawing from a private seeded source."""
    rng = random.Random(seed)

    def select() -> Piece:
        return random_piece(rng)

    return select
