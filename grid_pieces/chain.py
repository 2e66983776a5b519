"""Movement chain interpreter.

A movement chain is a tuple of directions applied left to right with
:func:`grid_pieces.step.step`, each step consuming the ``(grid, position)``
produced by the previous one. The first :class:`CollisionError` aborts the
chain; steps after it are never attempted. The empty chain is the identity.
"""

from typing import Iterator, Tuple

from grid_pieces.config import MAX_CHAIN_LENGTH
from grid_pieces.grid import Grid
from grid_pieces.position import Position
from grid_pieces.step import step
from grid_pieces.types import Direction, MovementChain


def validate_chain(chain: MovementChain) -> None:
    """Check ``chain`` is a sequence of at most ``MAX_CHAIN_LENGTH`` directions.

    Raises:
        ValueError: If the chain is too long or holds a non-``Direction``.
    """
    if len(chain) > MAX_CHAIN_LENGTH:
        raise ValueError(
            f"Movement chain has {len(chain)} steps, at most {MAX_CHAIN_LENGTH} allowed"
        )
    for direction in chain:
        if not isinstance(direction, Direction):
            raise ValueError(f"Not a direction: {direction!r}")


def iter_render(
    chain: MovementChain, grid: Grid, pos: Position
) -> Iterator[Tuple[Grid, Position]]:
    """Lazily apply ``chain``, yielding ``(grid, position)`` after each step.

    Raises:
        CollisionError: At the first failing step, after yielding the state
            produced by every step before it.
        ValueError: If ``chain`` is malformed (before any step is applied).
    """
    validate_chain(chain)
    for direction in chain:
        grid, pos = step(direction, grid, pos)
        yield grid, pos


def render_chain(
    chain: MovementChain, grid: Grid, pos: Position
) -> Tuple[Grid, Position]:
    """Apply every step of ``chain`` and return the final ``(grid, position)``.

    Args:
        chain (MovementChain): Directions to apply in order.
        grid (Grid): Starting grid.
        pos (Position): Starting cursor position.

    Returns:
        Tuple[Grid, Position]: Grid with every visited cell marked and the
            position of the last placed cell. Unchanged inputs for an empty
            chain.

    Raises:
        CollisionError: Propagated from the first failing step.
    """
    validate_chain(chain)
    for direction in chain:
        grid, pos = step(direction, grid, pos)
    return grid, pos
