"""Position value object.

Immutable integer grid coordinates. Every step of the engine produces a new
``Position``; nothing updates one in place.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        row: Row index (0 at top).
        col: Column index (0 at left).
    """

    row: int
    col: int

    def __post_init__(self) -> None:
        if self.row < 0 or self.col < 0:
            raise ValueError(
                f"Position coordinates must be non-negative, got {(self.row, self.col)}"
            )

    def offset(self, d_row: int, d_col: int) -> "Position":
        """Return the position shifted by ``(d_row, d_col)``."""
        return Position(self.row + d_row, self.col + d_col)
