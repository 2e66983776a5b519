"""Build-time configuration constants.

Grid dimensions are fixed for the lifetime of the process; every bounds
predicate in :mod:`grid_pieces.directions` reads them from the ``Grid`` it is
evaluated against, and ``Grid`` defaults to the constants declared here.
"""

from dataclasses import dataclass

GRID_WIDTH = 10
GRID_HEIGHT = 10

# Steps per movement chain beyond the implicit starting cell.
MAX_CHAIN_LENGTH = 3

DEFAULT_RESOLUTION = 320


@dataclass(frozen=True)
class GridConfig:
    """Grid dimensions.

    Attributes:
        width: Number of columns.
        height: Number of rows.
    """

    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Grid dimensions must be positive, got {self.width}x{self.height}"
            )


DEFAULT_GRID_CONFIG = GridConfig()
