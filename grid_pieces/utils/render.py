"""Plain-text grid rendering."""

from grid_pieces.grid import Grid


def grid_to_text(grid: Grid, present: str = "#", void: str = ".") -> str:
    """Return one line per row, ``present`` for occupied cells."""
    return "\n".join(
        "".join(present if form.is_present else void for form in row)
        for row in grid.cells
    )
