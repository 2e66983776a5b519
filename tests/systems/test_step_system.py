from typing import List

import pytest

from grid_pieces.directions import advance, violates_bounds
from grid_pieces.errors import CollisionError
from grid_pieces.grid import Grid
from grid_pieces.position import Position
from grid_pieces.step import step
from grid_pieces.types import Direction, Form
from tests.test_utils import all_positions, make_grid, present_coords


def _blocked(direction: Direction) -> List[Position]:
    grid = make_grid()
    return [p for p in all_positions() if violates_bounds(direction, p, grid)]


def _open(direction: Direction) -> List[Position]:
    grid = make_grid()
    return [p for p in all_positions() if not violates_bounds(direction, p, grid)]


@pytest.mark.parametrize("direction", list(Direction))
def test_out_of_bounds_step_collides_without_mutation(direction: Direction) -> None:
    positions = _blocked(direction)
    assert positions
    for pos in positions:
        grid = make_grid([(pos.row, pos.col)])
        before = Grid(grid.width, grid.height, grid.cells)
        with pytest.raises(CollisionError):
            step(direction, grid, pos)
        assert grid == before


@pytest.mark.parametrize("direction", list(Direction))
def test_occupied_destination_collides_without_mutation(direction: Direction) -> None:
    for pos in _open(direction):
        dest = advance(direction, pos)
        grid = make_grid([(pos.row, pos.col), (dest.row, dest.col)])
        before = Grid(grid.width, grid.height, grid.cells)
        with pytest.raises(CollisionError):
            step(direction, grid, pos)
        assert grid == before


@pytest.mark.parametrize("direction", list(Direction))
def test_void_destination_is_marked(direction: Direction) -> None:
    for pos in _open(direction):
        grid = make_grid([(pos.row, pos.col)])
        new_grid, new_pos = step(direction, grid, pos)
        dest = advance(direction, pos)
        assert new_pos == dest
        assert new_grid.pos(dest) == Form.PRESENT
        assert present_coords(new_grid) == present_coords(grid) | {
            (dest.row, dest.col)
        }
        # Input grid untouched
        assert grid.pos(dest) == Form.VOID


def test_bounds_checked_before_occupancy() -> None:
    # Every cell present: a blocked move must still fail on bounds, never index.
    grid = make_grid([(p.row, p.col) for p in all_positions()])
    assert len(grid.present_positions()) == 16
    with pytest.raises(CollisionError):
        step(Direction.UP, grid, Position(0, 0))
    with pytest.raises(CollisionError):
        step(Direction.DIAGONAL_SKIP, grid, Position(0, 3))


def test_step_does_not_require_start_marked() -> None:
    grid = make_grid()
    new_grid, pos = step(Direction.RIGHT, grid, Position(0, 0))
    assert pos == Position(0, 1)
    assert present_coords(new_grid) == {(0, 1)}


def test_cannot_step_from_negative_position() -> None:
    grid = make_grid()
    with pytest.raises(ValueError):
        step(Direction.DOWN, grid, Position(-1, 0))
    assert present_coords(grid) == set()
