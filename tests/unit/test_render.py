from grid_pieces.renderer.image import (
    DEFAULT_BACKGROUND,
    DEFAULT_FILL,
    ImageRenderer,
    render,
)
from grid_pieces.utils.render import grid_to_text
from tests.test_utils import make_grid


def test_grid_to_text() -> None:
    grid = make_grid([(0, 1), (0, 2), (1, 1), (1, 2)])
    assert grid_to_text(grid) == ".##.\n.##.\n....\n...."


def test_grid_to_text_custom_glyphs() -> None:
    grid = make_grid([(1, 0)], width=2, height=2)
    assert grid_to_text(grid, present="X", void=" ") == "  \nX "


def test_render_image_size_and_cells() -> None:
    grid = make_grid([(0, 1), (3, 0)])
    img = render(grid, resolution=40)
    assert img.size == (40, 40)
    assert img.mode == "RGBA"
    # Cell centers: 10px tiles.
    assert img.getpixel((15, 5)) == DEFAULT_FILL
    assert img.getpixel((5, 35)) == DEFAULT_FILL
    assert img.getpixel((35, 35)) == DEFAULT_BACKGROUND


def test_image_renderer_matches_function() -> None:
    grid = make_grid([(1, 2)], width=4, height=2)
    renderer = ImageRenderer(resolution=80)
    img = renderer.render(grid)
    assert img.size == (80, 40)
    assert img.tobytes() == render(grid, resolution=80).tobytes()
