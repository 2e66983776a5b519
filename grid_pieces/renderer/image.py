from typing import Tuple

from PIL import Image, ImageDraw

from grid_pieces.config import DEFAULT_RESOLUTION
from grid_pieces.grid import Grid

Color = Tuple[int, int, int, int]

DEFAULT_BACKGROUND: Color = (32, 32, 32, 255)
DEFAULT_FILL: Color = (230, 180, 40, 255)
DEFAULT_OUTLINE: Color = (64, 64, 64, 255)


def render(
    grid: Grid,
    resolution: int = DEFAULT_RESOLUTION,
    fill: Color = DEFAULT_FILL,
    background: Color = DEFAULT_BACKGROUND,
    outline: Color = DEFAULT_OUTLINE,
) -> Image.Image:
    """
    Renders a grid as a PIL Image, one square tile per cell with occupied cells filled.
    """
    cell_size: int = max(1, resolution // grid.width)
    img = Image.new(
        "RGBA", (grid.width * cell_size, grid.height * cell_size), background
    )
    draw = ImageDraw.Draw(img)

    for row, cells in enumerate(grid.cells):
        for col, form in enumerate(cells):
            x0, y0 = col * cell_size, row * cell_size
            box = (x0, y0, x0 + cell_size - 1, y0 + cell_size - 1)
            draw.rectangle(box, fill=fill if form.is_present else None, outline=outline)

    return img


class ImageRenderer:
    resolution: int
    fill: Color
    background: Color
    outline: Color

    def __init__(
        self,
        resolution: int = DEFAULT_RESOLUTION,
        fill: Color = DEFAULT_FILL,
        background: Color = DEFAULT_BACKGROUND,
        outline: Color = DEFAULT_OUTLINE,
    ):
        self.resolution = resolution
        self.fill = fill
        self.background = background
        self.outline = outline

    def render(self, grid: Grid) -> Image.Image:
        return render(
            grid,
            resolution=self.resolution,
            fill=self.fill,
            background=self.background,
            outline=self.outline,
        )
