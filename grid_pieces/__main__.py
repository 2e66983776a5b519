"""Command line demo.

Run with: ``python -m grid_pieces``

Spawns a piece on an empty grid, prints the result as text and optionally
saves it as an image. Exits with status 1 on collision.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from grid_pieces.config import DEFAULT_GRID_CONFIG, DEFAULT_RESOLUTION
from grid_pieces.errors import CollisionError
from grid_pieces.grid import Grid
from grid_pieces.pieces import Piece
from grid_pieces.placement import place_piece
from grid_pieces.position import Position
from grid_pieces.renderer.image import render
from grid_pieces.selector import make_selector
from grid_pieces.utils.render import grid_to_text

logger = logging.getLogger("grid_pieces")


def _non_negative(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Place a piece on an empty grid")
    parser.add_argument(
        "--piece",
        choices=[piece.value for piece in Piece],
        help="Piece to place (random when omitted)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Selector seed")
    parser.add_argument("--row", type=_non_negative, default=1, help="Start row")
    parser.add_argument("--col", type=_non_negative, default=1, help="Start column")
    parser.add_argument("--image", default=None, help="Also save a PNG here")
    parser.add_argument(
        "--resolution", type=int, default=DEFAULT_RESOLUTION, help="Image width"
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    piece = Piece(args.piece) if args.piece else make_selector(args.seed)()
    start = Position(args.row, args.col)
    logger.info("Placing %s at %s", piece, start)

    try:
        grid, _ = place_piece(piece, Grid.from_config(DEFAULT_GRID_CONFIG), start)
    except CollisionError:
        print("collision")
        return 1

    print(grid_to_text(grid))
    if args.image:
        render(grid, resolution=args.resolution).save(args.image)
        logger.info("Saved image to %s", args.image)
    return 0


if __name__ == "__main__":
    sys.exit(main())
