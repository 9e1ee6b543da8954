"""Command that reads an image from a pipe file and reports its box count."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .counting import BOX_SIZE, GRID_SIZE, Grid, count_parallel, fractal_dimension
from .image import IMAGE_SIDE, load_image
from .pipe import PipeError

DEFAULT_PIPE = "pipe.pp"


@dataclass(frozen=True)
class BoxCountResult:
    """Box counts of the four quadrants, their total and the fractal dimension."""

    counts: Tuple[int, int, int, int]
    total: int
    dimension: Optional[float]

    def report(self) -> str:
        """Render the result as the lines the command prints."""
        r0, r1, r2, r3 = self.counts
        lines = [
            f"R0: {r0}\t R1: {r1}\t R2: {r2}\t R3: {r3}",
            f"Boxes with a non-white pixel = {float(self.total):f}",
        ]
        if self.dimension is None:
            lines.append("Fractal dimension = undefined")
        else:
            lines.append(f"Fractal dimension = {self.dimension:f}")
        return "\n".join(lines)


def analyse(grid: Grid, box_size: int = BOX_SIZE, grid_size: float = GRID_SIZE) -> BoxCountResult:
    """Count occupied boxes quadrant by quadrant and derive the fractal dimension."""
    counts = count_parallel(grid, box_size)
    total = sum(counts)
    dimension = fractal_dimension(total, grid_size) if total > 0 else None
    return BoxCountResult(counts=counts, total=total, dimension=dimension)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="boxcount",
        description="Estimate the fractal dimension of an image by box counting.",
    )
    parser.add_argument("pipe", nargs="?", default=DEFAULT_PIPE, help="pipe file to read")
    parser.add_argument("--side", type=int, default=IMAGE_SIDE, help="image side in pixels")
    parser.add_argument("--box-size", type=int, default=BOX_SIZE, help="box side in pixels")
    parser.add_argument("--grid-size", type=float, default=GRID_SIZE, help="grid size")
    parser.add_argument("--dump", action="store_true", help="print every pixel value")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; return its exit status."""
    args = _parser().parse_args(argv)
    try:
        grid = load_image(args.pipe, args.side)
    except (OSError, PipeError, ValueError) as error:
        print(f"The value can't be received: {error}", file=sys.stderr)
        return 1

    if args.dump:
        values = (value for row in grid for value in row)
        for index, value in enumerate(values):
            print(f"imagem[{index}]: {value}")

    try:
        result = analyse(grid, args.box_size, args.grid_size)
    except ValueError as error:
        print(f"Cannot analyse image: {error}", file=sys.stderr)
        return 1

    print(result.report())
    return 0


if __name__ == "__main__":
    sys.exit(main())