"""Box counting over grey-level grids.

A grid is indexed as ``grid[x][y]``. A box is occupied when any pixel in it
is not white.
"""

from __future__ import annotations

import math
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import List, Sequence, Tuple

WHITE = 255
BLACK = 0
GRID_SIZE = 64
BOX_SIZE = 16
WORKERS = 4

Grid = Sequence[Sequence[int]]


def has_pixel(grid: Grid, top: int, left: int, bottom: int, right: int) -> bool:
    """Tell whether any non-white pixel lies in ``x`` in [left, right), ``y`` in [top, bottom)."""
    return any(
        grid[x][y] != WHITE for x in range(left, right) for y in range(top, bottom)
    )


def count_boxes(
    grid: Grid,
    top: int,
    left: int,
    bottom: int,
    right: int,
    box_width: int,
    box_height: int,
) -> int:
    """Count the occupied boxes tiling the given region."""
    if box_width <= 0 or box_height <= 0:
        raise ValueError("box dimensions must be positive")
    return sum(
        1
        for y in range(top, bottom, box_height)
        for x in range(left, right, box_width)
        if has_pixel(grid, y, x, y + box_height, x + box_width)
    )


def split_quadrants(grid: Grid) -> Tuple[List[List[int]], ...]:
    """Split a square grid of even side into its four quadrants.

    The order is: low x and low y, low x and high y, high x and low y,
    high x and high y.
    """
    side = len(grid)
    if side == 0 or side % 2 or any(len(row) != side for row in grid):
        raise ValueError("grid must be square with an even, non-zero side")
    half = side // 2
    low, high = grid[:half], grid[half:]
    return (
        [list(row[:half]) for row in low],
        [list(row[half:]) for row in low],
        [list(row[:half]) for row in high],
        [list(row[half:]) for row in high],
    )


def count_quadrant(quadrant: Grid, box_size: int = BOX_SIZE) -> int:
    """Count the occupied square boxes covering a whole square quadrant."""
    side = len(quadrant)
    return count_boxes(quadrant, 0, 0, side, side, box_size, box_size)


def count_parallel(grid: Grid, box_size: int = BOX_SIZE) -> Tuple[int, int, int, int]:
    """Count each quadrant in its own worker; return the four counts."""
    quadrants = split_quadrants(grid)
    with ThreadPoolExecutor(max_workers=WORKERS) as pool:
        return tuple(pool.map(partial(count_quadrant, box_size=box_size), quadrants))


def fractal_dimension(total: float, grid_size: float = GRID_SIZE) -> float:
    """Return ``log(total) / log(1 / sqrt(grid_size))``."""
    if total <= 0:
        raise ValueError("box count must be positive")
    if grid_size <= 0 or grid_size == 1:
        raise ValueError("grid size must be positive and not 1")
    return math.log(total) / math.log(1 / math.sqrt(grid_size))