"""
Pixel sampling and straight-line path walking over a grayscale grid.

The grid is a 2-D numpy array indexed ``grid[row, col]``. Coordinates at
this level are always passed as ``(col, row)`` pairs, matching the way
image libraries address pixels.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Tuple

import numpy as np

Point = Tuple[int, int]

# Intensity of a white module in an 8-bit grayscale image.
WHITE = 255


class Axis(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


def sample(grid: np.ndarray, col: int, row: int, white_level: int = WHITE) -> int:
    """Return 0 for a white pixel and 1 for anything darker."""
    return 0 if int(grid[row, col]) >= white_level else 1


def walk(
    grid: np.ndarray,
    start: Point,
    stop: Point,
    axis: Axis,
    white_level: int = WHITE,
) -> List[int]:
    """
    Sample every pixel from `start` to `stop` inclusive along `axis`.

    The walk runs ascending or descending depending on which endpoint is
    larger, so `walk(g, a, b, ax)` is the reverse of `walk(g, b, a, ax)`.
    """
    (start_col, start_row), (stop_col, stop_row) = start, stop
    axis = Axis(axis)

    if axis is Axis.VERTICAL:
        if start_col != stop_col:
            raise ValueError(f"vertical walk needs a fixed column, got {start} -> {stop}")
        step = 1 if start_row <= stop_row else -1
        return [
            sample(grid, start_col, row, white_level)
            for row in range(start_row, stop_row + step, step)
        ]

    if start_row != stop_row:
        raise ValueError(f"horizontal walk needs a fixed row, got {start} -> {stop}")
    step = 1 if start_col <= stop_col else -1
    return [
        sample(grid, col, start_row, white_level)
        for col in range(start_col, stop_col + step, step)
    ]
