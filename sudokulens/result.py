"""Rendering a solved grid onto a background picture with digit images."""

import os

import numpy as np

from .pixels import WHITE, load_image
from .solver import read_grid, solve
from .verbose import FatalError

DEFAULT_BACKGROUND = "/tmp/resultGrid.jpg"
DEFAULT_DIGITS_DIR = "/tmp/Numbers"

SOLVED_COLOR = 128 << 16 | 237 << 8 | 153
ORIGIN_X = 20
ORIGIN_Y = 10
CELL_STEP = 100


def _load(path):
    try:
        return load_image(path)
    except OSError as exc:
        raise FatalError(f"IMG_Load: {exc}") from exc


def _recolor(digit):
    """Transparent black turns to the solved colour; everything else to opaque white."""
    return np.where(digit == 0, SOLVED_COLOR, WHITE).astype(np.uint32)


def _blit(dest, src, x, y):
    """Alpha-blend `src` onto `dest` with its top-left corner at (x, y)."""
    height, width = dest.shape
    x_end = min(width, x + src.shape[1])
    y_end = min(height, y + src.shape[0])
    if x_end <= x or y_end <= y:
        return
    s = src[:y_end - y, :x_end - x].astype(np.int64)
    d = dest[y:y_end, x:x_end].astype(np.int64)
    alpha = (s >> 24) & 0xFF
    rest = 255 - alpha

    def blend(shift):
        return (((s >> shift) & 0xFF) * alpha + ((d >> shift) & 0xFF) * rest + 127) // 255

    out_alpha = alpha + (((d >> 24) & 0xFF) * rest + 127) // 255
    dest[y:y_end, x:x_end] = (
        out_alpha << 24 | blend(16) << 16 | blend(8) << 8 | blend(0)
    ).astype(np.uint32)


def construct_result(
    grid,
    base_grid,
    background_path=DEFAULT_BACKGROUND,
    digits_dir=DEFAULT_DIGITS_DIR,
):
    """Draw the digits of `grid` onto the background image and return it.

    Digits that were empty in `base_grid` (found by the solver) are recoloured.
    """
    result = _load(background_path)
    for index, (digit, base) in enumerate(zip(grid[:81], base_grid)):
        if digit in (".", "0"):
            continue
        number = _load(os.path.join(digits_dir, f"5-{digit}.png"))
        if base == ".":
            number = _recolor(number)
        row, column = divmod(index, 9)
        _blit(result, number, ORIGIN_X + CELL_STEP * column, ORIGIN_Y + CELL_STEP * row)
    return result


def render_grid_file(
    path,
    background_path=DEFAULT_BACKGROUND,
    digits_dir=DEFAULT_DIGITS_DIR,
):
    """Read a grid file, solve it and return the rendered result image."""
    try:
        grid = read_grid(path)
    except OSError as exc:
        raise FatalError(f"Error: Could not open file {path}") from exc
    solved = list(grid)
    solve(solved, 9, 9)
    return construct_result(solved, grid, background_path, digits_dir)