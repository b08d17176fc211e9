"""Detection and removal of connected white regions ("blobs")."""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .floodfill import flood_fill
from .pixels import BLACK, BLUE, WHITE, Point
from .verbose import FatalError


@dataclass
class BlobResult:
    """The largest blob found: an image holding only it, its seed and its size."""

    image: np.ndarray
    point: Optional[Point]
    size: int


def _positions(mask):
    ys, xs = np.nonzero(mask)
    return [Point(int(x), int(y)) for y, x in zip(ys, xs)]


def find_biggest_blob(image):
    """Return a copy of `image` with only its largest white blob left white.

    `point` is the first pixel of that blob in scan order, or None when the
    image has no white pixel.
    """
    dest = np.array(image, dtype=np.uint32, copy=True)
    biggest = 0
    seed_point = None
    for seed in _positions(dest == WHITE):
        if dest[seed.y, seed.x] != WHITE:
            continue
        area = flood_fill(dest, seed, WHITE, BLUE)
        if area > biggest:
            biggest = area
            seed_point = seed

    if seed_point is None:
        return BlobResult(dest, None, 0)

    flood_fill(dest, seed_point, BLUE, WHITE)
    for seed in _positions(dest == BLUE):
        if (
            seed.x != seed_point.x
            and seed.y != seed_point.y
            and dest[seed.y, seed.x] == BLUE
        ):
            flood_fill(dest, seed, BLUE, BLACK)

    return BlobResult(dest, seed_point, biggest)


def remove_small_blobs(image, threshold, foreground, background):
    """Repaint with `background` every `foreground` blob of at most `threshold` pixels."""
    if foreground == BLUE:
        raise FatalError(f"removeSmallBlob: Invalid foregroundColor of {foreground:#x}")

    for seed in _positions(image == foreground):
        if image[seed.y, seed.x] != foreground:
            continue
        size = flood_fill(image, seed, foreground, BLUE)
        if size <= threshold:
            flood_fill(image, seed, BLUE, background)

    image[image == BLUE] = foreground