"""Adaptive thresholding with the "mean - C" method."""

import numpy as np

from .pixels import BLACK, WHITE, intensity

ADAPTIVE_THRESHOLD_RANGE = 5
ADAPTIVE_THRESHOLD_C = 3


def _offset(mean):
    return mean - ADAPTIVE_THRESHOLD_C if mean > ADAPTIVE_THRESHOLD_C else 0


def local_threshold(image, x, y, radius):
    """Mean level of the window [x-radius, x+radius) x [y-radius, y+radius), less C."""
    levels = intensity(image)
    height, width = levels.shape
    window = levels[
        max(0, y - radius):min(height, y + radius),
        max(0, x - radius):min(width, x + radius),
    ]
    mean = int(window.sum() / window.size) if window.size else 0
    return _offset(mean)


def adaptive_threshold(image):
    """Return a binary image: pixels darker than their local threshold turn white."""
    levels = intensity(image)
    height, width = levels.shape
    r = ADAPTIVE_THRESHOLD_RANGE

    integral = np.zeros((height + 1, width + 1), dtype=np.int64)
    integral[1:, 1:] = levels.cumsum(axis=0).cumsum(axis=1)

    ys = np.arange(height)
    xs = np.arange(width)
    y_lo = np.clip(ys - r, 0, height)[:, None]
    y_hi = np.clip(ys + r, 0, height)[:, None]
    x_lo = np.clip(xs - r, 0, width)[None, :]
    x_hi = np.clip(xs + r, 0, width)[None, :]

    totals = (
        integral[y_hi, x_hi]
        - integral[y_lo, x_hi]
        - integral[y_hi, x_lo]
        + integral[y_lo, x_lo]
    )
    counts = (y_hi - y_lo) * (x_hi - x_lo)
    means = np.floor(totals / counts).astype(np.int64)
    thresholds = np.where(
        means > ADAPTIVE_THRESHOLD_C, means - ADAPTIVE_THRESHOLD_C, 0
    )
    return np.where(levels > thresholds, BLACK, WHITE).astype(np.uint32)


def adaptive_threshold_in_place(image):
    """Replace `image` with its adaptive threshold."""
    image[...] = adaptive_threshold(image)