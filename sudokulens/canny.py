"""Canny-style edge detection: Sobel gradients, non-maximum suppression,
double thresholding and hysteresis."""

import math

import numpy as np

from .pixels import intensity

HIGH_THRESHOLD_RATIO = 0.09
LOW_THRESHOLD_RATIO = 0.05
WEAK_VALUE = 25
STRONG_VALUE = 255

_KX = (-1, 0, 1, -2, 0, 2, -1, 0, 1)
_KY = (1, 2, 1, 0, 0, 0, -1, -2, -1)
_OFFSETS = tuple((dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1))

_PI = 3.14159265359


def _gray_argb(levels):
    v = np.asarray(levels, dtype=np.int64) & 0xFF
    return (0xFF000000 | v << 16 | v << 8 | v).astype(np.uint32)


def _gradient_at(levels, x, y):
    """Gradient at an edge pixel: kernel taps advance only over in-bounds neighbours."""
    height, width = levels.shape
    gx = gy = 0
    tap = 0
    for dx, dy in _OFFSETS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < width and 0 <= ny < height:
            value = int(levels[ny, nx])
            gx += value * _KX[tap]
            gy += value * _KY[tap]
            tap += 1
    return gx, gy


def sobel_filters(image):
    """Return (magnitude, direction) arrays of the Sobel gradient.

    The magnitude is scaled so that its maximum is 255; an image with no
    gradient at all gives a zero magnitude.
    """
    levels = intensity(image)
    height, width = levels.shape
    ix = np.zeros((height, width), dtype=np.int64)
    iy = np.zeros((height, width), dtype=np.int64)

    if height >= 3 and width >= 3:
        for tap, (dx, dy) in enumerate(_OFFSETS):
            shifted = levels[1 + dy:height - 1 + dy, 1 + dx:width - 1 + dx]
            ix[1:-1, 1:-1] += shifted * _KX[tap]
            iy[1:-1, 1:-1] += shifted * _KY[tap]

    border = np.ones((height, width), dtype=bool)
    if height >= 3 and width >= 3:
        border[1:-1, 1:-1] = False
    for y, x in np.argwhere(border):
        ix[y, x], iy[y, x] = _gradient_at(levels, int(x), int(y))

    magnitude = np.sqrt((ix * ix + iy * iy).astype(float))
    direction = np.arctan2(iy.astype(float), ix.astype(float))
    peak = magnitude.max() if magnitude.size else 0.0
    if peak > 0:
        magnitude = magnitude / peak * 255
    return magnitude, direction


def non_max_suppression(magnitude, direction):
    """Keep only the magnitudes that are local maxima along the gradient.

    Each row is judged with the single direction stored `h` entries past the
    row's start in the flattened direction array; the border stays zero.
    """
    img = np.asarray(magnitude, dtype=float)
    height, width = img.shape
    angle = np.asarray(direction, dtype=float).ravel() * 180 / _PI
    angle = np.where(angle < 0, angle + 180, angle)
    result = np.zeros((height, width))
    if width < 3:
        return result

    for i in range(1, height - 1):
        current = angle[i * width + height]
        row = img[i, 1:width - 1]
        q = np.full(width - 2, 255.0)
        r = np.full(width - 2, 255.0)
        if 0 <= current < 22.5 or 157.5 <= current <= 180:
            q = img[i, 2:width]
            r = img[i, 0:width - 2]
        if 22.5 <= current < 67.5:
            q = img[i + 1, 0:width - 2]
            r = img[i - 1, 2:width]
        if 67.5 <= current < 112.5:
            q = img[i + 1, 1:width - 1]
            r = img[i - 1, 1:width - 1]
        if 112.5 <= current < 157.5:
            q = img[i - 1, 0:width - 2]
            r = img[i + 1, 2:width]
        q = np.trunc(q)
        r = np.trunc(r)
        result[i, 1:width - 1] = np.where((row >= q) & (row >= r), row, 0.0)
    return result


def double_threshold(values):
    """Classify values as strong (255), weak (25) or zero."""
    values = np.asarray(values, dtype=float)
    peak = max(0.0, float(values.max())) if values.size else 0.0
    high = peak * HIGH_THRESHOLD_RATIO
    low = high * LOW_THRESHOLD_RATIO
    result = np.zeros(values.shape)
    result[values > low] = WEAK_VALUE
    result[values > high] = STRONG_VALUE
    return result


def hysteresis(values):
    """Promote weak interior pixels next to a strong one; drop the other weak ones.

    Pixels are visited in raster order, so a promotion is seen by the pixels after it.
    """
    result = np.array(values, dtype=float, copy=True)
    height, width = result.shape
    if height < 3 or width < 3:
        return result
    inner = result[1:-1, 1:-1] == WEAK_VALUE
    for y, x in np.argwhere(inner) + 1:
        window = result[y - 1:y + 2, x - 1:x + 2]
        result[y, x] = STRONG_VALUE if (window == STRONG_VALUE).any() else 0
    return result


def canny_filter(image):
    """Return a gray image of the scaled Sobel gradient magnitude."""
    magnitude, _ = sobel_filters(image)
    return _gray_argb(np.trunc(magnitude).astype(np.int64))


def canny_filter_in_place(image):
    """Replace `image` with its edge image."""
    image[...] = canny_filter(image)