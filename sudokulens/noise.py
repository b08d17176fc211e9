"""Noise reduction: the Kuwahara filter and a separable Gaussian blur."""

import math

import numpy as np

from .pixels import intensity, intensity_to_argb, new_image

KUWAHARA_RANGE = 4
GAUSSIAN_RANGE = 2
GAUSSIAN_BLUR_SIGMA = 1.3


def _gray_argb(levels):
    v = np.asarray(levels, dtype=np.int64)
    return (0xFF000000 | v << 16 | v << 8 | v).astype(np.uint32)


def _interior(shape, margin):
    height, width = shape
    return (
        slice(margin, max(margin, height - margin)),
        slice(margin, max(margin, width - margin)),
    )


def _region(levels, x_lo, x_hi, y_lo, y_hi):
    height, width = levels.shape
    if x_lo < 0 or y_lo < 0 or x_hi >= width or y_hi >= height:
        raise IndexError(
            f"window x=[{x_lo}, {x_hi}] y=[{y_lo}, {y_hi}] lies outside the image"
        )
    return levels[y_lo:y_hi + 1, x_lo:x_hi + 1]


def _kuwahara(levels, x, y):
    r = KUWAHARA_RANGE
    area = (r + 1) * (r + 1)
    # Each quadrant: the box its mean is taken over, then the box its spread is taken over.
    quadrants = (
        ((x, x + r, y, y + r), (x, x + r, y, y + r)),
        ((x - r, x, y, y + r), (x - r, x + r, y, y + r)),
        ((x - r, x, y - r, y), (x, x + r, y - r, y)),
        ((x, x + r, y - r, y), (x, x + r, y - r, y)),
    )
    best_mean = best_spread = None
    for mean_box, spread_box in quadrants:
        mean = _region(levels, *mean_box).sum() / area
        spread = ((_region(levels, *spread_box) - mean) ** 2).sum() / area
        if best_spread is None or spread < best_spread:
            best_mean, best_spread = mean, spread
    return int(best_mean)


def kuwahara_value(image, x, y):
    """Return the Kuwahara-filtered gray level at (x, y)."""
    return _kuwahara(intensity(image), x, y)


def kuwahara_filter(image):
    """Return a new image filtered with the Kuwahara technique.

    Pixels closer than KUWAHARA_RANGE + 1 to the edge are left black (zero).
    """
    levels = intensity(image)
    height, width = levels.shape
    dest = new_image(width, height)
    margin = KUWAHARA_RANGE + 1
    for y in range(margin, height - margin):
        for x in range(margin, width - margin):
            dest[y, x] = intensity_to_argb(_kuwahara(levels, x, y))
    return dest


def kuwahara_filter_in_place(image):
    """Apply the Kuwahara filter to the interior of `image`."""
    dest = kuwahara_filter(image)
    inner = _interior(image.shape, KUWAHARA_RANGE)
    image[inner] = dest[inner]


def gaussian(x, sigma):
    """Unnormalised Gaussian exp(-x^2 / (2 sigma^2))."""
    return math.exp(-(x * x) / (2 * sigma * sigma))


def build_gaussian_kernel(size):
    """Return a normalised one-dimensional Gaussian kernel of `size` taps."""
    values = np.array(
        [gaussian(x - GAUSSIAN_RANGE, GAUSSIAN_BLUR_SIGMA) for x in range(size)]
    )
    return values / values.sum()


def gaussian_blur(image):
    """Return a blurred copy of `image`; a border of GAUSSIAN_RANGE stays zero."""
    levels = intensity(image)
    height, width = levels.shape
    r = GAUSSIAN_RANGE
    kernel = build_gaussian_kernel(2 * r + 1)
    dest = new_image(width, height)

    inner_w = width - 2 * r
    if inner_w <= 0:
        return dest
    temp = np.zeros((height, width), dtype=np.int64)
    acc = np.zeros((height, inner_w))
    for k, weight in enumerate(kernel):
        acc = acc + levels[:, k:k + inner_w] * weight
    temp[:, r:width - r] = np.clip(np.trunc(acc), 0, 255).astype(np.int64)

    inner_h = height - 2 * r
    if inner_h <= 0:
        return dest
    acc = np.zeros((inner_h, inner_w))
    for k, weight in enumerate(kernel):
        acc = acc + temp[k:k + inner_h, r:width - r] * weight
    dest[r:height - r, r:width - r] = _gray_argb(np.clip(np.trunc(acc), 0, 255))
    return dest


def gaussian_blur_in_place(image):
    """Blur the interior of `image` in place."""
    dest = gaussian_blur(image)
    inner = _interior(image.shape, GAUSSIAN_RANGE)
    image[inner] = dest[inner]