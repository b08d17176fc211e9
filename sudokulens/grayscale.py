"""Conversion of ARGB images to gray."""

import numpy as np

from .verbose import FatalError


def grayscale_pixel(pixel):
    """Return the opaque gray pixel whose level is the mean of r, g and b."""
    r = pixel >> 16 & 0xFF
    g = pixel >> 8 & 0xFF
    b = pixel & 0xFF
    v = (r + g + b) // 3
    return 0xFF000000 | v << 16 | v << 8 | v


def apply_grayscale(image):
    """Turn every pixel of an ARGB image gray, in place."""
    if not isinstance(image, np.ndarray) or image.dtype != np.uint32 or image.ndim != 2:
        raise FatalError("Invalid format for surface, expected ARGB8888")
    wide = image.astype(np.int64)
    v = (((wide >> 16) & 0xFF) + ((wide >> 8) & 0xFF) + (wide & 0xFF)) // 3
    image[...] = (0xFF000000 | v << 16 | v << 8 | v).astype(np.uint32)