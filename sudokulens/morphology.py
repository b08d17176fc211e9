"""Gray-level dilation and erosion, and the close/open operations built on them."""

import numpy as np

DILATION_MATRIX_SIZE = 3

# Neighbour offsets (dx, dy) sampled by each operation, besides the pixel itself.
_DILATE_OFFSETS = (
    (0, -1), (1, -1), (2, -1),
    (-1, 0), (0, 0), (1, 0), (2, 0),
    (-1, 1), (0, 1),
)
_ERODE_OFFSETS = ((0, -1), (2, -1), (-1, 0), (0, 0), (2, 0))

_PAD = 2


def _gray_argb(levels):
    v = np.asarray(levels, dtype=np.int64)
    return (0xFF000000 | v << 16 | v << 8 | v).astype(np.uint32)


def _combine(image, offsets, reduce, fill):
    levels = (np.asarray(image) & 0xFF).astype(np.int64)
    height, width = levels.shape
    padded = np.pad(levels, _PAD, constant_values=fill)
    result = levels.copy()
    for dx, dy in offsets:
        shifted = padded[_PAD + dy:_PAD + dy + height, _PAD + dx:_PAD + dx + width]
        result = reduce(result, shifted)
    return _gray_argb(result)


def _interior(shape):
    m = DILATION_MATRIX_SIZE
    height, width = shape
    return slice(m, max(m, height - m)), slice(m, max(m, width - m))


def dilate(image):
    """Return the gray-level dilation of `image`."""
    return _combine(image, _DILATE_OFFSETS, np.maximum, -1)


def dilate_in_place(image):
    """Dilate `image`, leaving a border of DILATION_MATRIX_SIZE untouched."""
    dest = dilate(image)
    inner = _interior(image.shape)
    image[inner] = dest[inner]


def erode(image):
    """Return the gray-level erosion of `image`."""
    return _combine(image, _ERODE_OFFSETS, np.minimum, 256)


def erode_in_place(image):
    """Erode `image`, leaving a border of DILATION_MATRIX_SIZE untouched."""
    dest = erode(image)
    inner = _interior(image.shape)
    image[inner] = dest[inner]


def morphology_close(image):
    """Dilate then erode, in place."""
    dilate_in_place(image)
    erode_in_place(image)


def morphology_open(image):
    """Erode then dilate, in place."""
    erode_in_place(image)
    dilate_in_place(image)