"""Perspective correction mapping a quadrilateral onto a square."""

import numpy as np

from .matrix import SingularMatrixError, inverse, multiply, transpose
from .verbose import FatalError


def homography_coefficients(points, size):
    """Return the eight coefficients mapping the square of side `size` onto `points`.

    A destination pixel (i, j) maps to source
    x = (c0 i + c1 j + c2) / (c6 i + c7 j + 1),
    y = (c3 i + c4 j + c5) / (c6 i + c7 j + 1).
    """
    s = size
    ul, ur, ll, lr = points.ul, points.ur, points.ll, points.lr
    a = np.zeros((8, 8))
    a[0, 2] = 1
    a[1, 5] = 1
    a[2, 0] = s
    a[2, 2] = 1
    a[2, 6] = -ur.x * s
    a[3, 3] = s
    a[3, 5] = 1
    a[3, 6] = -ur.y * s
    a[4, 1] = s
    a[4, 2] = 1
    a[4, 7] = -ll.x * s
    a[5, 4] = s
    a[5, 5] = 1
    a[5, 7] = -ll.y * s
    a[6, 0] = s
    a[6, 1] = s
    a[6, 2] = 1
    a[6, 6] = -lr.x * s
    a[6, 7] = -lr.y * s
    a[7, 3] = s
    a[7, 4] = s
    a[7, 5] = 1
    a[7, 6] = -lr.x * s
    a[7, 7] = -lr.y * s

    b = np.array(
        [ul.x, ul.y, ur.x, ur.y, ll.x, ll.y, lr.x, lr.y], dtype=float
    )
    a_t = transpose(a)
    try:
        normal_inverse = inverse(multiply(a_t, a))
    except SingularMatrixError as exc:
        raise FatalError("Matrix is singular") from exc
    return multiply(multiply(normal_inverse, a_t), b)


def homographic_transform(image, points, size):
    """Return a `size` x `size` image of the region of `image` bounded by `points`."""
    m = homography_coefficients(points, size)
    src_h, src_w = image.shape
    dest = np.zeros((size, size), dtype=np.uint32)
    i, j = np.meshgrid(np.arange(size, dtype=float), np.arange(size, dtype=float))
    with np.errstate(divide="ignore", invalid="ignore"):
        denom = m[6] * i + m[7] * j + 1
        x = (m[0] * i + m[1] * j + m[2]) / denom
        y = (m[3] * i + m[4] * j + m[5]) / denom
        valid = (x >= 0) & (x < src_w) & (y >= 0) & (y < src_h)
    src = np.asarray(image, dtype=np.uint32)
    dest[valid] = src[y[valid].astype(np.int64), x[valid].astype(np.int64)]
    return dest