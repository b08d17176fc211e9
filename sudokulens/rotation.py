"""Rotation of images about their centre."""

import math

import numpy as np

_PI = 3.14159265


def _round(values):
    """Round half away from zero."""
    return np.where(values >= 0, np.floor(values + 0.5), np.ceil(values - 0.5))


def _grid(width, height):
    xs, ys = np.meshgrid(np.arange(width), np.arange(height), indexing="ij")
    return xs.ravel(), ys.ravel()


def _scatter(image, xs, ys, new_x, new_y):
    """Copy pixels to their new places; the last write to a place wins."""
    height, width = image.shape
    dest = np.zeros((height, width), dtype=np.uint32)
    new_x = new_x.astype(np.int64)
    new_y = new_y.astype(np.int64)
    valid = (new_x >= 0) & (new_x < width) & (new_y >= 0) & (new_y < height)
    targets = (new_y * width + new_x)[valid]
    values = np.asarray(image, dtype=np.uint32)[ys[valid], xs[valid]]
    if targets.size == 0:
        return dest
    _, first_in_reverse = np.unique(targets[::-1], return_index=True)
    keep = targets.size - 1 - first_in_reverse
    dest.ravel()[targets[keep]] = values[keep]
    return dest


def rotate(image, angle):
    """Return `image` rotated by `angle` degrees about its centre."""
    height, width = image.shape
    rad = angle * (_PI / 180)
    cx, cy = width // 2, height // 2
    cos_a, sin_a = math.cos(rad), math.sin(rad)
    xs, ys = _grid(width, height)
    x_off = (xs - cx).astype(float)
    y_off = (ys - cy).astype(float)
    new_x = _round(x_off * cos_a + y_off * sin_a + cx)
    new_y = _round(y_off * cos_a - x_off * sin_a + cy)
    return _scatter(image, xs, ys, new_x, new_y)


def rotate_shearing(image, angle):
    """Return `image` rotated by `angle` degrees using three shears."""
    height, width = image.shape
    rad = angle * (_PI / 180)
    cx, cy = width // 2, height // 2
    sin_a = math.sin(rad)
    tan_a = math.tan(rad / 2)
    xs, ys = _grid(width, height)
    x_off = (xs - cx).astype(float)
    y_off = (ys - cy).astype(float)
    new_x = _round(x_off - y_off * tan_a)
    new_y = _round(new_x * sin_a + y_off)
    new_x = _round(new_x - new_y * tan_a)
    return _scatter(image, xs, ys, new_x + cx, new_y + cy)