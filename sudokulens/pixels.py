"""ARGB images held as 2-D uint32 arrays indexed [y, x], and pixel helpers."""

import math
from typing import NamedTuple

import numpy as np
from PIL import Image

WHITE = 0xFFFFFFFF
BLACK = 0xFF000000
BLUE = 0xFF00FFFF


class Point(NamedTuple):
    """A pixel position."""

    x: int
    y: int


def intensity_to_argb(value):
    """Return the opaque gray ARGB pixel for an 8-bit intensity."""
    v = int(value) & 0xFF
    return 0xFF000000 | v << 16 | v << 8 | v


def distance(i, j, k, l):
    """Euclidean distance between (i, j) and (k, l)."""
    return math.sqrt((k - i) ** 2 + (j - l) ** 2)


def intensity(image):
    """Return the blue channel (the gray level) of every pixel."""
    return (np.asarray(image) & 0xFF).astype(np.int64)


def new_image(width, height):
    """Return a blank image of the given size."""
    return np.zeros((height, width), dtype=np.uint32)


def draw_line(image, x0, y0, x1, y1, pixel):
    """Draw a straight line from (x0, y0) towards (x1, y1) in place."""
    dx = x1 - x0
    dy = y1 - y0
    length = math.hypot(dx, dy)
    if length == 0:
        return
    step_x = dx / length
    step_y = dy / length
    height, width = image.shape
    x, y = float(x0), float(y0)
    for _ in range(math.ceil(length)):
        px, py = int(x), int(y)
        if 0 <= px < width and 0 <= py < height:
            image[py, px] = pixel
        x += step_x
        y += step_y


def load_image(path):
    """Read an image file into an ARGB array."""
    with Image.open(path) as img:
        rgba = np.asarray(img.convert("RGBA"), dtype=np.uint32)
    r, g, b, a = (rgba[..., channel] for channel in range(4))
    return (a << 24) | (r << 16) | (g << 8) | b


def save_image(image, path):
    """Write an ARGB array to a file; the format follows the extension."""
    image = np.asarray(image, dtype=np.uint32)
    rgb = np.stack(
        [(image >> 16) & 0xFF, (image >> 8) & 0xFF, image & 0xFF], axis=-1
    ).astype(np.uint8)
    Image.fromarray(rgb).save(path)