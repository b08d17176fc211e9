"""Cutting a straightened sudoku image into its 81 cells."""

import os

from .blobs import find_biggest_blob
from .pixels import new_image, save_image
from .utils import remove_directory
from .verbose import FatalError, info

SC_DESTDIR = "./extractedDigits"
DIGITS_PER_LINE = 9
MIN_DIGIT_SIZE = 40


def is_digit(cell):
    """Keep only the biggest blob of `cell` (in place); True when it is large enough."""
    blob = find_biggest_blob(cell)
    cell[...] = blob.image
    if blob.point is None:
        info(f"digitBlob is empty, size = {blob.size}")
    else:
        info(f"digitBlob is at x = {blob.point.x}, y = {blob.point.y}, size = {blob.size}")
    return blob.size > MIN_DIGIT_SIZE


def cut_sudoku(image, dest_dir=SC_DESTDIR):
    """Save every cell holding a digit as `dest_dir`/x<col>-y<row>.bmp.

    The directory is emptied first. Returns the paths written.
    """
    size = image.shape[1] // DIGITS_PER_LINE
    if size == 0:
        raise FatalError("Couldn't create a cell image: the grid is too small")

    if os.path.exists(dest_dir):
        remove_directory(dest_dir)
    os.mkdir(dest_dir, 0o700)

    cell = new_image(size, size)
    saved = []
    for x in range(DIGITS_PER_LINE):
        for y in range(DIGITS_PER_LINE):
            region = image[y * size:(y + 1) * size, x * size:(x + 1) * size]
            cell[:region.shape[0], :region.shape[1]] = region
            if is_digit(cell):
                path = os.path.join(dest_dir, f"x{x}-y{y}.bmp")
                save_image(cell, path)
                saved.append(path)
    return saved