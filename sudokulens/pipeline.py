"""The full image pipeline: from a photo of a sudoku to a solved picture."""

import os

import numpy as np
from PIL import Image

from .blobs import find_biggest_blob, remove_small_blobs
from .corners import order_points
from .cutter import SC_DESTDIR, cut_sudoku
from .floodfill import flood_fill
from .homography import homographic_transform
from .morphology import dilate_in_place, erode_in_place, morphology_close, morphology_open
from .network import PATH_WEIGHT, predict
from .noise import gaussian_blur_in_place
from .pixels import BLACK, WHITE, load_image, save_image
from .result import construct_result
from .solver import solve
from .threshold import adaptive_threshold_in_place
from .verbose import FatalError, info, log

SMALL_BLOB_THRESHOLD = 50
GRID_SIZE = 252


def _show(image, options):
    if not options.show_image:
        return
    image = np.asarray(image, dtype=np.uint32)
    rgb = np.stack(
        [(image >> 16) & 0xFF, (image >> 8) & 0xFF, image & 0xFF], axis=-1
    ).astype(np.uint8)
    Image.fromarray(rgb).show()
    try:
        input("Press Enter to continue...")
    except EOFError:
        pass


def find_grid_corners(image, options):
    """Return the four corners of the sudoku grid; `image` is dilated in place."""
    dilate_in_place(image)
    blob = find_biggest_blob(image)
    if blob.point is not None:
        log(
            f"Found the biggest blob starting at x = {blob.point.x}, "
            f"y = {blob.point.y}, of size {blob.size}"
        )
    result = blob.image
    erode_in_place(result)
    points = order_points(result)
    _show(result, options)
    return points


def read_digits(digits_dir=SC_DESTDIR, weights_path=PATH_WEIGHT):
    """Recognise the saved cell images; return the 81 grid characters ('.' when empty)."""
    grid = ["."] * 81
    for i in range(9):
        for j in range(9):
            path = os.path.join(digits_dir, f"x{i}-y{j}.bmp")
            if not os.path.exists(path):
                continue
            scores = predict(path, weights_path)
            digit = int(np.argmax(scores[:8])) + 1
            grid[j * 9 + i] = str(digit)
    return grid


def process_image(options):
    """Run the whole pipeline on `options.input_file` and save the result picture."""
    info(f"Running processImage with inputFile = {options.input_file}")
    try:
        image = load_image(options.input_file)
    except OSError as exc:
        raise FatalError(f"Failed to load image: {exc}") from exc
    output = options.output_file or "out.bmp"
    height, width = image.shape
    log(f"Successfully loaded {options.input_file} (w={width}, h={height})")
    _show(image, options)

    gaussian_blur_in_place(image)
    log("Reduced noise")
    _show(image, options)

    adaptive_threshold_in_place(image)
    log("Applied adaptive threshold (mean - C method)")
    remove_small_blobs(image, SMALL_BLOB_THRESHOLD, WHITE, BLACK)
    log(f"Removed all blobs smaller than {SMALL_BLOB_THRESHOLD} pixels")
    _show(image, options)

    morphology_close(image)
    morphology_open(image)
    log("Applied Morphology operations")

    points = find_grid_corners(image, options)
    log(f"Found corner with ul(x = {points.ul.x}, y = {points.ul.y})")
    flood_fill(image, points.ul, WHITE, BLACK)
    log("Removed the grid")
    _show(image, options)

    save_image(image, "output.bmp")
    straightened = homographic_transform(image, points, GRID_SIZE)
    log("Applied homographic transform")
    _show(straightened, options)
    save_image(straightened, "Homographic.bmp")

    save_image(image, output)
    info(f"Saved image under filename {output}")

    cut_sudoku(straightened)
    log(f"Saved digits in directory {SC_DESTDIR}")

    starting = read_digits(SC_DESTDIR, PATH_WEIGHT)
    solved = list(starting)
    solve(solved, 3, 3)
    result = construct_result(solved, starting)
    _show(result, options)

    if len(output) > 4 and output.endswith((".bmp", ".png")):
        save_image(result, output)
    return 0