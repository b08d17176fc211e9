"""Loading labelled digit images for training and prediction."""

import itertools
import os
import re
from dataclasses import dataclass

import numpy as np

from .pixels import intensity, load_image
from .verbose import FatalError

DATASET_DIR = "./bddImages/"
DEFAULT_COUNT = 8228

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class LabeledImage:
    """A digit image flattened row by row, with its label."""

    label: int
    pixels: np.ndarray


def label_from_name(name):
    """Return the integer after the first '-' in `name` (0 if none is there)."""
    dash = name.find("-")
    if dash < 0:
        raise ValueError(f"no label in file name: {name}")
    match = _LEADING_INT.match(name, dash + 1)
    return int(match.group(1)) if match else 0


def load_labeled_image(path):
    """Load an image file as gray levels, labelled from its file name."""
    path = os.fspath(path)
    try:
        image = load_image(path)
    except OSError as exc:
        raise FatalError(f"IMG_Load: {exc}") from exc
    pixels = intensity(image).astype(float).ravel()
    return LabeledImage(label_from_name(os.path.basename(path)), pixels)


def load_dataset(directory=DATASET_DIR, count=DEFAULT_COUNT):
    """Load up to `count` images from `directory`, skipping hidden files."""
    try:
        names = sorted(os.listdir(directory))
    except OSError as exc:
        raise FatalError(
            f'imageVect: directory "{directory}" does not exist'
        ) from exc
    visible = (name for name in names if not name.startswith("."))
    return [
        load_labeled_image(os.path.join(directory, name))
        for name in itertools.islice(visible, count)
    ]