"""Shared helpers: run options, clamping, Gaussian kernels and directory removal."""

import enum
import math
import shutil
from dataclasses import dataclass
from typing import Optional

import numpy as np


class Mode(enum.Enum):
    """What the command line should do."""

    GUI = "GUI"
    IMAGE = "IMAGE"
    TRAIN = "TRAIN"
    PREDICT = "PREDICT"
    SOLVE = "SOLVE"

    @classmethod
    def parse(cls, name):
        """Return the mode named `name`, ignoring case."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"unknown mode: {name}") from None


@dataclass
class Options:
    """Settings collected from the command line."""

    input_file: Optional[str] = None
    output_file: Optional[str] = None
    nn_input_file: Optional[str] = None
    show_image: bool = False
    nb_iterations: int = 100000
    minibatch_size: int = 100
    nb_images: int = 8228
    learning_rate: float = 0.25
    mode: Mode = Mode.GUI


def clamp(value, minimum, maximum):
    """Keep `value` within [minimum, maximum]."""
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


def build_2d_gaussian_kernel(radius, sigma):
    """Return a normalised (2*radius+1) square Gaussian kernel."""
    if radius < 0:
        raise ValueError("radius must not be negative")
    size = 2 * radius + 1
    offsets = np.arange(size) - radius
    yy, xx = np.meshgrid(offsets, offsets, indexing="ij")
    kernel = np.exp((xx ** 2 + yy ** 2) / (-2 * sigma * sigma)) / (
        2 * math.pi * sigma * sigma
    )
    return kernel / kernel.sum()


def remove_directory(path):
    """Remove a directory and everything below it."""
    shutil.rmtree(path)