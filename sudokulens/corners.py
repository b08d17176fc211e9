"""Locating the four corners of a white quadrilateral."""

from dataclasses import dataclass

import numpy as np

from .pixels import Point, intensity


@dataclass(frozen=True)
class OrderedPoints:
    """Upper-left, upper-right, lower-left and lower-right corners."""

    ul: Point
    ur: Point
    ll: Point
    lr: Point


def order_points(image):
    """Return the corners of the white shape in `image`.

    Meant for the output of blob detection; an image without white pixels
    gives (0, 0) for every corner.
    """
    ys, xs = np.nonzero(intensity(image) == 0xFF)
    if xs.size == 0:
        origin = Point(0, 0)
        return OrderedPoints(origin, origin, origin, origin)

    sums = xs + ys
    diffs = xs - ys

    def at(index):
        return Point(int(xs[index]), int(ys[index]))

    last_max_sum = sums.size - 1 - int(np.argmax(sums[::-1]))
    return OrderedPoints(
        ul=at(int(np.argmin(sums))),
        ur=at(int(np.argmax(diffs))),
        ll=at(int(np.argmin(diffs))),
        lr=at(last_max_sum),
    )