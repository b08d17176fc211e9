"""Hough transform for straight lines in a binary image."""

import math
import warnings
from typing import NamedTuple

import numpy as np

from .pixels import draw_line, intensity
from .utils import clamp

HOUGH_THRESHOLD = 600
LINE_COLOR = 0xFF00FFFF


class Line(NamedTuple):
    """A line in normal form: distance from the origin and angle in radians."""

    rho: float
    theta: float


def hough_transform(image):
    """Return the lines supported by at least HOUGH_THRESHOLD white pixels."""
    levels = intensity(image)
    ny, nx = levels.shape
    rho_step = 1.0
    theta_step = 1.0
    n_theta = int(180 / theta_step)
    diagonal = math.sqrt(nx * nx + ny * ny)
    n_rho = int(diagonal / rho_step)
    if n_rho == 0:
        return []
    dtheta = math.pi / n_theta
    drho = diagonal / n_rho

    odd = (levels != 0) & (levels != 0xFF)
    if odd.any():
        y, x = (int(v) for v in np.argwhere(odd)[0])
        warnings.warn(
            f"{int(odd.sum())} pixels are not black or white, "
            f"first at image(y={y}, x={x})"
        )

    ys, xs = np.nonzero(levels == 0xFF)
    xs = xs.astype(float)
    heights = (ny - ys).astype(float)
    accum = np.zeros((n_theta, n_rho), dtype=np.int64)
    for itheta in range(n_theta):
        theta = itheta * dtheta
        rho = xs * math.cos(theta) + heights * math.sin(theta)
        irho = np.trunc(rho / drho).astype(np.int64)
        irho = irho[(irho > 0) & (irho < n_rho)]
        accum[itheta] += np.bincount(irho, minlength=n_rho)

    return [
        Line(rho=int(irho) * drho, theta=int(itheta) * dtheta)
        for itheta, irho in np.argwhere(accum >= HOUGH_THRESHOLD)
    ]


def draw_hough_lines(image, lines):
    """Draw each line across `image` in place, reporting it on standard output."""
    height, width = image.shape
    for rho, theta in lines:
        print(f"Lines with rho={rho:f} and theta={theta:f}")
        a = math.cos(theta)
        b = math.sin(theta)
        x0 = math.floor(a * rho)
        y0 = math.floor(b * rho)
        x1 = clamp(math.floor(x0 + 1000 * (-b)), 0, width - 1)
        y1 = clamp(math.floor(y0 + 1000 * a), 0, height - 1)
        x2 = clamp(math.floor(x0 - 1000 * (-b)), 0, height - 1)
        y2 = clamp(math.floor(y0 - 1000 * a), 0, height - 1)
        draw_line(image, x1, y1, x2, y2, LINE_COLOR)