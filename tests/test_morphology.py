import numpy as np

from sudokulens.morphology import (
    dilate,
    dilate_in_place,
    erode,
    erode_in_place,
    morphology_close,
    morphology_open,
)
from sudokulens.pixels import BLACK, WHITE, intensity, intensity_to_argb


def filled(width, height, color):
    return np.full((height, width), color, dtype=np.uint32)


def test_dilate_grows_a_single_pixel():
    image = filled(9, 9, BLACK)
    image[4, 4] = WHITE
    out = dilate(image)
    assert out[4, 4] == WHITE
    assert (intensity(out) == 255).sum() == 9


def test_dilate_of_uniform_image_is_unchanged():
    image = filled(7, 7, intensity_to_argb(50))
    assert np.array_equal(dilate(image), image)


def test_dilate_output_is_opaque():
    assert (dilate(np.zeros((4, 4), dtype=np.uint32)) == BLACK).all()


def test_erode_removes_a_single_pixel():
    image = filled(9, 9, BLACK)
    image[4, 4] = WHITE
    assert not intensity(erode(image)).any()


def test_erode_of_uniform_white_is_unchanged():
    image = filled(6, 6, WHITE)
    assert np.array_equal(erode(image), image)


def test_erode_shrinks_and_dilate_grows_a_block():
    image = filled(12, 12, BLACK)
    image[2:10, 2:10] = WHITE
    block = (intensity(image) == 255).sum()
    assert (intensity(erode(image)) == 255).sum() < block
    assert (intensity(dilate(image)) == 255).sum() > block


def test_dilate_in_place_only_touches_interior():
    image = filled(10, 10, BLACK)
    image[4, 4] = WHITE
    image[1, 1] = WHITE
    original = image.copy()
    dilate_in_place(image)
    assert np.array_equal(image[:3, :], original[:3, :])
    assert np.array_equal(image[:, :3], original[:, :3])
    assert np.array_equal(image[3:7, 3:7], dilate(original)[3:7, 3:7])


def test_erode_in_place_only_touches_interior():
    image = filled(10, 10, WHITE)
    image[5, 5] = BLACK
    original = image.copy()
    erode_in_place(image)
    assert np.array_equal(image[7:, :], original[7:, :])
    assert np.array_equal(image[3:7, 3:7], erode(original)[3:7, 3:7])


def test_close_and_open_keep_uniform_images():
    image = filled(10, 10, intensity_to_argb(90))
    original = image.copy()
    morphology_close(image)
    assert np.array_equal(image, original)
    morphology_open(image)
    assert np.array_equal(image, original)