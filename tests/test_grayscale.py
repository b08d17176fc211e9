import numpy as np
import pytest

from sudokulens.grayscale import apply_grayscale, grayscale_pixel
from sudokulens.pixels import BLACK, WHITE, intensity_to_argb, new_image
from sudokulens.verbose import FatalError


def test_grayscale_pixel_mean():
    assert grayscale_pixel(0xFF102030) == 0xFF202020


def test_grayscale_pixel_sets_alpha():
    assert grayscale_pixel(0x00FFFFFF) == WHITE
    assert grayscale_pixel(0x00000000) == BLACK


@pytest.mark.parametrize("level", [0, 17, 128, 255])
def test_gray_pixel_is_fixed_point(level):
    pixel = intensity_to_argb(level)
    assert grayscale_pixel(pixel) == pixel


def test_apply_grayscale_matches_pixel_function():
    image = new_image(3, 2)
    image[:] = np.array(
        [[0xFF102030, 0x00FF0000, 0x12345678], [0xFFFFFFFF, 0x0000FF00, 0xFF0000FF]],
        dtype=np.uint32,
    )
    expected = [[grayscale_pixel(int(p)) for p in row] for row in image]
    apply_grayscale(image)
    assert image.tolist() == expected


def test_apply_grayscale_channels_equal():
    rng = np.random.default_rng(0)
    image = rng.integers(0, 2 ** 32, size=(4, 5), dtype=np.uint64).astype(np.uint32)
    apply_grayscale(image)
    b = image & 0xFF
    assert np.array_equal((image >> 8) & 0xFF, b)
    assert np.array_equal((image >> 16) & 0xFF, b)
    assert np.all(image >> 24 == 0xFF)


def test_apply_grayscale_rejects_wrong_format():
    with pytest.raises(FatalError):
        apply_grayscale(np.zeros((2, 2), dtype=np.uint8))
    with pytest.raises(FatalError):
        apply_grayscale(np.zeros((2, 2, 4), dtype=np.uint32))