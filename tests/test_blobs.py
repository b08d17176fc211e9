import numpy as np
import pytest

from sudokulens.blobs import find_biggest_blob, remove_small_blobs
from sudokulens.pixels import BLACK, BLUE, WHITE, Point
from sudokulens.verbose import FatalError


def canvas():
    image = np.full((12, 12), BLACK, dtype=np.uint32)
    image[1:4, 1:4] = WHITE
    image[8:10, 6:8] = WHITE
    return image


def test_find_biggest_blob():
    image = canvas()
    original = image.copy()
    result = find_biggest_blob(image)
    assert result.size == 9
    assert result.point == Point(1, 1)
    assert (result.image[1:4, 1:4] == WHITE).all()
    assert (result.image[8:10, 6:8] == BLACK).all()
    assert np.array_equal(image, original)


def test_find_biggest_blob_without_white():
    image = np.full((5, 5), BLACK, dtype=np.uint32)
    result = find_biggest_blob(image)
    assert result.size == 0
    assert result.point is None
    assert np.array_equal(result.image, image)


def test_blob_on_the_seed_row_stays_marked():
    image = np.full((12, 12), BLACK, dtype=np.uint32)
    image[1:4, 1:4] = WHITE
    image[1, 8:10] = WHITE
    result = find_biggest_blob(image)
    assert result.point == Point(1, 1)
    assert result.image[1, 8] == BLUE
    assert result.image[1, 9] == BLUE


def test_remove_small_blobs():
    image = canvas()
    remove_small_blobs(image, 4, WHITE, BLACK)
    assert (image[1:4, 1:4] == WHITE).all()
    assert (image[8:10, 6:8] == BLACK).all()
    assert not (image == BLUE).any()


def test_remove_small_blobs_keeps_larger_ones():
    image = canvas()
    remove_small_blobs(image, 3, WHITE, BLACK)
    assert np.array_equal(image, canvas())


def test_remove_small_blobs_rejects_blue_foreground():
    with pytest.raises(FatalError):
        remove_small_blobs(canvas(), 4, BLUE, BLACK)