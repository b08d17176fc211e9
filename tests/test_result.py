import numpy as np
import pytest
from PIL import Image

from sudokulens.pixels import BLACK, WHITE, intensity_to_argb, save_image
from sudokulens.result import construct_result, render_grid_file
from sudokulens.verbose import FatalError

PUZZLE = (
    "53..7...."
    "6..195..."
    ".98....6."
    "8...6...3"
    "4..8.3..1"
    "7...2...6"
    ".6....28."
    "...419..5"
    "....8..79"
)


@pytest.fixture
def background(tmp_path):
    path = tmp_path / "background.png"
    save_image(np.full((120, 300), BLACK, dtype=np.uint32), path)
    return path


def _write_half_digit(directory, digit):
    rgba = np.zeros((10, 10, 4), dtype=np.uint8)
    rgba[:, 5:] = (255, 0, 0, 255)
    Image.fromarray(rgba).save(directory / f"5-{digit}.png")


def test_given_digit_blits_as_is(tmp_path, background):
    _write_half_digit(tmp_path, 5)
    grid = "5" + "0" * 80
    result = construct_result(grid, grid, background, tmp_path)
    assert (result[10:20, 20:25] == BLACK).all()
    assert (result[10:20, 25:30] == 0xFFFF0000).all()
    assert (result[30:, :] == BLACK).all()


def test_solved_digit_is_recoloured(tmp_path, background):
    _write_half_digit(tmp_path, 5)
    grid = "05" + "0" * 79
    base = "." * 81
    result = construct_result(grid, base, background, tmp_path)
    assert (result[10:20, 120:125] == BLACK).all()
    assert (result[10:20, 125:130] == WHITE).all()
    assert (result[10:20, 20:30] == BLACK).all()


def test_missing_digit_image(tmp_path, background):
    grid = "7" + "0" * 80
    with pytest.raises(FatalError):
        construct_result(grid, grid, background, tmp_path)


def test_missing_background(tmp_path):
    with pytest.raises(FatalError):
        construct_result("0" * 81, "." * 81, tmp_path / "none.png", tmp_path)


def test_render_grid_file(tmp_path, background):
    digits = tmp_path / "digits"
    digits.mkdir()
    for d in range(1, 10):
        save_image(np.full((10, 10), intensity_to_argb(d * 20), dtype=np.uint32),
                   digits / f"5-{d}.png")
    grid_path = tmp_path / "grid.txt"
    grid_path.write_text(PUZZLE)
    result = render_grid_file(grid_path, background, digits)
    assert (result[10:20, 20:30] == intensity_to_argb(100)).all()
    assert (result[10:20, 120:130] == intensity_to_argb(60)).all()
    assert (result[10:20, 220:230] == WHITE).all()


def test_render_grid_file_missing(tmp_path, background):
    with pytest.raises(FatalError):
        render_grid_file(tmp_path / "absent.txt", background, tmp_path)