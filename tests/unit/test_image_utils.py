"""Unit tests for heightmap export helpers."""

import numpy as np
import pytest
from PIL import Image

from pyterranoise.misc import (
    colored_image,
    heightmap_to_image,
    save_colored_png,
    save_heightmap_npy,
    save_heightmap_png,
)


@pytest.fixture
def ramp():
    """A 6x10 heightmap rising from 0 to 1 along x."""
    return np.tile(np.linspace(0.0, 1.0, 10), (6, 1))


@pytest.mark.unit
def test_uint8_image(ramp):
    img = heightmap_to_image(ramp, uint=True)
    assert img.mode == "L"
    assert img.size == (10, 6)
    data = np.asarray(img)
    assert data[0, 0] == 0
    assert data[0, -1] == 255


@pytest.mark.unit
def test_uint16_image(ramp):
    img = heightmap_to_image(ramp)
    assert img.mode == "I;16"
    data = np.asarray(img)
    assert data.max() == 65535
    assert data.min() == 0


@pytest.mark.unit
def test_out_of_range_values_clipped():
    heights = np.array([[-0.5, 0.5], [1.5, np.nan]])
    data = np.asarray(heightmap_to_image(heights, uint=True))
    assert data.tolist() == [[0, 128], [255, 0]]


@pytest.mark.unit
def test_normalize_rescales():
    heights = np.array([[10.0, 20.0], [30.0, 20.0]])
    data = np.asarray(heightmap_to_image(heights, uint=True, normalize=True))
    assert data.tolist() == [[0, 128], [255, 128]]


@pytest.mark.unit
def test_constant_heightmap_normalizes_to_zero():
    data = np.asarray(heightmap_to_image(np.full((3, 3), 7.0), uint=True, normalize=True))
    assert not data.any()


@pytest.mark.unit
def test_rejects_non_2d_input():
    with pytest.raises(ValueError):
        heightmap_to_image(np.zeros(5))


@pytest.mark.unit
def test_colored_image(ramp):
    img = colored_image(ramp)
    assert img.mode == "RGB"
    assert img.size == (10, 6)
    low = np.asarray(img)[0, 0]
    # water blue at the bottom of the ramp
    assert low.tolist() == [51, 102, 204]


@pytest.mark.unit
def test_save_npy_round_trip(tmp_path, ramp):
    path = tmp_path / "heights.npy"
    save_heightmap_npy(ramp, str(path))
    np.testing.assert_array_equal(np.load(path), ramp)


@pytest.mark.unit
def test_save_npy_unwritable(tmp_path, ramp):
    with pytest.raises(OSError):
        save_heightmap_npy(ramp, str(tmp_path / "missing" / "heights.npy"))


@pytest.mark.unit
def test_save_pngs(tmp_path, ramp):
    gray = tmp_path / "gray.png"
    color = tmp_path / "color.png"
    save_heightmap_png(ramp, str(gray), uint=True)
    save_colored_png(ramp, str(color))

    with Image.open(gray) as img:
        assert img.mode == "L"
        assert img.size == (10, 6)
    with Image.open(color) as img:
        assert img.mode == "RGB"
