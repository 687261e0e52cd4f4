"""Tests for OpenCV image I/O helpers."""

import numpy as np
import pytest
from utils.image_io import load_image, save_image, downscale_for_hash
from utils.test_images import generate_chroma_stripes


def test_png_roundtrip_keeps_rgb_order(tmp_path):
    image = generate_chroma_stripes(16, 8)
    path = str(tmp_path / "stripes.png")
    save_image(image, path)
    assert np.array_equal(load_image(path), image)


def test_missing_file():
    with pytest.raises(ValueError, match="Could not load"):
        load_image("/nonexistent/image.png")


def test_downscale_for_hash():
    image = np.zeros((100, 200, 3), dtype=np.uint8)
    assert downscale_for_hash(image).shape == (32, 64, 3)
    small = np.zeros((10, 20, 3), dtype=np.uint8)
    assert downscale_for_hash(small) is small
