"""Tests for the blurhash forward/inverse cosine transform."""

import math
import threading

import numpy as np
import pytest
from engines import dct_engine
from engines.dct_engine import cosine_basis, compute_factors, render_factors
from engines.color_space import linear_to_srgb
from engines.errors import TransformTimeoutError


def naive_factors(linear, x_components, y_components):
    """Direct per-pixel sum, straight from the definition."""
    height, width = linear.shape[:2]
    grid = np.zeros((y_components, x_components, 3))
    for j in range(y_components):
        for i in range(x_components):
            norm = 1.0 if i == 0 and j == 0 else 2.0
            for py in range(height):
                for px in range(width):
                    basis = math.cos(math.pi * i * px / width) * math.cos(math.pi * j * py / height)
                    grid[j, i] += basis * linear[py, px]
            grid[j, i] *= norm / (width * height)
    return grid


def test_cosine_basis():
    """Row 0 is constant, row k samples cos(pi*k*n/N)."""
    basis = cosine_basis(3, 4)
    assert basis.shape == (3, 4)
    assert np.allclose(basis[0], 1.0)
    assert np.allclose(basis[2], [1.0, 0.0, -1.0, 0.0], atol=1e-12)


def test_matches_direct_sum():
    """Vectorized factors equal the textbook double sum."""
    rng = np.random.default_rng(7)
    linear = rng.random((5, 6, 3))
    factors = compute_factors(linear, 4, 3)
    assert factors.shape == (3, 4, 3)
    assert np.allclose(factors, naive_factors(linear, 4, 3), atol=1e-12)


def test_dc_is_average():
    """DC term equals the mean linear color."""
    rng = np.random.default_rng(1)
    linear = rng.random((8, 8, 3))
    factors = compute_factors(linear, 3, 3)
    assert np.allclose(factors[0, 0], linear.reshape(-1, 3).mean(axis=0))


def test_single_worker_matches_pool():
    rng = np.random.default_rng(3)
    linear = rng.random((6, 9, 3))
    assert np.allclose(
        compute_factors(linear, 5, 4, max_workers=1),
        compute_factors(linear, 5, 4)
    )


def test_timeout_is_fatal(monkeypatch):
    """A stalled cell aborts the whole transform."""
    release = threading.Event()

    def stalled(*args):
        release.wait(5.0)
        return np.zeros(3)

    monkeypatch.setattr(dct_engine, 'compute_factor', stalled)
    try:
        with pytest.raises(TransformTimeoutError) as exc_info:
            compute_factors(np.zeros((2, 2, 3)), 2, 2, timeout_s=0.05)
        assert exc_info.value.pending > 0
    finally:
        release.set()


def test_render_dc_only():
    """A DC-only grid renders a flat image of the average color."""
    dc = np.array([0.5, 0.2, 0.9])
    image = render_factors(dc.reshape(1, 1, 3), 5, 4)
    assert image.shape == (4, 5, 3)
    assert image.dtype == np.uint8
    assert np.all(image == linear_to_srgb(dc))


def test_render_matches_direct_sum():
    """Rendered pixels equal the per-pixel cosine sum."""
    rng = np.random.default_rng(11)
    factors = rng.normal(scale=0.2, size=(3, 4, 3))
    factors[0, 0] = [0.5, 0.5, 0.5]
    width, height = 7, 5
    image = render_factors(factors, width, height)
    for py, px in [(0, 0), (2, 3), (4, 6)]:
        linear = np.zeros(3)
        for j in range(3):
            for i in range(4):
                linear += factors[j, i] * math.cos(math.pi * px * i / width) * math.cos(math.pi * py * j / height)
        assert np.allclose(image[py, px].astype(int), linear_to_srgb(linear).astype(int), atol=1)


def test_render_stays_in_byte_range():
    factors = np.full((3, 3, 3), 5.0)
    factors[1, 1] = -20.0
    image = render_factors(factors, 6, 6)
    assert image.min() >= 0 and image.max() <= 255
