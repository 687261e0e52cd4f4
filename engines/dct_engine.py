"""Blurhash DCT: per-cell cosine factors and their resynthesis.

This is not the orthonormal DCT-II: the basis samples cos(pi * k * n / N)
at integer pixel positions, so it cannot be delegated to an FFT routine.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Optional

import numpy as np

from engines.color_space import linear_to_srgb
from engines.errors import TransformTimeoutError
from utils.constants import DEFAULT_TRANSFORM_TIMEOUT_S

logger = logging.getLogger(__name__)


def cosine_basis(components: int, size: int) -> np.ndarray:
    """(components, size) matrix of cos(pi * k * n / size)."""
    k = np.arange(components, dtype=np.float64)[:, None]
    n = np.arange(size, dtype=np.float64)[None, :]
    return np.cos(np.pi * k * n / size)


def compute_factor(linear: np.ndarray, basis_x: np.ndarray, basis_y: np.ndarray,
                   normalisation: float) -> np.ndarray:
    """Single grid cell: weighted sum of the linear image over one 2D basis."""
    height, width = linear.shape[:2]
    basis = np.outer(basis_y, basis_x)
    total = np.einsum('ij,ijc->c', basis, linear)
    return total * (normalisation / (width * height))


def compute_factors(
    linear: np.ndarray,
    x_components: int,
    y_components: int,
    timeout_s: float = DEFAULT_TRANSFORM_TIMEOUT_S,
    max_workers: Optional[int] = None
) -> np.ndarray:
    """Forward transform of a (H, W, 3) linear image.

    Every cell is an independent task on a thread pool; the join is
    bounded by `timeout_s`. Returns a (y_components, x_components, 3) grid.
    """
    height, width = linear.shape[:2]
    basis_x = cosine_basis(x_components, width)
    basis_y = cosine_basis(y_components, height)

    cells = [(x, y) for y in range(y_components) for x in range(x_components)]
    if max_workers is None:
        max_workers = min(len(cells), os.cpu_count() or 1)

    pool = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix='blurhash-dct')
    try:
        futures = [
            pool.submit(
                compute_factor, linear, basis_x[x], basis_y[y],
                1.0 if x == 0 and y == 0 else 2.0
            )
            for (x, y) in cells
        ]
        _, pending = wait(futures, timeout=timeout_s)
        if pending:
            logger.warning("DCT join timed out with %d of %d cells pending",
                           len(pending), len(cells))
            raise TransformTimeoutError(timeout_s, len(pending))
        factors = np.array([f.result() for f in futures], dtype=np.float64)
    finally:
        pool.shutdown(wait=False, cancel_futures=True)

    return factors.reshape(y_components, x_components, 3)


def render_factors(factors: np.ndarray, width: int, height: int) -> np.ndarray:
    """Inverse transform: (y_comp, x_comp, 3) grid -> (height, width, 3) uint8 sRGB."""
    y_components, x_components = factors.shape[:2]
    basis_x = cosine_basis(x_components, width)
    basis_y = cosine_basis(y_components, height)
    linear = np.einsum('jy,ix,jic->yxc', basis_y, basis_x, factors)
    return linear_to_srgb(linear)
