"""Synthetic test images for hashing demos and tests."""

import numpy as np


def generate_solid(width: int = 32, height: int = 32, color=(128, 64, 192)) -> np.ndarray:
    """Uniform color - all energy in the DC term."""
    img = np.empty((height, width, 3), dtype=np.uint8)
    img[:, :] = color
    return img


def generate_colored_checkerboard(size: int = 64, block_size: int = 16) -> np.ndarray:
    """High-contrast checkerboard - mostly high frequencies the hash throws away."""
    idx = np.arange(size) // block_size
    dark = ((idx[:, None] + idx[None, :]) % 2 == 0)
    img = np.full((size, size, 3), 220, dtype=np.uint8)
    img[dark] = [30, 30, 30]
    return img


def generate_gradient(width: int = 64, height: int = 48) -> np.ndarray:
    """Smooth diagonal gradient - well captured by the first AC terms."""
    ys, xs = np.mgrid[0:height, 0:width]
    t = (ys + xs) / max(width + height - 2, 1)
    img = np.stack([40 + t * 180, 60 + t * 140, 120 + t * 100], axis=-1)
    return np.clip(img, 0, 255).astype(np.uint8)


def generate_chroma_stripes(width: int = 64, height: int = 32) -> np.ndarray:
    """Saturated vertical color bars."""
    colors = np.array([
        [180, 40, 40],    # Red
        [40, 160, 40],    # Green
        [40, 80, 180],    # Blue
        [180, 180, 40],   # Yellow
    ], dtype=np.uint8)
    band = np.minimum(np.arange(width) * len(colors) // width, len(colors) - 1)
    return np.broadcast_to(colors[band], (height, width, 3)).copy()


def generate_demo_image(key: str) -> np.ndarray | None:
    """Generate demo image by key."""
    generators = {
        "solid": generate_solid,
        "checkerboard": generate_colored_checkerboard,
        "gradient": generate_gradient,
        "chroma_stripes": generate_chroma_stripes,
    }
    
    if key in generators:
        return generators[key]()
    
    return None
