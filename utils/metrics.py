"""Metrics: placeholder fidelity (PSNR, SSIM) and hash size."""

import time
import numpy as np
from skimage.metrics import peak_signal_noise_ratio, structural_similarity
from typing import Dict

# skimage's default SSIM window
SSIM_MIN_SIDE = 7


def _luma(rgb: np.ndarray) -> np.ndarray:
    rgb = rgb.astype(np.float64)
    return 0.299 * rgb[:, :, 0] + 0.587 * rgb[:, :, 1] + 0.114 * rgb[:, :, 2]


def compute_psnr_ssim(original_rgb: np.ndarray, placeholder_rgb: np.ndarray) -> Dict[str, float]:
    """Compute PSNR and SSIM on RGB and Y channel.
    
    SSIM is NaN for images smaller than the 7x7 comparison window.
    """
    psnr_rgb = peak_signal_noise_ratio(original_rgb, placeholder_rgb, data_range=255)
    original_y = _luma(original_rgb)
    placeholder_y = _luma(placeholder_rgb)
    psnr_y = peak_signal_noise_ratio(original_y, placeholder_y, data_range=255)
    
    if min(original_rgb.shape[:2]) >= SSIM_MIN_SIDE:
        ssim_rgb = structural_similarity(
            original_rgb, placeholder_rgb, channel_axis=2, data_range=255
        )
        ssim_y = structural_similarity(original_y, placeholder_y, data_range=255)
    else:
        ssim_rgb = ssim_y = float('nan')
    
    return {
        'psnr_rgb': float(psnr_rgb),
        'ssim_rgb': float(ssim_rgb),
        'psnr_y': float(psnr_y),
        'ssim_y': float(ssim_y)
    }


class Timer:
    """Simple timer for encode/decode runtime."""
    
    def __init__(self):
        self.encode_time_ms = 0.0
        self.decode_time_ms = 0.0
    
    def measure_encode(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.encode_time_ms = (time.perf_counter() - start) * 1000.0
        return result
    
    def measure_decode(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.decode_time_ms = (time.perf_counter() - start) * 1000.0
        return result


def hash_size_stats(blurhash: str, original_shape: tuple) -> Dict:
    """Hash size against the raw 24-bit RGB source."""
    h, w = original_shape
    original_bytes = h * w * 3
    hash_bytes = len(blurhash.encode('ascii'))
    return {
        'hash_bytes': hash_bytes,
        'bits_per_pixel': float(hash_bytes * 8 / (h * w)),
        'compression_ratio': float(original_bytes / max(hash_bytes, 1)),
    }
