"""Encode result with placeholder quality metrics."""

from dataclasses import dataclass
import numpy as np


@dataclass
class HashResult:
    """Results from the encode/reconstruct pipeline."""
    
    blurhash: str
    x_components: int
    y_components: int
    
    original_image: np.ndarray
    placeholder_image: np.ndarray
    
    # Placeholder vs. source
    psnr_y: float
    ssim_y: float
    psnr_rgb: float
    ssim_rgb: float
    
    # Size
    hash_bytes: int
    compression_ratio: float
    
    # Runtime
    encode_time_ms: float
    decode_time_ms: float
    
    @property
    def average_color(self) -> tuple:
        return tuple(int(c) for c in self.placeholder_image.reshape(-1, 3).mean(axis=0).round())
