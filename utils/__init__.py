"""Shared utilities."""

from .constants import BASE83_ALPHABET, MAX_COMPONENTS
from .metrics import compute_psnr_ssim, Timer, hash_size_stats
from .test_images import (
    generate_solid,
    generate_colored_checkerboard,
    generate_gradient,
    generate_chroma_stripes,
    generate_demo_image,
)
from .image_io import load_image, save_image, downscale_for_hash

__all__ = [
    'BASE83_ALPHABET',
    'MAX_COMPONENTS',
    'compute_psnr_ssim',
    'Timer',
    'hash_size_stats',
    'generate_solid',
    'generate_colored_checkerboard',
    'generate_gradient',
    'generate_chroma_stripes',
    'generate_demo_image',
    'load_image',
    'save_image',
    'downscale_for_hash',
]
