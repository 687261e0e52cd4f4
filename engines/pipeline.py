"""Encode/reconstruct pipeline for inspecting placeholder quality."""

import numpy as np
from typing import Optional, Tuple

from models.hash_params import HashParams
from models.hash_result import HashResult
from models.intermediate_data import IntermediateData
from engines.base83 import decode_base83
from engines.codec import decode_factors, decode_image, encode_factors, image_factors
from engines.quantizer import quantize_max_ac
from utils.constants import AC_DIGITS, HEADER_LENGTH
from utils.metrics import compute_psnr_ssim, Timer, hash_size_stats


def _encode_with_factors(image_rgb: np.ndarray, params: HashParams) -> Tuple[str, np.ndarray]:
    h, w = image_rgb.shape[:2]
    factors = image_factors(image_rgb, w, h, params)
    return encode_factors(factors, params), factors


def encode_reconstruct(
    image_rgb: np.ndarray,
    params: Optional[HashParams] = None
) -> Tuple[HashResult, IntermediateData]:
    """Hash an image, decode it back at the source size and score the placeholder."""
    if params is None:
        params = HashParams()
    if image_rgb.ndim != 3 or image_rgb.shape[2] != 3:
        raise ValueError(f"Expected (H, W, 3) RGB image, got shape {image_rgb.shape}")
    timer = Timer()
    h, w = image_rgb.shape[:2]

    # === ENCODING ===
    blurhash, factors = timer.measure_encode(_encode_with_factors, image_rgb, params)

    # === DECODING ===
    placeholder = timer.measure_decode(decode_image, blurhash, w, h, params.punch)

    # === METRICS ===
    metrics = compute_psnr_ssim(image_rgb, placeholder)
    size_info = hash_size_stats(blurhash, (h, w))

    result = HashResult(
        blurhash=blurhash,
        x_components=params.x_components,
        y_components=params.y_components,
        original_image=image_rgb,
        placeholder_image=placeholder,
        psnr_y=metrics['psnr_y'],
        ssim_y=metrics['ssim_y'],
        psnr_rgb=metrics['psnr_rgb'],
        ssim_rgb=metrics['ssim_rgb'],
        hash_bytes=size_info['hash_bytes'],
        compression_ratio=size_info['compression_ratio'],
        encode_time_ms=timer.encode_time_ms,
        decode_time_ms=timer.decode_time_ms
    )

    # === INTERMEDIATE DATA ===
    quantized_max, max_value = quantize_max_ac(factors.reshape(-1, 3)[1:])
    quantized_ac = np.array([
        decode_base83(blurhash[i:i + AC_DIGITS])
        for i in range(HEADER_LENGTH, len(blurhash), AC_DIGITS)
    ], dtype=np.int64)
    error_map_rgb = np.mean(
        np.abs(image_rgb.astype(np.float64) - placeholder.astype(np.float64)), axis=2
    )

    intermediate = IntermediateData(
        factors=factors,
        decoded_factors=decode_factors(blurhash, params.punch),
        quantized_max_ac=quantized_max,
        max_ac_value=max_value,
        quantized_dc=decode_base83(blurhash[2:6]),
        quantized_ac=quantized_ac,
        error_map_rgb=error_map_rgb
    )

    return result, intermediate
