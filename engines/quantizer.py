"""Quantization of DCT factors to blurhash integers."""

import math
from typing import Tuple

import numpy as np

from engines.color_space import linear_to_srgb, srgb_to_linear, sign_pow
from utils.constants import AC_HALF_RANGE, AC_LEVELS, AC_MAX_LEVELS, AC_MAX_SCALE


def encode_dc(rgb: np.ndarray) -> int:
    """Linear average color -> 24-bit packed sRGB."""
    r, g, b = (int(c) for c in linear_to_srgb(np.asarray(rgb, dtype=np.float64)))
    return (r << 16) | (g << 8) | b


def decode_dc(value: int) -> np.ndarray:
    """24-bit packed sRGB -> linear average color."""
    channels = np.array([value >> 16, (value >> 8) & 0xFF, value & 0xFF], dtype=np.float64)
    return srgb_to_linear(channels)


def quantize_max_ac(ac: np.ndarray) -> Tuple[int, float]:
    """Quantize the largest AC magnitude.

    Returns (quantized_max, max_value) where max_value is the scale the
    decoder will reconstruct from quantized_max.
    """
    ac = np.asarray(ac, dtype=np.float64)
    if ac.size == 0:
        return 0, 1.0

    actual_max = float(np.max(np.abs(ac)))
    quantized = int(max(0, min(AC_MAX_LEVELS, math.floor(actual_max * AC_MAX_SCALE - 0.5))))
    return quantized, dequantize_max_ac(quantized)


def dequantize_max_ac(quantized: int) -> float:
    return (quantized + 1) / AC_MAX_SCALE


def encode_ac(rgb: np.ndarray, max_value: float) -> int:
    """AC factor -> three 19-level values packed base 19."""
    normalized = sign_pow(np.asarray(rgb, dtype=np.float64) / max_value, 0.5)
    q = np.clip(np.floor(normalized * AC_HALF_RANGE + 9.5), 0, AC_LEVELS - 1).astype(int)
    return int(q[0] * AC_LEVELS * AC_LEVELS + q[1] * AC_LEVELS + q[2])


def decode_ac(value: int, max_value: float, punch: float = 1.0) -> np.ndarray:
    """Packed AC value -> AC factor, scaled by max_value and punch."""
    q = np.array(
        [value // (AC_LEVELS * AC_LEVELS), (value // AC_LEVELS) % AC_LEVELS, value % AC_LEVELS],
        dtype=np.float64,
    )
    return sign_pow((q - AC_HALF_RANGE) / AC_HALF_RANGE, 2.0) * max_value * punch
