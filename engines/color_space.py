"""sRGB <-> linear-light conversion.

Both directions accept a scalar or a numpy array. Scalars come back as
Python numbers, arrays keep their shape.

Gamma rounding: ``linear_to_srgb`` rounds to the nearest 8-bit value
(``floor(v * 255 + 0.5)``) rather than truncating.
"""

import numpy as np


def srgb_to_linear(value):
    """8-bit sRGB channel value(s) (0-255) to linear light (0.0-1.0)."""
    v = np.asarray(value, dtype=np.float64) / 255.0
    linear = np.where(v <= 0.04045, v / 12.92, ((v + 0.055) / 1.055) ** 2.4)
    if linear.ndim == 0:
        return float(linear)
    return linear


def linear_to_srgb(value):
    """Linear light value(s) to 8-bit sRGB, clamped to [0, 255]."""
    v = np.clip(np.asarray(value, dtype=np.float64), 0.0, 1.0)
    encoded = np.where(
        v <= 0.0031308,
        v * 12.92,
        1.055 * np.power(v, 1.0 / 2.4) - 0.055,
    )
    srgb = np.clip(np.floor(encoded * 255.0 + 0.5), 0, 255)
    if srgb.ndim == 0:
        return int(srgb)
    return srgb.astype(np.uint8)


def sign_pow(value, exponent: float):
    """Sign-preserving power: sign(v) * |v| ** exponent."""
    v = np.asarray(value, dtype=np.float64)
    result = np.copysign(np.power(np.abs(v), exponent), v)
    if result.ndim == 0:
        return float(result)
    return result
