"""Blurhash engines - pure computation, no I/O."""

from .color_space import srgb_to_linear, linear_to_srgb, sign_pow
from .base83 import encode_base83, decode_base83
from .quantizer import encode_dc, decode_dc, quantize_max_ac, dequantize_max_ac, encode_ac, decode_ac
from .dct_engine import compute_factors, render_factors
from .errors import (
    BlurhashError,
    DimensionMismatchError,
    TooShortError,
    LengthMismatchError,
    InvalidCharacterError,
    TransformTimeoutError,
)
from .codec import (
    encode,
    encode_image,
    encode_factors,
    image_factors,
    decode,
    decode_image,
    decode_factors,
    get_components,
    average_color,
    is_valid,
)
from .pipeline import encode_reconstruct

__all__ = [
    'srgb_to_linear',
    'linear_to_srgb',
    'sign_pow',
    'encode_base83',
    'decode_base83',
    'encode_dc',
    'decode_dc',
    'quantize_max_ac',
    'dequantize_max_ac',
    'encode_ac',
    'decode_ac',
    'compute_factors',
    'render_factors',
    'BlurhashError',
    'DimensionMismatchError',
    'TooShortError',
    'LengthMismatchError',
    'InvalidCharacterError',
    'TransformTimeoutError',
    'encode',
    'encode_image',
    'encode_factors',
    'image_factors',
    'decode',
    'decode_image',
    'decode_factors',
    'get_components',
    'average_color',
    'is_valid',
    'encode_reconstruct',
]
