"""Blurhash encode/decode.

Hash layout:
    [0]      size flag      (x_components - 1) + (y_components - 1) * 9
    [1]      quantized max AC magnitude
    [2:6]    DC as packed 24-bit sRGB
    [6:]     two characters per AC term, row-major, skipping (0, 0)

Preconditions: component counts in [1, 9], width and height >= 1.
Violations raise ValueError before any work is done.
"""

import logging
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from engines.base83 import DIGIT_INDEX, decode_base83, encode_base83
from engines.color_space import linear_to_srgb, srgb_to_linear
from engines.dct_engine import compute_factors, render_factors
from engines.errors import (
    BlurhashError,
    DimensionMismatchError,
    LengthMismatchError,
    TooShortError,
)
from engines.quantizer import (
    decode_ac,
    decode_dc,
    dequantize_max_ac,
    encode_ac,
    encode_dc,
    quantize_max_ac,
)
from models.hash_params import HashParams
from utils.constants import (
    AC_DIGITS,
    DC_DIGITS,
    DEFAULT_PUNCH,
    DEFAULT_X_COMPONENTS,
    DEFAULT_Y_COMPONENTS,
    HEADER_LENGTH,
    MAX_AC_DIGITS,
    SIZE_FLAG_DIGITS,
)

logger = logging.getLogger(__name__)

PixelBuffer = Union[Sequence[int], np.ndarray]


def _check_size(width: int, height: int) -> None:
    if width < 1 or height < 1:
        raise ValueError(f"Width and height must be >= 1, got {width}x{height}")


def encode_factors(factors: np.ndarray, params: HashParams) -> str:
    """Quantize and pack a (y_components, x_components, 3) factor grid."""
    flat = factors.reshape(-1, 3)
    dc, ac = flat[0], flat[1:]
    quantized_max, max_value = quantize_max_ac(ac)

    parts = [
        encode_base83(params.size_flag, SIZE_FLAG_DIGITS),
        encode_base83(quantized_max, MAX_AC_DIGITS),
        encode_base83(encode_dc(dc), DC_DIGITS),
    ]
    parts.extend(encode_base83(encode_ac(factor, max_value), AC_DIGITS) for factor in ac)
    return "".join(parts)


def image_factors(
    pixels: PixelBuffer,
    width: int,
    height: int,
    params: HashParams
) -> np.ndarray:
    """Validate a row-major RGB buffer and run the forward transform on it.

    Pixel values must be integers in [0, 255]; float buffers are rejected
    rather than rounded.
    """
    _check_size(width, height)

    buffer = np.asarray(pixels)
    expected = width * height * 3
    if buffer.size != expected:
        raise DimensionMismatchError(expected, int(buffer.size))
    if not np.issubdtype(buffer.dtype, np.integer):
        raise ValueError(f"Pixel values must be 8-bit integers, got dtype {buffer.dtype}")
    if buffer.min() < 0 or buffer.max() > 255:
        raise ValueError("Pixel values must be in [0, 255]")

    linear = srgb_to_linear(buffer.reshape(height, width, 3))
    return compute_factors(
        linear, params.x_components, params.y_components,
        timeout_s=params.timeout_s, max_workers=params.max_workers
    )


def encode(
    pixels: PixelBuffer,
    width: int,
    height: int,
    x_components: Optional[int] = None,
    y_components: Optional[int] = None,
    params: Optional[HashParams] = None
) -> str:
    """Encode a row-major RGB buffer of width * height * 3 bytes.

    Component counts come either from `x_components`/`y_components`
    (default 4x3) or from `params`, not both.
    """
    if params is None:
        params = HashParams(
            x_components=DEFAULT_X_COMPONENTS if x_components is None else x_components,
            y_components=DEFAULT_Y_COMPONENTS if y_components is None else y_components,
        )
    elif x_components is not None or y_components is not None:
        raise ValueError("Pass component counts either directly or through params, not both")

    blurhash = encode_factors(image_factors(pixels, width, height, params), params)

    logger.debug("Encoded %dx%d image with %dx%d components: %s",
                 width, height, params.x_components, params.y_components, blurhash)
    return blurhash


def encode_image(image: np.ndarray, params: Optional[HashParams] = None) -> str:
    """Encode an (H, W, 3) uint8 RGB array."""
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Expected (H, W, 3) RGB image, got shape {image.shape}")
    height, width = image.shape[:2]
    if params is None:
        params = HashParams()
    return encode(image, width, height, params=params)


def get_components(blurhash: str) -> Tuple[int, int]:
    """(x_components, y_components) from the size flag."""
    if len(blurhash) < HEADER_LENGTH:
        raise TooShortError(HEADER_LENGTH, len(blurhash))
    return HashParams.components_from_size_flag(decode_base83(blurhash[0]))


def _parse_params(blurhash: str, punch: float) -> HashParams:
    x_components, y_components = get_components(blurhash)
    expected = HEADER_LENGTH + 2 * (x_components * y_components - 1)
    if len(blurhash) != expected:
        raise LengthMismatchError(expected, len(blurhash))
    return HashParams.from_size_flag(decode_base83(blurhash[0]), punch=punch)


def decode_factors(blurhash: str, punch: float = DEFAULT_PUNCH) -> np.ndarray:
    """Dequantized (y_components, x_components, 3) factor grid."""
    params = _parse_params(blurhash, punch)

    max_value = dequantize_max_ac(decode_base83(blurhash[1], offset=1))
    colors = [decode_dc(decode_base83(blurhash[2:6], offset=2))]
    for i in range(1, params.num_components):
        start = HEADER_LENGTH + (i - 1) * AC_DIGITS
        value = decode_base83(blurhash[start:start + AC_DIGITS], offset=start)
        colors.append(decode_ac(value, max_value, params.punch))

    return np.array(colors).reshape(params.y_components, params.x_components, 3)


def decode_image(
    blurhash: str,
    width: int,
    height: int,
    punch: float = DEFAULT_PUNCH
) -> np.ndarray:
    """Decode to an (height, width, 3) uint8 RGB array."""
    _check_size(width, height)
    factors = decode_factors(blurhash, punch)
    logger.debug("Decoding %s at %dx%d (punch=%.2f)", blurhash, width, height, punch)
    return render_factors(factors, width, height)


def decode(
    blurhash: str,
    width: int,
    height: int,
    punch: float = DEFAULT_PUNCH
) -> np.ndarray:
    """Decode to a flat row-major RGB buffer of width * height * 3 bytes."""
    return decode_image(blurhash, width, height, punch).reshape(-1)


def average_color(blurhash: str) -> Tuple[int, int, int]:
    """sRGB average color straight from the DC term."""
    _parse_params(blurhash, DEFAULT_PUNCH)
    r, g, b = linear_to_srgb(decode_dc(decode_base83(blurhash[2:6], offset=2)))
    return int(r), int(g), int(b)


def is_valid(blurhash: str) -> bool:
    """Structural check: length, size flag and alphabet."""
    try:
        _parse_params(blurhash, DEFAULT_PUNCH)
    except (BlurhashError, ValueError):
        return False
    return all(char in DIGIT_INDEX for char in blurhash)
