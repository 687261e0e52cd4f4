"""Fixed-width base-83 integer encoding."""

from types import MappingProxyType

from engines.errors import InvalidCharacterError
from utils.constants import BASE83_ALPHABET

BASE = len(BASE83_ALPHABET)

# Reverse lookup, built once from the same literal as the forward alphabet.
DIGIT_INDEX = MappingProxyType({char: i for i, char in enumerate(BASE83_ALPHABET)})


def encode_base83(value: int, length: int) -> str:
    """Encode a non-negative integer as exactly `length` digits, most significant first."""
    value = int(value)
    if value < 0:
        raise ValueError(f"Cannot base83-encode negative value {value}")
    if value >= BASE ** length:
        raise ValueError(f"Value {value} does not fit in {length} base83 digits")

    digits = []
    for i in range(1, length + 1):
        digit = (value // BASE ** (length - i)) % BASE
        digits.append(BASE83_ALPHABET[digit])
    return "".join(digits)


def decode_base83(text: str, offset: int = 0) -> int:
    """Decode a base-83 string.

    `offset` is only used to report the position of a bad character
    relative to the enclosing hash.
    """
    value = 0
    for i, char in enumerate(text):
        digit = DIGIT_INDEX.get(char)
        if digit is None:
            raise InvalidCharacterError(char, offset + i)
        value = value * BASE + digit
    return value
