"""Errors raised by the blurhash codec."""


class BlurhashError(Exception):
    """Base class for errors raised by the codec."""


class DimensionMismatchError(BlurhashError, ValueError):
    """Pixel buffer length does not match width * height * 3."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Pixel array size doesn't match dimensions: expected {expected} values, got {actual}"
        )


class TooShortError(BlurhashError, ValueError):
    """Hash is shorter than the fixed header."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Blurhash must be at least {expected} characters, got {actual}"
        )


class LengthMismatchError(BlurhashError, ValueError):
    """Hash length disagrees with the component counts in its size flag."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid blurhash length: expected {expected} characters, got {actual}"
        )


class InvalidCharacterError(BlurhashError, ValueError):
    """Character outside the base-83 alphabet."""

    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(
            f"Invalid base83 character {character!r} at position {position}"
        )


class TransformTimeoutError(BlurhashError, TimeoutError):
    """Forward transform workers did not finish in time."""

    def __init__(self, timeout: float, pending: int):
        self.timeout = timeout
        self.pending = pending
        super().__init__(
            f"DCT factor computation timed out after {timeout:.1f}s "
            f"({pending} cells unfinished)"
        )
