"""Blurhash encode/decode parameters."""

from dataclasses import dataclass
from typing import Optional, Tuple

from utils.constants import (
    DEFAULT_PUNCH,
    DEFAULT_TRANSFORM_TIMEOUT_S,
    DEFAULT_X_COMPONENTS,
    DEFAULT_Y_COMPONENTS,
    HEADER_LENGTH,
    MAX_COMPONENTS,
    MIN_COMPONENTS,
)


@dataclass
class HashParams:
    """Component counts and tuning knobs for one encode/decode call."""
    
    x_components: int = DEFAULT_X_COMPONENTS
    y_components: int = DEFAULT_Y_COMPONENTS
    punch: float = DEFAULT_PUNCH
    timeout_s: float = DEFAULT_TRANSFORM_TIMEOUT_S
    max_workers: Optional[int] = None
    
    def __post_init__(self):
        for name in ('x_components', 'y_components'):
            value = getattr(self, name)
            if not (MIN_COMPONENTS <= value <= MAX_COMPONENTS):
                raise ValueError(
                    f"{name} must be {MIN_COMPONENTS}-{MAX_COMPONENTS}, got {value}"
                )
        if self.punch <= 0:
            raise ValueError(f"Punch must be positive, got {self.punch}")
        if self.timeout_s <= 0:
            raise ValueError(f"Timeout must be positive, got {self.timeout_s}")
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
    
    @staticmethod
    def components_from_size_flag(size_flag: int) -> Tuple[int, int]:
        """(x_components, y_components), unvalidated."""
        return size_flag % MAX_COMPONENTS + 1, size_flag // MAX_COMPONENTS + 1
    
    @classmethod
    def from_size_flag(cls, size_flag: int, **kwargs) -> "HashParams":
        x_components, y_components = cls.components_from_size_flag(size_flag)
        return cls(x_components=x_components, y_components=y_components, **kwargs)
    
    @property
    def size_flag(self) -> int:
        return (self.x_components - 1) + (self.y_components - 1) * MAX_COMPONENTS
    
    @property
    def num_components(self) -> int:
        return self.x_components * self.y_components
    
    @property
    def hash_length(self) -> int:
        """Header plus two characters per AC term."""
        return HEADER_LENGTH + 2 * (self.num_components - 1)
