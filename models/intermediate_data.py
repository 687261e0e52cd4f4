"""Intermediate data for inspecting a hash."""

from dataclasses import dataclass
from typing import Optional
import numpy as np


@dataclass
class IntermediateData:
    """Factor grids and quantized values behind one hash."""
    
    factors: Optional[np.ndarray] = None
    decoded_factors: Optional[np.ndarray] = None
    
    quantized_max_ac: int = 0
    max_ac_value: float = 1.0
    quantized_dc: int = 0
    quantized_ac: Optional[np.ndarray] = None
    
    error_map_rgb: Optional[np.ndarray] = None
