"""Data models for hash parameters and results."""

from .hash_params import HashParams
from .hash_result import HashResult
from .intermediate_data import IntermediateData

__all__ = ['HashParams', 'HashResult', 'IntermediateData']
