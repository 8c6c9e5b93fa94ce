"""Additive color mixing: target color to per-primary luminance."""

from .allocation import Allocation
from .allocator import DEFAULT_TOLERANCE, REALIZABILITY_TOLERANCE, MixingAllocator

__all__ = [
    "Allocation",
    "MixingAllocator",
    "DEFAULT_TOLERANCE",
    "REALIZABILITY_TOLERANCE",
]
