"""lampmix: additive color mixing for multi-primary LED fixtures."""

__version__ = "0.1.0"

from .devices import Frame, FrameEncoder, LedLamp
from .mixing import Allocation, MixingAllocator
from .models import Chromaticity, Color, Palette, Primary, WiringTable

__all__ = [
    "Allocation",
    "Chromaticity",
    "Color",
    "Frame",
    "FrameEncoder",
    "LedLamp",
    "MixingAllocator",
    "Palette",
    "Primary",
    "WiringTable",
]
