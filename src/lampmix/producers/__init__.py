"""Color producers: anything that yields target colors for a lamp."""

from .sequence import ColorSequence, ColorStep, SequencePlayer
from .xyz import xyz_to_color

__all__ = [
    "ColorSequence",
    "ColorStep",
    "SequencePlayer",
    "xyz_to_color",
]
