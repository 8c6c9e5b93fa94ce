"""Fixture controllers and frame encoding."""

from .frame import MAX_DUTY_CODE, Frame, FrameEncoder
from .lamp import LedLamp

__all__ = [
    "Frame",
    "FrameEncoder",
    "LedLamp",
    "MAX_DUTY_CODE",
]
