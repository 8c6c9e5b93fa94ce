"""Data models for lampmix."""

from .color import Chromaticity, Color
from .config import AppConfig
from .fixture import (
    RGBAW_LAMP_DEVICE_TYPE,
    SET_RGBAW_LEDS_PWM_COMMAND,
    FixtureConfig,
    reference_primaries,
    reference_wiring,
)
from .palette import Palette
from .primary import Primary
from .wiring import WiringTable

__all__ = [
    # Color
    "Chromaticity",
    "Color",
    # Hardware description
    "Primary",
    "Palette",
    "WiringTable",
    "FixtureConfig",
    "reference_primaries",
    "reference_wiring",
    "RGBAW_LAMP_DEVICE_TYPE",
    "SET_RGBAW_LEDS_PWM_COMMAND",
    # Configuration
    "AppConfig",
]
