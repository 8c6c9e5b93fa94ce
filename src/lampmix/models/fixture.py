"""Fixture description: primaries, priority order and channel wiring.

The defaults describe the reference RGBAW lamp:

- White: LedEngin LZ9-K0WW00-0030, driven at 700 mA
- Red, green, blue, amber: LedEngin LZ4-20MA00-0000 emitters, 700 mA each
  (four red, four green, four blue and two amber dies)

Chromaticities of the colored emitters follow the Nichia LED color tables.
Capacities are in lumens at full duty.
"""

from pydantic import BaseModel, Field, model_validator

from .palette import Palette
from .primary import Primary
from .wiring import WiringTable

# Device type reported by the lamp's firmware
RGBAW_LAMP_DEVICE_TYPE = 91235

# Command that sets the PWM duty of all channels at once
SET_RGBAW_LEDS_PWM_COMMAND = 1


def reference_primaries() -> list[Primary]:
    """Primaries of the reference lamp, in decreasing priority."""
    return [
        Primary.from_xy("white", 0.434, 0.403, capacity=1350 / 2),
        Primary.from_xy("green", 0.18, 0.7, capacity=160 * 4),
        Primary.from_xy("red", 0.68, 0.3, capacity=100 * 4),
        Primary.from_xy("blue", 0.13, 0.06, capacity=30 * 4),
        Primary.from_xy("amber", 0.57, 0.43, capacity=90 * 2),
    ]


def reference_wiring() -> list[str]:
    """Channel order of the prototype board (blue and green are swapped)."""
    return ["red", "blue", "green", "amber", "white"]


class FixtureConfig(BaseModel):
    """Static description of a multi-primary fixture."""

    name: str = Field(default="RGBAW lamp", description="Human-readable fixture name")
    device_type: int = Field(default=RGBAW_LAMP_DEVICE_TYPE, description="Firmware device type")
    primaries: list[Primary] = Field(
        default_factory=reference_primaries,
        description="Primaries in decreasing priority order",
    )
    wiring: list[str] = Field(
        default_factory=reference_wiring,
        description="Primary name for each wired channel, in wire order",
    )
    command_id: int = Field(
        default=SET_RGBAW_LEDS_PWM_COMMAND,
        ge=0,
        le=127,
        description="Command id used to transmit a PWM frame",
    )
    max_code: int = Field(default=255, ge=1, le=255, description="Duty code at full output")

    @model_validator(mode="after")
    def check_wiring(self) -> "FixtureConfig":
        """Every primary must be wired exactly once, and only primaries are wired."""
        names = [p.name for p in self.primaries]
        missing = [n for n in names if n not in self.wiring]
        unknown = [n for n in self.wiring if n not in names]
        if missing:
            raise ValueError(f"primaries without a wired channel: {', '.join(missing)}")
        if unknown:
            raise ValueError(f"wired channels without a primary: {', '.join(unknown)}")
        return self

    def build_palette(self) -> Palette:
        """
        Build the priority-ordered palette.

        Raises:
            InvalidPaletteError: If primaries are missing, duplicated or coincident
        """
        return Palette(self.primaries)

    def build_wiring(self) -> WiringTable:
        """Build the wiring table."""
        return WiringTable(slots=tuple(self.wiring))
