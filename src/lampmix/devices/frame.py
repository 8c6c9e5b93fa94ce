"""Duty-code frames for a fixture's wired channels.

A frame holds one duty code per physical channel, in wiring order. The
encoder turns a sparse Allocation (only active primaries) into a full
frame, quantizing each contribution through its primary's response curve
and leaving silent channels at 0.

Example
-------

Reference lamp, wired red, blue, green, amber, white; red at half capacity::

    allocation = {red: 200.0}
          ↓
    red.quantize(200.0, 255) = 128
          ↓
    Frame(codes=(128, 0, 0, 0, 0))
          ↓
    payload b"\\x80\\x00\\x00\\x00\\x00"

Duty codes are 8-bit: 0 is off and max_code (at most 255) is full output.
"""

import logging
from dataclasses import dataclass

from lampmix.exceptions import ConfigurationError
from lampmix.mixing import Allocation
from lampmix.models import Palette, WiringTable

logger = logging.getLogger(__name__)

MAX_DUTY_CODE = 255


@dataclass(frozen=True, slots=True)
class Frame:
    """Duty codes for every wired channel, in wire order."""

    codes: tuple[int, ...]
    wiring: WiringTable

    def to_bytes(self) -> bytes:
        """Payload bytes, one per channel."""
        return bytes(self.codes)

    def by_name(self) -> dict[str, int]:
        """Mapping of primary name to duty code, in wire order."""
        return dict(zip(self.wiring.slots, self.codes))

    def __getitem__(self, name: str) -> int:
        return self.codes[self.wiring.slot_of(name)]

    def __len__(self) -> int:
        return len(self.codes)

    def __str__(self) -> str:
        return " ".join(f"{name}={code}" for name, code in self.by_name().items())


class FrameEncoder:
    """Encode allocations into frames for one fixture."""

    def __init__(self, palette: Palette, wiring: WiringTable, max_code: int = MAX_DUTY_CODE):
        """
        Initialize encoder.

        Args:
            palette: Primaries of the fixture
            wiring: Primary name for each wired channel
            max_code: Duty code at full output (1-255)

        Raises:
            ValueError: If max_code is outside 1-255
            ConfigurationError: If palette and wiring don't name the same primaries
        """
        if not 1 <= max_code <= MAX_DUTY_CODE:
            raise ValueError(f"max_code must be between 1 and {MAX_DUTY_CODE}, got {max_code}")

        unwired = [name for name in palette.names if name not in wiring]
        unknown = [name for name in wiring.slots if name not in palette]
        if unwired or unknown:
            raise ConfigurationError(
                user_message="Fixture wiring does not match its primaries",
                technical_message=f"unwired primaries={unwired}, unknown channels={unknown}",
                recovery_hint="List every primary exactly once in the fixture's wiring",
            )

        self.palette = palette
        self.wiring = wiring
        self.max_code = max_code

    def encode(self, allocation: Allocation) -> Frame:
        """
        Quantize an allocation into a frame.

        Raises:
            ConfigurationError: If the allocation names a primary that isn't wired
            CapacityExceededError: If a contribution exceeds its primary's capacity
        """
        codes = [0] * self.wiring.width
        for primary, luminance in allocation:
            if primary.name not in self.wiring:
                raise ConfigurationError(
                    user_message=f"Primary '{primary.name}' is not wired on this fixture",
                    technical_message=f"{primary.name} missing from wiring {self.wiring.slots}",
                )
            codes[self.wiring.slot_of(primary.name)] = primary.quantize(luminance, self.max_code)

        return Frame(codes=tuple(codes), wiring=self.wiring)

    def encode_codes(self, codes: dict[str, int]) -> Frame:
        """
        Build a frame from raw duty codes keyed by primary name.

        Unnamed channels are 0.

        Raises:
            KeyError: If a name is not wired
            ValueError: If a code is outside 0-max_code
        """
        frame = [0] * self.wiring.width
        for name, code in codes.items():
            if not 0 <= code <= self.max_code:
                raise ValueError(f"Duty code for {name} must be 0-{self.max_code}, got {code}")
            frame[self.wiring.slot_of(name)] = code

        return Frame(codes=tuple(frame), wiring=self.wiring)
