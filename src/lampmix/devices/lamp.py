"""Multi-primary LED lamp controller.

LedLamp ties the pieces together for one physical fixture::

    Color ──► MixingAllocator ──► Allocation ──► FrameEncoder ──► Frame
                                                                   │
                                   transport.send_command(id, bytes)

The whole path runs under a per-lamp lock, so frames reach the transport in
the order requests were accepted and two requests never interleave.
"""

import logging
import threading
from typing import Optional

from lampmix.exceptions import TransportError
from lampmix.mixing import Allocation, MixingAllocator
from lampmix.models import Color, FixtureConfig, Palette, WiringTable
from lampmix.protocols import CommandTransport

from .frame import MAX_DUTY_CODE, Frame, FrameEncoder

logger = logging.getLogger(__name__)


class LedLamp:
    """A lamp made of several high-power emitters of different colors."""

    def __init__(
        self,
        device_id: int,
        palette: Palette,
        wiring: WiringTable,
        transport: CommandTransport,
        command_id: int = 1,
        max_code: int = MAX_DUTY_CODE,
        allocator: Optional[MixingAllocator] = None,
    ):
        """
        Initialize lamp controller.

        Args:
            device_id: Fixture address, used in logs and errors
            palette: Primaries in priority order
            wiring: Primary name for each wired channel
            transport: Delivers PWM frames to the fixture
            command_id: Firmware command that sets all channels' PWM
            max_code: Duty code at full output
            allocator: Custom allocator (defaults to one built on `palette`)
        """
        self.device_id = device_id
        self.command_id = command_id
        self._transport = transport
        self._allocator = allocator or MixingAllocator(palette)
        self._encoder = FrameEncoder(palette, wiring, max_code)
        self._lock = threading.Lock()
        self._last_frame: Optional[Frame] = None
        self._last_allocation: Optional[Allocation] = None

    @classmethod
    def from_config(
        cls, config: FixtureConfig, transport: CommandTransport, device_id: int = 0
    ) -> "LedLamp":
        """Create a lamp from a fixture configuration."""
        return cls(
            device_id=device_id,
            palette=config.build_palette(),
            wiring=config.build_wiring(),
            transport=transport,
            command_id=config.command_id,
            max_code=config.max_code,
        )

    @property
    def palette(self) -> Palette:
        return self._allocator.palette

    @property
    def wiring(self) -> WiringTable:
        return self._encoder.wiring

    @property
    def allocator(self) -> MixingAllocator:
        return self._allocator

    @property
    def last_frame(self) -> Optional[Frame]:
        """Last frame the transport accepted."""
        return self._last_frame

    @property
    def last_allocation(self) -> Optional[Allocation]:
        """Allocation behind the last color frame the transport accepted."""
        return self._last_allocation

    def set_color(self, color: Color) -> Frame:
        """
        Set the color the lamp should produce.

        Returns:
            The frame that was transmitted

        Raises:
            MixingError: If the color can't be reproduced exactly (nothing is sent)
            TransportError: If the transport reports failure
        """
        with self._lock:
            allocation = self._allocator.allocate(color)
            frame = self._encoder.encode(allocation)
            self._transmit(frame)
            self._last_allocation = allocation
            return frame

    def set_pwm_state(self, **codes: int) -> Frame:
        """
        Set raw PWM duty codes, by primary name.

        Example:
            >>> lamp.set_pwm_state(red=255, white=40)

        Raises:
            KeyError: If a name is not a wired channel
            ValueError: If a code is outside 0-max_code
            TransportError: If the transport reports failure
        """
        with self._lock:
            frame = self._encoder.encode_codes(codes)
            self._transmit(frame)
            self._last_allocation = None
            return frame

    def turn_off(self) -> Frame:
        """Set every channel to 0."""
        return self.set_pwm_state()

    def _transmit(self, frame: Frame) -> None:
        """Send a frame. Must be called with the lock held."""
        logger.info(f"Setting pwm state on device {self.device_id}: {frame}")

        if not self._transport.send_command(self.command_id, frame.to_bytes()):
            raise TransportError(self.device_id, self.command_id, "transport reported failure")

        self._last_frame = frame
