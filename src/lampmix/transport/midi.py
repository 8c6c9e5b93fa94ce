"""MIDI transport: delivers fixture commands as SysEx over a mido output port."""

import logging
import threading
from typing import Optional

import mido

from .sysex import DEFAULT_HEADER, CommandSysEx

logger = logging.getLogger(__name__)


class MidiCommandTransport:
    """
    Send commands for one fixture through a MIDI output port.

    Example:
        ```python
        with MidiCommandTransport(device_id=3, port_name="Lamp MIDI 1") as transport:
            lamp = LedLamp.from_config(config.fixture, transport, device_id=3)
            lamp.set_color(color)
        ```
    """

    def __init__(
        self,
        device_id: int,
        port_name: Optional[str] = None,
        header: tuple[int, ...] | list[int] = DEFAULT_HEADER,
    ):
        """
        Initialize MIDI transport.

        Args:
            device_id: Fixture id written into every command
            port_name: Output port to open (None = first available port)
            header: SysEx header bytes
        """
        self.device_id = device_id
        self.port_name = port_name
        self.sysex = CommandSysEx(header)
        self._port: Optional[mido.ports.BaseOutput] = None
        self._port_lock = threading.Lock()

    @staticmethod
    def list_ports() -> list[str]:
        """List available MIDI output ports."""
        return mido.get_output_names()

    def open(self) -> None:
        """
        Open the output port.

        Raises:
            OSError: If no port is available or it cannot be opened
        """
        with self._port_lock:
            if self._port:
                logger.warning("MidiCommandTransport already open")
                return

            name = self.port_name
            if name is None:
                available = mido.get_output_names()
                if not available:
                    raise OSError("No MIDI output ports available")
                name = available[0]

            self._port = mido.open_output(name)
            logger.info(f"Connected to MIDI output: {name}")

    def close(self) -> None:
        """Close the output port."""
        with self._port_lock:
            if self._port:
                try:
                    self._port.close()
                except Exception as e:
                    logger.error(f"Error closing MIDI output port: {e}")
                self._port = None
                logger.debug("MIDI output closed")

    def send_command(self, command_id: int, payload: bytes) -> bool:
        """
        Send a command as a SysEx message.

        Returns:
            True if sent, False if the port is closed or the send failed
        """
        message = self.sysex.command(self.device_id, command_id, payload)

        with self._port_lock:
            if not self._port:
                logger.warning(f"Dropping command {command_id}: MIDI output not open")
                return False
            try:
                self._port.send(message)
                return True
            except Exception as e:
                logger.error(f"Error sending MIDI message: {e}")
                return False

    @property
    def is_connected(self) -> bool:
        """Check if the output port is open."""
        with self._port_lock:
            return self._port is not None

    def __enter__(self):
        """Context manager entry."""
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
