"""In-memory transport for dry runs and tests."""

import logging
import threading

logger = logging.getLogger(__name__)


class RecordingTransport:
    """
    Record commands instead of sending them anywhere.

    Attributes:
        sent: (command_id, payload) pairs in the order they were accepted
        accept: When False, every send reports failure
    """

    def __init__(self, accept: bool = True):
        self.sent: list[tuple[int, bytes]] = []
        self.accept = accept
        self._lock = threading.Lock()

    def send_command(self, command_id: int, payload: bytes) -> bool:
        if not self.accept:
            logger.warning(f"Rejected command {command_id} ({payload.hex(' ')})")
            return False

        with self._lock:
            self.sent.append((command_id, bytes(payload)))
        logger.debug(f"Recorded command {command_id}: {payload.hex(' ')}")
        return True

    @property
    def last_payload(self) -> bytes | None:
        """Payload of the most recent command, None if nothing was sent."""
        with self._lock:
            return self.sent[-1][1] if self.sent else None

    def clear(self) -> None:
        with self._lock:
            self.sent.clear()
