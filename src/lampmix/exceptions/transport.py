"""Transport-related exceptions."""

from .base import LampMixError


class TransportError(LampMixError):
    """The transport refused or failed to deliver a command."""

    def __init__(self, device_id: int, command_id: int, detail: str | None = None):
        """
        Initialize transport error.

        Args:
            device_id: Fixture the command was addressed to
            command_id: Command that could not be delivered
            detail: Optional low-level reason
        """
        tech_msg = f"send_command({command_id}) to device {device_id} failed"
        if detail:
            tech_msg += f": {detail}"

        super().__init__(
            user_message=f"Could not send command {command_id} to device {device_id}",
            technical_message=tech_msg,
            recoverable=True,
            recovery_hint="Check that the fixture is connected. Run 'lampmix midi list' to see ports.",
        )
        self.device_id = device_id
        self.command_id = command_id
        self.detail = detail
