"""Root of the lampmix exception tree."""

from typing import Optional


class LampMixError(Exception):
    """
    Base exception for all lampmix errors.

    Attributes:
        user_message: One-line description shown by the CLI
        technical_message: Detailed description for logs
        recoverable: True when the failure concerns a single request (one
            color, one command) and the caller may carry on with the next.
            Batch helpers collect recoverable errors and let the others
            propagate.
        recovery_hint: What the user can change to avoid the error
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        *,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message
