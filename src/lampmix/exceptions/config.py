"""Errors raised while loading lampmix JSON files (app config, sequences)."""

from typing import Any, Optional

from .base import LampMixError

# Extra guidance appended when the failing field path starts with one of these
_FIELD_HINTS = {
    "fixture": "Run 'lampmix config init --force' to write a fresh default fixture",
    "primaries": "Each primary needs a name, x > 0, y > 0 with x + y <= 1 and a capacity > 0",
    "wiring": "Wiring lists every primary name exactly once, in wire slot order",
    "max_code": "Duty codes are one byte per channel, so max_code is at most 255",
    "midi_port": "Run 'lampmix midi list' to see the available ports",
    "steps": "Each step needs x, y, luminance and an optional hold in seconds",
}


class ConfigurationError(LampMixError):
    """A JSON file could not be read into a lampmix model."""
    pass


class ConfigFileInvalidError(ConfigurationError):
    """The file is not valid JSON."""

    def __init__(self, file_path: str, parse_error: str):
        super().__init__(
            user_message=f"{file_path} is not valid JSON",
            technical_message=f"JSON parse error in {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=(
                f"Fix the syntax near: {parse_error}\n"
                "JSON forbids trailing commas and single-quoted strings"
            ),
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """A value in the file is out of range or inconsistent."""

    def __init__(
        self,
        field: str,
        value: Any,
        error_msg: str,
        file_path: Optional[str] = None,
    ):
        """
        Args:
            field: Dotted path of the failing field ("fixture.primaries.0.y")
            value: The rejected value, if known
            error_msg: Why it was rejected
            file_path: File the value came from
        """
        hints = [f"Correct '{field}' in {file_path}" if file_path else f"Correct '{field}'"]
        hints.extend(
            hint for key, hint in _FIELD_HINTS.items() if key in field.split(".")
        )

        super().__init__(
            user_message=f"Invalid configuration value for '{field}': {error_msg}",
            technical_message=f"Validation failed for {field}={value!r}: {error_msg}",
            recoverable=True,
            recovery_hint="\n".join(hints),
        )
        self.field = field
        self.value = value
        self.file_path = file_path
