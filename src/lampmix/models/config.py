"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from lampmix.utils.persistence import PydanticPersistence

from .fixture import FixtureConfig

DEFAULT_CONFIG_PATH = Path.home() / ".lampmix" / "config.json"


class AppConfig(BaseModel):
    """Application configuration and settings."""

    fixture: FixtureConfig = Field(
        default_factory=FixtureConfig,
        description="Fixture primaries, wiring and frame settings",
    )

    # Addressing
    device_id: int = Field(
        default=0,
        ge=0,
        le=0x3FFF,
        description="Fixture device id (14-bit, sent in every command)",
    )

    # MIDI transport
    midi_port: str | None = Field(
        default=None,
        description="MIDI output port name (None = first available port)",
    )
    sysex_header: list[int] = Field(
        default_factory=lambda: [0x7D],
        description="SysEx header bytes after 0xF0 (0x7D = non-commercial id)",
    )

    @field_validator("sysex_header")
    @classmethod
    def validate_header(cls, v: list[int]) -> list[int]:
        """SysEx data bytes must be 7-bit."""
        if not v:
            raise ValueError("SysEx header must not be empty")
        for byte in v:
            if not 0 <= byte <= 0x7F:
                raise ValueError(f"SysEx header byte {byte} is not in 0-127")
        return v

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses ~/.lampmix/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file (with .bak backup of the previous file)."""
        if path is None:
            path = DEFAULT_CONFIG_PATH

        PydanticPersistence.save_json(self, path)
