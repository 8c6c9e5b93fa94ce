"""Tests for AppConfig and JSON persistence."""

import json
from pathlib import Path

import pytest
from pydantic import BaseModel, ValidationError

from lampmix.exceptions import (
    ConfigFileInvalidError,
    ConfigValidationError,
    DegenerateChromaticityError,
)
from lampmix.models import AppConfig
from lampmix.utils import PydanticPersistence


class SampleModel(BaseModel):
    """Simple model for testing."""

    name: str = "test"
    value: int = 42


@pytest.mark.unit
class TestAppConfig:
    """Test application config defaults, validation and persistence."""

    def test_defaults(self):
        config = AppConfig()
        assert config.device_id == 0
        assert config.midi_port is None
        assert config.sysex_header == [0x7D]
        assert config.fixture.build_palette().names[0] == "white"

    def test_sysex_header_must_be_7bit(self):
        with pytest.raises(ValidationError):
            AppConfig(sysex_header=[0xF0])
        with pytest.raises(ValidationError):
            AppConfig(sysex_header=[])

    def test_device_id_range(self):
        with pytest.raises(ValidationError):
            AppConfig(device_id=0x4000)

    def test_missing_file_gives_default(self, tmp_path: Path):
        path = tmp_path / "config.json"
        config = AppConfig.load_or_default(path)

        assert config == AppConfig()
        assert not path.exists()

    def test_save_and_load(self, tmp_path: Path):
        path = tmp_path / "nested" / "config.json"
        AppConfig(device_id=42, midi_port="Lamp MIDI 1").save(path)

        loaded = AppConfig.load_or_default(path)
        assert loaded.device_id == 42
        assert loaded.midi_port == "Lamp MIDI 1"
        assert loaded.fixture == AppConfig().fixture

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text('{"device_id": 1,}')

        with pytest.raises(ConfigFileInvalidError):
            AppConfig.load_or_default(path)

    def test_invalid_value(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"fixture": {"max_code": 300}}))

        with pytest.raises(ConfigValidationError) as exc_info:
            AppConfig.load_or_default(path)
        assert exc_info.value.field == "fixture.max_code"

    def test_degenerate_primary_in_file(self, tmp_path: Path):
        """Test that a primary with y = 0 is reported as a mixing error."""
        data = json.loads(AppConfig().model_dump_json())
        data["fixture"]["primaries"][0]["chromaticity"]["y"] = 0.0
        path = tmp_path / "config.json"
        path.write_text(json.dumps(data))

        with pytest.raises(DegenerateChromaticityError):
            AppConfig.load_or_default(path)

    def test_custom_fixture_from_file(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "fixture": {
                "name": "two-channel strip",
                "primaries": [
                    {"name": "warm", "chromaticity": {"x": 0.45, "y": 0.41}, "capacity": 100},
                    {"name": "cool", "chromaticity": {"x": 0.31, "y": 0.32}, "capacity": 120},
                ],
                "wiring": ["cool", "warm"],
            }
        }))

        config = AppConfig.load_or_default(path)
        assert config.fixture.build_palette().names == ("warm", "cool")
        assert config.fixture.build_wiring().slot_of("warm") == 1


@pytest.mark.unit
class TestPersistenceSafety:
    """Test safety features of PydanticPersistence."""

    def test_save_creates_backup(self, tmp_path: Path):
        """Test that save_json creates a .bak file before overwriting."""
        config_path = tmp_path / "config.json"

        PydanticPersistence.save_json(SampleModel(name="original", value=1), config_path, backup=False)
        PydanticPersistence.save_json(SampleModel(name="modified", value=2), config_path, backup=True)

        backup_path = config_path.with_suffix(".json.bak")
        assert backup_path.exists()
        assert PydanticPersistence.load_json(backup_path, SampleModel).name == "original"
        assert PydanticPersistence.load_json(config_path, SampleModel).name == "modified"

    def test_save_without_backup(self, tmp_path: Path):
        config_path = tmp_path / "config.json"
        PydanticPersistence.save_json(SampleModel(), config_path, backup=False)
        PydanticPersistence.save_json(SampleModel(value=2), config_path, backup=False)

        assert not config_path.with_suffix(".json.bak").exists()

    def test_atomic_write_cleans_up_temp_file(self, tmp_path: Path):
        config_path = tmp_path / "config.json"
        PydanticPersistence.save_json(SampleModel(), config_path)

        assert config_path.exists()
        assert list(tmp_path.iterdir()) == [config_path]

    def test_load_missing(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            PydanticPersistence.load_json(tmp_path / "nope.json", SampleModel)

    def test_load_empty_file(self, tmp_path: Path):
        path = tmp_path / "empty.json"
        path.write_text("   ")

        with pytest.raises(ConfigFileInvalidError):
            PydanticPersistence.load_json(path, SampleModel)

    def test_load_or_default_factory(self, tmp_path: Path):
        result = PydanticPersistence.load_json_or_default(
            tmp_path / "nope.json", SampleModel, default_factory=lambda: SampleModel(value=7)
        )
        assert result.value == 7
