"""Smoke tests for CLI commands.

Tests that CLI commands parse correctly and produce the expected output.
Uses Click's CliRunner; every command runs as a dry run against a config
file in a temporary directory, so nothing touches MIDI hardware.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from lampmix.cli.main import cli
from lampmix.models import AppConfig


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Path for a config file that does not exist yet."""
    return tmp_path / "config.json"


def invoke(runner, config_path, *args):
    return runner.invoke(cli, ["--config", str(config_path), *args])


@pytest.mark.integration
class TestCLIHelp:
    """Test that all commands have working help text."""

    def test_main_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Multi-primary LED lamp color mixer" in result.output

    def test_version_flag(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    @pytest.mark.parametrize("command", ["mix", "raw", "palette", "play", "config", "midi"])
    def test_command_help(self, runner, command):
        result = runner.invoke(cli, [command, "--help"])
        assert result.exit_code == 0


@pytest.mark.integration
class TestMixCommand:
    """Test the mix command."""

    def test_dry_run(self, runner, config_path):
        result = invoke(runner, config_path, "mix", "0.68", "0.3", "200")

        assert result.exit_code == 0, result.output
        assert "red=128 blue=0 green=0 amber=0 white=0" in result.output
        assert "Payload: 80 00 00 00 00" in result.output
        assert "dry run" in result.output

    def test_out_of_gamut(self, runner, config_path):
        result = invoke(runner, config_path, "mix", "0.3", "0.05", "100")

        assert result.exit_code == 1
        assert "outside the gamut" in result.output

    def test_capacity_exceeded(self, runner, config_path):
        result = invoke(runner, config_path, "mix", "0.68", "0.3", "500")

        assert result.exit_code == 1
        assert "exceeds the capacity of red" in result.output

    def test_invalid_chromaticity(self, runner, config_path):
        result = invoke(runner, config_path, "mix", "0.8", "0.5", "10")
        assert result.exit_code == 2

    def test_send_without_ports(self, runner, config_path):
        with patch("lampmix.transport.midi.mido") as mock_mido:
            mock_mido.get_output_names.return_value = []
            result = invoke(runner, config_path, "mix", "0.68", "0.3", "200", "--send")

        assert result.exit_code == 1
        assert "Cannot open MIDI output" in result.output

    def test_send(self, runner, config_path):
        with patch("lampmix.transport.midi.mido") as mock_mido:
            mock_mido.get_output_names.return_value = ["Lamp MIDI 1"]
            result = invoke(runner, config_path, "mix", "0.68", "0.3", "200", "--send")

        assert result.exit_code == 0, result.output
        port = mock_mido.open_output.return_value
        assert list(port.send.call_args[0][0].data) == [0x7D, 0x00, 0x00, 0x01, 0x01, 0, 0, 0, 0, 0]
        port.close.assert_called_once()


@pytest.mark.integration
class TestRawCommand:
    """Test the raw command."""

    def test_codes(self, runner, config_path):
        result = invoke(runner, config_path, "raw", "-c", "red=255", "-c", "white=40")

        assert result.exit_code == 0, result.output
        assert "Payload: ff 00 00 00 28" in result.output

    def test_all_off(self, runner, config_path):
        result = invoke(runner, config_path, "raw")
        assert "Payload: 00 00 00 00 00" in result.output

    @pytest.mark.parametrize("code", ["violet=1", "red", "red=abc", "red=999"])
    def test_bad_codes(self, runner, config_path, code):
        result = invoke(runner, config_path, "raw", "-c", code)
        assert result.exit_code == 2


@pytest.mark.integration
class TestPaletteCommands:
    """Test palette inspection."""

    def test_show(self, runner, config_path):
        result = invoke(runner, config_path, "palette", "show")

        assert result.exit_code == 0, result.output
        assert "[0] white" in result.output
        assert "[4] amber" in result.output
        assert "slot 1: blue" in result.output
        assert "device type 91235" in result.output

    def test_max(self, runner, config_path):
        result = invoke(runner, config_path, "palette", "max", "0.18", "0.7")

        assert result.exit_code == 0, result.output
        assert result.output.strip() == "640.000"

    def test_max_out_of_gamut(self, runner, config_path):
        result = invoke(runner, config_path, "palette", "max", "0.3", "0.05")
        assert result.exit_code == 1


@pytest.mark.integration
class TestPlayCommand:
    """Test sequence playback."""

    @pytest.fixture
    def sequence_file(self, tmp_path: Path) -> Path:
        path = tmp_path / "seq.json"
        path.write_text(json.dumps({
            "name": "demo",
            "steps": [
                {"x": 0.434, "y": 0.403, "luminance": 100, "hold": 5},
                {"x": 0.3, "y": 0.05, "luminance": 10, "hold": 5},
                {"x": 0.68, "y": 0.3, "luminance": 200, "hold": 5},
            ],
        }))
        return path

    def test_stop_on_error(self, runner, config_path, sequence_file):
        result = invoke(runner, config_path, "play", str(sequence_file), "--no-wait")

        assert result.exit_code == 1
        assert "outside the gamut" in result.output

    def test_keep_going(self, runner, config_path, sequence_file):
        result = invoke(
            runner, config_path, "play", str(sequence_file), "--no-wait", "--keep-going", "-n", "2"
        )

        assert result.exit_code == 0, result.output
        assert "Sent 4 color(s) from 'demo'" in result.output
        assert "Failed 2 of 6 operations" in result.output


@pytest.mark.integration
class TestConfigCommands:
    """Test config show/init."""

    def test_init_and_show(self, runner, config_path):
        result = invoke(runner, config_path, "config", "init")
        assert result.exit_code == 0, result.output
        assert config_path.exists()

        result = invoke(runner, config_path, "config", "show")
        assert result.exit_code == 0
        assert AppConfig.model_validate_json(result.output) == AppConfig()

    def test_init_refuses_overwrite(self, runner, config_path):
        invoke(runner, config_path, "config", "init")
        result = invoke(runner, config_path, "config", "init")

        assert result.exit_code == 1
        assert "already exists" in result.output

        result = invoke(runner, config_path, "config", "init", "--force")
        assert result.exit_code == 0
        assert config_path.with_suffix(".json.bak").exists()

    def test_invalid_config_file(self, runner, config_path):
        config_path.write_text('{"device_id": -1}')
        result = invoke(runner, config_path, "palette", "show")

        assert result.exit_code == 1
        assert "Invalid configuration value for 'device_id'" in result.output

    def test_custom_wiring_changes_frame(self, runner, config_path):
        config = AppConfig()
        config.fixture.wiring = ["white", "amber", "green", "blue", "red"]
        config.save(config_path)

        result = invoke(runner, config_path, "mix", "0.68", "0.3", "200")
        assert "Payload: 00 00 00 00 80" in result.output


@pytest.mark.integration
class TestMidiCommands:
    """Test the midi group."""

    def test_list(self, runner):
        with patch("lampmix.transport.midi.mido") as mock_mido:
            mock_mido.get_output_names.return_value = ["Lamp MIDI 1"]
            result = runner.invoke(cli, ["midi", "list"])

        assert result.exit_code == 0
        assert "[0] Lamp MIDI 1" in result.output

    def test_list_empty(self, runner):
        with patch("lampmix.transport.midi.mido") as mock_mido:
            mock_mido.get_output_names.return_value = []
            result = runner.invoke(cli, ["midi", "list"])

        assert "No MIDI output ports found" in result.output
