"""Tests for LedLamp."""

import threading
from unittest.mock import Mock

import pytest

from lampmix.devices import LedLamp
from lampmix.exceptions import CapacityExceededError, OutOfGamutError, TransportError
from lampmix.models import Color, FixtureConfig
from lampmix.transport import RecordingTransport


@pytest.mark.unit
class TestLedLamp:
    """Test the color-to-command path of a lamp."""

    def test_set_color_sends_frame(self, lamp, transport):
        frame = lamp.set_color(Color.from_xyY(0.68, 0.3, 200.0))

        assert frame.codes == (128, 0, 0, 0, 0)
        assert transport.sent == [(1, b"\x80\x00\x00\x00\x00")]
        assert lamp.last_frame == frame
        assert lamp.last_allocation.as_dict() == {"red": pytest.approx(200.0)}

    def test_out_of_gamut_sends_nothing(self, lamp, transport):
        with pytest.raises(OutOfGamutError):
            lamp.set_color(Color.from_xyY(0.3, 0.05, 10.0))

        assert transport.sent == []
        assert lamp.last_frame is None

    def test_capacity_exceeded_sends_nothing(self, lamp, transport):
        with pytest.raises(CapacityExceededError):
            lamp.set_color(Color.from_xyY(0.68, 0.3, 401.0))
        assert transport.sent == []

    def test_transport_failure(self, palette, wiring):
        """Test that a refused command raises TransportError and keeps the old frame."""
        transport = RecordingTransport(accept=False)
        lamp = LedLamp(device_id=3, palette=palette, wiring=wiring, transport=transport)

        with pytest.raises(TransportError) as exc_info:
            lamp.set_color(Color.from_xyY(0.434, 0.403, 100.0))

        assert exc_info.value.device_id == 3
        assert exc_info.value.command_id == 1
        assert lamp.last_frame is None

    def test_transport_exception_propagates(self, palette, wiring):
        transport = Mock()
        transport.send_command = Mock(side_effect=OSError("port vanished"))
        lamp = LedLamp(device_id=3, palette=palette, wiring=wiring, transport=transport)

        with pytest.raises(OSError, match="port vanished"):
            lamp.set_color(Color.from_xyY(0.434, 0.403, 100.0))

    def test_no_retries(self, palette, wiring):
        transport = Mock()
        transport.send_command = Mock(return_value=False)
        lamp = LedLamp(device_id=3, palette=palette, wiring=wiring, transport=transport)

        with pytest.raises(TransportError):
            lamp.set_pwm_state(red=1)
        assert transport.send_command.call_count == 1

    def test_custom_command_id(self, palette, wiring, transport):
        lamp = LedLamp(device_id=1, palette=palette, wiring=wiring, transport=transport, command_id=9)
        lamp.turn_off()
        assert transport.sent[0][0] == 9

    def test_set_pwm_state(self, lamp, transport):
        """Test raw duty codes by name, other channels off."""
        frame = lamp.set_pwm_state(red=255, white=40)

        assert frame.codes == (255, 0, 0, 0, 40)
        assert transport.last_payload == bytes([255, 0, 0, 0, 40])
        assert lamp.last_allocation is None

    def test_set_pwm_state_rejects_bad_codes(self, lamp, transport):
        with pytest.raises(ValueError):
            lamp.set_pwm_state(red=300)
        with pytest.raises(KeyError):
            lamp.set_pwm_state(violet=1)
        assert transport.sent == []

    def test_turn_off(self, lamp, transport):
        lamp.set_color(Color.from_xyY(0.68, 0.3, 200.0))
        frame = lamp.turn_off()

        assert frame.codes == (0, 0, 0, 0, 0)
        assert transport.last_payload == b"\x00" * 5

    def test_zero_luminance_turns_off(self, lamp, transport):
        lamp.set_color(Color.from_xyY(0.434, 0.403, 0.0))
        assert transport.last_payload == b"\x00" * 5

    def test_from_config(self, transport):
        config = FixtureConfig(command_id=2, max_code=100)
        lamp = LedLamp.from_config(config, transport, device_id=12)

        lamp.set_color(Color.from_xyY(0.68, 0.3, 200.0))

        assert lamp.device_id == 12
        assert lamp.palette.names == ("white", "green", "red", "blue", "amber")
        assert lamp.wiring.slots == ("red", "blue", "green", "amber", "white")
        assert transport.sent == [(2, bytes([50, 0, 0, 0, 0]))]

    def test_transport_called_with_lock_held(self, palette, wiring):
        """Test that the frame is transmitted inside the lamp's critical section."""
        held = []
        transport = Mock()

        def send_command(command_id, payload):
            held.append(lamp._lock.locked())
            return True

        transport.send_command = Mock(side_effect=send_command)
        lamp = LedLamp(device_id=1, palette=palette, wiring=wiring, transport=transport)

        lamp.set_color(Color.from_xyY(0.434, 0.403, 10.0))
        lamp.turn_off()

        assert held == [True, True]


@pytest.mark.integration
def test_concurrent_set_color_is_serialized(lamp, transport):
    """Test that concurrent requests each produce exactly one whole frame."""
    luminances = [float(value) for value in range(1, 41)]

    def worker(values):
        for value in values:
            lamp.set_color(Color.from_xyY(0.68, 0.3, value))

    threads = [threading.Thread(target=worker, args=(luminances[i::4],)) for i in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(transport.sent) == len(luminances)
    red_codes = sorted(payload[0] for _, payload in transport.sent)
    expected = sorted(lamp.palette["red"].quantize(value, 255) for value in luminances)
    assert red_codes == expected
    assert all(payload[1:] == b"\x00" * 4 for _, payload in transport.sent)
    assert lamp.last_frame.to_bytes() == transport.sent[-1][1]
