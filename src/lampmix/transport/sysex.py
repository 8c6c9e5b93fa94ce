"""
SysEx framing for fixture commands.

Commands travel as MIDI System Exclusive messages::

    [0xF0] [header...] [device hi] [device lo] [command] [packed payload...] [0xF7]
     Start   0x7D by     14-bit fixture id      7-bit                         End
             default

mido adds the 0xF0 / 0xF7 framing; this module builds the data bytes.

7-bit Packing
-------------

SysEx data bytes must be 0-127, but PWM duty codes use all 8 bits. The
payload is split into groups of up to seven bytes; each group is preceded
by one byte holding the groups' high bits (bit i = MSB of byte i)::

    payload:  0x80 0x00 0x00 0x00 0xFF
    packed:   0x11 0x00 0x00 0x00 0x00 0x7F
              │    └─────────── low 7 bits ─────────┘
              └─ MSBs: byte 0 and byte 4 → 0b0010001

A 5-channel RGBAW frame becomes 6 data bytes.
"""

import mido

# Non-commercial / educational manufacturer id
DEFAULT_HEADER = (0x7D,)

MAX_DEVICE_ID = 0x3FFF
MAX_COMMAND_ID = 0x7F


def pack_7bit(payload: bytes) -> list[int]:
    """Pack 8-bit bytes into 7-bit SysEx data bytes."""
    packed: list[int] = []
    for start in range(0, len(payload), 7):
        group = payload[start:start + 7]
        msbs = 0
        for i, byte in enumerate(group):
            msbs |= ((byte >> 7) & 1) << i
        packed.append(msbs)
        packed.extend(byte & 0x7F for byte in group)
    return packed


def unpack_7bit(data: list[int]) -> bytes:
    """
    Reverse pack_7bit.

    Raises:
        ValueError: If a data byte is not 7-bit
    """
    out = bytearray()
    for start in range(0, len(data), 8):
        group = data[start:start + 8]
        if any(not 0 <= byte <= 0x7F for byte in group):
            raise ValueError("SysEx data bytes must be 0-127")
        msbs, body = group[0], group[1:]
        for i, byte in enumerate(body):
            out.append(byte | (((msbs >> i) & 1) << 7))
    return bytes(out)


class CommandSysEx:
    """Builds and parses fixture command SysEx messages."""

    def __init__(self, header: tuple[int, ...] | list[int] = DEFAULT_HEADER):
        """
        Initialize with SysEx header.

        Args:
            header: Bytes following 0xF0 (manufacturer id and any sub-ids)
        """
        if any(not 0 <= byte <= 0x7F for byte in header):
            raise ValueError("SysEx header bytes must be 0-127")
        self.header = list(header)

    def command(self, device_id: int, command_id: int, payload: bytes) -> mido.Message:
        """
        Build a command message.

        Args:
            device_id: Fixture id (0-16383)
            command_id: Firmware command (0-127)
            payload: Raw payload bytes
        """
        if not 0 <= device_id <= MAX_DEVICE_ID:
            raise ValueError(f"device_id must be 0-{MAX_DEVICE_ID}, got {device_id}")
        if not 0 <= command_id <= MAX_COMMAND_ID:
            raise ValueError(f"command_id must be 0-{MAX_COMMAND_ID}, got {command_id}")

        data = [
            *self.header,
            (device_id >> 7) & 0x7F,
            device_id & 0x7F,
            command_id,
            *pack_7bit(payload),
        ]
        return mido.Message("sysex", data=data)

    def parse(self, message: mido.Message) -> tuple[int, int, bytes] | None:
        """
        Parse a command message.

        Returns:
            (device_id, command_id, payload), or None if the message is not a
            command with this header
        """
        if message.type != "sysex":
            return None

        data = list(message.data)
        size = len(self.header)
        if data[:size] != self.header or len(data) < size + 3:
            return None

        device_id = (data[size] << 7) | data[size + 1]
        command_id = data[size + 2]
        return device_id, command_id, unpack_7bit(data[size + 3:])
