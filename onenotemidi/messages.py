"""
MIDI short message encoding.

A short message is 4 bytes on the wire:

    [0] Status byte : 0b SSSS CCCC  (signature, channel)
    [1] Data byte 1 : pitch or instrument
    [2] Data byte 2 : velocity (0 for select instrument)
    [3] Unused      : always 0

There is no separate note off message here. A note is silenced by sending
note on again with velocity 0.
"""
import struct
from typing import NamedTuple

NOTE_ON_SIGNATURE = 0b1001
SELECT_INSTRUMENT_SIGNATURE = 0b1100

# Data bytes carried after the status byte, by signature
_DATA_LENGTHS = {
    0b1000: 2,
    0b1001: 2,
    0b1010: 2,
    0b1011: 2,
    0b1100: 1,
    0b1101: 1,
    0b1110: 2,
}

_NOTE_NAMES = ['C', 'C#', 'D', 'D#', 'E', 'F', 'F#', 'G', 'G#', 'A', 'A#', 'B']


class ShortMessage(NamedTuple):
    """A 4 byte MIDI short message."""

    status: int
    data1: int
    data2: int = 0
    unused: int = 0

    @property
    def signature(self) -> int:
        return self.status >> 4

    @property
    def channel(self) -> int:
        return self.status & 0x0F

    def to_bytes(self) -> bytes:
        return bytes(self)

    def to_dword(self) -> int:
        """Pack the message into a 32 bit value, status in the lowest byte."""
        return struct.unpack('<I', self.to_bytes())[0]

    def significant_bytes(self) -> bytes:
        """Status byte followed by the data bytes its signature defines."""
        length = 1 + _DATA_LENGTHS.get(self.signature, 2)
        return self.to_bytes()[:length]


def _status_byte(signature: int, channel: int) -> int:
    return ((signature << 4) | channel) & 0xFF


def encode_select_instrument(channel: int, instrument: int) -> ShortMessage:
    """
    Build a select instrument (program change) message.

    Inputs are not range checked. Values wider than a byte are truncated
    to their low 8 bits.

    Args:
        channel: Channel, 4 bits, 0 to 15
        instrument: General MIDI instrument, 7 bits, 0 to 127

    Returns:
        ShortMessage [0b1100CCCC, instrument, 0, 0]
    """
    return ShortMessage(
        status=_status_byte(SELECT_INSTRUMENT_SIGNATURE, channel),
        data1=instrument & 0xFF,
    )


def encode_note(channel: int, pitch: int, velocity: int) -> ShortMessage:
    """
    Build a note on message. Velocity 0 turns the note off.

    Inputs are not range checked. Values wider than a byte are truncated
    to their low 8 bits.

    Args:
        channel: Channel, 4 bits, 0 to 15
        pitch: Note number, 7 bits, 0 to 127
        velocity: Volume, 7 bits, 0 to 127

    Returns:
        ShortMessage [0b1001CCCC, pitch, velocity, 0]
    """
    return ShortMessage(
        status=_status_byte(NOTE_ON_SIGNATURE, channel),
        data1=pitch & 0xFF,
        data2=velocity & 0xFF,
    )


def note_name(note_number: int) -> str:
    """Convert MIDI note number to note name (60 -> C4)."""
    octave = (note_number // 12) - 1
    note = _NOTE_NAMES[note_number % 12]
    return f"{note}{octave}"
