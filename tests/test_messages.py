import unittest

from onenotemidi.messages import (
    NOTE_ON_SIGNATURE,
    SELECT_INSTRUMENT_SIGNATURE,
    ShortMessage,
    encode_note,
    encode_select_instrument,
    note_name,
)


class EncodeNoteTest(unittest.TestCase):
    def test_middle_c_full_velocity(self):
        message = encode_note(0, 60, 127)
        self.assertEqual(message.to_bytes(), bytes([0x90, 60, 127, 0]))

    def test_status_nibbles_for_every_channel(self):
        for channel in range(16):
            message = encode_note(channel, 64, 100)
            self.assertEqual(message.status >> 4, NOTE_ON_SIGNATURE)
            self.assertEqual(message.status & 0x0F, channel)
            self.assertEqual(message.channel, channel)

    def test_velocity_is_copied_exactly(self):
        for velocity in (0, 1, 64, 127):
            self.assertEqual(encode_note(3, 60, velocity).data2, velocity)

    def test_zero_velocity_reuses_note_on_status(self):
        on = encode_note(2, 72, 90)
        off = encode_note(2, 72, 0)
        self.assertEqual(off.status, on.status)
        self.assertEqual(off.data1, on.data1)
        self.assertEqual(off.data2, 0)

    def test_unused_byte_is_zero(self):
        self.assertEqual(encode_note(15, 127, 127).unused, 0)
        self.assertEqual(encode_note(20, 300, 500).unused, 0)

    def test_encoding_is_pure(self):
        self.assertEqual(encode_note(9, 36, 110), encode_note(9, 36, 110))

    def test_out_of_range_channel_is_truncated(self):
        # 0x90 | 20 -> 0x94, channel 4
        message = encode_note(20, 60, 127)
        self.assertEqual(message.status, 0x94)
        self.assertEqual(message.channel, 4)

    def test_wide_values_keep_low_byte(self):
        message = encode_note(0, 0x1C8, 0x17F)
        self.assertEqual(message.data1, 0xC8)
        self.assertEqual(message.data2, 0x7F)


class EncodeSelectInstrumentTest(unittest.TestCase):
    def test_guitar_on_channel_one(self):
        message = encode_select_instrument(1, 24)
        self.assertEqual(message.to_bytes(), bytes([0xC1, 24, 0, 0]))

    def test_status_nibbles_for_every_channel(self):
        for channel in range(16):
            message = encode_select_instrument(channel, 127)
            self.assertEqual(message.signature, SELECT_INSTRUMENT_SIGNATURE)
            self.assertEqual(message.channel, channel)
            self.assertEqual(message.data2, 0)
            self.assertEqual(message.unused, 0)


class ShortMessageTest(unittest.TestCase):
    def test_dword_has_status_in_lowest_byte(self):
        self.assertEqual(encode_note(0, 60, 127).to_dword(), 0x007F3C90)
        self.assertEqual(encode_select_instrument(1, 24).to_dword(), 0x000018C1)

    def test_significant_bytes(self):
        self.assertEqual(encode_note(0, 60, 127).significant_bytes(), bytes([0x90, 60, 127]))
        self.assertEqual(encode_select_instrument(0, 24).significant_bytes(), bytes([0xC0, 24]))

    def test_is_four_bytes(self):
        self.assertEqual(len(ShortMessage(0x90, 60).to_bytes()), 4)


class NoteNameTest(unittest.TestCase):
    def test_note_names(self):
        self.assertEqual(note_name(60), "C4")
        self.assertEqual(note_name(61), "C#4")
        self.assertEqual(note_name(81), "A5")
        self.assertEqual(note_name(0), "C-1")


if __name__ == '__main__':
    unittest.main()
