import unittest

from onenotemidi.errors import ValidationError
from onenotemidi.player import PlaybackRequest
from onenotemidi.validation import validate, validate_field, validate_request


class ValidateTest(unittest.TestCase):
    def test_accepts_values_up_to_max(self):
        for value in (0, 7, 15):
            self.assertIsNone(validate(value, 15, "Channel"))

    def test_rejects_values_above_max(self):
        with self.assertRaises(ValidationError) as ctx:
            validate(16, 15, "Channel")
        self.assertEqual(ctx.exception.field, "Channel")
        self.assertEqual(ctx.exception.value, 16)
        self.assertEqual(ctx.exception.max, 15)
        self.assertEqual(str(ctx.exception), "Channel Current: 16 Max: 15")

    def test_field_name_does_not_affect_outcome(self):
        for name in ("Channel", "Pitch", "anything"):
            validate(127, 127, name)
            with self.assertRaises(ValidationError):
                validate(128, 127, name)

    def test_is_a_value_error(self):
        with self.assertRaises(ValueError):
            validate(200, 127, "Velocity")


class ValidateFieldTest(unittest.TestCase):
    def test_accepts_full_range(self):
        for value in (0, 64, 127):
            validate_field(value, 127, "Pitch")

    def test_rejects_below_zero(self):
        with self.assertRaises(ValidationError) as ctx:
            validate_field(-1, 15, "Channel")
        self.assertEqual(str(ctx.exception), "Channel Current: -1 Max: 15")

    def test_rejects_above_max(self):
        with self.assertRaises(ValidationError):
            validate_field(16, 15, "Channel")


class ValidateRequestTest(unittest.TestCase):
    def test_upper_boundaries_pass(self):
        validate_request(PlaybackRequest(channel=15, instrument=127, pitch=127, velocity=127))

    def test_each_field_reports_its_name(self):
        cases = [
            (PlaybackRequest(channel=16), "Channel", 16, 15),
            (PlaybackRequest(instrument=128), "Instrument", 128, 127),
            (PlaybackRequest(pitch=128), "Pitch", 128, 127),
            (PlaybackRequest(velocity=128), "Velocity", 128, 127),
        ]
        for request, field, value, max_value in cases:
            with self.assertRaises(ValidationError) as ctx:
                validate_request(request)
            self.assertEqual((ctx.exception.field, ctx.exception.value, ctx.exception.max),
                             (field, value, max_value))

    def test_negative_fields_are_rejected(self):
        cases = [
            (PlaybackRequest(channel=-1), "Channel", 15),
            (PlaybackRequest(instrument=-1), "Instrument", 127),
            (PlaybackRequest(pitch=-1), "Pitch", 127),
            (PlaybackRequest(velocity=-1), "Velocity", 127),
        ]
        for request, field, max_value in cases:
            with self.assertRaises(ValidationError) as ctx:
                validate_request(request)
            self.assertEqual((ctx.exception.field, ctx.exception.value, ctx.exception.max),
                             (field, -1, max_value))

    def test_channel_checked_first(self):
        with self.assertRaises(ValidationError) as ctx:
            validate_request(PlaybackRequest(channel=20, velocity=200))
        self.assertEqual(ctx.exception.field, "Channel")


if __name__ == '__main__':
    unittest.main()
