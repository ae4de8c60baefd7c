"""
Range checks for MIDI message parameters.
"""
from onenotemidi.errors import ValidationError
import onenotemidi.config as config


def validate(value: int, max_value: int, field_name: str):
    """
    Check a value against its protocol limit.

    Args:
        value: Value to check
        max_value: Largest value the field can hold
        field_name: Name reported in the error, e.g. "Channel"

    Raises:
        ValidationError: if value is greater than max_value
    """
    if value > max_value:
        raise ValidationError(field_name, value, max_value)


def validate_field(value: int, max_value: int, field_name: str):
    """Check a message field fits its bit width, 0 to max_value."""
    if value < 0:
        raise ValidationError(field_name, value, max_value)
    validate(value, max_value, field_name)


def validate_instrument_selection(channel: int, instrument: int):
    validate_field(channel, config.MAX_CHANNEL, "Channel")
    validate_field(instrument, config.MAX_DATA_VALUE, "Instrument")


def validate_note(channel: int, pitch: int, velocity: int):
    validate_field(channel, config.MAX_CHANNEL, "Channel")
    validate_field(pitch, config.MAX_DATA_VALUE, "Pitch")
    validate_field(velocity, config.MAX_DATA_VALUE, "Velocity")


def validate_request(request):
    """Validate every field of a PlaybackRequest, stopping at the first failure."""
    validate_instrument_selection(request.channel, request.instrument)
    validate_note(request.channel, request.pitch, request.velocity)
