"""
Errors raised while validating parameters or talking to the MIDI device.
"""
import logging
from typing import Optional

logger = logging.getLogger(__name__)

# Device status codes returned by sinks. 0 is success, everything else is
# an opaque device-specific failure.
STATUS_OK = 0
STATUS_ERROR = 1
STATUS_BAD_DEVICE_ID = 2
STATUS_ALLOCATED = 4
STATUS_INVALID_HANDLE = 5
STATUS_NO_DRIVER = 6
STATUS_INVALID_PARAM = 11

STATUS_DESCRIPTIONS = {
    STATUS_ERROR: "unspecified device error",
    STATUS_BAD_DEVICE_ID: "no such device",
    STATUS_ALLOCATED: "device busy",
    STATUS_INVALID_HANDLE: "invalid device handle",
    STATUS_NO_DRIVER: "no device driver",
    STATUS_INVALID_PARAM: "invalid message",
}


def describe_status(code: int) -> str:
    """Human readable description of a device status code."""
    return STATUS_DESCRIPTIONS.get(code, "unknown device error")


class MidiError(Exception):
    """Base class for onenotemidi errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        # Secondary failure while releasing the device after this error
        self.cleanup_error: Optional["DeviceError"] = None

    def __str__(self):
        if self.cleanup_error is not None:
            return f"{self.message} (cleanup also failed: {self.cleanup_error})"
        return self.message


class ValidationError(MidiError, ValueError):
    """A parameter exceeded its protocol bit-width limit."""

    def __init__(self, field: str, value: int, max_value: int):
        super().__init__(f"{field} Current: {value} Max: {max_value}")
        self.field = field
        self.value = value
        self.max = max_value


class DeviceError(MidiError):
    """An open, send or close call failed at the device boundary."""

    def __init__(self, operation: str, code: int):
        self.operation = operation
        self.code = code
        self.description = describe_status(code)
        super().__init__(f"Midi Error: {code} ({self.description}) during {operation}")


def check_device_status(code: int, operation: str):
    """
    Raise DeviceError if a device call returned a failure status.

    Args:
        code: Status returned by the sink
        operation: Name of the device call ("open", "send" or "close")
    """
    if code != STATUS_OK:
        logger.error("Device %s failed with status %s (%s)", operation, code, describe_status(code))
        raise DeviceError(operation, code)
