"""
Plays a single note: open device, select instrument, note on, hold, note off, close.
"""
import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from onenotemidi.devices import DeviceSink
from onenotemidi.errors import DeviceError, MidiError, check_device_status
from onenotemidi.messages import ShortMessage, encode_note, encode_select_instrument, note_name
from onenotemidi.validation import (
    validate_instrument_selection,
    validate_note,
    validate_request,
)
import onenotemidi.config as config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlaybackRequest:
    """Everything needed to play one note."""

    channel: int = config.DEFAULT_CHANNEL
    instrument: int = config.DEFAULT_INSTRUMENT
    pitch: int = config.DEFAULT_PITCH
    velocity: int = config.DEFAULT_VELOCITY
    length_ms: int = config.DEFAULT_LENGTH_MS


class PlayerState(Enum):
    CLOSED = "closed"
    OPEN = "open"
    INSTRUMENT_SELECTED = "instrument_selected"
    SOUNDING = "sounding"
    SILENCED = "silenced"


class NotePlayer:
    """
    Sequences the messages for one note on a DeviceSink.

    The device is released on every exit path. If the hold is interrupted
    after the note started sounding, the note is still silenced before the
    interruption propagates.
    """

    def __init__(self, sink: DeviceSink, validate: bool = True,
                 device_index: int = config.DEFAULT_DEVICE_INDEX,
                 sleep: Optional[Callable[[float], None]] = None):
        """
        Initialize note player.

        Args:
            sink: Device to send messages to
            validate: If False, parameters go to the encoder unchecked
            device_index: Index of the output device to open
            sleep: Blocking wait used for the hold, in seconds (time.sleep if None)
        """
        self.sink = sink
        self.validate = validate
        self.device_index = device_index
        self.sleep = sleep if sleep is not None else time.sleep
        self.state = PlayerState.CLOSED

    def play(self, request: PlaybackRequest):
        """
        Play one note and return once it has been silenced and the device closed.

        Raises:
            ValidationError: a parameter is out of range (before any device call)
            DeviceError: open, send or close failed
        """
        if self.validate:
            validate_request(request)

        logger.info(
            "Playing %s (pitch %s) on channel %s, instrument %s, velocity %s, for %sms",
            note_name(request.pitch), request.pitch, request.channel,
            request.instrument, request.velocity, request.length_ms,
        )

        with self._open_device() as handle:
            self._select_instrument(handle, request.channel, request.instrument)
            self._note_on(handle, request.channel, request.pitch, request.velocity)

            try:
                self._hold(request.length_ms)
            except BaseException:
                self._silence_best_effort(handle, request.channel, request.pitch)
                raise

            self._note_off(handle, request.channel, request.pitch)

    @contextmanager
    def _open_device(self):
        """Open the sink and guarantee it is closed again on every exit path."""
        status, handle = self.sink.open(self.device_index)
        check_device_status(status, "open")
        self.state = PlayerState.OPEN
        logger.debug("Device %s open", self.device_index)

        try:
            yield handle
        except BaseException as primary:
            self._close_after_failure(handle, primary)
            raise

        self.state = PlayerState.CLOSED
        check_device_status(self.sink.close(handle), "close")
        logger.debug("Device %s closed", self.device_index)

    def _close_after_failure(self, handle, primary: BaseException):
        self.state = PlayerState.CLOSED
        try:
            check_device_status(self.sink.close(handle), "close")
        except DeviceError as secondary:
            logger.error("Error closing device after failure: %s", secondary)
            if isinstance(primary, MidiError):
                primary.cleanup_error = secondary

    def _send(self, handle, message: ShortMessage):
        logger.debug("Sending %s", message.to_bytes().hex())
        check_device_status(self.sink.send(handle, message), "send")

    def _select_instrument(self, handle, channel: int, instrument: int):
        if self.validate:
            validate_instrument_selection(channel, instrument)
        self._send(handle, encode_select_instrument(channel, instrument))
        self.state = PlayerState.INSTRUMENT_SELECTED

    def _note_on(self, handle, channel: int, pitch: int, velocity: int):
        if self.validate:
            validate_note(channel, pitch, velocity)
        self._send(handle, encode_note(channel, pitch, velocity))
        self.state = PlayerState.SOUNDING

    def _note_off(self, handle, channel: int, pitch: int):
        # Note on with velocity 0 stops the note
        self._send(handle, encode_note(channel, pitch, 0))
        self.state = PlayerState.SILENCED

    def _silence_best_effort(self, handle, channel: int, pitch: int):
        try:
            self._note_off(handle, channel, pitch)
        except DeviceError as e:
            logger.error("Could not silence note %s after interruption: %s", pitch, e)

    def _hold(self, length_ms: int):
        self.sleep(max(length_ms, 0) / 1000)
