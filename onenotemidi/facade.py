"""
Entry points for playing a note, with or without parameter checks.
"""
import logging
from typing import Optional

from onenotemidi.devices import DeviceSink, MidoSink
from onenotemidi.errors import MidiError
from onenotemidi.player import NotePlayer, PlaybackRequest
import onenotemidi.config as config

logger = logging.getLogger(__name__)


def play_note_simple(request: PlaybackRequest, sink: Optional[DeviceSink] = None,
                     device_index: int = config.DEFAULT_DEVICE_INDEX, **kwargs):
    """
    Play a note without parameter checks.

    Out-of-range values are truncated by the encoder instead of reported,
    e.g. channel 20 ends up on channel 4. Device failures still raise
    DeviceError.
    """
    if sink is None:
        sink = MidoSink()
    player = NotePlayer(sink, validate=False, device_index=device_index, **kwargs)
    player.play(request)


def play_note_robust(request: PlaybackRequest, sink: Optional[DeviceSink] = None,
                     device_index: int = config.DEFAULT_DEVICE_INDEX, **kwargs):
    """
    Play a note with every parameter checked before it is encoded.

    Raises:
        ValidationError: a parameter is out of range, nothing was sent
        DeviceError: the device failed, it has been closed again
    """
    if sink is None:
        sink = MidoSink()
    player = NotePlayer(sink, validate=True, device_index=device_index, **kwargs)
    try:
        player.play(request)
    except MidiError as e:
        logger.error("Playing note failed: %s", e)
        raise


def play_note(request: PlaybackRequest, sink: Optional[DeviceSink] = None,
              simple: bool = False, **kwargs):
    """Play a note in simple or robust mode."""
    if simple:
        play_note_simple(request, sink, **kwargs)
    else:
        play_note_robust(request, sink, **kwargs)
