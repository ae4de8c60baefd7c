"""
MIDI output devices.

A sink follows the status-code style of platform MIDI APIs:

    open(device_index) -> (status, handle)
    send(handle, message) -> status
    close(handle) -> status

Status 0 means success. Any other value is a device error code.
"""
import logging
from typing import List, Optional, Sequence, Tuple, Union

import mido

from onenotemidi.errors import (
    STATUS_ALLOCATED,
    STATUS_BAD_DEVICE_ID,
    STATUS_ERROR,
    STATUS_INVALID_HANDLE,
    STATUS_INVALID_PARAM,
    STATUS_NO_DRIVER,
    STATUS_OK,
)
from onenotemidi.messages import ShortMessage
import onenotemidi.config as config

logger = logging.getLogger(__name__)


class DeviceSink:
    """Interface for anything that accepts encoded short messages."""

    def open(self, device_index: int) -> Tuple[int, object]:
        raise NotImplementedError

    def send(self, handle, message: ShortMessage) -> int:
        raise NotImplementedError

    def close(self, handle) -> int:
        raise NotImplementedError


class MidoSink(DeviceSink):
    """
    Sends messages to a MIDI output port opened through mido.
    """

    def __init__(self, device_keyword: str = config.MIDI_DEVICE_KEYWORD):
        """
        Initialize sink.

        Args:
            device_keyword: Keyword to match in port names (empty for all ports).
                The device index counts only matching ports.
        """
        self.device_keyword = device_keyword

    def find_device(self, device_index: int) -> Optional[str]:
        """
        Find the output port at device_index among ports matching the keyword.

        Returns:
            Port name if found, None otherwise
        """
        ports = mido.get_output_names()
        if self.device_keyword:
            ports = [port for port in ports if self.device_keyword.lower() in port.lower()]

        if 0 <= device_index < len(ports):
            return ports[device_index]
        return None

    def open(self, device_index: int) -> Tuple[int, Optional[mido.ports.BaseOutput]]:
        try:
            port_name = self.find_device(device_index)
        except Exception as e:
            logger.error("Error listing MIDI outputs: %s", e)
            return STATUS_NO_DRIVER, None

        if not port_name:
            logger.warning("No MIDI output at index %s", device_index)
            return STATUS_BAD_DEVICE_ID, None

        try:
            outport = mido.open_output(port_name)
        except Exception as e:
            logger.error("Error opening MIDI output %s: %s", port_name, e)
            return STATUS_ALLOCATED, None

        logger.info("Opened MIDI output: %s", port_name)
        return STATUS_OK, outport

    def send(self, handle, message: ShortMessage) -> int:
        if not isinstance(handle, mido.ports.BaseOutput):
            return STATUS_INVALID_HANDLE

        try:
            msg = mido.Message.from_bytes(list(message.significant_bytes()))
        except ValueError as e:
            logger.error("MIDI message %s rejected: %s", message.to_bytes().hex(), e)
            return STATUS_INVALID_PARAM

        try:
            handle.send(msg)
        except Exception as e:
            logger.error("Error sending MIDI message: %s", e)
            return STATUS_ERROR
        return STATUS_OK

    def close(self, handle) -> int:
        if not isinstance(handle, mido.ports.BaseOutput):
            return STATUS_INVALID_HANDLE

        try:
            handle.close()
        except Exception as e:
            logger.error("Error closing MIDI output: %s", e)
            return STATUS_ERROR
        logger.info("Closed MIDI output: %s", handle.name)
        return STATUS_OK


class RecordingSink(DeviceSink):
    """
    Virtual sink that records every call instead of making sound.

    Failure statuses can be configured per operation to simulate a device
    that is busy, missing or broken.
    """

    HANDLE = "recording-sink"

    def __init__(self, open_status: int = STATUS_OK,
                 send_statuses: Union[int, Sequence[int], None] = None,
                 close_status: int = STATUS_OK):
        """
        Args:
            open_status: Status returned by open
            send_statuses: Status for every send, or a list consumed one per
                send call (calls past the end of the list succeed)
            close_status: Status returned by close
        """
        self.open_status = open_status
        self.send_statuses = send_statuses
        self.close_status = close_status

        self.opened: List[int] = []
        self.sent: List[ShortMessage] = []
        self.closed: List[object] = []
        self.calls: List[str] = []

    def _next_send_status(self) -> int:
        if self.send_statuses is None:
            return STATUS_OK
        if isinstance(self.send_statuses, int):
            return self.send_statuses
        index = self.calls.count("send") - 1
        if index < len(self.send_statuses):
            return self.send_statuses[index]
        return STATUS_OK

    def open(self, device_index: int):
        self.calls.append("open")
        self.opened.append(device_index)
        if self.open_status != STATUS_OK:
            return self.open_status, None
        return STATUS_OK, self.HANDLE

    def send(self, handle, message: ShortMessage) -> int:
        if handle != self.HANDLE:
            return STATUS_INVALID_HANDLE
        self.calls.append("send")
        status = self._next_send_status()
        if status != STATUS_OK:
            return status
        self.sent.append(message)
        logger.debug("Recorded message %s", message.to_bytes().hex())
        return STATUS_OK

    def close(self, handle) -> int:
        self.calls.append("close")
        self.closed.append(handle)
        return self.close_status
