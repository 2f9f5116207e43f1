"""Sends CAN frames through a transport and reports failures."""

from __future__ import annotations

from collections.abc import Callable

from canmaster.parameters import FRAME_DATA_SIZE, CanFrame, CanOpenConfig
from canmaster.signals import Signal

Transport = Callable[[CanFrame], bool]

DLC_TOO_LARGE = "frame data length must not exceed 8 bytes"
SEND_FAILED = "CAN send failed"


class Driver:
    """Hands frames to a transport and reports problems on ``send_error``.

    The transport is a callable that takes a ``CanFrame`` and returns whether
    it was sent.  Without a transport every send fails.
    """

    def __init__(self, config: CanOpenConfig, transport: Transport | None = None) -> None:
        self.config = config
        self.transport = transport
        self.is_open = False
        self.nmt_msg = Signal()
        self.sdo_msg = Signal()
        self.heart_beat = Signal()
        self.pdo_msg = Signal()
        self.send_error = Signal()
        self.send_can_frame_to_ui = Signal()

    def open_device(self) -> None:
        """Mark the device as open."""
        self.is_open = True

    def close_device(self) -> None:
        """Mark the device as closed."""
        self.is_open = False

    def reset_can_device(self) -> None:
        """Close the device and open it again."""
        self.close_device()
        self.open_device()

    def send_request(self, frame: CanFrame) -> bool:
        """Send a frame; on failure emit ``send_error`` and return False."""
        if frame.dlc > FRAME_DATA_SIZE:
            self.send_error.emit(DLC_TOO_LARGE)
            return False
        if not self._send_can_frame(frame):
            self.send_error.emit(SEND_FAILED)
            return False
        return True

    def _send_can_frame(self, frame: CanFrame) -> bool:
        if self.transport is None:
            return False
        try:
            return bool(self.transport(frame))
        except OSError:
            return False