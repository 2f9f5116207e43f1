"""Network management: builds NMT command frames."""

from __future__ import annotations

import time

from canmaster.parameters import CanFrame, CanOpenConfig
from canmaster.signals import Signal

NMT_COB_ID = 0x000
NMT_DLC = 2
DEFAULT_CYCLE_TIME_MS = 10


class Nmt:
    """Builds NMT frames for the currently addressed node and emits them."""

    def __init__(self, config: CanOpenConfig,
                 cycle_time: int = DEFAULT_CYCLE_TIME_MS) -> None:
        if cycle_time <= 0:
            raise ValueError(f"cycle time must be positive, got {cycle_time}")
        self.config = config
        self.cycle_time = cycle_time
        self.send_can_frame = Signal()

    def send_nmt(self, command: int) -> CanFrame:
        """Emit ``send_can_frame`` with an NMT frame for the current node and return it."""
        if not 0 <= command <= 0xFF:
            raise ValueError(f"NMT command must fit in one byte, got {command}")
        frame = CanFrame(
            can_id=NMT_COB_ID,
            dlc=NMT_DLC,
            data=bytes([command, self.config.slave.current_node_id]),
            time=time.time_ns() // 1_000_000,
        )
        self.send_can_frame.emit(frame)
        return frame