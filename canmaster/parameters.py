"""CAN frames, channel settings and CANopen slave descriptions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any

FRAME_DATA_SIZE = 8


@dataclass
class CanFrame:
    """A classic CAN frame: identifier, length, eight data bytes and a timestamp in ms."""

    can_id: int = 0
    dlc: int = 0
    data: bytearray = field(default_factory=lambda: bytearray(FRAME_DATA_SIZE))
    time: int = 0

    def __post_init__(self) -> None:
        data = bytearray(self.data)
        if len(data) > FRAME_DATA_SIZE:
            raise ValueError(
                f"frame data holds at most {FRAME_DATA_SIZE} bytes, got {len(data)}"
            )
        data.extend(bytes(FRAME_DATA_SIZE - len(data)))
        self.data = data

    def payload(self) -> bytes:
        """The first ``dlc`` bytes of the frame data."""
        return bytes(self.data[: self.dlc])


class CanDeviceType(Enum):
    SOCKET_CAN = "SocketCan"
    ZLG_USBCANFD_200U = "ZLG_USBCANFD_200U"


@dataclass
class CanChannel:
    """Settings and statistics of one CAN channel."""

    can_type: CanDeviceType = CanDeviceType.SOCKET_CAN
    channel: Any = None
    nominal_baudrate: int = 1000000
    data_baudrate: int = 1000000
    bus_usage: int = 0
    frame_rate: int = 0


class NMTState(IntEnum):
    INITIALIZING = 0x00
    STOPPED = 0x04
    OPERATIONAL = 0x05
    PRE_OPERATIONAL = 0x7F
    UNKNOWN = 0xFF


@dataclass
class SlaveInfo:
    """Description of a single CANopen slave."""

    node_id: int = 0
    model: str = ""
    name: str = ""
    nmt_state: NMTState = NMTState.UNKNOWN
    last_frame_timestamp: int = 0
    ctrl_mode: int = 0


@dataclass
class CanOpenSlave:
    """The slaves known to the master and the one currently addressed."""

    current_node_id: int = 0
    slave_count: int = 0
    slaves: dict[str, SlaveInfo] = field(default_factory=dict)


@dataclass
class CanOpenConfig:
    """Shared CANopen state: slave list and channel."""

    slave: CanOpenSlave = field(default_factory=CanOpenSlave)
    channel: CanChannel = field(default_factory=CanChannel)