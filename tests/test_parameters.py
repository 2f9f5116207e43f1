import pytest

from canmaster.parameters import (
    CanChannel,
    CanDeviceType,
    CanFrame,
    CanOpenConfig,
    CanOpenSlave,
    NMTState,
    SlaveInfo,
)


def test_frame_defaults_are_zeroed():
    frame = CanFrame()
    assert frame.can_id == 0
    assert frame.dlc == 0
    assert frame.data == bytearray(8)
    assert frame.payload() == b""


def test_short_data_is_padded_to_eight_bytes():
    frame = CanFrame(can_id=0x000, dlc=2, data=b"\x01\x05")
    assert len(frame.data) == 8
    assert frame.data[:2] == bytearray(b"\x01\x05")
    assert frame.data[2:] == bytearray(6)


def test_payload_is_first_dlc_bytes():
    frame = CanFrame(dlc=3, data=bytes(range(1, 9)))
    assert frame.payload() == bytes([1, 2, 3])


def test_payload_with_dlc_over_eight_is_whole_data():
    data = bytes(range(8))
    frame = CanFrame(dlc=12, data=data)
    assert frame.payload() == data


def test_data_longer_than_eight_bytes_raises():
    with pytest.raises(ValueError):
        CanFrame(data=bytes(9))


def test_data_byte_out_of_range_raises():
    with pytest.raises(ValueError):
        CanFrame(data=[256])


def test_frame_data_is_not_shared_between_instances():
    first = CanFrame()
    second = CanFrame()
    first.data[0] = 0x7F
    assert second.data[0] == 0


def test_channel_defaults():
    channel = CanChannel()
    assert channel.can_type is CanDeviceType.SOCKET_CAN
    assert channel.channel is None
    assert channel.nominal_baudrate == 1000000
    assert channel.data_baudrate == 1000000
    assert channel.bus_usage == 0
    assert channel.frame_rate == 0


def test_nmt_state_values():
    assert NMTState.INITIALIZING == 0x00
    assert NMTState.STOPPED == 0x04
    assert NMTState.OPERATIONAL == 0x05
    assert NMTState.PRE_OPERATIONAL == 0x7F
    assert NMTState.UNKNOWN == 0xFF
    assert NMTState(0x7F) is NMTState.PRE_OPERATIONAL


def test_unknown_nmt_value_raises():
    with pytest.raises(ValueError):
        NMTState(0x01)


def test_slave_info_defaults_to_unknown_state():
    info = SlaveInfo()
    assert info.nmt_state is NMTState.UNKNOWN
    assert info.node_id == 0
    assert info.model == ""


def test_config_holds_independent_slave_lists():
    first = CanOpenConfig()
    second = CanOpenConfig()
    first.slave.slaves["1"] = SlaveInfo(node_id=1)
    assert "1" in first.slave.slaves
    assert second.slave.slaves == {}
    assert first.slave.current_node_id == 0
    assert isinstance(CanOpenSlave().slaves, dict) and CanOpenSlave().slave_count == 0