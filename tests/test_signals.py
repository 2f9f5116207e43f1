import pytest

from canmaster.signals import Signal


def test_emit_passes_arguments_to_slot():
    received = []
    signal = Signal()
    signal.connect(lambda *args: received.append(args))
    signal.emit("1", "1000_00", {"index": 0x1000})
    assert received == [("1", "1000_00", {"index": 0x1000})]


def test_slots_called_in_connection_order():
    calls = []
    signal = Signal()
    signal.connect(lambda: calls.append("first"))
    signal.connect(lambda: calls.append("second"))
    signal.emit()
    assert calls == ["first", "second"]


def test_disconnect_stops_delivery():
    calls = []

    def slot(value):
        calls.append(value)

    signal = Signal()
    signal.connect(slot)
    signal.emit(1)
    signal.disconnect(slot)
    signal.emit(2)
    assert calls == [1]
    assert len(signal) == 0


def test_disconnect_removes_all_duplicate_connections():
    calls = []

    def slot(value):
        calls.append(value)

    signal = Signal()
    signal.connect(slot)
    signal.connect(slot)
    assert len(signal) == 2
    signal.emit("a")
    assert calls == ["a", "a"]
    signal.disconnect(slot)
    assert len(signal) == 0
    signal.emit("b")
    assert calls == ["a", "a"]


def test_disconnect_unknown_slot_raises():
    signal = Signal()
    with pytest.raises(ValueError):
        signal.disconnect(print)


def test_connect_non_callable_raises():
    signal = Signal()
    with pytest.raises(TypeError):
        signal.connect("not callable")


def test_slot_may_disconnect_itself_during_emit():
    calls = []
    signal = Signal()

    def once():
        calls.append("once")
        signal.disconnect(once)

    signal.connect(once)
    signal.connect(lambda: calls.append("always"))
    signal.emit()
    signal.emit()
    assert calls == ["once", "always", "always"]