"""The CiA 301 object dictionary entries every node starts with."""

from __future__ import annotations

from typing import Any, NamedTuple

_DLC_BY_TYPE = {"uint8_t": 1, "uint16_t": 2, "uint32_t": 4, "string": 0}


def key_string(index: int, sub_index: int) -> str:
    """Dictionary key of an object, e.g. ``"1A00_01"``."""
    if not 0 <= index <= 0xFFFF:
        raise ValueError(f"index out of range: {index}")
    if not 0 <= sub_index <= 0xFF:
        raise ValueError(f"sub-index out of range: {sub_index}")
    return f"{index:04X}_{sub_index:02X}"


class _Spec(NamedTuple):
    index: int
    sub_index: int
    name: str
    access: str
    default: str
    type: str
    unit: str = ""


def _pdo_communication(base: int, kind: str, cob_ids: tuple[int, ...],
                       transmit: bool) -> list[_Spec]:
    specs = []
    for number, cob_id in enumerate(cob_ids):
        index = base + number
        if transmit:
            specs += [
                _Spec(index, 0, f"{kind}{number + 1} communication parameter number of subindex",
                      "RO", "6", "uint8_t"),
                _Spec(index, 1, "COBID", "RW", str(cob_id), "uint32_t"),
                _Spec(index, 2, "transmission type", "RW", "255", "uint8_t"),
                _Spec(index, 3, "inhibit timer", "RW", "0", "uint16_t", "0.1ms"),
                _Spec(index, 5, "event timer", "RW", "0", "uint16_t", "ms"),
            ]
        else:
            specs += [
                _Spec(index, 0, f"{kind}{number + 1} communication parameter number of subindex",
                      "RO", "5", "uint8_t"),
                _Spec(index, 1, "COBID", "RW", str(cob_id), "uint32_t"),
                _Spec(index, 2, "transmission type", "RO", "255", "uint8_t"),
                _Spec(index, 3, "inhibit timer", "RO", "255", "uint16_t"),
                _Spec(index, 5, "event timer", "RW", "0", "uint16_t"),
            ]
    return specs


def _pdo_mapping(base: int, kind: str) -> list[_Spec]:
    specs = []
    for number in range(4):
        index = base + number
        specs.append(_Spec(index, 0, f"{kind}{number + 1} mapping parameter number of subindex",
                           "RW", "7", "uint8_t"))
        specs += [
            _Spec(index, sub, f"mapped objects {sub}", "RW", "0", "uint32_t")
            for sub in range(1, 9)
        ]
    return specs


_SPECS: tuple[_Spec, ...] = (
    _Spec(0x1000, 0, "Device type", "RO", "0", "uint32_t"),
    _Spec(0x1005, 0, "COB-ID SYNC message", "RO", "128", "uint32_t"),
    _Spec(0x1006, 0, "communication cycle period", "RW", "0", "uint32_t"),
    _Spec(0x1008, 0, "manufacturer device name", "RO", "Sanhua-RJM", "string"),
    _Spec(0x1010, 0, "store parameters number of subindex", "RO", "1", "uint8_t"),
    _Spec(0x1010, 1, "store all parameters", "RW", "0", "uint32_t"),
    _Spec(0x1011, 0, "restore default parameters number of subindex", "RO", "1", "uint8_t"),
    _Spec(0x1011, 1, "Restore all parameters", "RW", "0", "uint32_t"),
    _Spec(0x100A, 0, "Manufacturer software version", "RO", "", "string"),
    _Spec(0x1014, 0, "COB ID emergency", "RO", "129", "uint32_t"),
    _Spec(0x1015, 0, "inhibit time EMCY", "RW", "0", "uint16_t", "0.1ms"),
    _Spec(0x1016, 0, "consumer heartbeat time number of subindex", "RO", "5", "uint8_t"),
    _Spec(0x1016, 1, "consumer heartbeat time 1", "RW", "1", "uint32_t", "ms"),
    _Spec(0x1017, 0, "producer heartbeat time", "RW", "0", "uint16_t", "ms"),
    _Spec(0x1018, 0, "identity object number of subindex", "RO", "4", "uint8_t"),
    _Spec(0x1018, 1, "vendor ID", "RO", "86", "uint32_t"),
    _Spec(0x1018, 2, "product code", "RO", "0", "uint32_t"),
    _Spec(0x1018, 3, "revision number", "RO", "0", "uint32_t"),
    _Spec(0x1018, 4, "serial number", "RO", "0", "uint32_t"),
    _Spec(0x1200, 0, "SDO server parameter number of subindex", "RO", "2", "uint8_t"),
    _Spec(0x1200, 1, "client to server COBID", "RO", "1537", "uint32_t"),
    _Spec(0x1200, 2, "server to client COBID", "RO", "1409", "uint32_t"),
    *_pdo_communication(0x1400, "RPDO", (513, 769, 1025, 1281), transmit=False),
    *_pdo_mapping(0x1600, "RPDO"),
    *_pdo_communication(0x1800, "TPDO", (385, 641, 897, 1153), transmit=True),
    *_pdo_mapping(0x1A00, "TPDO"),
)


def _entry(spec: _Spec) -> dict[str, Any]:
    return {
        "index": spec.index,
        "subIndex": spec.sub_index,
        "name": spec.name,
        "access": spec.access,
        "defaultValue": spec.default,
        "type": spec.type,
        "dlc": _DLC_BY_TYPE[spec.type],
        "unit": spec.unit,
        "oldValue": "",
        "currentValue": "",
        "pendingValue": "",
    }


def default_entries() -> dict[str, dict[str, Any]]:
    """A fresh copy of the default dictionary, keyed by ``key_string`` and sorted by key."""
    entries = {key_string(spec.index, spec.sub_index): _entry(spec) for spec in _SPECS}
    return dict(sorted(entries.items()))