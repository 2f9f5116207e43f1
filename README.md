# canmaster

Building blocks for a CANopen master. The package has these modules:

- `canmaster.parameters` is the data model. It holds `CanFrame` (identifier,
  `dlc`, eight data bytes, a millisecond timestamp, and `payload()` for the
  first `dlc` bytes), `CanChannel`, `CanDeviceType`, `NMTState`, `SlaveInfo`,
  `CanOpenSlave` and `CanOpenConfig`.
- `canmaster.dictionary` holds the default CiA 301 object dictionary for a
  node. `default_entries()` returns a fresh copy of it, sorted by key.
  `key_string(index, sub_index)` builds keys such as `"1A00_08"` and raises
  `ValueError` when the index or sub-index is out of range.
- `canmaster.object_store` provides `ObjectStore`, a thread-safe store of
  dictionary entries for each node:
  - `add_node(node_id)` gives a node the default dictionary.
  - `insert` and `update` change single entries.
  - `get` and `get_all` return copies.
  - `clear()` drops every node.
  - `sync_item` and `sync_list` apply changes without emitting signals.
    `sync_list("0", ...)` drops every node.
  - `item_changed(node_id, key, item)` is emitted by `insert` and `update`.
  - `list_changed(node_id, items)` is emitted by `add_node`, and by `clear`
    with node `"0"` and an empty mapping.
- `canmaster.nmt` provides `Nmt`. Its `send_nmt(command)` builds an NMT frame
  and returns it after emitting it on `send_can_frame`. The frame has CAN-ID
  `0x000` and two data bytes: the command and
  `config.slave.current_node_id`.
- `canmaster.driver` provides `Driver`. It passes frames to a transport you
  supply, which is a callable that takes a `CanFrame` and returns whether the
  frame was sent. `send_request(frame)` returns `True` on success. If `dlc` is
  larger than 8, or if the transport fails, it emits a message on
  `send_error` and returns `False`. A transport that returns false or raises
  `OSError` counts as failing. `open_device`, `close_device` and
  `reset_can_device` only set the `is_open` flag.
- `canmaster.signals` provides `Signal`, a small synchronous observer that the
  package uses throughout. It offers `connect`, `disconnect` and `emit`.

## Installation

```
pip install .
```

## Example

```python
from canmaster.parameters import CanOpenConfig
from canmaster.object_store import ObjectStore
from canmaster.nmt import Nmt
from canmaster.driver import Driver

store = ObjectStore()
store.list_changed.connect(lambda node, items: print("node", node, len(items)))
store.add_node("1")
print(store.get(1, 0x1017, 0x00)["name"])   # producer heartbeat time

config = CanOpenConfig()
config.slave.current_node_id = 5

sent = []
driver = Driver(config, lambda frame: sent.append(frame) or True)
driver.send_error.connect(print)

nmt = Nmt(config, 10)
nmt.send_can_frame.connect(driver.send_request)
frame = nmt.send_nmt(0x01)                  # start remote node 5
print(hex(frame.can_id), frame.payload())   # 0x0 b'\x01\x05'
```

## What it does not do

- The package does not talk to CAN hardware. Frames reach the bus only
  through the transport callable that you pass to `Driver`. Without a
  transport, every send fails.
- It does not receive or decode frames. `Driver` has the signals `nmt_msg`,
  `sdo_msg`, `heart_beat`, `pdo_msg` and `send_can_frame_to_ui`, but nothing
  in the package emits them.
- There is no SDO client, no PDO handling, no heartbeat monitoring and no
  periodic processing loop. `Nmt.cycle_time` is stored but not used to
  schedule anything.
- There is no command-line program.

## Running the tests

```
pip install .[test]
pytest
```