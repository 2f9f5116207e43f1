"""A thread-safe store of per-node CANopen object dictionaries."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from typing import Any

from canmaster.dictionary import default_entries, key_string
from canmaster.signals import Signal

Entry = dict[str, Any]
ALL_NODES = "0"


class ObjectStore:
    """Object dictionaries keyed by node id, then by ``"IIII_SS"`` object key.

    ``item_changed(node_id, key, item)`` fires on ``insert`` and ``update``;
    ``list_changed(node_id, items)`` fires on ``add_node`` and ``clear``
    (with node id ``"0"`` and an empty mapping).  The ``sync_*`` methods apply
    changes coming from elsewhere and emit nothing, so that two stores kept in
    step through these signals do not echo each other forever.
    """

    def __init__(self) -> None:
        self._nodes: dict[str, dict[str, Any]] = {}
        self._lock = threading.RLock()
        self.item_changed = Signal()
        self.list_changed = Signal()

    def key_string(self, index: int, sub_index: int) -> str:
        """Dictionary key of an object, e.g. ``"1000_00"``."""
        return key_string(index, sub_index)

    def insert(self, node_id: int, index: int, sub_index: int,
               data: Mapping[str, Any]) -> None:
        """Set an entry of a known node, adding the key if needed."""
        key = self.key_string(index, sub_index)
        node_key = str(node_id)
        item = dict(data)
        with self._lock:
            node = self._nodes.get(node_key)
            if node is not None:
                node[key] = dict(item)
        self.item_changed.emit(node_key, key, item)

    def update(self, node_id: int, index: int, sub_index: int,
               data: Mapping[str, Any]) -> None:
        """Replace an entry that already exists in a known node."""
        key = self.key_string(index, sub_index)
        node_key = str(node_id)
        item = dict(data)
        with self._lock:
            node = self._nodes.get(node_key)
            if node is not None and key in node:
                node[key] = dict(item)
        self.item_changed.emit(node_key, key, item)

    def sync_item(self, node_id: str, key: str, item: Mapping[str, Any]) -> None:
        """Replace an existing entry without emitting a signal."""
        with self._lock:
            node = self._nodes.get(node_id)
            if node is not None and key in node:
                node[key] = dict(item)

    def sync_list(self, node_id: str, item: Mapping[str, Any]) -> None:
        """Replace a node's whole dictionary, or drop every node for ``"0"``.

        Emits no signal.
        """
        with self._lock:
            if node_id == ALL_NODES:
                self._nodes.clear()
            else:
                self._nodes[node_id] = dict(item)

    def get(self, node_id: int, index: int, sub_index: int) -> Entry:
        """A copy of one entry, or an empty dict if it is absent."""
        key = self.key_string(index, sub_index)
        with self._lock:
            value = self._nodes.get(str(node_id), {}).get(key)
            return dict(value) if isinstance(value, Mapping) else {}

    def get_all(self, node_id: int) -> dict[str, Any]:
        """A copy of a node's whole dictionary, or an empty dict."""
        with self._lock:
            node = self._nodes.get(str(node_id), {})
            return {
                key: dict(value) if isinstance(value, Mapping) else value
                for key, value in node.items()
            }

    def clear(self) -> None:
        """Drop every node and announce it as node ``"0"``."""
        with self._lock:
            self._nodes.clear()
        self.list_changed.emit(ALL_NODES, {})

    def add_node(self, node_id: int | str) -> None:
        """Give a node the default dictionary, replacing any it had."""
        node_key = str(node_id)
        items = default_entries()
        with self._lock:
            self._nodes[node_key] = {key: dict(value) for key, value in items.items()}
        self.list_changed.emit(node_key, items)