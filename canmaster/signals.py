"""A minimal synchronous signal/slot mechanism."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

Slot = Callable[..., Any]


class Signal:
    """Calls every connected slot, in connection order, when emitted."""

    def __init__(self) -> None:
        self._slots: list[Slot] = []

    def connect(self, slot: Slot) -> None:
        """Connect a callable to this signal."""
        if not callable(slot):
            raise TypeError(f"slot must be callable, got {type(slot).__name__}")
        self._slots.append(slot)

    def disconnect(self, slot: Slot) -> None:
        """Remove every connection of ``slot``; raise ValueError if it had none."""
        remaining = [s for s in self._slots if s != slot]
        if len(remaining) == len(self._slots):
            raise ValueError("slot is not connected to this signal")
        self._slots = remaining

    def emit(self, *args: Any) -> None:
        """Call each connected slot with ``args``."""
        for slot in list(self._slots):
            slot(*args)

    def __len__(self) -> int:
        return len(self._slots)