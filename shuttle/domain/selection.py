"""Per-collection selection slot shared between a list view and the VM."""
from __future__ import annotations

from typing import Callable, Optional

from .entities import Item


class SelectionSlot:
    """Holds the currently highlighted item of one collection, or ``None``.

    The view writes the slot from its selection events; the transfer use
    case only reads and clears it. ``on_changed`` fires when the value
    actually changes so a bound view can drop its highlight.
    """

    def __init__(self, on_changed: Optional[Callable[[Optional[Item]], None]] = None) -> None:
        self.on_changed = on_changed
        self._item: Optional[Item] = None

    def get(self) -> Optional[Item]:
        return self._item

    def set(self, item: Optional[Item]) -> None:
        if item == self._item:
            return
        self._item = item
        if self.on_changed:
            self.on_changed(item)

    def clear(self) -> None:
        self.set(None)

    @property
    def is_empty(self) -> bool:
        return self._item is None


__all__ = ["SelectionSlot"]
