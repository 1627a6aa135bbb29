"""Ordered item collection that publishes add/remove deltas to observers.

Call context:
    ``TransferVM`` owns two instances; ``ListPanelView`` subscribes to one
    each and mirrors the deltas into a ``tk.Listbox``.

Observers run synchronously, in subscription order, before the mutating
call returns. Exceptions raised by an observer propagate to the caller.
"""
from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, List, Tuple

from .entities import Item, ListChange
from .ports import ListObserver

_log = logging.getLogger(__name__)


class ObservableList:
    """Append-at-tail, remove-first-match list with change notifications."""

    def __init__(self, items: Iterable[Item] = (), *, name: str = "") -> None:
        self.name = name
        self._items: List[Item] = list(items)
        self._observers: List[ListObserver] = []

    # ---- Observers ----
    def subscribe(self, observer: ListObserver) -> Callable[[], None]:
        """Register ``observer`` and return a callable that unregisters it."""
        if observer not in self._observers:
            self._observers.append(observer)
        return lambda: self.unsubscribe(observer)

    def unsubscribe(self, observer: ListObserver) -> None:
        try:
            self._observers.remove(observer)
        except ValueError:
            pass

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def _publish(self, change: ListChange) -> None:
        _log.debug("%s %s [%d] %r", self.name or "list", change.kind, change.index, change.item)
        for observer in list(self._observers):
            observer(change)

    # ---- Mutation ----
    def append(self, item: Item) -> None:
        self._items.append(item)
        self._publish(ListChange("added", len(self._items) - 1, item))

    def extend(self, items: Iterable[Item]) -> None:
        for item in items:
            self.append(item)

    def remove(self, item: Item) -> int:
        """Remove the first occurrence of ``item`` and return its former index.

        Raises:
            ValueError: ``item`` is not in the list.
        """
        index = self._items.index(item)
        del self._items[index]
        self._publish(ListChange("removed", index, item))
        return index

    # ---- Read access ----
    def snapshot(self) -> Tuple[Item, ...]:
        return tuple(self._items)

    def index(self, item: Item) -> int:
        return self._items.index(item)

    def count(self, item: Item) -> int:
        return self._items.count(item)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[Item]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Item:
        return self._items[index]

    def __repr__(self) -> str:
        return f"ObservableList(name={self.name!r}, items={self._items!r})"


__all__ = ["ObservableList"]
