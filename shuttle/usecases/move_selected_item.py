"""Move the selected item of one collection to the tail of the other.

Call context:
    ``TransferVM.move`` invokes this use case from the button commands via
    ``CommandDispatcher``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional

from ..domain.entities import Direction, Item, Side
from ..domain.observable_list import ObservableList
from ..domain.ports import UseCaseError
from ..domain.selection import SelectionSlot


@dataclass
class MoveSelectedItem:
    """Remove-then-append transfer of the source collection's selection.

    The source selection is cleared after every successful move, in both
    directions. An empty selection is a silent no-op. A selection whose value
    is no longer in the source collection is cleared and otherwise ignored.
    """

    collections: Mapping[Side, ObservableList]
    selections: Mapping[Side, SelectionSlot]
    _log: logging.Logger = field(
        default_factory=lambda: logging.getLogger(__name__), repr=False
    )

    def __call__(self, direction: Direction) -> Optional[Item]:
        try:
            direction = Direction(direction)
        except ValueError:
            raise UseCaseError("UNKNOWN_DIRECTION", f"Unknown direction: {direction!r}") from None
        source = self.collections[direction.source]
        destination = self.collections[direction.destination]
        selection = self.selections[direction.source]

        item = selection.get()
        if item is None:
            self._log.debug("Move %s ignored: nothing selected", direction.value)
            return None
        if item not in source:
            self._log.warning(
                "Move %s ignored: %r no longer in %s", direction.value, item, direction.source.value
            )
            selection.clear()
            return None

        selection.clear()
        # The append must run even if a source observer raises.
        try:
            source.remove(item)
        finally:
            destination.append(item)
        self._log.info(
            "Moved %r %s -> %s", item, direction.source.value, direction.destination.value
        )
        return item


__all__ = ["MoveSelectedItem"]
