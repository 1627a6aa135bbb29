from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Optional, Tuple

from ..domain.entities import Direction, Item, Side
from ..domain.observable_list import ObservableList
from ..domain.seeds import seed_capitals, seed_countries
from ..domain.selection import SelectionSlot
from ..usecases.move_selected_item import MoveSelectedItem


class TransferVM:
    """Owns the two collections and their selections. Pure UI-logic.

    Responsibilities
    - Hold the left (countries) and right (capitals) ``ObservableList``
    - Hold one ``SelectionSlot`` per side, written by the list views
    - Provide move commands for the two buttons (signals via ``on_moved``)
    """

    def __init__(
        self,
        *,
        left: Optional[Iterable[Item]] = None,
        right: Optional[Iterable[Item]] = None,
        on_moved: Optional[Callable[[Direction, Item], None]] = None,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.on_moved = on_moved

        self.left = ObservableList(seed_countries() if left is None else left, name="left")
        self.right = ObservableList(seed_capitals() if right is None else right, name="right")
        self.left_selection = SelectionSlot()
        self.right_selection = SelectionSlot()

        self._uc_move = MoveSelectedItem(
            collections={Side.LEFT: self.left, Side.RIGHT: self.right},
            selections={Side.LEFT: self.left_selection, Side.RIGHT: self.right_selection},
        )

    # ---- Accessors ----
    def collection(self, side: Side) -> ObservableList:
        return self.left if Side(side) is Side.LEFT else self.right

    def selection(self, side: Side) -> SelectionSlot:
        return self.left_selection if Side(side) is Side.LEFT else self.right_selection

    def contents(self) -> Dict[Side, Tuple[Item, ...]]:
        return {Side.LEFT: self.left.snapshot(), Side.RIGHT: self.right.snapshot()}

    # ---- Selection API (called by View) ----
    def set_selection(self, side: Side, item: Optional[Item]) -> None:
        self.selection(side).set(item)

    def get_selection(self, side: Side) -> Optional[Item]:
        return self.selection(side).get()

    # ---- Commands surfaced to View ----
    def move(self, direction: Direction) -> Optional[Item]:
        """Run the transfer for ``direction``; return the moved item or ``None``."""
        moved = self._uc_move(direction)
        if moved is not None and self.on_moved:
            self.on_moved(Direction(direction), moved)
        return moved

    def cmd_move_right(self) -> Optional[Item]:
        return self.move(Direction.LEFT_TO_RIGHT)

    def cmd_move_left(self) -> Optional[Item]:
        return self.move(Direction.RIGHT_TO_LEFT)


__all__ = ["TransferVM"]
