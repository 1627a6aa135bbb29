"""Typed value objects shared by the transfer use case and view models.

Items are plain strings compared by value; duplicates are allowed.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal

Item = str


class Side(str, Enum):
    """One of the two collections owned by the view model."""

    LEFT = "left"
    RIGHT = "right"

    @property
    def other(self) -> "Side":
        return Side.RIGHT if self is Side.LEFT else Side.LEFT


class Direction(str, Enum):
    """Transfer direction, named by source and destination collection."""

    LEFT_TO_RIGHT = "left_to_right"
    RIGHT_TO_LEFT = "right_to_left"

    @property
    def source(self) -> Side:
        return Side.LEFT if self is Direction.LEFT_TO_RIGHT else Side.RIGHT

    @property
    def destination(self) -> Side:
        return self.source.other


class Command(str, Enum):
    """Discrete commands emitted by the two transfer buttons."""

    MOVE_RIGHT = "move_right"  # " > "
    MOVE_LEFT = "move_left"  # " < "


ChangeKind = Literal["added", "removed"]


@dataclass(frozen=True)
class ListChange:
    """Single delta published by an ``ObservableList``.

    ``index`` is the position of the item at the time of the change: the new
    tail index for ``added``, the former index for ``removed``.
    """

    kind: ChangeKind
    index: int
    item: Item


__all__ = ["ChangeKind", "Command", "Direction", "Item", "ListChange", "Side"]
