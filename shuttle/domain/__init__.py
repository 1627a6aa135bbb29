"""Domain package exports for value objects and collections."""

from .entities import Command, Direction, Item, ListChange, Side
from .observable_list import ObservableList
from .selection import SelectionSlot

__all__ = [
    "Command",
    "Direction",
    "Item",
    "ListChange",
    "ObservableList",
    "SelectionSlot",
    "Side",
]
