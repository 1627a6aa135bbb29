from __future__ import annotations

from typing import List, Optional

from shuttle.domain.entities import Direction, Side
from shuttle.domain.seeds import seed_capitals, seed_countries
from shuttle.domain.selection import SelectionSlot


def test_selection_slot_notifies_only_on_change() -> None:
    seen: List[Optional[str]] = []
    slot = SelectionSlot(on_changed=seen.append)

    slot.set("Vienna")
    slot.set("Vienna")
    slot.clear()
    slot.clear()

    assert seen == ["Vienna", None]
    assert slot.is_empty


def test_direction_source_and_destination() -> None:
    assert Direction.LEFT_TO_RIGHT.source is Side.LEFT
    assert Direction.LEFT_TO_RIGHT.destination is Side.RIGHT
    assert Direction.RIGHT_TO_LEFT.source is Side.RIGHT
    assert Direction.RIGHT_TO_LEFT.destination is Side.LEFT
    assert Side.LEFT.other is Side.RIGHT


def test_seeds_have_eleven_plus_two_items() -> None:
    countries = seed_countries()
    capitals = seed_capitals()

    assert len(countries) == 13
    assert countries[:2] == ("Australia", "Vienna")
    assert countries[-2:] == ("Italy", "Japan")
    assert len(capitals) == 13
    assert capitals[-2:] == ("Rome", "Tokyo")
