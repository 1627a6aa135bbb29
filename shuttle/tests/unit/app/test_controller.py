from __future__ import annotations

from typing import List

import pytest

from shuttle.app.controller import COMMAND_DIRECTIONS, CommandDispatcher
from shuttle.domain.entities import Command, Direction, Side
from shuttle.domain.ports import UseCaseError
from shuttle.viewmodels.transfer_vm import TransferVM


class VMStub:
    def __init__(self) -> None:
        self.moves: List[Direction] = []

    def move(self, direction: Direction):
        self.moves.append(direction)
        return None


def test_button_commands_map_to_directions() -> None:
    assert COMMAND_DIRECTIONS == {
        Command.MOVE_RIGHT: Direction.LEFT_TO_RIGHT,
        Command.MOVE_LEFT: Direction.RIGHT_TO_LEFT,
    }


def test_dispatch_accepts_enum_and_string_values() -> None:
    vm = VMStub()
    dispatcher = CommandDispatcher(vm)  # type: ignore[arg-type]

    dispatcher.dispatch(Command.MOVE_LEFT)
    dispatcher.dispatch("move_right")
    dispatcher.on_move_right()
    dispatcher.on_move_left()

    assert vm.moves == [
        Direction.RIGHT_TO_LEFT,
        Direction.LEFT_TO_RIGHT,
        Direction.LEFT_TO_RIGHT,
        Direction.RIGHT_TO_LEFT,
    ]


def test_unknown_command_raises_use_case_error() -> None:
    dispatcher = CommandDispatcher(VMStub())  # type: ignore[arg-type]

    with pytest.raises(UseCaseError) as exc_info:
        dispatcher.dispatch("sideways")

    assert exc_info.value.code == "UNKNOWN_COMMAND"


def test_dispatch_moves_items_on_real_vm() -> None:
    vm = TransferVM(left=["Australia", "Vienna"], right=["Rome", "Tokyo"])
    dispatcher = CommandDispatcher(vm)

    vm.set_selection(Side.RIGHT, "Tokyo")
    assert dispatcher.on_move_left() == "Tokyo"

    assert vm.contents() == {
        Side.LEFT: ("Australia", "Vienna", "Tokyo"),
        Side.RIGHT: ("Rome",),
    }
