"""Explicit command dispatch from button intents to transfer operations.

Call chain:
    ``MainWindowView`` buttons -> ``App`` callbacks -> ``CommandDispatcher``
    -> ``TransferVM.move``.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Union

from ..domain.entities import Command, Direction, Item
from ..domain.ports import UseCaseError
from ..viewmodels.transfer_vm import TransferVM

COMMAND_DIRECTIONS: Dict[Command, Direction] = {
    Command.MOVE_RIGHT: Direction.LEFT_TO_RIGHT,
    Command.MOVE_LEFT: Direction.RIGHT_TO_LEFT,
}


class CommandDispatcher:
    """Map discrete ``Command`` values onto ``TransferVM`` moves."""

    def __init__(self, vm: TransferVM) -> None:
        self.vm = vm
        self._log = logging.getLogger(__name__)

    @staticmethod
    def direction_for(command: Union[Command, str]) -> Direction:
        """Resolve a command (enum or its string value) to a direction.

        Raises:
            UseCaseError: ``command`` is not one of the known button commands.
        """
        try:
            return COMMAND_DIRECTIONS[Command(command)]
        except (KeyError, ValueError):
            raise UseCaseError("UNKNOWN_COMMAND", f"Unknown command: {command!r}") from None

    def dispatch(self, command: Union[Command, str]) -> Optional[Item]:
        direction = self.direction_for(command)
        self._log.debug("Dispatch %s -> %s", Command(command).value, direction.value)
        return self.vm.move(direction)

    # ---- Zero-argument button callbacks ----
    def on_move_right(self) -> Optional[Item]:
        return self.dispatch(Command.MOVE_RIGHT)

    def on_move_left(self) -> Optional[Item]:
        return self.dispatch(Command.MOVE_LEFT)


__all__ = ["COMMAND_DIRECTIONS", "CommandDispatcher"]
