# shuttle/app/main.py
from __future__ import annotations

import logging
from typing import Optional

# ---- Views (UI-only) ----
from .views.main_window import MainWindowView
from .views.list_panel_view import ListPanelView
from .views.view_utils import safe_call

# ---- ViewModels & dispatch ----
from ..domain.entities import Direction, Item, Side
from ..domain.ports import UseCaseError
from ..viewmodels.transfer_vm import TransferVM
from .config import WindowConfig
from .controller import CommandDispatcher
from ..utils import logging as logging_utils


class App:
    """Bootstrap: wire list panels <-> TransferVM and buttons -> dispatcher."""

    def __init__(self, config: Optional[WindowConfig] = None) -> None:
        self._log = logging.getLogger(__name__)
        config = config or WindowConfig.from_env()

        # ---- ViewModel ----
        self.vm = TransferVM(on_moved=self._on_moved)
        self.dispatcher = CommandDispatcher(self.vm)

        # ---- Main window with button callback wiring ----
        self.win = MainWindowView(
            config=config,
            on_move_right=lambda: self._on_button(self.dispatcher.on_move_right),
            on_move_left=lambda: self._on_button(self.dispatcher.on_move_left),
        )

        self._bind_panel(self.win.left_panel, Side.LEFT)
        self._bind_panel(self.win.right_panel, Side.RIGHT)
        self.win.set_status_message("Ready.")

    # ==================================================================
    # Wiring
    # ==================================================================
    def _bind_panel(self, panel: ListPanelView, side: Side) -> None:
        """Render one collection in ``panel`` and link its selection slot."""
        panel.bind_collection(self.vm.collection(side))
        panel.on_select = lambda item: self.vm.set_selection(side, item)
        slot = self.vm.selection(side)
        slot.on_changed = lambda item: self._on_selection_changed(panel, item)

    @staticmethod
    def _on_selection_changed(panel: ListPanelView, item: Optional[Item]) -> None:
        if item is None:
            panel.clear_selection()

    # ==================================================================
    # Buttons
    # ==================================================================
    def _on_button(self, handler) -> None:
        safe_call(handler, on_error=self._toast_error)

    def _on_moved(self, direction: Direction, item: Item) -> None:
        self.win.set_status_message(
            f"Moved {item!r} to {direction.destination.value}."
        )

    def _toast_error(self, err: Exception) -> None:
        if isinstance(err, UseCaseError):
            self._log.error("Command failed [%s]: %s", err.code, err.message)
            self.win.show_toast(err.message)
            return
        self._log.exception("Unexpected error while moving an item", exc_info=err)
        self.win.show_toast(f"Unexpected error: {err}")


def main() -> None:
    logging_utils.configure_root()
    app = App()
    app.win.mainloop()


if __name__ == "__main__":
    main()
