"""List panel view mirroring one ``ObservableList`` into a ``tk.Listbox``.

The panel applies add/remove deltas as they are published, so the widget
always matches the collection without full redraws. Selection changes are
emitted through ``on_select``.
"""

from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from ...domain.entities import Item, ListChange
from ...domain.observable_list import ObservableList
from .theme import listbox_options

_log = logging.getLogger(__name__)


class ListPanelView(ttk.Frame):
    """Single-select listbox bound to an observable collection."""

    def __init__(
        self,
        parent,
        *,
        on_select: Optional[Callable[[Optional[Item]], None]] = None,
        **kwargs,
    ):
        """Build listbox + vertical scrollbar.

        Args:
            parent: Grid cell container from ``MainWindowView``.
            on_select: Called with the highlighted item, or ``None`` when the
                highlight is cleared by the user.
            **kwargs: Additional frame options forwarded to ``ttk.Frame``.
        """
        super().__init__(parent, **kwargs)
        self.on_select = on_select
        self._collection: Optional[ObservableList] = None
        self._unsubscribe: Optional[Callable[[], None]] = None

        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)

        # exportselection=False keeps both lists' highlights independent.
        self.listbox = tk.Listbox(
            self,
            selectmode=tk.BROWSE,
            exportselection=False,
            activestyle="none",
            **listbox_options(),
        )
        vsb = ttk.Scrollbar(self, orient="vertical", command=self.listbox.yview)
        self.listbox.configure(yscrollcommand=vsb.set)

        self.listbox.grid(row=0, column=0, sticky="nsew")
        vsb.grid(row=0, column=1, sticky="ns")

        self.listbox.bind("<<ListboxSelect>>", self._on_select_changed)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def bind_collection(self, collection: ObservableList) -> None:
        """Render ``collection`` and follow its deltas until rebound."""
        self.unbind_collection()
        self._collection = collection
        self.listbox.delete(0, tk.END)
        for item in collection:
            self.listbox.insert(tk.END, item)
        self._unsubscribe = collection.subscribe(self._apply_change)

    def unbind_collection(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
        self._unsubscribe = None
        self._collection = None

    def selected_item(self) -> Optional[Item]:
        """Return the highlighted item text, if any."""
        selection = self.listbox.curselection()
        if not selection:
            return None
        return self.listbox.get(selection[0])

    def clear_selection(self) -> None:
        self.listbox.selection_clear(0, tk.END)

    def items(self) -> tuple:
        return tuple(self.listbox.get(0, tk.END))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _apply_change(self, change: ListChange) -> None:
        if change.kind == "added":
            self.listbox.insert(change.index, change.item)
            self.listbox.see(change.index)
        elif change.kind == "removed":
            self.listbox.delete(change.index)
        else:
            _log.warning("Unhandled list change: %s", change)

    def _on_select_changed(self, _event=None) -> None:
        if self.on_select:
            self.on_select(self.selected_item())


__all__ = ["ListPanelView"]
