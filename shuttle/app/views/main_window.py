"""
MainWindowView
---------------
Tkinter main window for the list shuttle. This file contains **only View
code**: no list logic. It exposes callback hooks that are expected to be
connected to the command dispatcher.

Layout (three grid columns):
  * Column 0: "Countries" header + left list panel (grows)
  * Column 1: button column with " > " above " < "
  * Column 2: "Capitals" header + right list panel (grows)
  * StatusBar at the bottom
"""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from ..config import WindowConfig
from .list_panel_view import ListPanelView
from .theme import apply_modern_theme


class MainWindowView(tk.Tk):
    """Top-level application window.

    This class is UI-only. It builds the grid, owns both list panels, and
    forwards button presses to the callbacks given to the constructor.
    """

    # ---- Callback type aliases ----
    OnVoid = Optional[Callable[[], None]]

    def __init__(
        self,
        *,
        config: Optional[WindowConfig] = None,
        on_move_right: OnVoid = None,
        on_move_left: OnVoid = None,
    ) -> None:
        super().__init__()
        self.window_config = config or WindowConfig()

        # ---- Window basics ----
        self.title(self.window_config.title)
        self.geometry(self.window_config.geometry)
        apply_modern_theme(self)

        # Keep references to callbacks (can be None; we guard before calling)
        self._on_move_right = on_move_right
        self._on_move_left = on_move_left

        # ---- High-level layout: 2 rows (Main, Status) ----
        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)

        self._build_main_area(self)
        self._build_statusbar(self)

        # Keyboard shortcuts
        self.bind("<Control-Right>", lambda e: self._fire(self._on_move_right))
        self.bind("<Control-Left>", lambda e: self._fire(self._on_move_left))

    # ------------------------------------------------------------------
    # Main Area
    # ------------------------------------------------------------------
    def _build_main_area(self, parent: tk.Widget) -> None:
        cfg = self.window_config
        grid = ttk.Frame(parent, padding=cfg.padding)
        grid.grid(row=0, column=0, sticky="nsew")

        grid.columnconfigure(0, minsize=cfg.list_min_width, weight=1)
        grid.columnconfigure(1, minsize=cfg.button_column_width, weight=0)
        grid.columnconfigure(2, minsize=cfg.list_min_width, weight=1)
        grid.rowconfigure(1, weight=1)

        ttk.Label(grid, text=cfg.left_header, style="Header.TLabel").grid(
            row=0, column=0, pady=(0, cfg.gap)
        )
        ttk.Label(grid, text=cfg.right_header, style="Header.TLabel").grid(
            row=0, column=2, pady=(0, cfg.gap)
        )

        self.left_panel = ListPanelView(grid)
        self.left_panel.grid(row=1, column=0, sticky="nsew")
        self.right_panel = ListPanelView(grid)
        self.right_panel.grid(row=1, column=2, sticky="nsew")

        buttons = ttk.Frame(grid)
        buttons.grid(row=1, column=1, sticky="n", padx=cfg.gap)
        self.btn_move_right = ttk.Button(
            buttons, text=cfg.move_right_label, command=lambda: self._fire(self._on_move_right)
        )
        self.btn_move_left = ttk.Button(
            buttons, text=cfg.move_left_label, command=lambda: self._fire(self._on_move_left)
        )
        self.btn_move_right.pack(side=tk.TOP, fill=tk.X, pady=(0, cfg.gap))
        self.btn_move_left.pack(side=tk.TOP, fill=tk.X)

    # ------------------------------------------------------------------
    # StatusBar
    # ------------------------------------------------------------------
    def _build_statusbar(self, parent: tk.Widget) -> None:
        status = ttk.Frame(parent)
        status.grid(row=1, column=0, sticky="ew", padx=8, pady=(0, 6))
        status.columnconfigure(0, weight=1)

        self.status_message_var = tk.StringVar(value="Ready.")
        ttk.Label(status, textvariable=self.status_message_var).grid(row=0, column=0, sticky="w")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def set_status_message(self, text: str) -> None:
        """Update the short status message shown in the status bar."""
        self.status_message_var.set(text)

    def show_toast(self, message: str, level: str = "info") -> None:
        """Lightweight user feedback in the statusbar."""
        self.status_message_var.set(message)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _fire(callback: OnVoid) -> None:
        if callback:
            callback()
