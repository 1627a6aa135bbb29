"""Shared visual theme for the transfer window.

Centralizes ttk style tokens and the classic ``tk.Listbox`` colours so the
views carry no styling logic of their own.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

BG = "#f3f5f9"
CARD_BG = "#ffffff"
BORDER = "#d9dfeb"
TEXT = "#1f2937"
SELECTED = "#d9e4ff"


def apply_modern_theme(root: tk.Misc) -> None:
    """Apply a cohesive ttk + tk visual theme to the full application.

    Args:
        root: Root Tk object or any widget tied to the app Tcl interpreter.
    """
    style = ttk.Style(root)
    if "clam" in style.theme_names():
        style.theme_use("clam")

    root.option_add("*Font", "TkDefaultFont 10")
    root.configure(bg=BG)

    style.configure(".", background=BG, foreground=TEXT)
    style.configure("TFrame", background=BG)
    style.configure("TLabel", background=BG, foreground=TEXT)
    style.configure("Header.TLabel", background=BG, foreground=TEXT, font=("TkDefaultFont", 10, "bold"))
    style.configure(
        "TButton",
        padding=(6, 4),
        background=CARD_BG,
        bordercolor=BORDER,
        relief="flat",
    )
    style.map("TButton", background=[("active", "#edf2ff")])


def listbox_options() -> dict:
    """Return ``tk.Listbox`` options matching the ttk theme colours."""
    return {
        "background": CARD_BG,
        "foreground": TEXT,
        "selectbackground": SELECTED,
        "selectforeground": TEXT,
        "highlightthickness": 1,
        "highlightbackground": BORDER,
        "relief": "flat",
    }


__all__ = ["apply_modern_theme", "listbox_options"]
