"""ttk styling for the calendar tool windows."""

from __future__ import annotations

from dataclasses import dataclass
import tkinter as tk
from tkinter import ttk


@dataclass(frozen=True)
class Palette:
    window: str = "#eef1f6"
    field: str = "#ffffff"
    ink: str = "#22303f"
    muted: str = "#5b6b7c"
    edge: str = "#c6cfdc"
    accent: str = "#2f6fb1"
    hover: str = "#e2ebf7"
    mono_font: tuple = ("TkFixedFont", 11)


PALETTE = Palette()


def apply_modern_theme(root: tk.Misc, palette: Palette = PALETTE) -> None:
    """Style every ttk widget class used by the main window and settings dialog."""
    style = ttk.Style(root)
    if "clam" in style.theme_names():
        style.theme_use("clam")

    root.configure(bg=palette.window)
    style.configure(".", background=palette.window, foreground=palette.ink)
    style.configure("TLabelframe", background=palette.window, bordercolor=palette.edge)
    style.configure("TLabelframe.Label", background=palette.window, foreground=palette.muted)
    style.configure("TCheckbutton", background=palette.window)
    style.map("TCheckbutton", background=[("active", palette.window)])

    style.configure("TButton", padding=(8, 4), bordercolor=palette.edge)
    style.map(
        "TButton",
        background=[("pressed", palette.accent), ("active", palette.hover)],
        foreground=[("pressed", palette.field)],
    )

    for field in ("TEntry", "TCombobox"):
        style.configure(field, fieldbackground=palette.field, bordercolor=palette.edge)
    style.map("TCombobox", fieldbackground=[("readonly", palette.field)])
    style.configure("Vertical.TScrollbar", troughcolor=palette.window, bordercolor=palette.edge)


def style_output(text: tk.Text, palette: Palette = PALETTE) -> None:
    """Plain ``tk.Text`` ignores ttk styles; colour the result area directly."""
    text.configure(
        background=palette.field,
        foreground=palette.ink,
        font=palette.mono_font,
        relief="flat",
        highlightthickness=1,
        highlightbackground=palette.edge,
        highlightcolor=palette.accent,
        padx=6,
        pady=4,
    )
