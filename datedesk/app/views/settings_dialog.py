from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional, Sequence

from .view_utils import safe_call


class SettingsDialog(tk.Toplevel):
    """Modal dialog to edit app settings (UI-only)."""

    OnVoid = Optional[Callable[[], None]]
    OnSave = Optional[Callable[[dict], None]]

    def __init__(
        self,
        parent: tk.Widget,
        *,
        format_labels: Sequence[str] = (),
        on_save: OnSave = None,
        on_close: OnVoid = None,
    ) -> None:
        super().__init__(parent)
        self.title("Settings")
        self.transient(parent)
        self.resizable(False, False)

        self._format_labels = tuple(format_labels)
        self._on_save = on_save
        self._on_close = on_close

        self.protocol("WM_DELETE_WINDOW", self._on_close_clicked)

        self.range_start_var = tk.StringVar(value="")
        self.range_end_var = tk.StringVar(value="")
        self.default_format_var = tk.StringVar(value=self._format_labels[0] if self._format_labels else "")
        self.debug_logging_var = tk.BooleanVar(value=False)

        self._build_ui()
        self.update_idletasks()
        self.geometry(self._center_over_parent(parent))
        self.grab_set()
        self.focus_set()

    # ------------------------------------------------------------------
    def _build_ui(self) -> None:
        pad = dict(padx=8, pady=6)

        bounds = ttk.Labelframe(self, text="Valid range (dd.mm.yyyy)")
        bounds.grid(row=0, column=0, sticky="ew", **pad)
        bounds.columnconfigure(1, weight=1)
        ttk.Label(bounds, text="From").grid(row=0, column=0, sticky="w")
        ttk.Entry(bounds, textvariable=self.range_start_var, width=14).grid(
            row=0, column=1, sticky="w", padx=(0, 8)
        )
        ttk.Label(bounds, text="To").grid(row=0, column=2, sticky="e")
        ttk.Entry(bounds, textvariable=self.range_end_var, width=14).grid(row=0, column=3, sticky="w")

        output = ttk.Labelframe(self, text="Conversion")
        output.grid(row=1, column=0, sticky="ew", **pad)
        ttk.Label(output, text="Default format").grid(row=0, column=0, sticky="w")
        ttk.Combobox(
            output,
            textvariable=self.default_format_var,
            values=self._format_labels,
            state="readonly",
            width=40,
        ).grid(row=0, column=1, sticky="w", padx=(8, 0))

        flags = ttk.Frame(self)
        flags.grid(row=2, column=0, sticky="ew", **pad)
        ttk.Checkbutton(flags, text="Enable debug logging", variable=self.debug_logging_var).pack(side="left")

        footer = ttk.Frame(self)
        footer.grid(row=3, column=0, sticky="ew", **pad)
        footer.columnconfigure(0, weight=1)
        ttk.Button(footer, text="Save", command=self._emit_save).pack(side="right", padx=(0, 6))
        ttk.Button(footer, text="Close", command=self._on_close_clicked).pack(side="right")

    # ------------------------------------------------------------------
    def _emit_save(self) -> None:
        settings = {
            "range_start": self.range_start_var.get().strip(),
            "range_end": self.range_end_var.get().strip(),
            "default_format": self.default_format_var.get(),
            "debug_logging": bool(self.debug_logging_var.get()),
        }
        safe_call(self._on_save, settings)

    def _on_close_clicked(self) -> None:
        safe_call(self._on_close)
        try:
            if self.winfo_exists():
                self.destroy()
        except tk.TclError:
            pass

    # ------------------------------------------------------------------
    # Public setters to initialize dialog fields from VM
    # ------------------------------------------------------------------
    def set_range(self, start: str, end: str) -> None:
        self.range_start_var.set(start)
        self.range_end_var.set(end)

    def set_default_format(self, label: str) -> None:
        self.default_format_var.set(label)

    def set_debug_logging(self, enabled: bool) -> None:
        self.debug_logging_var.set(bool(enabled))

    # ------------------------------------------------------------------
    @staticmethod
    def _center_over_parent(parent: tk.Widget) -> str:
        width = 460
        height = 240
        try:
            px = parent.winfo_rootx()
            py = parent.winfo_rooty()
            pw = parent.winfo_width()
            ph = parent.winfo_height()
        except tk.TclError:
            return f"{width}x{height}"
        x = px + (pw - width) // 2
        y = py + (ph - height) // 2
        return f"{width}x{height}+{x}+{y}"
