"""
MainWindowView
---------------
Tkinter main window for the calendar tool.
This file contains **only View code**: no date parsing, no formatting. It
exposes callback hooks that are connected to ``CalendarVM`` by ``App``.

The window provides:
  * Two date inputs and the target-format dropdown
  * Five command buttons
  * A read-only output area
  * StatusBar with a Settings button at the bottom
"""
from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional, Sequence

from .view_utils import safe_call

# Button order matches the command enum values in CalendarVM.
COMMAND_BUTTONS = (
    ("show_now", "Current date/time"),
    ("validate", "Validate date"),
    ("convert", "Convert format"),
    ("check_range", "Check range"),
    ("difference", "Calculate difference"),
)


class MainWindowView(tk.Tk):
    """Top-level application window.

    UI-only. Field values are read through :meth:`get_date1`,
    :meth:`get_date2` and :meth:`get_format_label`; results are written with
    :meth:`set_output`.
    """

    OnVoid = Optional[Callable[[], None]]
    OnCommand = Optional[Callable[[str], None]]

    def __init__(
        self,
        *,
        format_labels: Sequence[str] = (),
        on_command: OnCommand = None,
        on_open_settings: OnVoid = None,
    ) -> None:
        super().__init__()

        # ---- Window basics ----
        self.title("Calendar Tool")
        self.geometry("850x400")
        self.resizable(False, False)

        self._on_command = on_command
        self._on_open_settings = on_open_settings
        self._format_labels = tuple(format_labels)

        self.date1_var = tk.StringVar(value="")
        self.date2_var = tk.StringVar(value="")
        self.format_var = tk.StringVar(value=self._format_labels[0] if self._format_labels else "")

        self.rowconfigure(1, weight=1)
        self.columnconfigure(0, weight=1)

        self._build_form(self)
        self._build_output(self)
        self._build_statusbar(self)

        self.bind("<Return>", lambda e: self._emit("validate"))
        self.bind("<Control-d>", lambda e: self._emit("difference"))

    # ------------------------------------------------------------------
    # Form: inputs, format selector, command buttons
    # ------------------------------------------------------------------
    def _build_form(self, parent: tk.Widget) -> None:
        form = ttk.Frame(parent)
        form.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 4))
        form.columnconfigure(1, weight=1)

        ttk.Label(form, text="Date 1 (dd.mm.yyyy):").grid(row=0, column=0, sticky="w", padx=8, pady=4)
        self.entry_date1 = ttk.Entry(form, textvariable=self.date1_var, width=24)
        self.entry_date1.grid(row=0, column=1, sticky="w", padx=8, pady=4)

        ttk.Label(form, text="Date 2 (optional, for difference):").grid(
            row=1, column=0, sticky="w", padx=8, pady=4
        )
        ttk.Entry(form, textvariable=self.date2_var, width=24).grid(
            row=1, column=1, sticky="w", padx=8, pady=4
        )

        ttk.Label(form, text="Target format:").grid(row=2, column=0, sticky="w", padx=8, pady=4)
        self.format_box = ttk.Combobox(
            form,
            textvariable=self.format_var,
            values=self._format_labels,
            state="readonly",
            width=40,
        )
        self.format_box.grid(row=2, column=1, sticky="w", padx=8, pady=4)

        buttons = ttk.Frame(form)
        buttons.grid(row=3, column=0, columnspan=2, pady=(8, 0))
        for col, (command, label) in enumerate(COMMAND_BUTTONS):
            ttk.Button(buttons, text=label, command=lambda c=command: self._emit(c)).grid(
                row=0, column=col, padx=6
            )

    def _build_output(self, parent: tk.Widget) -> None:
        frame = ttk.Frame(parent)
        frame.grid(row=1, column=0, sticky="nsew", padx=8, pady=4)
        frame.rowconfigure(0, weight=1)
        frame.columnconfigure(0, weight=1)

        self.output = tk.Text(frame, height=8, width=50, wrap="word", state="disabled")
        vbar = ttk.Scrollbar(frame, orient="vertical", command=self.output.yview)
        self.output.configure(yscrollcommand=vbar.set)
        self.output.grid(row=0, column=0, sticky="nsew")
        vbar.grid(row=0, column=1, sticky="ns")

    def _build_statusbar(self, parent: tk.Widget) -> None:
        status = ttk.Frame(parent)
        status.grid(row=2, column=0, sticky="ew", padx=8, pady=(4, 8))
        status.columnconfigure(0, weight=1)

        self.status_message_var = tk.StringVar(value="Ready.")
        ttk.Label(status, textvariable=self.status_message_var).grid(row=0, column=0, sticky="w")
        ttk.Button(status, text="Settings", command=self._on_open_settings).grid(row=0, column=1, sticky="e")

    # ------------------------------------------------------------------
    # Public API (called by App)
    # ------------------------------------------------------------------
    def get_date1(self) -> str:
        return self.date1_var.get()

    def get_date2(self) -> str:
        return self.date2_var.get()

    def get_format_label(self) -> str:
        return self.format_var.get()

    def set_format_label(self, label: str) -> None:
        self.format_var.set(label)

    def set_output(self, text: str) -> None:
        """Replace the output area content; the widget stays read-only."""
        self.output.configure(state="normal")
        self.output.delete("1.0", "end")
        self.output.insert("1.0", text)
        self.output.configure(state="disabled")

    def set_status_message(self, text: str) -> None:
        self.status_message_var.set(text)

    def show_toast(self, message: str, level: str = "info") -> None:
        """
        Lightweight user feedback in the statusbar.
        level is currently informational.
        """
        self.status_message_var.set(message)

    # ------------------------------------------------------------------
    def _emit(self, command: str) -> None:
        safe_call(self._on_command, command, on_error=lambda exc: self.show_toast(str(exc), "error"))


if __name__ == "__main__":
    win = MainWindowView(format_labels=("ISO",))
    win.mainloop()
