# datedesk/app/main.py
from __future__ import annotations
import logging
import os
from typing import Dict, Optional

# ---- Views (UI-only) ----
from .views.main_window import MainWindowView
from .views.settings_dialog import SettingsDialog
from .views.theme import apply_modern_theme, style_output

# ---- ViewModels ----
from ..viewmodels.calendar_vm import FORMAT_LABEL_CHOICES, CalendarVM
from ..viewmodels.settings_vm import SettingsVM

# ---- Domain, UseCases & Adapter ----
from ..domain.date_engine import DateFormatEngine
from ..domain.ports import UseCaseError
from ..adapters.storage_local import StorageLocal
from ..usecases.load_user_settings import LoadUserSettings
from ..usecases.save_user_settings import SaveUserSettings
from ..utils import logging as logging_utils

logging_utils.configure_root()


class App:
    """Bootstrap: wire the main window to CalendarVM, settings and storage."""

    def __init__(self) -> None:
        self._log = logging.getLogger(__name__)
        self.win = MainWindowView(
            format_labels=FORMAT_LABEL_CHOICES,
            on_command=self._on_command,
            on_open_settings=self._on_open_settings,
        )
        apply_modern_theme(self.win)
        style_output(self.win.output)
        self._settings_dialog: Optional[SettingsDialog] = None

        # ---- ViewModels ----
        self.settings_vm = SettingsVM()
        self.calendar_vm = CalendarVM(DateFormatEngine(), on_output=self.win.set_output)

        # ---- LocalStorage Adapter & UseCases ----
        self._storage_root = os.environ.get("DATEDESK_STORAGE_ROOT") or "."
        self._storage = StorageLocal(root_dir=self._storage_root)
        self.uc_load_settings = LoadUserSettings(self._storage)
        self.uc_save_settings = SaveUserSettings(self._storage)
        self._load_user_settings()

        self.win.set_format_label(self.settings_vm.default_format)
        self.win.set_status_message("Ready.")

    def _load_user_settings(self) -> None:
        payload: Optional[Dict] = None
        try:
            payload = self.uc_load_settings()
        except UseCaseError as exc:
            self._toast_error(exc)
        if payload is not None:
            try:
                self.settings_vm.apply_dict(payload)
            except ValueError as exc:
                self._toast_error(exc, context="Stored settings ignored")
        self._apply_settings()

    def _apply_settings(self) -> None:
        self.calendar_vm.set_range(self.settings_vm.range_start, self.settings_vm.range_end)
        self.calendar_vm.set_format_label(self.settings_vm.default_format)
        level = logging_utils.apply_gui_preferences(self.settings_vm)
        self._log.debug("Effective GUI log level: %s", logging_utils.level_name(level))

    # ==================================================================
    # Actions
    # ==================================================================
    def _on_command(self, command: str) -> None:
        """Copy the current field values into the VM and run the command."""
        self.calendar_vm.set_date1(self.win.get_date1())
        self.calendar_vm.set_date2(self.win.get_date2())
        self.calendar_vm.set_format_label(self.win.get_format_label())
        self.calendar_vm.dispatch(command)

    def _on_open_settings(self) -> None:
        if self._settings_dialog is not None:
            self._settings_dialog.lift()
            return
        dialog = SettingsDialog(
            self.win,
            format_labels=FORMAT_LABEL_CHOICES,
            on_save=self._on_save_settings,
            on_close=self._on_settings_closed,
        )
        dialog.set_range(self.settings_vm.range_start, self.settings_vm.range_end)
        dialog.set_default_format(self.settings_vm.default_format)
        dialog.set_debug_logging(self.settings_vm.debug_logging)
        self._settings_dialog = dialog

    def _on_settings_closed(self) -> None:
        self._settings_dialog = None

    def _on_save_settings(self, payload: Dict) -> None:
        previous = self.settings_vm.to_dict()
        try:
            self.settings_vm.apply_dict(payload)
            self.uc_save_settings(self.settings_vm.to_dict())
        except ValueError as exc:
            self._toast_error(exc)
            return
        except UseCaseError as exc:
            # Nothing was written; keep the VM in step with the file.
            self.settings_vm.apply_dict(previous)
            self._toast_error(exc)
            return
        self._apply_settings()
        self.win.set_format_label(self.settings_vm.default_format)
        self._log.info(
            "Settings saved: range=%s..%s format=%s",
            self.settings_vm.range_start,
            self.settings_vm.range_end,
            self.settings_vm.default_format,
        )
        self.win.show_toast("Settings saved.")

    # ==================================================================
    # Error handling helpers
    # ==================================================================
    def _toast_error(self, err: Exception, *, context: Optional[str] = None) -> None:
        message = self._format_error_message(err)
        if context:
            message = f"{context}: {message}"
        self.win.show_toast(message)

    def _format_error_message(self, err: Exception) -> str:
        if isinstance(err, UseCaseError):
            self._log.warning("UseCase error (%s): %s", err.code, err.message)
            return err.message
        if isinstance(err, ValueError):
            self._log.warning("Invalid settings: %s", err)
            return f"Invalid settings: {err}"
        self._log.exception("Unexpected error")
        return str(err)


def main() -> None:
    app = App()
    app.win.mainloop()


if __name__ == "__main__":
    main()
