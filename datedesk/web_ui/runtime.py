"""NiceGUI runtime orchestration for the calendar tool.

This module composes the existing viewmodels and use cases for the web
runtime. Each browser page gets its own ``CalendarVM``; settings are shared.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Mapping, Optional

from datedesk.adapters.storage_local import StorageLocal
from datedesk.domain.date_engine import Clock, DateFormatEngine
from datedesk.domain.ports import UseCaseError
from datedesk.usecases.load_user_settings import LoadUserSettings
from datedesk.usecases.save_user_settings import SaveUserSettings
from datedesk.utils import logging as logging_utils
from datedesk.viewmodels.calendar_vm import CalendarVM
from datedesk.viewmodels.settings_vm import SettingsVM


LOGGER = logging.getLogger(__name__)


class WebRuntime:
    """Orchestration state used by NiceGUI views."""

    def __init__(self, *, storage_root: Optional[str] = None, clock: Optional[Clock] = None) -> None:
        self.status_message = "Ready."
        self.settings_vm = SettingsVM()
        self.engine = DateFormatEngine(clock)
        self.storage = StorageLocal(root_dir=storage_root or os.environ.get("DATEDESK_STORAGE_ROOT") or ".")
        self.uc_load_settings = LoadUserSettings(self.storage)
        self.uc_save_settings = SaveUserSettings(self.storage)

        self._load_settings_defaults()

    # ------------------------------------------------------------------
    # Basic projections
    # ------------------------------------------------------------------
    def settings_payload(self) -> Dict[str, Any]:
        return self.settings_vm.to_dict()

    def new_calendar_vm(self) -> CalendarVM:
        """Build a page-scoped dispatcher seeded from current settings."""
        return CalendarVM(
            self.engine,
            range_start=self.settings_vm.range_start,
            range_end=self.settings_vm.range_end,
            format_label=self.settings_vm.default_format,
        )

    # ------------------------------------------------------------------
    # Settings workflows
    # ------------------------------------------------------------------
    def apply_settings_payload(self, payload: Mapping[str, Any], *, persist: bool = True) -> None:
        """Validate, apply and (optionally) persist a settings payload.

        Raises:
            ValueError: when the payload is rejected by ``SettingsVM``.
            UseCaseError: when writing the settings file fails.
        """
        previous = self.settings_vm.to_dict()
        self.settings_vm.apply_dict(payload)
        if persist:
            try:
                self.uc_save_settings(self.settings_vm.to_dict())
            except UseCaseError:
                self.settings_vm.apply_dict(previous)
                raise
        logging_utils.apply_gui_preferences(self.settings_vm)
        self.status_message = "Settings applied."

    def _load_settings_defaults(self) -> None:
        try:
            payload = self.uc_load_settings()
        except UseCaseError as exc:
            LOGGER.warning("Could not load local settings defaults: %s", exc.message)
            return
        if payload is None:
            return
        try:
            self.settings_vm.apply_dict(payload)
        except ValueError as exc:
            LOGGER.warning("Could not apply local settings defaults: %s", exc)
