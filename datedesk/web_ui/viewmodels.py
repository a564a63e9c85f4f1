"""Thin web-facing viewmodels for NiceGUI bindings.

These viewmodels hold browser form state and translate to/from existing core
viewmodels without adding I/O or orchestration logic.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
from typing import Any, Dict, Mapping

from datedesk.viewmodels.calendar_vm import (
    DEFAULT_FORMAT_LABEL,
    DEFAULT_RANGE_END,
    DEFAULT_RANGE_START,
    CalendarVM,
    Command,
)
from datedesk.viewmodels.settings_vm import SettingsVM


@dataclass
class WebSettingsVM:
    """Browser-editable settings projection for NiceGUI forms."""

    range_start: str = DEFAULT_RANGE_START
    range_end: str = DEFAULT_RANGE_END
    default_format: str = DEFAULT_FORMAT_LABEL
    debug_logging: bool = False

    @classmethod
    def from_settings_vm(cls, settings_vm: SettingsVM) -> "WebSettingsVM":
        """Build browser form state from the core ``SettingsVM`` snapshot."""
        return cls.from_payload(settings_vm.to_dict())

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "WebSettingsVM":
        """Build browser form state from a settings payload mapping."""
        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping.")
        return cls(
            range_start=str(payload.get("range_start") or DEFAULT_RANGE_START).strip(),
            range_end=str(payload.get("range_end") or DEFAULT_RANGE_END).strip(),
            default_format=str(payload.get("default_format") or DEFAULT_FORMAT_LABEL),
            debug_logging=bool(payload.get("debug_logging")),
        )

    def to_payload(self) -> Dict[str, Any]:
        """Serialize browser form state using ``SettingsVM`` payload shape."""
        return {
            "range_start": str(self.range_start or "").strip(),
            "range_end": str(self.range_end or "").strip(),
            "default_format": str(self.default_format or ""),
            "debug_logging": bool(self.debug_logging),
        }

    def load(self, settings_vm: SettingsVM) -> None:
        """Refresh the form fields from the core settings viewmodel."""
        fresh = self.from_settings_vm(settings_vm)
        self.range_start = fresh.range_start
        self.range_end = fresh.range_end
        self.default_format = fresh.default_format
        self.debug_logging = fresh.debug_logging


@dataclass
class WebCalendarForm:
    """Input widget values for one page; submitted into a ``CalendarVM``."""

    date1: str = ""
    date2: str = ""
    format_label: str = DEFAULT_FORMAT_LABEL

    def submit(self, vm: CalendarVM, command: Command | str) -> str:
        vm.set_date1(self.date1)
        vm.set_date2(self.date2)
        vm.set_format_label(self.format_label)
        return vm.dispatch(command)


def parse_settings_json(text: str) -> Dict[str, Any]:
    """Parse imported settings JSON into a mapping payload."""
    raw = json.loads(text)
    if not isinstance(raw, dict):
        raise ValueError("Imported settings must be a JSON object.")
    return dict(raw)
