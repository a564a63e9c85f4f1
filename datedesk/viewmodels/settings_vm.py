from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Callable, Dict, Mapping, Optional

from ..domain.calendar_date import DateParseError, parse_date
from ..utils.logging import env_requests_debug
from .calendar_vm import (
    DEFAULT_FORMAT_LABEL,
    DEFAULT_RANGE_END,
    DEFAULT_RANGE_START,
    FORMAT_LABELS,
)


@dataclass
class SettingsConfig:
    """Typed runtime settings that persist via StorageLocal."""

    range_start: str = DEFAULT_RANGE_START
    range_end: str = DEFAULT_RANGE_END
    default_format: str = DEFAULT_FORMAT_LABEL


def _default_debug_logging() -> bool:
    return env_requests_debug()


class SettingsVM:
    """Keeps app settings UI state and validation, no I/O here."""

    def __init__(
        self,
        *,
        config: Optional[SettingsConfig] = None,
        on_save: Optional[Callable[[dict], None]] = None,
    ) -> None:
        self.config = config or SettingsConfig()
        self.on_save = on_save
        self.debug_logging: bool = _default_debug_logging()

    # ------------------------------------------------------------------
    # Properties bridging to the typed config
    # ------------------------------------------------------------------
    @property
    def range_start(self) -> str:
        return self.config.range_start

    @range_start.setter
    def range_start(self, value: str) -> None:
        self.config = replace(self.config, range_start=self._coerce_date("range_start", value))

    @property
    def range_end(self) -> str:
        return self.config.range_end

    @range_end.setter
    def range_end(self, value: str) -> None:
        self.config = replace(self.config, range_end=self._coerce_date("range_end", value))

    @property
    def default_format(self) -> str:
        return self.config.default_format

    @default_format.setter
    def default_format(self, value: str) -> None:
        self.config = replace(self.config, default_format=self._coerce_format_label(value))

    # ------------------------------------------------------------------
    def is_valid(self) -> bool:
        try:
            start = parse_date(self.range_start)
            end = parse_date(self.range_end)
        except DateParseError:
            return False
        if start > end:
            return False
        return self.default_format in FORMAT_LABELS

    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Apply persisted settings to the view-model.

        The payload is validated as a whole; on error nothing is changed.
        """

        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        allowed_flat_keys = {*SettingsConfig.__annotations__.keys(), "debug_logging"}
        unknown = set(payload.keys()) - allowed_flat_keys
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")

        updates: Dict[str, Any] = {}
        for cfg_key in SettingsConfig.__annotations__.keys():
            if cfg_key in payload:
                updates[cfg_key] = self._coerce_config_value(cfg_key, payload[cfg_key])

        candidate = replace(self.config, **updates) if updates else self.config
        if parse_date(candidate.range_start) > parse_date(candidate.range_end):
            raise ValueError("range_start must not be after range_end.")

        debug = self.debug_logging
        if "debug_logging" in payload:
            debug = self._coerce_bool(payload["debug_logging"])

        self.config = candidate
        self.debug_logging = debug

    def to_dict(self) -> dict:
        snapshot = asdict(self.config)
        snapshot["debug_logging"] = bool(self.debug_logging)
        return snapshot

    def set_debug_logging(self, enabled: bool) -> None:
        self.debug_logging = self._coerce_bool(enabled)

    def cmd_save(self) -> None:
        if not self.is_valid():
            raise ValueError("Settings invalid")
        if self.on_save:
            self.on_save(self.to_dict())

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _coerce_config_value(self, key: str, raw: Any) -> Any:
        if key in {"range_start", "range_end"}:
            return self._coerce_date(key, raw)
        if key == "default_format":
            return self._coerce_format_label(raw)
        raise ValueError(f"Unhandled config field: {key}")

    @staticmethod
    def _coerce_date(name: str, value: Any) -> str:
        if not isinstance(value, str):
            raise ValueError(f"{name} must be a dd.mm.yyyy string.")
        text = value.strip()
        try:
            parse_date(text)
        except DateParseError as exc:
            raise ValueError(f"{name} must be a dd.mm.yyyy date, got '{text}'.") from exc
        return text

    @staticmethod
    def _coerce_format_label(value: Any) -> str:
        text = "" if value is None else str(value).strip()
        if text not in FORMAT_LABELS:
            raise ValueError(f"default_format must be one of: {', '.join(FORMAT_LABELS)}")
        return text

    @staticmethod
    def _coerce_bool(value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)


def default_settings_payload() -> dict:
    """Return a fresh snapshot containing the default settings payload."""
    return SettingsVM().to_dict()
