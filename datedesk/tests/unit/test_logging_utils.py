from __future__ import annotations

import logging
from types import SimpleNamespace

import pytest

from datedesk.utils import logging as logging_utils
from datedesk.viewmodels.settings_vm import SettingsVM


def _settings(debug: bool) -> SettingsVM:
    vm = SettingsVM()
    vm.set_debug_logging(debug)
    return vm


def test_env_level_overrides_gui_preference(monkeypatch) -> None:
    monkeypatch.setenv("DATEDESK_LOG_LEVEL", "warning")
    monkeypatch.delenv("DATEDESK_DEBUG", raising=False)

    assert logging_utils.apply_gui_preferences(_settings(True)) == logging.WARNING
    assert logging_utils.env_requests_debug() is False


def test_gui_preference_without_env(monkeypatch) -> None:
    monkeypatch.delenv("DATEDESK_LOG_LEVEL", raising=False)
    monkeypatch.delenv("DATEDESK_DEBUG", raising=False)

    assert logging_utils.apply_gui_preferences(_settings(True)) == logging.DEBUG
    assert logging_utils.apply_gui_preferences(SimpleNamespace(debug_logging=False)) == logging.INFO


def test_debug_flag_and_numeric_levels(monkeypatch) -> None:
    monkeypatch.delenv("DATEDESK_LOG_LEVEL", raising=False)
    monkeypatch.setenv("DATEDESK_DEBUG", "on")
    assert logging_utils.env_requests_debug() is True

    monkeypatch.setenv("DATEDESK_LOG_LEVEL", "15")
    assert logging_utils.configure_root() == 15
    assert logging_utils.level_name(logging.ERROR) == "ERROR"


@pytest.mark.parametrize("raw", ["²", "①", "verbose"])
def test_unparseable_env_level_falls_back_to_info(monkeypatch, raw: str) -> None:
    monkeypatch.delenv("DATEDESK_DEBUG", raising=False)
    monkeypatch.setenv("DATEDESK_LOG_LEVEL", raw)

    assert logging_utils.parse_level(raw) is None
    assert logging_utils.configure_root() == logging.INFO
