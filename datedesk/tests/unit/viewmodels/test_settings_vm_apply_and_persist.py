from __future__ import annotations

import pytest

from datedesk.viewmodels.calendar_vm import FORMAT_LABEL_CHOICES
from datedesk.viewmodels.settings_vm import SettingsVM, default_settings_payload


def test_defaults() -> None:
    payload = default_settings_payload()
    assert payload["range_start"] == "01.01.1900"
    assert payload["range_end"] == "31.12.2100"
    assert payload["default_format"] == FORMAT_LABEL_CHOICES[0]
    assert set(payload) == {"range_start", "range_end", "default_format", "debug_logging"}


def test_apply_dict_updates_flat_keys() -> None:
    vm = SettingsVM()
    vm.apply_dict(
        {
            "range_start": " 01.01.2000 ",
            "range_end": "31.12.2030",
            "default_format": FORMAT_LABEL_CHOICES[1],
            "debug_logging": "yes",
        }
    )

    assert vm.range_start == "01.01.2000"
    assert vm.range_end == "31.12.2030"
    assert vm.default_format == FORMAT_LABEL_CHOICES[1]
    assert vm.debug_logging is True
    assert vm.is_valid() is True


@pytest.mark.parametrize(
    "payload",
    [
        ["not", "a", "mapping"],
        {"box_urls": {}},
        {"range_start": "31.02.2000"},
        {"range_end": 2100},
        {"default_format": "Format 7"},
        {"range_start": "01.01.2050", "range_end": "01.01.2000"},
    ],
)
def test_apply_dict_rejects_invalid_payloads(payload) -> None:
    vm = SettingsVM()
    before = vm.to_dict()
    with pytest.raises(ValueError):
        vm.apply_dict(payload)
    assert vm.to_dict() == before


def test_setters_validate_dates() -> None:
    vm = SettingsVM()
    vm.range_start = "02.01.1900"
    assert vm.range_start == "02.01.1900"
    with pytest.raises(ValueError):
        vm.range_end = "32.12.2100"


def test_cmd_save_emits_snapshot() -> None:
    saved = []
    vm = SettingsVM(on_save=saved.append)
    vm.set_debug_logging(True)
    vm.cmd_save()
    assert saved == [vm.to_dict()]
    assert saved[0]["debug_logging"] is True


def test_debug_logging_default_follows_env(monkeypatch) -> None:
    monkeypatch.delenv("DATEDESK_LOG_LEVEL", raising=False)
    monkeypatch.setenv("DATEDESK_DEBUG", "1")
    assert SettingsVM().debug_logging is True
    monkeypatch.setenv("DATEDESK_DEBUG", "0")
    assert SettingsVM().debug_logging is False
