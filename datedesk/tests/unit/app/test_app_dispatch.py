from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import List

from datedesk.adapters.storage_local import StorageLocal
from datedesk.app.main import App
from datedesk.domain.date_engine import DateFormatEngine
from datedesk.domain.ports import UseCaseError
from datedesk.usecases.load_user_settings import LoadUserSettings
from datedesk.usecases.save_user_settings import SaveUserSettings
from datedesk.viewmodels.calendar_vm import FORMAT_LABEL_CHOICES, CalendarVM
from datedesk.viewmodels.settings_vm import SettingsVM


class _WindowRecorder:
    def __init__(self) -> None:
        self.date1 = ""
        self.date2 = ""
        self.format_label = FORMAT_LABEL_CHOICES[0]
        self.outputs: List[str] = []
        self.messages: List[str] = []

    def get_date1(self) -> str:
        return self.date1

    def get_date2(self) -> str:
        return self.date2

    def get_format_label(self) -> str:
        return self.format_label

    def set_format_label(self, label: str) -> None:
        self.format_label = label

    def set_output(self, text: str) -> None:
        self.outputs.append(text)

    def show_toast(self, message: str) -> None:
        self.messages.append(message)


class _FailingSave:
    def __call__(self, payload):
        raise UseCaseError("SAVE_SETTINGS_FAILED", "Could not save settings: read-only")


def _app_for_tests(tmp_path) -> App:
    app = App.__new__(App)
    app.win = _WindowRecorder()
    app._log = logging.getLogger("test.app")
    app.settings_vm = SettingsVM()
    engine = DateFormatEngine(clock=lambda: datetime(2024, 1, 2, 3, 4, 5))
    app.calendar_vm = CalendarVM(engine, on_output=app.win.set_output)
    storage = StorageLocal(root_dir=str(tmp_path))
    app.uc_load_settings = LoadUserSettings(storage)
    app.uc_save_settings = SaveUserSettings(storage)
    return app


def test_command_reads_fields_and_writes_output(tmp_path) -> None:
    app = _app_for_tests(tmp_path)
    app.win.date1 = "05.03.2024"
    app.win.format_label = FORMAT_LABEL_CHOICES[1]

    app._on_command("convert")

    assert app.win.outputs[-1] == "Converted date:\n05.03.2024"


def test_difference_command(tmp_path) -> None:
    app = _app_for_tests(tmp_path)
    app.win.date1 = "01.03.2020"
    app.win.date2 = "01.01.2020"

    app._on_command("difference")

    assert app.win.outputs[-1] == "Difference:\n0 years, 2 months, 0 days\n(total: 60 days)"


def test_save_settings_persists_and_updates_range(tmp_path) -> None:
    app = _app_for_tests(tmp_path)
    payload = {
        "range_start": "01.01.2000",
        "range_end": "31.12.2000",
        "default_format": FORMAT_LABEL_CHOICES[2],
        "debug_logging": False,
    }

    app._on_save_settings(payload)

    assert app.win.messages[-1] == "Settings saved."
    assert app.win.format_label == FORMAT_LABEL_CHOICES[2]
    with (tmp_path / "user_settings.json").open("r", encoding="utf-8") as fh:
        assert json.load(fh) == payload

    app.win.date1 = "01.01.2001"
    app._on_command("check_range")
    assert app.win.outputs[-1] == "Date is outside the valid range (01.01.2000 to 31.12.2000)."


def test_save_settings_rejects_invalid_bounds(tmp_path) -> None:
    app = _app_for_tests(tmp_path)

    app._on_save_settings({"range_start": "31.02.2000"})

    assert app.win.messages[-1].startswith("Invalid settings: range_start")
    assert not (tmp_path / "user_settings.json").exists()


def test_save_settings_storage_failure_is_toasted(tmp_path) -> None:
    app = _app_for_tests(tmp_path)
    app.uc_save_settings = _FailingSave()

    before = app.settings_vm.to_dict()

    app._on_save_settings({"range_start": "01.01.2000", "range_end": "31.12.2000"})

    assert app.win.messages[-1] == "Could not save settings: read-only"
    assert app.settings_vm.to_dict() == before
    assert app.settings_vm.range_start == app.calendar_vm.range_start == "01.01.1900"
    assert app.settings_vm.range_end == app.calendar_vm.range_end


def test_load_user_settings_applies_stored_payload(tmp_path) -> None:
    (tmp_path / "user_settings.json").write_text(
        json.dumps({"range_start": "01.01.1990", "range_end": "31.12.1999"}), encoding="utf-8"
    )
    app = _app_for_tests(tmp_path)

    app._load_user_settings()

    assert app.calendar_vm.range_start == "01.01.1990"
    assert app.calendar_vm.range_end == "31.12.1999"
    assert app.win.messages == []


def test_load_user_settings_ignores_bad_payload(tmp_path) -> None:
    (tmp_path / "user_settings.json").write_text(json.dumps({"relay": {}}), encoding="utf-8")
    app = _app_for_tests(tmp_path)

    app._load_user_settings()

    assert app.win.messages[-1].startswith("Stored settings ignored: Invalid settings")
    assert app.calendar_vm.range_start == "01.01.1900"
