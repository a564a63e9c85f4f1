from __future__ import annotations

from typing import Dict, Optional

import pytest

from datedesk.adapters.storage_local import StorageLocal
from datedesk.domain.ports import UseCaseError
from datedesk.usecases.load_user_settings import LoadUserSettings
from datedesk.usecases.save_user_settings import SaveUserSettings


class _BrokenStorage:
    def save_user_settings(self, payload: Dict) -> None:
        raise OSError("disk full")

    def load_user_settings(self) -> Optional[Dict]:
        raise OSError("permission denied")


def test_save_then_load(tmp_path) -> None:
    storage = StorageLocal(root_dir=str(tmp_path))
    SaveUserSettings(storage)({"range_start": "01.01.1900"})
    assert LoadUserSettings(storage)() == {"range_start": "01.01.1900"}


def test_load_missing_returns_none(tmp_path) -> None:
    assert LoadUserSettings(StorageLocal(root_dir=str(tmp_path)))() is None


def test_storage_errors_become_usecase_errors() -> None:
    with pytest.raises(UseCaseError) as save_err:
        SaveUserSettings(_BrokenStorage())({})
    assert save_err.value.code == "SAVE_SETTINGS_FAILED"
    assert "disk full" in save_err.value.message

    with pytest.raises(UseCaseError) as load_err:
        LoadUserSettings(_BrokenStorage())()
    assert load_err.value.code == "LOAD_SETTINGS_FAILED"
