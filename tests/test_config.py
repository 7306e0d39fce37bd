"""Tests for worklog.config."""

import json

from worklog.config import (
    DATA_DIR_ENV,
    Settings,
    get_backup_path,
    get_data_dir,
    get_database_path,
    get_settings,
    save_settings,
)


class TestDataDir:
    def test_explicit_path_wins(self, tmp_path, monkeypatch):
        monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path / "env"))
        data_dir = get_data_dir(tmp_path / "explicit")
        assert data_dir == tmp_path / "explicit"
        assert data_dir.is_dir()

    def test_env_var(self, tmp_path, monkeypatch):
        monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path / "env"))
        assert get_data_dir() == tmp_path / "env"

    def test_platform_default(self, tmp_path, monkeypatch):
        monkeypatch.delenv(DATA_DIR_ENV, raising=False)
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg"))
        monkeypatch.setenv("APPDATA", str(tmp_path / "xdg"))
        assert get_data_dir() == tmp_path / "xdg" / "worklog"

    def test_file_names(self, tmp_path):
        assert get_database_path(tmp_path).name == "worklog.json"
        assert get_backup_path(tmp_path).name == "worklog_old.json"


class TestSettings:
    def test_defaults_when_missing(self, tmp_path):
        settings = get_settings(tmp_path)
        assert settings.default_log_hours == 0
        assert settings.default_log_minutes == 30
        assert settings.last_project_id is None

    def test_save_and_load(self, tmp_path):
        assert save_settings(tmp_path, Settings(default_log_minutes=15, last_project_id="abc"))
        settings = get_settings(tmp_path)
        assert settings.default_log_minutes == 15
        assert settings.last_project_id == "abc"

    def test_invalid_values_fall_back_to_defaults(self, tmp_path, caplog):
        (tmp_path / "settings.json").write_text(json.dumps({"default_log_minutes": 75}))
        assert get_settings(tmp_path) == Settings()
        assert "Ignoring invalid settings" in caplog.text

    def test_unreadable_file_falls_back_to_defaults(self, tmp_path):
        (tmp_path / "settings.json").write_text("{broken")
        assert get_settings(tmp_path) == Settings()
