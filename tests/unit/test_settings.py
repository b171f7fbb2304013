"""Unit tests for channel settings resolution."""

from __future__ import annotations

import json
import os

from dschannel.settings import DEFAULT_CONNECT_TIMEOUT, SettingsStore, load_channel_settings


def _store(tmp_path, data):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(data))
    return SettingsStore(path)


def test_defaults_without_settings_file(tmp_path):
    settings = load_channel_settings(SettingsStore(tmp_path / "missing.json"))

    assert settings.connect_timeout == DEFAULT_CONNECT_TIMEOUT
    assert settings.fanout_workers == min(32, (os.cpu_count() or 1) + 4)


def test_values_from_settings_file(tmp_path):
    settings = load_channel_settings(_store(tmp_path, {"fanout_workers": 6, "connect_timeout": 30}))

    assert settings.fanout_workers == 6
    assert settings.connect_timeout == 30


def test_environment_overrides_file(tmp_path, monkeypatch):
    monkeypatch.setenv("DSCHANNEL_FANOUT_WORKERS", "2")
    monkeypatch.setenv("DSCHANNEL_CONNECT_TIMEOUT", "5")

    settings = load_channel_settings(_store(tmp_path, {"fanout_workers": 6, "connect_timeout": 30}))

    assert settings.fanout_workers == 2
    assert settings.connect_timeout == 5


def test_invalid_values_fall_back_to_defaults(tmp_path, caplog):
    settings = load_channel_settings(_store(tmp_path, {"fanout_workers": "many", "connect_timeout": -1}))

    assert settings.connect_timeout == DEFAULT_CONNECT_TIMEOUT
    assert settings.fanout_workers == min(32, (os.cpu_count() or 1) + 4)
    assert "Ignoring invalid fanout_workers" in caplog.text
    assert "Ignoring non-positive connect_timeout" in caplog.text


def test_settings_path_override(tmp_path, monkeypatch):
    path = tmp_path / "custom.json"
    path.write_text(json.dumps({"connect_timeout": 42}))
    monkeypatch.setenv("DSCHANNEL_SETTINGS_PATH", str(path))

    assert SettingsStore().file_path == path
    assert load_channel_settings().connect_timeout == 42


def test_corrupt_settings_file(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json")

    assert SettingsStore(path).load_all() == {}
