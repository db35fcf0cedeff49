from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from semrange.app.settings import (
    SETTINGS,
    SETTINGS_ENV_VAR,
    deepMerge,
    loadSettings,
    loadUserSettings,
    settings,
    settingsBool,
    userSettingsPath,
)


# -------- deepMerge --------

def test_deepMerge_nested_dicts():
    left = {"a": 1, "b": {"x": 1, "y": 2}}
    right = {"b": {"y": 5, "z": 9}, "c": 7}
    out = deepMerge(left, right)
    assert out == {"a": 1, "b": {"x": 1, "y": 5, "z": 9}, "c": 7}
    # inputs untouched
    assert left == {"a": 1, "b": {"x": 1, "y": 2}}


@pytest.mark.parametrize(
    "left, right",
    [
        ([1, 2], [3]),
        ({"a": 1}, "text"),
        ("text", {"a": 1}),
        (1, None),
    ],
)
def test_deepMerge_non_dicts_take_right(left, right):
    assert deepMerge(left, right) == right


# -------- loading --------

def test_defaults_without_user_file(isolatedSettings: Path):
    assert not isolatedSettings.exists()
    assert loadUserSettings() == {}
    assert loadSettings() == SETTINGS
    assert settings("logging.level") == "INFO"
    assert settingsBool("debug.traceAlgebra") is False


def test_user_file_overrides_defaults(isolatedSettings: Path):
    isolatedSettings.write_text(
        "// user overrides\n{debug: {traceAlgebra: true}, logging: {file: {enabled: true,},},}",
        encoding="utf-8",
    )
    assert settingsBool("debug.traceAlgebra") is True
    assert settingsBool("logging.file.enabled") is True
    # untouched siblings survive the merge
    assert settings("logging.file.backupCount") == 5
    assert settings("logging.level") == "INFO"


def test_loadSettings_is_cached(isolatedSettings: Path):
    first = loadSettings()
    isolatedSettings.write_text("{logging: {level: 'DEBUG'}}", encoding="utf-8")
    assert loadSettings() is first
    loadSettings.cache_clear()
    assert settings("logging.level") == "DEBUG"


def test_broken_user_file_is_logged_and_ignored(isolatedSettings: Path, caplog: pytest.LogCaptureFixture):
    isolatedSettings.write_text("{not json5 at all", encoding="utf-8")
    with caplog.at_level(logging.ERROR, logger="semrange.app.settings"):
        assert loadUserSettings() == {}
    assert "Failed to parse" in caplog.text


def test_non_object_user_file_is_ignored(isolatedSettings: Path, caplog: pytest.LogCaptureFixture):
    isolatedSettings.write_text("[1, 2, 3]", encoding="utf-8")
    with caplog.at_level(logging.ERROR, logger="semrange.app.settings"):
        assert loadUserSettings() == {}
    assert "must be an object" in caplog.text


def test_userSettingsPath_falls_back_to_home(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(SETTINGS_ENV_VAR, raising=False)
    expected = Path(os.path.expanduser("~/.semrange/semrange.json5"))
    assert userSettingsPath() == expected


def test_accessor_defaults():
    assert settings("no.such.path", 300) == 300
    assert settings("", "fallback") == "fallback"
    assert settingsBool("no.such.flag", True) is True
