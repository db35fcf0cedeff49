import sys
from pathlib import Path

import pytest

from semrange.app.settings import SETTINGS_ENV_VAR, loadSettings



def pytest_configure(config: pytest.Config) -> None:
    if sys.flags.optimize:
        raise RuntimeError("Assertions are disabled (optimize > 0)")



@pytest.fixture(autouse=True)
def isolatedSettings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """
    Point the settings loader at a per-test file (absent unless a test writes it)
    so the developer's own ~/.semrange/semrange.json5 never leaks into tests.
    """
    settingsPath = tmp_path / "semrange.json5"
    monkeypatch.setenv(SETTINGS_ENV_VAR, str(settingsPath))
    loadSettings.cache_clear()
    yield settingsPath
    loadSettings.cache_clear()
