# semrange/app/settings.py
from __future__ import annotations
import json5, os
from pydantic import JsonValue
from pathlib import Path
from typing import Any, cast
from functools import lru_cache

from semrange.core.dictpath import getByPath

import logging
logger = logging.getLogger(__name__)

__all__ = [
    "SETTINGS", "SETTINGS_ENV_VAR", "userSettingsPath", "loadUserSettings",
    "loadSettings", "deepMerge", "settings", "settingsBool",
]


SETTINGS_ENV_VAR = "SEMRANGE_SETTINGS"
SETTINGS: JsonValue = {
    "__source": "SEMRANGE_DEFAULTS",
    "debug": {"devModeEnabled": False, "traceAlgebra": False},
    "logging": {
        "level": "INFO",
        "json": False,
        "file": {"enabled": False, "path": "semrange.log", "maxBytes": 10 * 1024 * 1024, "backupCount": 5},
    },
}



def userSettingsPath() -> Path:
    """`$SEMRANGE_SETTINGS` when set, else ~/.semrange/semrange.json5"""
    override = os.environ.get(SETTINGS_ENV_VAR)
    if override:
        return Path(os.path.expanduser(override))
    return Path(os.path.expanduser("~/.semrange/semrange.json5"))



def loadUserSettings() -> JsonValue:
    filePath = userSettingsPath()
    if filePath.exists():
        try:
            loaded = json5.loads(filePath.read_text(encoding="utf-8"))
        except Exception as err:
            logger.error("Failed to parse '%s': %s", filePath, err)
            return {}
        if not isinstance(loaded, dict):
            logger.error("Ignoring '%s': top-level value must be an object, got %s", filePath, type(loaded).__name__)
            return {}
        return cast(JsonValue, loaded)
    return {}



@lru_cache(maxsize=1)
def loadSettings() -> JsonValue:
    return deepMerge(SETTINGS, loadUserSettings())



def deepMerge(first: JsonValue, second: JsonValue) -> JsonValue:
    """
    Returns a new JsonValue where keys from `second` override/extend `first`.
    Only merges recursively when BOTH sides are JSON objects (dicts).
    For all other JSON types (lists, strings, numbers, booleans, null),
    the right-hand value `second` replaces `first`.
    """
    if isinstance(first, dict) and isinstance(second, dict):
        out: dict[str, JsonValue] = {}
        # Start with left
        for key, value in first.items():
            out[key] = cast(JsonValue, value)
        # Overlay right
        for key, value in second.items():
            if key in out:
                out[key] = deepMerge(out[key], cast(JsonValue, value))
            else:
                out[key] = cast(JsonValue, value)
        return cast(JsonValue, out)

    # If not both dicts, replace with right-hand side
    return cast(JsonValue, second)

# ---------- Ergonomic accessors over merged settings ----------

def settings(path: str, default: Any = None) -> Any:
    """Returns value at `path` from merged settings, or `default` if missing."""
    val = getByPath(loadSettings(), path)
    return default if val is None else val



def settingsBool(path: str, default: bool = False) -> bool:
    """Returns bool value at `path` or `default` if missing."""
    val = getByPath(loadSettings(), path)
    if isinstance(val, bool):
        return val
    if val is None:
        return default
    return bool(val)
