# semrange/core/dictpath.py
from __future__ import annotations
from typing import Any
from collections.abc import Mapping

__all__ = ["getByPath", "hasPath"]



_MISSING = object()



def _splitPath(path: str) -> list[str]:
    """
    Splits a dotted path into segments.

    Examples:
      - logging.file.path -> ["logging", "file", "path"]
      - "" / "a..b" / "a." -> ValueError
    """
    if not isinstance(path, str) or not path:
        raise ValueError("Path must be a non-empty string")
    parts = path.split(".")
    if any(part == "" for part in parts):
        raise ValueError(f"Path '{path}' contains empty segment(s)")
    return parts



def _lookup(obj: Any, path: str) -> Any:
    try:
        parts = _splitPath(path)
    except ValueError:
        # Invalid path is treated as "not found"
        return _MISSING

    current: Any = obj
    for part in parts:
        if isinstance(current, Mapping) and part in current:
            current = current[part]
            continue
        return _MISSING
    return current



def getByPath(obj: Any, path: str, default: Any | None = None) -> Any:
    """
    Returns the value at dotted `path` inside nested mappings, or `default`
    when any hop is missing or the path itself is malformed.
    """
    value = _lookup(obj, path)
    return default if value is _MISSING else value



def hasPath(obj: Any, path: str) -> bool:
    return _lookup(obj, path) is not _MISSING
