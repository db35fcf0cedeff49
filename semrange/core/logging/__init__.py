# semrange/core/logging/__init__.py
from __future__ import annotations

from .formatters import DevFormatter, JsonFormatter
from .setup import configureLogging, loadLoggingOptions, LoggingOptions
from .util import getLogger, getTraceLogger, TraceLogger

__all__ = [
    "configureLogging",
    "loadLoggingOptions",
    "LoggingOptions",
    "DevFormatter",
    "JsonFormatter",
    "getLogger",
    "getTraceLogger",
    "TraceLogger",
]
