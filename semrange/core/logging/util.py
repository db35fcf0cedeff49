# semrange/core/logging/util.py
from __future__ import annotations

import logging

from semrange.app.settings import settingsBool



class TraceLogger:
    """
    Tiny sugar over a module logger with trace().

    trace() records are DEBUG records tagged with the operation name; they are
    emitted only when `debug.traceAlgebra` is enabled. The flag is read from
    the cached settings on every call, and only once DEBUG is on.
    """
    def __init__(self, logger: logging.Logger) -> None:
        self._log = logger

    @property
    def traceEnabled(self) -> bool:
        return settingsBool("debug.traceAlgebra", False)

    def debug(self, msg: str, *args, **kwargs): self._log.debug(msg, *args, **kwargs)
    def info(self, msg: str, *args, **kwargs): self._log.info(msg, *args, **kwargs)
    def warning(self, msg: str, *args, **kwargs): self._log.warning(msg, *args, **kwargs)
    def error(self, msg: str, *args, **kwargs): self._log.error(msg, *args, **kwargs)
    def trace(self, op: str, msg: str, *args):
        if self._log.isEnabledFor(logging.DEBUG) and self.traceEnabled:
            self._log.debug("[TRACE] " + msg, *args, extra={"op": op})

def getLogger(name: str, side: str = "") -> logging.Logger:
    return logging.getLogger(f"{side}.{name}" if side else name)

def getTraceLogger(name: str) -> TraceLogger:
    return TraceLogger(logging.getLogger(name))
