# semrange/core/logging/formatters.py
from __future__ import annotations

import logging

from semrange.core.jsonutils import safeJsonDumps

__all__ = ["DevFormatter", "JsonFormatter"]



class JsonFormatter(logging.Formatter):
    """One-line JSON records for files and log shippers."""
    def format(self, record: logging.LogRecord) -> str:
        base: dict[str, object] = {
            "ts": int(record.created * 1000),
            "level": record.levelname.lower(),
            "logger": record.name,
            "msg": record.getMessage(),
            "proc": {"pid": record.process, "name": record.processName},
            "thread": {"id": record.thread, "name": record.threadName},
        }
        op = getattr(record, "op", None)
        if op:
            base["op"] = op

        if record.exc_info:
            excType = record.exc_info[0]
            excValue = record.exc_info[1]
            base["exc"] = {
                "type": getattr(excType, "__name__", "Error"),
                "message": str(excValue),
                "stack": self.formatException(record.exc_info),
            }

        return safeJsonDumps(base)



class DevFormatter(logging.Formatter):
    """Human-friendly console formatter (dev mode)."""
    def format(self, record: logging.LogRecord) -> str:
        op = getattr(record, "op", None)
        opStr = f" [{op}]" if op else ""
        msg = record.getMessage()
        if record.exc_info:
            msg += "\n" + self.formatException(record.exc_info)
        if record.stack_info:
            msg += "\n" + str(record.stack_info)
        return f"{record.levelname}: [{record.name}] {msg}{opStr}"
