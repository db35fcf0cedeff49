# semrange/core/logging/setup.py
from __future__ import annotations
import logging
import logging.handlers

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from semrange.app.settings import settings, settingsBool
from .formatters import DevFormatter, JsonFormatter

__all__ = [
    "LogFileOptions",
    "LoggingOptions",
    "loadLoggingOptions",
    "configureLogging",
]

logger = logging.getLogger(__name__)



class LogFileOptions(BaseModel):
    model_config = ConfigDict(extra="ignore")
    enabled: bool = False
    path: str = "semrange.log"
    maxBytes: int = Field(default=10 * 1024 * 1024, ge=0)
    backupCount: int = Field(default=5, ge=0)



class LoggingOptions(BaseModel):
    """The `logging` section of the merged settings."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")
    level: str = "INFO"
    useJson: bool = Field(default=False, alias="json")
    file: LogFileOptions = Field(default_factory=LogFileOptions)



def loadLoggingOptions() -> LoggingOptions:
    raw = settings("logging", {})
    try:
        return LoggingOptions.model_validate(raw if isinstance(raw, dict) else {})
    except ValidationError as err:
        logger.error("Invalid logging settings, falling back to defaults: %s", err)
        return LoggingOptions()



def configureLogging(root: logging.Logger | None = None) -> list[logging.Handler]:
    """
    Install handlers on the root logger (or `root`) from settings.

    Dev (`debug.devModeEnabled`):
      - Console pretty logs at DEBUG

    Otherwise:
      - Console at `logging.level`, pretty or JSON (`logging.json`)

    Optional:
      - JSON file log with rotation (`logging.file.*`)

    Returns the installed handlers.
    """
    options = loadLoggingOptions()
    devMode = settingsBool("debug.devModeEnabled", False)
    levelName = options.level.upper()
    rootLevel = logging.DEBUG if devMode else getattr(logging, levelName, logging.INFO)
    if not isinstance(rootLevel, int):
        rootLevel = logging.INFO

    target = root if root is not None else logging.getLogger()
    target.handlers.clear()
    target.setLevel(rootLevel)

    consoleHandler = logging.StreamHandler()
    consoleHandler.setLevel(rootLevel)
    consoleHandler.setFormatter(JsonFormatter() if options.useJson and not devMode else DevFormatter())
    handlers: list[logging.Handler] = [consoleHandler]

    if options.file.enabled:
        fileHandler = logging.handlers.RotatingFileHandler(
            options.file.path,
            maxBytes=options.file.maxBytes,
            backupCount=options.file.backupCount,
            encoding="utf-8"
        )
        fileHandler.setLevel(rootLevel)
        fileHandler.setFormatter(JsonFormatter())
        handlers.append(fileHandler)

    for handler in handlers:
        target.addHandler(handler)
    return handlers
