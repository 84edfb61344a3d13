# -*- coding: utf-8 -*-
"""
Unified Logger
==============

Named loggers with console output, optional file output and a SUCCESS level.

Usage:
    from assistant_agents.logging import get_logger

    logger = get_logger("GptAgent")
    logger.info("Creating assistant...")
    logger.success("Assistant created")
"""

from datetime import datetime
import logging
from pathlib import Path
from typing import Optional, Union

SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

_ROOT_NAME = "assistant_agents"
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class Logger(logging.LoggerAdapter):
    """Logger adapter adding `success()` on top of the standard levels."""

    def success(self, msg: str, *args, **kwargs) -> None:
        self.log(SUCCESS, msg, *args, **kwargs)


_loggers: dict[str, Logger] = {}
_defaults: dict[str, Optional[Union[str, int, Path]]] = {"level": None, "log_dir": None}


def _resolve_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    value = (level or "INFO").strip().upper()
    if value == "SUCCESS":
        return SUCCESS
    resolved = logging.getLevelName(value)
    return resolved if isinstance(resolved, int) else logging.INFO


def _has_handler(logger: logging.Logger, handler_type: type, path: Optional[str] = None) -> bool:
    for handler in logger.handlers:
        if type(handler) is not handler_type:
            continue
        if path is None or getattr(handler, "baseFilename", None) == path:
            return True
    return False


def get_logger(
    name: str,
    level: Optional[Union[str, int]] = None,
    log_dir: Optional[Union[str, Path]] = None,
) -> Logger:
    """
    Get (or create) a named logger.

    Args:
        name: Logger name, nested under the package root logger
        level: Log level name or number (defaults to the configured level, else INFO)
        log_dir: Optional directory; when given, also writes to <log_dir>/<name>_<date>.log

    Returns:
        Logger instance
    """
    level = level if level is not None else (_defaults["level"] or "INFO")
    log_dir = log_dir or _defaults["log_dir"]

    base = logging.getLogger(f"{_ROOT_NAME}.{name}")
    base.setLevel(_resolve_level(level))

    formatter = logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT)

    if not _has_handler(base, logging.StreamHandler):
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        base.addHandler(console)
        base.propagate = False

    if log_dir:
        directory = Path(log_dir)
        directory.mkdir(parents=True, exist_ok=True)
        safe_name = name.replace("/", "_").replace(".", "_")
        path = directory / f"{safe_name}_{datetime.now():%Y%m%d}.log"
        if not _has_handler(base, logging.FileHandler, str(path.resolve())):
            file_handler = logging.FileHandler(path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            base.addHandler(file_handler)

    logger = _loggers.get(name)
    if logger is None:
        logger = Logger(base, {})
        _loggers[name] = logger
    return logger


def configure_logging(
    level: Optional[Union[str, int]] = None,
    log_dir: Optional[Union[str, Path]] = None,
) -> None:
    """
    Set the default level / log directory and apply them to existing loggers.

    Args:
        level: Log level for all package loggers
        log_dir: Directory for log files (None keeps console-only output)
    """
    _defaults["level"] = level
    _defaults["log_dir"] = log_dir
    for name in list(_loggers):
        get_logger(name, level=level, log_dir=log_dir)


__all__ = ["Logger", "SUCCESS", "configure_logging", "get_logger"]
