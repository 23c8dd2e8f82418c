"""
Logging for the family tree engine.

Every module logs through a child of the ``family_tree`` logger. Handlers
are attached to that base logger only and are built from the ``logging``
section of ``config/family_tree.yml``:

    level          threshold of the log file
    file           log file name inside ``paths.logs_dir`` (empty: no file)
    rotate         size-rotated file instead of a plain one
    max_bytes      rotation size
    backup_count   rotated files kept
    console_level  threshold of stderr output

``debug: true`` lowers both thresholds to DEBUG.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, List, Optional

from family_tree.config import FTConfig, get_config
from family_tree.utils.pathing import resolve_project_path

BASE_LOGGER_NAME = "family_tree"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_LOGGING: Dict[str, Any] = {
    "level": "INFO",
    "file": "family_tree.log",
    "rotate": False,
    "max_bytes": 5 * 1024 * 1024,
    "backup_count": 5,
    "console_level": "WARNING",
}

_configured = False


def _parse_level(value: Any, fallback: int) -> int:
    if isinstance(value, int):
        return value
    level = logging.getLevelName(str(value).upper())
    return level if isinstance(level, int) else fallback


def _build_file_handler(cfg: FTConfig, settings: Dict[str, Any]) -> Optional[logging.Handler]:
    filename = settings.get("file")
    if not filename:
        return None

    log_dir = resolve_project_path(cfg.paths.get("logs_dir") or "logs")
    log_dir.mkdir(parents=True, exist_ok=True)
    path = log_dir / filename

    if settings.get("rotate"):
        return RotatingFileHandler(
            path,
            maxBytes=int(settings["max_bytes"]),
            backupCount=int(settings["backup_count"]),
            encoding="utf-8",
        )
    return logging.FileHandler(path, encoding="utf-8")


def configure_logging(cfg: Optional[FTConfig] = None) -> logging.Logger:
    """
    (Re)build the handlers of the base logger from configuration.

    Safe to call again: previous handlers are closed and replaced.
    """
    global _configured

    cfg = cfg or get_config()
    settings = {**DEFAULT_LOGGING, **cfg.logging}

    if cfg.debug:
        file_level = console_level = logging.DEBUG
    else:
        file_level = _parse_level(settings["level"], logging.INFO)
        console_level = _parse_level(settings["console_level"], logging.WARNING)

    base = logging.getLogger(BASE_LOGGER_NAME)
    for handler in list(base.handlers):
        base.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(formatter)
    base.addHandler(console)
    threshold = console_level

    file_handler = _build_file_handler(cfg, settings)
    if file_handler is not None:
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        base.addHandler(file_handler)
        threshold = min(threshold, file_level)

    base.setLevel(threshold)
    base.propagate = False
    _configured = True
    return base


def _qualified_name(name: Optional[str]) -> str:
    if not name:
        return BASE_LOGGER_NAME
    if name == BASE_LOGGER_NAME or name.startswith(BASE_LOGGER_NAME + "."):
        return name
    return f"{BASE_LOGGER_NAME}.{name}"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Logger for ``name`` under the ``family_tree`` hierarchy. Module loggers
    carry no handlers of their own and propagate to the base logger.
    """
    if not _configured:
        configure_logging()
    return logging.getLogger(_qualified_name(name))


def active_logger_names() -> List[str]:
    """Names of the loggers created under the base logger so far."""
    return sorted(
        name
        for name, logger in logging.Logger.manager.loggerDict.items()
        if isinstance(logger, logging.Logger)
        and (name == BASE_LOGGER_NAME or name.startswith(BASE_LOGGER_NAME + "."))
    )
