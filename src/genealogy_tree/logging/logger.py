"""
Project loggers.

Every module asks ``get_logger`` for its logger. All of them hang under the
``genealogy_tree`` logger, which owns the shared handlers: one master log
file and the console. Each module logger also writes its own file, named
after the logger (``genealogy_tree_json_store.log``).

Level, file name and rotation come from the ``logging`` section of the
config; ``debug: true`` forces DEBUG everywhere.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, Tuple

from genealogy_tree.config import get_config

PROJECT_ROOT = Path(__file__).resolve().parents[3]
BASE_LOGGER_NAME = "genealogy_tree"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ROTATE_MAX_BYTES = 5 * 1024 * 1024
ROTATE_BACKUPS = 5

_loggers: Dict[str, Logger] = {}
_level: int = logging.INFO
_rotate: bool = False
_ready: bool = False


def _formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


def _log_dir() -> Path:
    cfg = get_config()
    path = Path(cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs")
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    path.mkdir(parents=True, exist_ok=True)
    return path


def _levels(cfg) -> Tuple[int, bool]:
    name = str(cfg.logging.get("level", "INFO")).upper()
    debug = bool(getattr(cfg, "debug", False))
    return (logging.DEBUG if debug else getattr(logging, name, logging.INFO)), debug


def _file_handler(path: Path) -> logging.Handler:
    if _rotate:
        handler: logging.Handler = RotatingFileHandler(
            path, maxBytes=ROTATE_MAX_BYTES, backupCount=ROTATE_BACKUPS, encoding="utf-8"
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(_level)
    handler.setFormatter(_formatter())
    return handler


def _root() -> Logger:
    global _level, _rotate, _ready

    root = logging.getLogger(BASE_LOGGER_NAME)
    if _ready:
        return root

    cfg = get_config()
    _level, debug = _levels(cfg)
    _rotate = bool(cfg.logging.get("rotate", False))

    root.setLevel(_level)
    root.propagate = False
    root.addHandler(_file_handler(_log_dir() / cfg.logging.get("file", "genealogy_tree.log")))

    console = StreamHandler()
    console.setLevel(logging.DEBUG if debug else logging.INFO)
    console.setFormatter(_formatter())
    root.addHandler(console)

    _ready = True
    return root


def get_logger(name: str | None = None) -> Logger:
    """
    Logger for ``name``. Short names are namespaced, so ``"json_store"`` and
    ``"genealogy_tree.json_store"`` give back the same logger.
    """
    root = _root()
    full_name = name or BASE_LOGGER_NAME
    if full_name != BASE_LOGGER_NAME and not full_name.startswith(BASE_LOGGER_NAME + "."):
        full_name = f"{BASE_LOGGER_NAME}.{full_name}"

    logger = logging.getLogger(full_name)
    logger.setLevel(_level)

    if logger is not root:
        if not any(getattr(h, "is_module_handler", False) for h in logger.handlers):
            handler = _file_handler(_log_dir() / f"{full_name.replace('.', '_')}.log")
            handler.is_module_handler = True  # type: ignore[attr-defined]
            logger.addHandler(handler)
        logger.propagate = True

    _loggers[full_name] = logger
    return logger


def list_active_loggers() -> List[str]:
    """Names handed out so far."""
    return list(_loggers)
