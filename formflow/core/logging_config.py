"""Root logger handlers for applications embedding formflow.

Installed by ``Settings.configure_logging`` when ``install_log_handlers``
is enabled. A console handler is always added; with ``log_dir`` set,
``info.log`` and ``error.log`` are written there too.
"""

import logging
import sys
from pathlib import Path

from formflow.core.config import Settings, get_settings

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"


def _attach(root: logging.Logger, handler: logging.Handler, level: int, fmt: str) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=DATE_FORMAT))
    root.addHandler(handler)


def _file_handler(path: Path) -> logging.FileHandler:
    return logging.FileHandler(path, encoding="utf-8")


def setup_logging(settings: Settings | None = None) -> logging.Logger:
    """Replace the root logger handlers according to settings.

    Args:
        settings: Optional settings. If None, uses global settings.

    Returns:
        The configured root logger.
    """
    settings = settings or get_settings()
    level = logging.DEBUG if settings.log_level == "DEBUG" else logging.INFO

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    if settings.log_dir is not None:
        settings.log_dir.mkdir(parents=True, exist_ok=True)
        _attach(root, _file_handler(settings.log_dir / "info.log"), logging.INFO, FILE_FORMAT)
        _attach(root, _file_handler(settings.log_dir / "error.log"), logging.ERROR, FILE_FORMAT)

    _attach(root, logging.StreamHandler(sys.stdout), level, CONSOLE_FORMAT)
    return root


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name (typically ``__name__``)."""
    return logging.getLogger(name)
