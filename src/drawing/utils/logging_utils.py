"""
logging_utils.py
----------------

Console + file logging for the `drawing` entry points.

Library modules only call ``logging.getLogger(__name__)``. Whoever owns the
process (the gallery runner, a notebook, a test) calls
:func:`configure_logging` once to attach handlers to the ``drawing`` logger:

    - a console handler rendering the level name in colour (colorama),
    - a size-rotated plain-text log file under ``log_dir``.

Calling it again replaces the handlers; colorama's stream wrapping is set up
only on the first call.
"""

__all__ = ["configure_logging", "ColorFormatter"]

import os
import time
import logging
import threading
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

import colorama
from colorama import Fore, Style

PathLike = Union[str, os.PathLike]

LOG_MAX_BYTES = 5_000_000
LOG_BACKUP_COUNT = 5
DATE_FORMAT = "%H:%M:%S"
FILE_FORMAT = "[%(asctime)s] [%(levelname)-8s] [%(name)s] %(message)s"

_colorama_lock = threading.Lock()
_colorama_ready = False


class ColorFormatter(logging.Formatter):
    """Console formatter: ``[time] [LEVEL] [logger] message`` with a coloured level."""

    LEVEL_COLORS = {
        logging.DEBUG:    Fore.CYAN,
        logging.INFO:     Fore.GREEN,
        logging.WARNING:  Fore.YELLOW,
        logging.ERROR:    Fore.RED,
        logging.CRITICAL: Fore.RED + Style.BRIGHT,
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno, "")
        text = (f"[{self.formatTime(record, self.datefmt)}] "
                f"[{color}{record.levelname:<8s}{Style.RESET_ALL}] "
                f"[{record.name}] {record.getMessage()}")
        if record.exc_info:
            text = f"{text}\n{self.formatException(record.exc_info)}"
        return text


# ---------------------------------------------------------------------------
# Handler factories
# ---------------------------------------------------------------------------
def _ensure_colorama() -> None:
    global _colorama_ready
    with _colorama_lock:
        if not _colorama_ready:
            colorama.just_fix_windows_console()
            _colorama_ready = True


def _console_handler() -> logging.Handler:
    _ensure_colorama()
    handler = logging.StreamHandler()
    handler.setFormatter(ColorFormatter(datefmt=DATE_FORMAT))
    return handler


def _file_handler(log_path: Path) -> logging.Handler:
    handler = RotatingFileHandler(log_path, maxBytes=LOG_MAX_BYTES,
                                  backupCount=LOG_BACKUP_COUNT, encoding="utf-8")
    handler.setFormatter(logging.Formatter(FILE_FORMAT, DATE_FORMAT))
    return handler


def _log_file_path(log_dir: PathLike, run_prefix: str) -> Path:
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    stamp = time.strftime("%Y-%m-%d_%H%M%S")
    return log_dir / f"{run_prefix}_PID{os.getpid()}_{stamp}.log"


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def configure_logging(level: Optional[int] = logging.INFO,
                      log_dir: Optional[PathLike] = "logs",
                      name: Optional[str] = "drawing",
                      run_prefix: Optional[str] = "run") -> Path:
    """Attach a colour console handler and a rotating file handler to ``name``.

    Args:
        level: Logger level.
        log_dir: Directory for the log file (created if missing).
        name: Logger to configure; "drawing" covers every library module.
        run_prefix: File name prefix of the log file.

    Returns:
        Path: Location of the log file.
    """
    log_path = _log_file_path(log_dir, run_prefix)

    logger = logging.getLogger(name)
    logger.setLevel(level)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    logger.addHandler(_console_handler())
    logger.addHandler(_file_handler(log_path))

    logger.info(f"Logging to {log_path} (PID {os.getpid()})")
    return log_path
