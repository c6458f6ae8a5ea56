# Area: Shared
"""
read_one_article._shared.logging_config — Structured logging setup
==================================================================

Configures dual logging: terminal (colored) + file (JSON).
Terminal output can be muted while a game screen is shown, so that log
lines do not interleave with the prompts; the file keeps everything.
"""

from __future__ import annotations
import logging
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..errors import ReadOneArticleError

# Package logger
logger = logging.getLogger("read_one_article")

_terminal_muted = False


class MuteFilter(logging.Filter):
    """Filter that suppresses terminal logs while the game screen is active."""

    def filter(self, record: logging.LogRecord) -> bool:
        return not _terminal_muted


class TerminalFormatter(logging.Formatter):
    """Colored formatter for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """JSON formatter for file output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def setup_logging(
    log_file_path: str = "read_one_article.log",
    level: int = logging.INFO,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str
        Path to the log file. Defaults to 'read_one_article.log' in current dir.
    level : int
        Logging level. Defaults to INFO.
    """
    pkg_logger = logging.getLogger("read_one_article")
    pkg_logger.setLevel(level)
    pkg_logger.handlers.clear()

    terminal_handler = logging.StreamHandler(sys.stderr)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    terminal_handler.addFilter(MuteFilter())
    pkg_logger.addHandler(terminal_handler)

    try:
        log_path = Path(log_file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(JSONFormatter())
        pkg_logger.addHandler(file_handler)
    except OSError as e:
        pkg_logger.warning(f"Could not create log file: {e}")

    # Prevent propagation to root logger
    pkg_logger.propagate = False


def log_game_error(error: "ReadOneArticleError") -> None:
    """
    Log a game error in the structured format.

    Parameters
    ----------
    error : ReadOneArticleError
        The error to log. Errors without ``format_error_log`` are logged
        by message only.
    """
    formatter = getattr(error, "format_error_log", None)
    if formatter is not None:
        print(formatter(), file=sys.stderr)

    logger.error(
        f"Game error: {error.__class__.__name__}: {error}",
        extra={"error_type": error.__class__.__name__},
    )


def mute_terminal() -> None:
    """Suppress terminal log output; file logging is unchanged."""
    global _terminal_muted
    _terminal_muted = True


def unmute_terminal() -> None:
    global _terminal_muted
    _terminal_muted = False


def is_terminal_muted() -> bool:
    return _terminal_muted
