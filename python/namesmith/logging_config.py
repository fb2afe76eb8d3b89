"""
Diagnostics logging for namesmith.

Library code only logs through module loggers below "namesmith"
("namesmith.engine", "namesmith.workspace", ...) and installs no handlers
on import. configure_logging() applies the logging settings of an
EngineConfig; get_default_engine() calls it once when it builds the
process-wide engine.

NAMESMITH_LOG_DIR adds a daily-rotated file: <dir>/namesmith-YYYY-MM-DD.log
NAMESMITH_LOG_LEVEL sets the level of the "namesmith" logger.
"""

import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from namesmith.config import EngineConfig

ROOT_LOGGER = "namesmith"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class _FlushingFileHandler(logging.handlers.TimedRotatingFileHandler):
    """Daily file handler that flushes every record, so a degraded request shows up at once."""

    def emit(self, record):
        super().emit(record)
        self.flush()


def _is_stderr_handler(handler: logging.Handler) -> bool:
    return (
        isinstance(handler, logging.StreamHandler)
        and not isinstance(handler, logging.FileHandler)
        and handler.stream is sys.stderr
    )


def parse_level(level: Union[int, str]) -> int:
    """
    Numeric logging level from an int or a level name.

    Examples:
        >>> parse_level("debug")
        10

        >>> parse_level(logging.WARNING)
        30

    Raises:
        ValueError: Unknown level name
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"unknown log level: {level!r}")
    return value


def setup_logging(
    log_dir: Optional[Path] = None,
    level: Union[int, str] = logging.INFO,
    backup_count: int = 7,
    console: bool = False,
) -> logging.Logger:
    """
    Attach a daily-rotated log file (and optionally stderr) to the namesmith logger.

    Calling it again never adds a second file or stderr handler; only the
    level is updated.

    Args:
        log_dir: Directory for log files (default: ./.namesmith/logs)
        level: Level as int or name, e.g. "DEBUG"
        backup_count: Rotated daily files kept
        console: Also log to stderr

    Returns:
        The "namesmith" logger
    """
    level = parse_level(level)
    log_dir = Path(log_dir) if log_dir is not None else Path.cwd() / ".namesmith" / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if not any(isinstance(h, _FlushingFileHandler) for h in logger.handlers):
        log_file = log_dir / f"namesmith-{datetime.now().strftime('%Y-%m-%d')}.log"
        file_handler = _FlushingFileHandler(
            log_file,
            when="midnight",
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logger.info(f"Logging to {log_file} at {logging.getLevelName(level)}")

    if console and not any(_is_stderr_handler(h) for h in logger.handlers):
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


def configure_logging(config: "EngineConfig") -> Optional[logging.Logger]:
    """
    Apply the logging settings of an engine config.

    A log directory installs the file handler (at config.log_level, INFO
    when unset). A level alone only adjusts the "namesmith" logger, for
    hosts that bring their own handlers.

    Returns:
        The "namesmith" logger, or None when neither setting is present
    """
    if config.log_dir is not None:
        return setup_logging(config.log_dir, config.log_level or logging.INFO)
    if config.log_level is not None:
        logger = logging.getLogger(ROOT_LOGGER)
        logger.setLevel(parse_level(config.log_level))
        return logger
    return None
