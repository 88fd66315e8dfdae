"""
Logging setup shared by the API server, the CLI and the dashboard.

One console handler always; a size-rotated file handler when the config names
a log file. Supabase talks HTTP through httpx, which logs every request at
INFO, so those loggers are held at WARNING unless DEBUG is asked for.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Rotation: 5MB per file, 3 backups
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 3

NOISY_LOGGERS = ('httpx', 'httpcore', 'hpack')


def _file_handler(log_file: Path, max_bytes: int, backup_count: int) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(
        log_file,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding='utf-8'
    )


def quiet_http_clients(level: int) -> None:
    """Hold the HTTP client loggers at WARNING unless level is DEBUG."""
    target = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(target)


def setup_logging(
    log_file: Optional[Path] = None,
    level: str = "INFO",
    max_bytes: int = MAX_LOG_BYTES,
    backup_count: int = LOG_BACKUPS
) -> logging.Logger:
    """
    Configure the root logger. Safe to call more than once; earlier
    handlers are replaced.

    Args:
        log_file: Rotating log file, relative paths resolved by the caller
        level: Level name from config (general.log_level)

    Returns:
        Root logger instance
    """
    log_level = getattr(logging, str(level).upper(), logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(_file_handler(Path(log_file), max_bytes, backup_count))

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(log_level)
        root_logger.addHandler(handler)

    quiet_http_clients(log_level)
    root_logger.debug(f"Logging configured at {logging.getLevelName(log_level)}, file={log_file}")
    return root_logger
