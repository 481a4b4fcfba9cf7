"""Simple logging utilities for remoji.

Modules use the standard pattern:

    import logging
    logger = logging.getLogger(__name__)

The CLI calls ``configure_logging()`` once, which attaches a rotating file
handler to the ``remoji`` logger so log lines never mix with emoji output
on stdout.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from remoji.config import get_data_dir, get_env_var
from remoji.config.constants import LOG_FILENAME
from remoji.exceptions import ConfigurationError

# Max log file size: 5MB, keep 2 backups
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 2

_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
_DATEFMT = '%Y-%m-%d %H:%M:%S'


def level_for_verbosity(verbosity: int) -> int:
    """Map the -v count to a log level; REMOJI_LOG_LEVEL applies at zero."""
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return getattr(logging, (get_env_var("REMOJI_LOG_LEVEL") or "WARNING").upper())


def get_logger(name: str, log_dir: Optional[Path] = None) -> logging.Logger:
    """Get a logger with a rotating file handler attached."""
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        log_dir = log_dir or get_data_dir()
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            handler = RotatingFileHandler(
                log_dir / LOG_FILENAME, maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT,
                encoding="utf-8",
            )
        except OSError as e:
            raise ConfigurationError(
                "Cannot open log file", setting="REMOJI_HOME", path=str(log_dir)
            ) from e

        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATEFMT))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger


def configure_logging(verbosity: int = 0, log_dir: Optional[Path] = None) -> logging.Logger:
    """Set up the package logger for one CLI invocation."""
    logger = get_logger("remoji", log_dir)
    level = level_for_verbosity(verbosity)
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)
    return logger
