"""File logging setup driven by LoggingConfig."""

from __future__ import annotations

import logging
from pathlib import Path

from ecotrip.config import LoggingConfig

LOG_FILENAME = "ecotrip.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(config: LoggingConfig) -> Path:
    """Send ecotrip logs to a file under the configured log_dir; returns the log path."""
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging level: {config.level}")

    log_dir = Path(config.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / LOG_FILENAME

    logger = logging.getLogger("ecotrip")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    # Keep log records off the interactive console.
    logger.propagate = False
    return log_path


__all__ = ["configure_logging"]
