"""Append-only text log of trip summaries."""

from __future__ import annotations

import logging
from pathlib import Path

DEFAULT_HISTORY_PATH = "trip_history.txt"

logger = logging.getLogger(__name__)


class TripLogError(Exception):
    """Raised when the trip log cannot be written or read."""


class TripLogWriteError(TripLogError):
    """Raised when appending to the trip log fails."""


class TripLogReadError(TripLogError):
    """Raised when reading the trip log fails."""


class TripLog:
    """Newline-delimited UTF-8 file; lines are only ever appended."""

    def __init__(self, path: str | Path = DEFAULT_HISTORY_PATH) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def append(self, line: str) -> None:
        """Append a single line; the terminator is added here."""
        if "\n" in line or "\r" in line:
            raise ValueError("Trip log entries must be a single line")
        try:
            with self._path.open("a", encoding="utf-8", newline="\n") as handle:
                handle.write(line + "\n")
        except OSError as exc:
            logger.error("trip_log_write_failed path=%s error=%s", self._path, exc)
            raise TripLogWriteError(f"Could not write {self._path}: {exc}") from exc
        logger.debug("trip_log_append path=%s", self._path)

    def read_lines(self) -> list[str]:
        """Return every entry in file order; a missing file reads as empty."""
        try:
            with self._path.open("r", encoding="utf-8", newline="") as handle:
                lines = [line.rstrip("\r\n") for line in handle]
        except FileNotFoundError:
            logger.debug("trip_log_missing path=%s", self._path)
            return []
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("trip_log_read_failed path=%s error=%s", self._path, exc)
            raise TripLogReadError(f"Could not read {self._path}: {exc}") from exc
        logger.debug("trip_log_read path=%s entries=%d", self._path, len(lines))
        return lines


__all__ = [
    "DEFAULT_HISTORY_PATH",
    "TripLog",
    "TripLogError",
    "TripLogReadError",
    "TripLogWriteError",
]
