from __future__ import annotations

import logging

import pytest

from ecotrip.config import LoggingConfig
from ecotrip.data.trip_log import TripLog, TripLogWriteError
from ecotrip.log_setup import configure_logging


def test_configure_logging_writes_file(tmp_path) -> None:
    log_path = configure_logging(LoggingConfig(level="debug", log_dir=str(tmp_path / "logs")))

    TripLog(tmp_path / "trips.txt").append("entry")
    for handler in logging.getLogger("ecotrip").handlers:
        handler.flush()

    assert log_path == tmp_path / "logs" / "ecotrip.log"
    assert "trip_log_append" in log_path.read_text(encoding="utf-8")


def test_write_failures_are_logged(tmp_path) -> None:
    log_path = configure_logging(LoggingConfig(level="INFO", log_dir=str(tmp_path)))
    blocked = TripLog(tmp_path / "missing_dir" / "trips.txt")

    with pytest.raises(TripLogWriteError):
        blocked.append("entry")
    for handler in logging.getLogger("ecotrip").handlers:
        handler.flush()

    assert "trip_log_write_failed" in log_path.read_text(encoding="utf-8")


def test_configure_logging_replaces_handlers(tmp_path) -> None:
    configure_logging(LoggingConfig(level="INFO", log_dir=str(tmp_path / "a")))
    configure_logging(LoggingConfig(level="INFO", log_dir=str(tmp_path / "b")))

    assert len(logging.getLogger("ecotrip").handlers) == 1


def test_configure_logging_rejects_unknown_level(tmp_path) -> None:
    with pytest.raises(ValueError):
        configure_logging(LoggingConfig(level="LOUD", log_dir=str(tmp_path)))
