"""Data structures for console output."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TripReport:
    """Outcome of a planning action, ready to print."""

    summary: str
    recommendation: str | None = None
    saved: bool = True
    error: str | None = None


__all__ = ["TripReport"]
