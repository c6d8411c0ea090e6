"""Parsing and aggregation of trip log entries."""

from __future__ import annotations

from collections import Counter, defaultdict
from dataclasses import dataclass, field
import re
from typing import Iterable

from ecotrip.logic.modes import TransportMode

_SUMMARY_PATTERN = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2}): "
    r"(?P<origin>.+?) to (?P<destination>.+), "
    r"(?P<distance>\d+(?:\.\d+)?) km, "
    r"(?P<mode>[^,]+), "
    r"(?P<footprint>\d+(?:\.\d+)?) g CO2, "
    r"(?P<hours>\d+(?:\.\d+)?) hours$"
)

BASELINE_MODE = TransportMode.BUS


@dataclass(frozen=True)
class HistoryEntry:
    """Values recovered from one logged summary line (already rounded)."""

    date: str
    origin: str
    destination: str
    distance: float
    mode: str
    footprint: float
    travel_time_hours: float


@dataclass(frozen=True)
class HistoryStats:
    """Aggregate totals across the trip log."""

    trips: int
    total_distance: float
    total_footprint: float
    total_hours: float
    trips_by_mode: dict[str, int] = field(default_factory=dict)
    distance_by_mode: dict[str, float] = field(default_factory=dict)
    co2_avoided: float = 0.0
    skipped_lines: int = 0


def parse_summary(line: str) -> HistoryEntry | None:
    """Parse a summary line written by the recorder; None when it does not match."""
    match = _SUMMARY_PATTERN.match(line.strip())
    if not match:
        return None
    return HistoryEntry(
        date=match.group("date"),
        origin=match.group("origin"),
        destination=match.group("destination"),
        distance=float(match.group("distance")),
        mode=match.group("mode"),
        footprint=float(match.group("footprint")),
        travel_time_hours=float(match.group("hours")),
    )


def summarize_history(lines: Iterable[str]) -> HistoryStats:
    """Total up every parseable line; blank and foreign lines are counted as skipped."""
    entries: list[HistoryEntry] = []
    skipped = 0
    for line in lines:
        if not line.strip():
            continue
        entry = parse_summary(line)
        if entry is None:
            skipped += 1
            continue
        entries.append(entry)

    trips_by_mode: Counter[str] = Counter(entry.mode for entry in entries)
    distance_by_mode: defaultdict[str, float] = defaultdict(float)
    for entry in entries:
        distance_by_mode[entry.mode] += entry.distance

    total_distance = sum(entry.distance for entry in entries)
    total_footprint = sum(entry.footprint for entry in entries)
    baseline = sum(BASELINE_MODE.footprint(entry.distance) for entry in entries)

    return HistoryStats(
        trips=len(entries),
        total_distance=total_distance,
        total_footprint=total_footprint,
        total_hours=sum(entry.travel_time_hours for entry in entries),
        trips_by_mode=dict(trips_by_mode),
        distance_by_mode=dict(distance_by_mode),
        co2_avoided=max(baseline - total_footprint, 0.0),
        skipped_lines=skipped,
    )


__all__ = ["BASELINE_MODE", "HistoryEntry", "HistoryStats", "parse_summary", "summarize_history"]
