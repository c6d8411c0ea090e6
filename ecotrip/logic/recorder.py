"""Trip value record, summary formatting, persistence and recommendation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ecotrip.data.trip_log import TripLog
from ecotrip.logic.modes import CATALOG, TransportMode, cheapest
from ecotrip.logic.validation import check_distance, require_location, validate_date


@dataclass(frozen=True)
class Trip:
    """A single planned trip; footprint and travel time are always derived."""

    origin: str
    destination: str
    distance: float
    mode: TransportMode
    date: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "origin", require_location(self.origin, "Start location"))
        object.__setattr__(self, "destination", require_location(self.destination, "Destination"))
        check_distance(self.distance)
        validate_date(self.date)

    @property
    def footprint(self) -> float:
        return self.mode.footprint(self.distance)

    @property
    def travel_time_hours(self) -> float:
        return self.mode.travel_time(self.distance)


def summarize(trip: Trip) -> str:
    """Render the one-line history entry for a trip.

    Distance and footprint use one decimal place, travel time two. Rounding is
    Python's ``format`` rounding of the exact binary value, which resolves
    true halves to even (``0.625`` becomes ``"0.62"``).
    """
    return (
        f"{trip.date}: {trip.origin} to {trip.destination}, "
        f"{trip.distance:.1f} km, {trip.mode.label}, "
        f"{trip.footprint:.1f} g CO2, {trip.travel_time_hours:.2f} hours"
    )


def record(trip: Trip, log: TripLog) -> str:
    """Append the trip summary to the log and return the line written.

    Raises TripLogWriteError when the log cannot be written; nothing is retried.
    """
    line = summarize(trip)
    log.append(line)
    return line


def recommend(trip: Trip, catalog: Iterable[TransportMode] = CATALOG) -> TransportMode | None:
    """Suggest a lower-footprint mode, or None when the chosen mode is already optimal."""
    best = cheapest(catalog, trip.distance)
    # A tie with the chosen mode counts as already optimal.
    if best.footprint(trip.distance) >= trip.footprint:
        return None
    return best


def format_recommendation(mode: TransportMode, distance: float) -> str:
    return (
        f"Recommendation: Use {mode.label} for a lower carbon footprint "
        f"({mode.footprint(distance):.1f} g CO2)"
    )


__all__ = ["Trip", "format_recommendation", "recommend", "record", "summarize"]
