from __future__ import annotations

import pytest

from ecotrip.logic.history import parse_summary, summarize_history
from ecotrip.logic.modes import TransportMode
from ecotrip.logic.recorder import Trip, summarize


def _line(origin: str, destination: str, distance: float, mode: TransportMode) -> str:
    return summarize(Trip(origin, destination, distance, mode, "2024-01-15"))


def test_parse_summary_reads_recorded_line() -> None:
    entry = parse_summary("2024-01-15: Home to Office, 10.0 km, Bus, 500.0 g CO2, 0.33 hours")

    assert entry is not None
    assert entry.date == "2024-01-15"
    assert entry.origin == "Home"
    assert entry.destination == "Office"
    assert entry.distance == 10.0
    assert entry.mode == "Bus"
    assert entry.footprint == 500.0
    assert entry.travel_time_hours == 0.33


def test_parse_summary_location_containing_to_and_commas() -> None:
    entry = parse_summary(_line("Back to School", "Main St, Apt 4", 1.5, TransportMode.WALK))

    assert entry is not None
    assert entry.origin == "Back"
    # Ambiguous split is resolved at the first " to "
    assert entry.destination == "School to Main St, Apt 4"
    assert entry.distance == 1.5


@pytest.mark.parametrize("line", ["", "hello", "2024-01-15: Home to Office"])
def test_parse_summary_rejects_foreign_lines(line: str) -> None:
    assert parse_summary(line) is None


def test_summarize_history_totals() -> None:
    lines = [
        _line("Home", "Office", 10.0, TransportMode.BUS),
        _line("Office", "Gym", 3.0, TransportMode.BIKE),
        "",
        "garbage",
        _line("Gym", "Home", 2.0, TransportMode.WALK),
    ]

    stats = summarize_history(lines)

    assert stats.trips == 3
    assert stats.total_distance == pytest.approx(15.0)
    assert stats.total_footprint == pytest.approx(500.0)
    assert stats.trips_by_mode == {"Bus": 1, "Bike": 1, "Walk": 1}
    assert stats.distance_by_mode["Bike"] == pytest.approx(3.0)
    assert stats.co2_avoided == pytest.approx(250.0)
    assert stats.skipped_lines == 1


def test_summarize_history_empty() -> None:
    stats = summarize_history([])

    assert stats.trips == 0
    assert stats.total_footprint == 0
    assert stats.trips_by_mode == {}
