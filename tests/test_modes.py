from __future__ import annotations

import pytest

from ecotrip.logic.modes import CATALOG, TransportMode, cheapest, footprint, travel_time

DISTANCES = [0.1, 1.0, 2.5, 10.0, 42.195, 1000.0]


def test_catalog_order_and_constants() -> None:
    assert [mode.label for mode in CATALOG] == ["Walk", "Bike", "Bus"]
    assert TransportMode.WALK.emission_factor == 0.0
    assert TransportMode.WALK.speed == 5.0
    assert TransportMode.BIKE.emission_factor == 0.0
    assert TransportMode.BIKE.speed == 15.0
    assert TransportMode.BUS.emission_factor == 50.0
    assert TransportMode.BUS.speed == 30.0


@pytest.mark.parametrize("distance", DISTANCES)
def test_zero_emission_modes(distance: float) -> None:
    assert footprint(TransportMode.WALK, distance) == 0
    assert footprint(TransportMode.BIKE, distance) == 0


@pytest.mark.parametrize("distance", DISTANCES)
def test_bus_footprint(distance: float) -> None:
    assert footprint(TransportMode.BUS, distance) == 50.0 * distance


@pytest.mark.parametrize("mode", list(TransportMode))
def test_travel_time_is_distance_over_speed(mode: TransportMode) -> None:
    for distance in DISTANCES:
        assert travel_time(mode, distance) == distance / mode.speed


@pytest.mark.parametrize("mode", list(TransportMode))
def test_travel_time_strictly_increasing(mode: TransportMode) -> None:
    times = [travel_time(mode, distance) for distance in DISTANCES]
    assert all(earlier < later for earlier, later in zip(times, times[1:]))


@pytest.mark.parametrize("distance", DISTANCES)
def test_cheapest_prefers_first_zero_emission_mode(distance: float) -> None:
    assert cheapest(CATALOG, distance) is TransportMode.WALK


def test_cheapest_tie_break_follows_catalog_order() -> None:
    reordered = (TransportMode.BUS, TransportMode.BIKE, TransportMode.WALK)

    assert cheapest(reordered, 5.0) is TransportMode.BIKE


def test_str_is_display_label() -> None:
    assert str(TransportMode.BUS) == "Bus"
