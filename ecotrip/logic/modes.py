"""Transport mode catalog and per-mode cost functions."""

from __future__ import annotations

from enum import Enum
from typing import Iterable


class TransportMode(Enum):
    """Closed set of transport modes with emission factor (g CO2/km) and speed (km/h)."""

    WALK = ("Walk", 0.0, 5.0)
    BIKE = ("Bike", 0.0, 15.0)
    BUS = ("Bus", 50.0, 30.0)

    def __init__(self, label: str, emission_factor: float, speed: float) -> None:
        self.label = label
        self.emission_factor = emission_factor
        self.speed = speed

    def footprint(self, distance: float) -> float:
        """Grams of CO2 emitted travelling `distance` km."""
        return self.emission_factor * distance

    def travel_time(self, distance: float) -> float:
        """Hours needed to travel `distance` km."""
        return distance / self.speed

    def __str__(self) -> str:
        return self.label


CATALOG: tuple[TransportMode, ...] = tuple(TransportMode)


def footprint(mode: TransportMode, distance: float) -> float:
    """Return the CO2 footprint in grams for a trip of `distance` km."""
    return mode.footprint(distance)


def travel_time(mode: TransportMode, distance: float) -> float:
    """Return the travel time in hours for a trip of `distance` km."""
    return mode.travel_time(distance)


def cheapest(catalog: Iterable[TransportMode], distance: float) -> TransportMode:
    """Return the lowest-footprint mode; ties go to the earliest catalog entry."""
    # min() keeps the first of several equal keys.
    return min(catalog, key=lambda mode: mode.footprint(distance))


__all__ = ["CATALOG", "TransportMode", "cheapest", "footprint", "travel_time"]
