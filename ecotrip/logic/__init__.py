"""Trip planning domain logic."""

from ecotrip.logic.modes import CATALOG, TransportMode, cheapest, footprint, travel_time
from ecotrip.logic.recorder import Trip, format_recommendation, recommend, record, summarize
from ecotrip.logic.validation import ValidationError

__all__ = [
    "CATALOG",
    "TransportMode",
    "Trip",
    "ValidationError",
    "cheapest",
    "footprint",
    "format_recommendation",
    "recommend",
    "record",
    "summarize",
    "travel_time",
]
