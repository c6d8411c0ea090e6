"""Text rendering for the trip planner console."""

from ecotrip.rendering.composer import (
    compose_history,
    compose_menu,
    compose_mode_menu,
    compose_mode_prompt,
    compose_trip_report,
)
from ecotrip.rendering.report import TripReport

__all__ = [
    "TripReport",
    "compose_history",
    "compose_menu",
    "compose_mode_menu",
    "compose_mode_prompt",
    "compose_trip_report",
]
