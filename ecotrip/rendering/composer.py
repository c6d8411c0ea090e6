"""Text composers for the interactive trip planner."""

from __future__ import annotations

from typing import Iterable, Sequence

from ecotrip.logic.modes import TransportMode
from ecotrip.rendering.report import TripReport

TITLE = "=== Eco-Friendly Trip Planner ==="
HISTORY_TITLE = "=== Trip History ==="
MENU_OPTIONS = ("Plan a new trip", "View trip history", "Exit")
MENU_PROMPT = "Choose an option: "

SAVED_MESSAGE = "Trip saved to history!"
EMPTY_HISTORY_MESSAGE = "No trip history found!"
GOODBYE_MESSAGE = "Thank you for using Eco-Friendly Trip Planner!"


def compose_menu() -> str:
    """Main menu text, without the trailing prompt."""
    lines = ["", TITLE]
    lines.extend(f"{index}. {label}" for index, label in enumerate(MENU_OPTIONS, start=1))
    return "\n".join(lines)


def compose_mode_menu(catalog: Sequence[TransportMode]) -> str:
    lines = ["Available transport modes:"]
    lines.extend(f"{index}. {mode.label}" for index, mode in enumerate(catalog, start=1))
    return "\n".join(lines)


def compose_mode_prompt(catalog: Sequence[TransportMode]) -> str:
    return f"Choose transport mode (1-{len(catalog)}): "


def compose_trip_report(report: TripReport) -> str:
    """Summary block printed after a trip is planned."""
    lines = ["", "Trip Summary:", report.summary]
    if report.saved:
        lines.append(SAVED_MESSAGE)
    elif report.error:
        lines.append(f"Error saving trip: {report.error}")
    if report.recommendation:
        lines.append(report.recommendation)
    return "\n".join(lines)


def compose_history(lines: Iterable[str]) -> str:
    """History block; lines are printed exactly as stored."""
    entries = list(lines)
    output = ["", HISTORY_TITLE]
    if not entries:
        output.append(EMPTY_HISTORY_MESSAGE)
    else:
        output.extend(entries)
    return "\n".join(output)


__all__ = [
    "EMPTY_HISTORY_MESSAGE",
    "GOODBYE_MESSAGE",
    "HISTORY_TITLE",
    "MENU_PROMPT",
    "SAVED_MESSAGE",
    "TITLE",
    "compose_history",
    "compose_menu",
    "compose_mode_menu",
    "compose_mode_prompt",
    "compose_trip_report",
]
