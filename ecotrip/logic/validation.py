"""Input validation for values collected at the console."""

from __future__ import annotations

from datetime import date
import math
import re
from typing import Sequence
import unicodedata

from ecotrip.logic.modes import TransportMode

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$", re.ASCII)
_DECIMAL_PATTERN = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)$", re.ASCII)
_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$", re.ASCII)


class ValidationError(ValueError):
    """Raised when user-supplied trip data is malformed or out of range."""


def require_location(text: str, field: str) -> str:
    """Return the trimmed location, rejecting empty input and control characters."""
    value = (text or "").strip()
    if not value:
        raise ValidationError(f"{field} cannot be empty!")
    # Line breaks or other control characters would split the history entry.
    if any(unicodedata.category(char).startswith("C") for char in value):
        raise ValidationError(f"{field} cannot contain control characters!")
    return value


def check_distance(distance: float) -> float:
    if not math.isfinite(distance) or distance <= 0:
        raise ValidationError("Invalid distance! Please enter a positive number.")
    return distance


def parse_distance(text: str) -> float:
    """Parse a positive, finite distance in kilometres."""
    value = (text or "").strip()
    if not _DECIMAL_PATTERN.match(value):
        raise ValidationError("Invalid distance! Please enter a positive number.")
    distance = float(value)
    return check_distance(distance)


def parse_mode_choice(text: str, catalog: Sequence[TransportMode]) -> TransportMode:
    """Map a 1-based menu index onto the catalog."""
    value = (text or "").strip()
    if not _INTEGER_PATTERN.match(value):
        raise ValidationError("Invalid input! Please enter a number.")
    choice = int(value)
    if choice < 1 or choice > len(catalog):
        raise ValidationError("Invalid mode selection!")
    return catalog[choice - 1]


def validate_date(text: str) -> str:
    """Ensure `text` is a real calendar date in YYYY-MM-DD form."""
    if not isinstance(text, str) or not _DATE_PATTERN.match(text):
        raise ValidationError(f"Invalid date '{text}', expected YYYY-MM-DD")
    try:
        date.fromisoformat(text)
    except ValueError as exc:
        raise ValidationError(f"Invalid date '{text}', expected YYYY-MM-DD") from exc
    return text


__all__ = [
    "ValidationError",
    "check_distance",
    "parse_distance",
    "parse_mode_choice",
    "require_location",
    "validate_date",
]
