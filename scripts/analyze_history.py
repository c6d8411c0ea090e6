"""Summarize the trip history log: totals per mode and CO2 avoided versus the bus."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from ecotrip.config import DEFAULT_CONFIG_PATH, resolve_config
from ecotrip.data.trip_log import TripLog, TripLogReadError
from ecotrip.logic.history import BASELINE_MODE, HistoryStats, summarize_history


def _format_stats(stats: HistoryStats) -> list[str]:
    lines = [
        f"  trips: {stats.trips}",
        f"  total distance: {stats.total_distance:.1f} km",
        f"  total footprint: {stats.total_footprint:.1f} g CO2",
        f"  total travel time: {stats.total_hours:.2f} hours",
        f"  CO2 avoided vs {BASELINE_MODE.label}: {stats.co2_avoided:.1f} g",
    ]
    if stats.skipped_lines:
        lines.append(f"  unparsed lines: {stats.skipped_lines}")
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--config",
        default=None,
        help=f"Path to YAML config (default: {DEFAULT_CONFIG_PATH} when present)",
    )
    parser.add_argument(
        "--history",
        default=None,
        help="Trip history file (default: configured history path)",
    )
    args = parser.parse_args(argv)

    if args.history:
        path = args.history
    else:
        try:
            path = resolve_config(args.config).history.path
        except ValueError as exc:
            print("config_error", str(exc), file=sys.stderr, flush=True)
            return 2

    try:
        lines = TripLog(path).read_lines()
    except TripLogReadError as exc:
        print("history_error", str(exc), file=sys.stderr, flush=True)
        return 1

    stats = summarize_history(lines)

    print(f"Trip history summary ({path})")
    for line in _format_stats(stats):
        print(line)

    if stats.trips_by_mode:
        print("\nBy mode:")
        for mode, count in sorted(stats.trips_by_mode.items(), key=lambda item: -item[1]):
            distance = stats.distance_by_mode.get(mode, 0.0)
            print(f"  {mode}: {count} trips, {distance:.1f} km")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
