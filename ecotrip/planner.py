"""Interactive menu loop for the Eco-Friendly Trip Planner."""

from __future__ import annotations

import argparse
from datetime import date
import logging
from typing import Callable, Sequence, TypeVar

from ecotrip.config import DEFAULT_CONFIG_PATH, resolve_config
from ecotrip.data.trip_log import TripLog, TripLogReadError, TripLogWriteError
from ecotrip.display import Console
from ecotrip.log_setup import configure_logging
from ecotrip.logic.modes import CATALOG, TransportMode
from ecotrip.logic.recorder import Trip, format_recommendation, recommend, record, summarize
from ecotrip.logic.validation import (
    ValidationError,
    parse_distance,
    parse_mode_choice,
    require_location,
)
from ecotrip.rendering import (
    TripReport,
    compose_history,
    compose_menu,
    compose_mode_menu,
    compose_mode_prompt,
    compose_trip_report,
)
from ecotrip.rendering.composer import GOODBYE_MESSAGE, MENU_PROMPT

T = TypeVar("T")

PLAN_TRIP = 1
VIEW_HISTORY = 2
EXIT = 3

logger = logging.getLogger(__name__)


class TripPlanner:
    """Menu-driven shell: reads console input, calls the core, prints results."""

    def __init__(
        self,
        console: Console,
        log: TripLog,
        catalog: Sequence[TransportMode] = CATALOG,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._console = console
        self._log = log
        self._catalog = tuple(catalog)
        self._today = today

    def run(self) -> int:
        """Loop until the user exits or input ends; always returns 0."""
        logger.info("planner_started history=%s", self._log.path)
        try:
            while True:
                self._console.show(compose_menu())
                raw = self._console.prompt(MENU_PROMPT)
                try:
                    choice = int(raw.strip())
                except ValueError:
                    self._console.show("Invalid input! Please enter a number.")
                    continue

                if choice == EXIT:
                    break
                if choice == PLAN_TRIP:
                    report = self.plan_trip()
                    self._console.show(compose_trip_report(report))
                elif choice == VIEW_HISTORY:
                    self.view_history()
                else:
                    self._console.show("Invalid option! Please choose 1, 2, or 3.")
        except (EOFError, KeyboardInterrupt):
            self._console.show()
        self._console.show(GOODBYE_MESSAGE)
        logger.info("planner_stopped")
        return 0

    def plan_trip(self) -> TripReport:
        """Collect one trip, persist its summary and build the report."""
        origin = self._ask("Enter start location: ", lambda text: require_location(text, "Start location"))
        destination = self._ask("Enter destination: ", lambda text: require_location(text, "Destination"))
        distance = self._ask("Enter distance (km): ", parse_distance)
        self._console.show(compose_mode_menu(self._catalog))
        mode = self._ask(
            compose_mode_prompt(self._catalog),
            lambda text: parse_mode_choice(text, self._catalog),
        )

        trip = Trip(
            origin=origin,
            destination=destination,
            distance=distance,
            mode=mode,
            date=self._today().isoformat(),
        )
        best = recommend(trip, self._catalog)
        recommendation = format_recommendation(best, trip.distance) if best is not None else None

        try:
            summary = record(trip, self._log)
        except TripLogWriteError as exc:
            logger.warning("trip_not_saved error=%s", exc)
            return TripReport(
                summary=summarize(trip),
                recommendation=recommendation,
                saved=False,
                error=str(exc),
            )

        logger.info("trip_recorded mode=%s distance=%.1f", trip.mode.label, trip.distance)
        return TripReport(summary=summary, recommendation=recommendation)

    def view_history(self) -> None:
        try:
            lines = self._log.read_lines()
        except TripLogReadError as exc:
            logger.warning("history_unavailable error=%s", exc)
            self._console.show(f"Error reading trip history: {exc}")
            return
        self._console.show(compose_history(lines))

    def _ask(self, prompt: str, parse: Callable[[str], T]) -> T:
        while True:
            raw = self._console.prompt(prompt)
            try:
                return parse(raw)
            except ValidationError as exc:
                self._console.show(str(exc))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Eco-Friendly Trip Planner")
    parser.add_argument(
        "--config",
        default=None,
        help=f"Path to YAML config (default: {DEFAULT_CONFIG_PATH} when present)",
    )
    parser.add_argument(
        "--history",
        default=None,
        help="Trip history file, overrides the configured path",
    )
    args = parser.parse_args(argv)

    try:
        config = resolve_config(args.config)
    except ValueError as exc:
        print("config_error", str(exc), flush=True)
        return 2

    try:
        configure_logging(config.log)
    except (OSError, ValueError) as exc:
        print("logging_disabled", str(exc), flush=True)

    history_path = args.history or config.history.path
    planner = TripPlanner(console=Console(), log=TripLog(history_path))
    return planner.run()


__all__ = ["TripPlanner", "main"]


if __name__ == "__main__":
    raise SystemExit(main())
