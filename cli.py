from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from responsesim.engines.rng import RNG
from responsesim.engines.scheduler import RoundScheduler
from responsesim.output.render import ConsoleClosedError, ConsoleRenderer
from responsesim.settings import SimulationSettings, load_settings
from responsesim.time import Pacer
from responsesim.world.loaders import load_locations

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Emergency Response Dispatch Simulation",
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
        help="Logging threshold for diagnostic output on stderr (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command")

    run_parser = subparsers.add_parser(
        "run",
        help="Play the dispatch simulation on the console",
    )
    run_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for deterministic RNG (default: RESPONSESIM_SEED or unseeded)",
    )
    run_parser.add_argument(
        "--rounds",
        type=int,
        default=None,
        help="Number of rounds to play (default: 5)",
    )
    run_parser.add_argument(
        "--locations",
        type=Path,
        default=None,
        help="YAML file listing incident locations",
    )
    run_parser.add_argument(
        "--fast",
        action="store_true",
        help="Skip the pacing pauses between incidents and rounds",
    )
    run_parser.add_argument(
        "--no-wait",
        action="store_true",
        help="Exit straight away instead of waiting for Enter at the end",
    )

    return parser


def _resolve_settings(args: argparse.Namespace) -> SimulationSettings:
    settings = load_settings()
    overrides = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.rounds is not None:
        overrides["rounds"] = args.rounds
    if args.locations is not None:
        overrides["locations_path"] = args.locations
    if not overrides:
        return settings
    return SimulationSettings(**{**settings.model_dump(), **overrides})


def _handle_run(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    try:
        settings = _resolve_settings(args)
    except (ValidationError, ValueError) as exc:
        parser.error(str(exc))

    try:
        locations = load_locations(settings.locations_path)
    except (FileNotFoundError, ValueError) as exc:
        parser.error(str(exc))

    renderer = ConsoleRenderer()
    scheduler = RoundScheduler(
        renderer=renderer,
        rng=RNG(settings.seed),
        locations=locations,
        settings=settings,
        pacer=Pacer(enabled=not args.fast),
    )
    try:
        scheduler.run()
    except ConsoleClosedError as exc:
        logger.error("simulation.input.closed", exc_info=exc)
        return 1

    if not args.no_wait:
        renderer.wait_for_exit()
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s %(message)s")

    if args.command == "run":
        return _handle_run(args, parser)
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
