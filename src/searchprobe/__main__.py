"""Entry point: ``python -m searchprobe``."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from pydantic import ValidationError

from searchprobe.exceptions import ConfigurationError
from searchprobe.models import RunSummary
from searchprobe.reporting.console import print_scenario_list
from searchprobe.reporting.data_export import export_to_file
from searchprobe.scenarios.runner import ScenarioRunner
from searchprobe.scenarios.suite import SCENARIOS
from searchprobe.settings import AppSettings


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )
    # Quiet noisy libraries
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="searchprobe", description=__doc__)
    parser.add_argument("--config", help="Path to settings.yaml.")
    parser.add_argument(
        "--scenario",
        action="append",
        dest="scenarios",
        metavar="NAME",
        help="Run only this scenario (repeatable).",
    )
    parser.add_argument("--export", choices=("json", "csv"), help="Write results to artifacts_dir.")
    parser.add_argument("--list", action="store_true", help="List scenarios and exit.")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


async def _async_main(args: argparse.Namespace, settings: AppSettings) -> RunSummary:
    runner = ScenarioRunner(settings)
    return await runner.run(args.scenarios)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    _configure_logging(args.verbose)

    if args.list:
        print_scenario_list(SCENARIOS)
        return

    try:
        settings = AppSettings.from_yaml(args.config)
        summary = asyncio.run(_async_main(args, settings))
    except (ConfigurationError, ValidationError) as exc:
        logging.error("%s", exc)
        sys.exit(2)
    except KeyboardInterrupt:
        logging.info("Interrupted by user.")
        sys.exit(130)

    if args.export:
        export_to_file(summary, settings.artifacts_dir, args.export)
    sys.exit(0 if summary.all_passed else 1)


if __name__ == "__main__":
    main()
