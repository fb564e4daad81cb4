"""Command-line entry point for the City Infrastructure Analyzer."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from .config import AppConfig, get_config
from .container import Container
from .domain.errors import CityAnalyzerError, ConfigurationError
from .logging_config import configure_logging
from .reporting import format_json, format_report
from .services import InfrastructureAnalyzerService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="city-analyzer",
        description="Analyze a city's district hierarchy and road network.",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory holding cities.csv, roads.csv and districts.csv.",
    )
    parser.add_argument(
        "--start",
        default=None,
        help="City to compute reachability and distances from.",
    )
    parser.add_argument(
        "--to",
        dest="end",
        default=None,
        help="Also print the shortest route from --start to this city.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on roads that name an unknown city instead of skipping them.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (overrides CITY_LOG_LEVEL).",
    )
    return parser


def _resolve_config(args: argparse.Namespace) -> AppConfig:
    base = get_config()
    updates: Dict[str, Any] = {}
    if args.data_dir is not None:
        updates["data_dir"] = args.data_dir
    if args.strict:
        updates["strict_roads"] = True

    network = base.network.model_copy(update=updates)
    if not network.data_dir.is_dir():
        raise ConfigurationError(
            f"Data directory does not exist: {network.data_dir}",
            setting_name="data_dir",
            expected_type="directory",
        )
    return AppConfig(network=network, observability=base.observability)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = _resolve_config(args)
        configure_logging(config.observability, level=args.log_level)

        container = Container.create_default(config)
        analyzer: InfrastructureAnalyzerService = container.resolve(
            InfrastructureAnalyzerService
        )

        start = args.start or config.network.default_start
        districts = analyzer.analyze_districts()
        network = analyzer.analyze_network(start)
        route = analyzer.route(start, args.end) if args.end else None
    except CityAnalyzerError as e:
        logger.debug("Analysis failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(format_json(districts, network, route))
    else:
        print(format_report(districts, network, route))
    return 0
