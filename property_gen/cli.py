"""Batch export of synthetic listings to dated JSON and CSV files.

Usage:
    property-gen
    property-gen --city="Orlando" --limit=50
    property-gen --output-dir exports --seed 42
"""

from __future__ import annotations

import argparse
import sys
from datetime import date
from pathlib import Path

from property_gen.config import PropertyGenConfig
from property_gen.exceptions import PropertyGenError
from property_gen.export import parse_limit
from property_gen.generators import PropertyGenerator
from property_gen.logging import get_logger, setup_logging
from property_gen.models import PropertyRecord
from property_gen.sinks import ConsoleSink, CsvFileSink, JsonFileSink

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="property-gen",
        description="Generate synthetic Central Florida listings and export them.",
    )
    parser.add_argument(
        "--city",
        default=None,
        help="Single city to generate (default: every roster city)",
    )
    parser.add_argument(
        "--limit",
        default=None,
        help="Listings per city (default: 10, capped at the configured maximum)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for the exported files (default: OUTPUT_DIR or cwd)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--log-level", default=None, help="Log level (default: LOG_LEVEL or INFO)")
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default=None,
        help="Log format",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Write JSON without indentation",
    )
    return parser


def run(
    config: PropertyGenConfig,
    cities: tuple[str, ...],
    limit: int,
    today: date | None = None,
) -> list[PropertyRecord]:
    """Generate listings for ``cities`` and write the dated export files.

    Parameters
    ----------
    config : PropertyGenConfig
        Seed and output settings.
    cities : tuple[str, ...]
        Cities to generate, in output order.
    limit : int
        Listings per city.
    today : date | None
        Date stamped into file names (default: today).

    Returns
    -------
    list[PropertyRecord]
        Every generated listing.
    """
    generator = PropertyGenerator(seed=config.seed)
    console = ConsoleSink()

    print(f"Cities: {', '.join(cities)}")
    print(f"Properties per city: {limit}")

    records: list[PropertyRecord] = []
    for city in cities:
        batch = list(generator.generate_batch(city, limit))
        console.write_batch(city, batch)
        records.extend(batch)

    name = f"properties-{(today or date.today()).isoformat()}"
    file_sinks = [
        JsonFileSink(config.output.output_dir, pretty=config.output.pretty_json),
        CsvFileSink(config.output.output_dir),
    ]
    for sink in file_sinks:
        print(f"Exported to {sink.write_batch(name, records)}")

    for sink in (*file_sinks, console):
        sink.close()
    return records


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = PropertyGenConfig.from_env()
    except PropertyGenError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    if args.seed is not None:
        config.seed = args.seed
    if args.output_dir is not None:
        config.output.output_dir = args.output_dir
    if args.compact:
        config.output.pretty_json = False

    setup_logging(
        level=args.log_level or config.log_level,
        format_type=args.log_format or config.log_format,
    )

    city = args.city.strip().strip('"') if args.city else ""
    cities = (city,) if city else config.cities
    limit = parse_limit(args.limit, config.api.default_limit, config.api.max_limit)

    try:
        run(config, cities, limit)
    except PropertyGenError as exc:
        logger.error("Export failed: %s", exc)
        return 1

    print("\nDone.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
