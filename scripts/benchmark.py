#!/usr/bin/env python3
"""Benchmark listing generation and export performance.

Measures:
- Listing generation rate (records/sec)
- JSON envelope and CSV rendering rate
- Memory usage at different scales

Usage:
    python scripts/benchmark.py
    python scripts/benchmark.py --scale 10000
    python scripts/benchmark.py --skip-export
"""

import argparse
import logging
import time

from property_gen.config import CITIES
from property_gen.export import ExportAdapter, ExportRequest
from property_gen.generators import PropertyGenerator
from property_gen.models import PropertyRecord
from property_gen.sinks.csv_export import render_csv

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def get_memory_mb() -> float:
    """Get current process memory usage in MB."""
    try:
        import resource
    except ImportError:
        return 0.0
    usage = resource.getrusage(resource.RUSAGE_SELF)
    return usage.ru_maxrss / 1024  # Linux reports in kilobytes


def benchmark_generation(num_properties: int, seed: int) -> list[PropertyRecord]:
    """Benchmark listing generation across the city roster.

    Parameters
    ----------
    num_properties : int
        Total number of listings to generate.
    seed : int
        Random seed.

    Returns
    -------
    list[PropertyRecord]
        Generated listings (for export benchmarks).
    """
    generator = PropertyGenerator(seed=seed)
    per_city = max(1, num_properties // len(CITIES))
    mem_before = get_memory_mb()

    t0 = time.perf_counter()
    records: list[PropertyRecord] = []
    for city in CITIES:
        records.extend(generator.generate_batch(city, per_city))
    elapsed = time.perf_counter() - t0
    print(f"  Properties:    {len(records):>8,} in {elapsed:.2f}s  ({len(records) / max(elapsed, 0.001):,.0f}/sec)")

    mem_after = get_memory_mb()
    print(f"\n  Memory: {mem_after:.1f} MB (delta: +{mem_after - mem_before:.1f} MB)")

    return records


def benchmark_export(records: list[PropertyRecord], seed: int) -> None:
    """Benchmark CSV rendering and the full JSON export path.

    Parameters
    ----------
    records : list[PropertyRecord]
        Listings to render as CSV.
    seed : int
        Random seed for the adapter's generator.
    """
    t0 = time.perf_counter()
    body = render_csv(records, include_agent=True)
    elapsed = time.perf_counter() - t0
    print(f"  CSV:           {len(records):>8,} in {elapsed:.2f}s  ({len(body) / 1024:,.0f} KB)")

    per_city = max(1, len(records) // len(CITIES))
    adapter = ExportAdapter(PropertyGenerator(seed=seed))
    request = ExportRequest(city=None, all_cities=True, limit=per_city)

    t0 = time.perf_counter()
    result = adapter.export(request)
    elapsed = time.perf_counter() - t0
    print(f"  JSON (all):    {result.count:>8,} in {elapsed:.2f}s  ({len(result.body) / 1024:,.0f} KB)")


def main() -> None:
    """Run benchmarks."""
    parser = argparse.ArgumentParser(description="Benchmark property-gen performance")
    parser.add_argument("--scale", type=int, default=3000, help="Number of listings (default: 3000)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument("--skip-export", action="store_true", help="Skip export benchmarks")
    args = parser.parse_args()

    print("=" * 60)
    print(f"  property-gen Benchmark  |  scale={args.scale:,}  seed={args.seed}")
    print("=" * 60)

    print("\n[1] Listing Generation")
    records = benchmark_generation(args.scale, args.seed)

    if not args.skip_export:
        print("\n[2] Export")
        benchmark_export(records, args.seed)

    print("\n" + "=" * 60)
    print("  Benchmark complete")
    print("=" * 60)


if __name__ == "__main__":
    main()
