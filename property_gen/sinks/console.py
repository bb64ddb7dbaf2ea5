"""Console sink printing listing summaries."""

from dataclasses import dataclass

from property_gen.models import PropertyRecord


@dataclass(frozen=True)
class PriceSummary:
    """Aggregate figures over a set of listings."""

    total: int
    cities: int
    average_price: int
    min_price: int
    max_price: int


def summarize(records: list[PropertyRecord], cities: int | None = None) -> PriceSummary:
    """Compute totals and price statistics.

    Parameters
    ----------
    records : list[PropertyRecord]
        Listings to summarize.
    cities : int | None
        Number of cities requested. Defaults to the distinct cities seen,
        which undercounts when a city produced no listings.
    """
    if cities is None:
        cities = len({record.city for record in records})

    if not records:
        return PriceSummary(total=0, cities=cities, average_price=0, min_price=0, max_price=0)

    prices = [record.price for record in records]
    return PriceSummary(
        total=len(records),
        cities=cities,
        average_price=sum(prices) // len(prices),
        min_price=min(prices),
        max_price=max(prices),
    )


class ConsoleSink:
    """Print per-city counts and a price summary to stdout."""

    def __init__(self) -> None:
        self._records: list[PropertyRecord] = []
        self._counts: dict[str, int] = {}

    def write_batch(self, city: str, records: list[PropertyRecord]) -> None:
        """Record and announce a batch of listings for ``city``."""
        print(f"Generated {len(records)} properties for {city}")
        self._records.extend(records)
        self._counts[city] = self._counts.get(city, 0) + len(records)

    def summary(self) -> PriceSummary:
        return summarize(self._records, cities=len(self._counts))

    def close(self) -> None:
        """Print summary and close."""
        summary = self.summary()
        print()
        print("Summary:")
        print(f"  Total properties: {summary.total}")
        print(f"  Cities covered: {summary.cities}")
        if summary.total:
            print(f"  Average price: ${summary.average_price:,}")
            print(f"  Price range: ${summary.min_price:,} - ${summary.max_price:,}")
