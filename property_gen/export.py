"""Turn a city selection into a serialized JSON or CSV response."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any

from property_gen.config import CITIES, ApiConfig
from property_gen.exceptions import UsageError
from property_gen.generators import PropertyGenerator
from property_gen.logging import get_logger
from property_gen.models import PropertyRecord
from property_gen.sinks.csv_export import render_csv
from property_gen.sinks.serialization import record_to_dict

logger = get_logger(__name__)

ALL_CITIES = "all"
FORMATS = ("json", "csv")

USAGE = {
    "single": "/api/scrape-v2?city=Orlando&limit=50",
    "all": "/api/scrape-v2?all=true&limit=10",
}


def parse_limit(raw: str | int | None, default: int = 10, ceiling: int = 200) -> int:
    """Parse a per-city limit.

    Absent or non-integer input falls back to ``default``; integers are
    clamped into ``[0, ceiling]``.
    """
    if raw is None:
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        return default
    return max(0, min(value, ceiling))


@dataclass(frozen=True)
class ExportRequest:
    """A validated export selection."""

    city: str | None
    all_cities: bool = False
    limit: int = 10
    format: str = "json"

    @classmethod
    def from_query(
        cls,
        city: str | None = None,
        all_: str | None = None,
        limit: str | int | None = None,
        format_: str | None = None,
        config: ApiConfig | None = None,
    ) -> "ExportRequest":
        """Build a request from raw query-string values.

        ``all_`` enables all-cities mode only when it is ``"true"``. A blank
        ``city`` counts as absent.

        Raises
        ------
        UsageError
            If neither a city nor ``all=true`` is given, or the format is
            not ``json`` or ``csv``.
        """
        config = config or ApiConfig()
        all_cities = (all_ or "").lower() == "true"
        city = city.strip() if city and city.strip() else None

        if not all_cities and city is None:
            raise UsageError("Missing parameter", usage=USAGE)

        fmt = (format_ or "json").lower()
        if fmt not in FORMATS:
            raise UsageError(
                f"Unsupported format {format_!r}; expected one of {', '.join(FORMATS)}",
                usage=USAGE,
            )

        return cls(
            city=city,
            all_cities=all_cities,
            limit=parse_limit(limit, config.default_limit, config.max_limit),
            format=fmt,
        )

    @property
    def label(self) -> str:
        """City name echoed in responses, or ``"all"``."""
        if self.all_cities or self.city is None:
            return ALL_CITIES
        return self.city


@dataclass
class ExportResult:
    """Serialized response body plus transport metadata."""

    body: str
    media_type: str
    count: int
    headers: dict[str, str] = field(default_factory=dict)


class ExportAdapter:
    """Select listings for a request and render them.

    Parameters
    ----------
    generator : PropertyGenerator
        Record source, called once per selected city.
    cities : tuple[str, ...]
        Roster used in all-cities mode, in output order.
    """

    def __init__(
        self,
        generator: PropertyGenerator,
        cities: tuple[str, ...] = CITIES,
    ) -> None:
        self.generator = generator
        self.cities = cities

    def select(self, request: ExportRequest) -> list[PropertyRecord]:
        """Generate listings for the requested city or for every roster city."""
        if request.all_cities:
            targets: tuple[str, ...] = self.cities
        elif request.city is not None:
            targets = (request.city,)
        else:
            raise UsageError("Missing parameter", usage=USAGE)

        records: list[PropertyRecord] = []
        for city in targets:
            records.extend(self.generator.generate_batch(city, request.limit))
        return records

    def export(self, request: ExportRequest) -> ExportResult:
        """Generate and serialize listings for ``request``."""
        records = self.select(request)
        logger.info(
            "Exporting %d listings for %s as %s",
            len(records),
            request.label,
            request.format,
            extra={"city": request.label, "count": len(records), "format": request.format},
        )

        if request.format == "csv":
            return ExportResult(
                body=render_csv(records),
                media_type="text/csv",
                count=len(records),
                headers={
                    "Content-Disposition": (
                        f'attachment; filename="properties-{_filename_safe(request.label)}.csv"'
                    ),
                },
            )

        return ExportResult(
            body=json.dumps(envelope(records, request.label)),
            media_type="application/json",
            count=len(records),
        )


def envelope(records: list[PropertyRecord], city: str) -> dict[str, Any]:
    """JSON response envelope."""
    return {
        "success": True,
        "count": len(records),
        "city": city,
        "properties": [record_to_dict(record) for record in records],
    }


def _filename_safe(label: str) -> str:
    """Replace characters that cannot appear in a quoted header filename."""
    return re.sub(r"[^A-Za-z0-9 ._-]", "_", label)
