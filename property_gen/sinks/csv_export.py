"""CSV rendering for listings.

Text cells are double-quoted and numeric cells (price, beds, baths, square
footage, year built) are left bare. Embedded quotes are doubled by the
``csv`` module, so addresses or city names containing commas or quotes stay
in a single column.
"""

import csv
import io
from typing import Any, Iterable

from property_gen.models import PropertyRecord

CSV_COLUMNS = (
    "Property ID",
    "MLS ID",
    "Address",
    "City",
    "State",
    "ZIP",
    "Price",
    "Beds",
    "Baths",
    "SqFt",
    "Type",
    "Year",
    "Status",
)

AGENT_COLUMNS = ("Agent", "Phone", "Broker")


def csv_header(include_agent: bool = False) -> list[str]:
    """Column names, optionally with the agent columns appended."""
    columns = list(CSV_COLUMNS)
    if include_agent:
        columns.extend(AGENT_COLUMNS)
    return columns


def csv_row(record: PropertyRecord, include_agent: bool = False) -> list[Any]:
    """Cell values for one listing, in header order."""
    bathrooms = record.bathrooms
    if float(bathrooms).is_integer():
        bathrooms = int(bathrooms)

    row: list[Any] = [
        record.property_id,
        record.mls_id,
        record.street_address,
        record.city,
        record.state,
        record.zip_code,
        record.price,
        record.bedrooms,
        bathrooms,
        record.sqft,
        record.property_type.value,
        record.year_built,
        record.listing_status.value,
    ]
    if include_agent:
        row.extend([record.agent.name, record.agent.phone, record.agent.broker])
    return row


def render_csv(records: Iterable[PropertyRecord], include_agent: bool = False) -> str:
    """Render listings as CSV text: a bare header line, then one row per record.

    Parameters
    ----------
    records : Iterable[PropertyRecord]
        Listings in output order.
    include_agent : bool
        Append agent name, phone and broker columns.

    Returns
    -------
    str
        CSV document with ``\\n`` line endings.
    """
    buffer = io.StringIO()
    buffer.write(",".join(csv_header(include_agent)) + "\n")

    writer = csv.writer(buffer, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    for record in records:
        writer.writerow(csv_row(record, include_agent))

    return buffer.getvalue()
