"""Base models shared across listing entities."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    """Street address with coordinates.

    ``latitude``/``longitude`` are rounded to six decimals, the precision
    listing sites publish.
    """

    street_address: str
    city: str
    state: str
    zip_code: str
    latitude: float
    longitude: float
