"""Property listing model."""

from dataclasses import dataclass
from datetime import date, datetime

from property_gen.models.enums import ListingStatus, PropertyType


@dataclass(frozen=True)
class Agent:
    """Listing agent and the brokerage they work for."""

    name: str
    phone: str
    email: str
    broker: str


@dataclass(frozen=True)
class PriceEvent:
    """Entry in a listing's price history."""

    date: date
    price: int
    event: str


@dataclass(frozen=True)
class TaxRecord:
    """Assessed value and tax paid for one year."""

    year: int
    value: int
    tax: int


@dataclass(frozen=True)
class School:
    """Nearby school with a 1-10 rating and distance in miles."""

    name: str
    rating: int
    distance: float
    grades: str


@dataclass(frozen=True)
class PropertyRecord:
    """Synthetic for-sale listing.

    Valuation fields (``zestimate``, ``rent_zestimate``, ``price_history``,
    ``tax_history``) are derived from ``price`` when the record is built and
    never recomputed.
    """

    property_id: str
    mls_id: str
    street_address: str
    city: str
    state: str
    zip_code: str
    latitude: float
    longitude: float
    price: int
    bedrooms: int
    bathrooms: float
    sqft: int
    lot_size: int
    year_built: int
    property_type: PropertyType
    listing_status: ListingStatus
    days_on_market: int
    hoa_fee: int | None
    zestimate: int
    rent_zestimate: int
    price_history: tuple[PriceEvent, ...]
    tax_history: tuple[TaxRecord, ...]
    agent: Agent
    images: tuple[str, ...]
    thumbnail_url: str
    description: str
    schools: tuple[School, ...]
    listing_link: str
    scraped_at: datetime
    data_source: str = "sample-generator"
    is_active: bool = True
