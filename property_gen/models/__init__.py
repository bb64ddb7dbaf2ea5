"""Domain models for synthetic listings."""

from property_gen.models.base import Address
from property_gen.models.enums import ListingStatus, PropertyType
from property_gen.models.property import (
    Agent,
    PriceEvent,
    PropertyRecord,
    School,
    TaxRecord,
)

__all__ = [
    "Address",
    "Agent",
    "ListingStatus",
    "PriceEvent",
    "PropertyRecord",
    "PropertyType",
    "School",
    "TaxRecord",
]
