"""Enumeration types for listing entities."""

from enum import Enum


class PropertyType(str, Enum):
    SINGLE_FAMILY = "Single Family"
    CONDO = "Condo"
    TOWNHOUSE = "Townhouse"
    MULTI_FAMILY = "Multi-Family"


class ListingStatus(str, Enum):
    FOR_SALE = "FOR_SALE"
