"""Listing generators."""

from property_gen.generators.address import BoundingBox, FloridaAddressFactory
from property_gen.generators.property import PropertyGenerator, generate_properties

__all__ = [
    "BoundingBox",
    "FloridaAddressFactory",
    "PropertyGenerator",
    "generate_properties",
]
