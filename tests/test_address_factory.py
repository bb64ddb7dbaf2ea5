"""Tests for FloridaAddressFactory and BoundingBox."""

import random

import pytest
from faker import Faker

from property_gen.generators.address import BoundingBox, FloridaAddressFactory
from property_gen.models.base import Address


def _factory(seed: int = 42, bbox: BoundingBox | None = None) -> FloridaAddressFactory:
    fake = Faker("en_US")
    fake.seed_instance(seed)
    return FloridaAddressFactory(fake, random.Random(seed), bbox=bbox)


class TestBoundingBox:
    """Tests for BoundingBox."""

    def test_central_florida(self) -> None:
        """Test the default Central Florida bounds."""
        box = BoundingBox.central_florida()

        assert (box.min_latitude, box.max_latitude) == (28.5, 29.0)
        assert (box.min_longitude, box.max_longitude) == (-81.4, -80.9)

    def test_contains(self) -> None:
        """Test points inside and outside the box."""
        box = BoundingBox.central_florida()

        assert box.contains(28.54, -81.38)
        assert not box.contains(25.76, -80.19)  # Miami
        assert not box.contains(28.54, -82.0)

    def test_frozen(self) -> None:
        """Test bounding boxes are immutable."""
        box = BoundingBox.central_florida()
        with pytest.raises(AttributeError):
            box.min_latitude = 0.0  # type: ignore[misc]


class TestFloridaAddressFactory:
    """Tests for FloridaAddressFactory."""

    def test_generate_returns_address(self) -> None:
        """Test generate returns an Address for the city."""
        address = _factory().generate("Kissimmee")

        assert isinstance(address, Address)
        assert address.city == "Kissimmee"
        assert address.state == "FL"

    def test_fields_in_range(self) -> None:
        """Test house number, ZIP and state stay in range."""
        factory = _factory()
        box = BoundingBox.central_florida()

        for _ in range(100):
            address = factory.generate("Lakeland")
            assert box.contains(address.latitude, address.longitude)
            assert 32700 <= int(address.zip_code) <= 33699
            number, street = address.street_address.split(" ", 1)
            assert 100 <= int(number) <= 9999
            assert street

    def test_coordinates_six_decimals(self) -> None:
        """Test coordinates are rounded to six decimals."""
        address = _factory().generate("Lakeland")

        assert round(address.latitude, 6) == address.latitude
        assert round(address.longitude, 6) == address.longitude

    def test_custom_bbox(self) -> None:
        """Test coordinates honour a custom bounding box."""
        box = BoundingBox(27.0, 27.1, -82.5, -82.4)
        factory = _factory(bbox=box)

        for _ in range(20):
            address = factory.generate("Sarasota")
            assert box.contains(address.latitude, address.longitude)

    def test_reproducible(self) -> None:
        """Test the same seed gives the same addresses."""
        first = _factory(seed=3).generate("Sanford")
        second = _factory(seed=3).generate("Sanford")

        assert first == second
