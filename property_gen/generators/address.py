"""Address generation for Central Florida listings."""

from __future__ import annotations

import random
from dataclasses import dataclass

from faker import Faker

from property_gen.models.base import Address


@dataclass(frozen=True)
class BoundingBox:
    """Latitude/longitude rectangle that generated coordinates fall in.

    Upper bounds are exclusive.
    """

    min_latitude: float
    max_latitude: float
    min_longitude: float
    max_longitude: float

    @classmethod
    def central_florida(cls) -> "BoundingBox":
        """Default box: Orlando metro north to Daytona, west to Lakeland."""
        return cls(
            min_latitude=28.5,
            max_latitude=29.0,
            min_longitude=-81.4,
            max_longitude=-80.9,
        )

    def contains(self, latitude: float, longitude: float) -> bool:
        return (
            self.min_latitude <= latitude <= self.max_latitude
            and self.min_longitude <= longitude <= self.max_longitude
        )


class FloridaAddressFactory:
    """Generate street addresses for any city in Central Florida.

    Street names come from Faker's ``en_US`` provider; house numbers, ZIP
    codes and coordinates are drawn from the shared random source so a seeded
    generator produces the same addresses on every run.

    Parameters
    ----------
    fake : Faker
        Faker instance used for street names.
    rng : random.Random
        Random source for numeric fields.
    bbox : BoundingBox | None
        Coordinate bounds. Defaults to ``BoundingBox.central_florida()``.
    """

    STATE = "FL"
    # Central Florida ZIP codes run 327xx-336xx
    ZIP_RANGE = (32700, 33699)
    HOUSE_NUMBER_RANGE = (100, 9999)

    def __init__(
        self,
        fake: Faker,
        rng: random.Random,
        bbox: BoundingBox | None = None,
    ) -> None:
        self._fake = fake
        self._rng = rng
        self._bbox = bbox or BoundingBox.central_florida()

    def generate(self, city: str) -> Address:
        """Generate an address in ``city``.

        Parameters
        ----------
        city : str
            City name, echoed verbatim. Not validated against the roster.

        Returns
        -------
        Address
            Generated address.
        """
        box = self._bbox
        latitude = box.min_latitude + self._rng.random() * (box.max_latitude - box.min_latitude)
        longitude = box.min_longitude + self._rng.random() * (
            box.max_longitude - box.min_longitude
        )

        return Address(
            street_address=f"{self._rng.randint(*self.HOUSE_NUMBER_RANGE)} {self._fake.street_name()}",
            city=city,
            state=self.STATE,
            zip_code=str(self._rng.randint(*self.ZIP_RANGE)),
            latitude=round(latitude, 6),
            longitude=round(longitude, 6),
        )
