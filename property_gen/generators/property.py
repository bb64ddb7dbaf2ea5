"""Property listing generator."""

from __future__ import annotations

import math
import random
from datetime import date, datetime, timezone
from typing import Callable, Iterator

from property_gen.exceptions import InvalidCountError
from property_gen.generators.address import BoundingBox, FloridaAddressFactory
from property_gen.generators.base import BaseGenerator
from property_gen.logging import get_logger
from property_gen.models import (
    Agent,
    ListingStatus,
    PriceEvent,
    PropertyRecord,
    PropertyType,
    School,
    TaxRecord,
)

logger = get_logger(__name__)

RENT_RATIO = 0.006


class PropertyGenerator(BaseGenerator):
    """Generate synthetic for-sale listings for a city.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    rng : random.Random | None
        Injected random source; overrides ``seed``.
    locale : str
        Faker locale for street names.
    clock : Callable[[], datetime] | None
        Source of ``scraped_at`` timestamps (default: current UTC time).
    bbox : BoundingBox | None
        Coordinate bounds for generated addresses.
    """

    PROPERTY_TYPES = list(PropertyType)

    AGENTS = (
        Agent("John Smith", "(407) 555-0101", "john.smith@realty.com", "Keller Williams"),
        Agent("Sarah Johnson", "(407) 555-0102", "sarah.j@remax.com", "RE/MAX"),
        Agent("Mike Davis", "(407) 555-0103", "mdavis@century21.com", "Century 21"),
        Agent("Emily Brown", "(407) 555-0104", "ebrown@coldwell.com", "Coldwell Banker"),
    )

    IMAGES = (
        "https://images.unsplash.com/photo-1568605114967-8130f3a36994?w=800&q=80",
        "https://images.unsplash.com/photo-1570129477492-45c003edd2be?w=800&q=80",
        "https://images.unsplash.com/photo-1564013799919-ab600027ffc6?w=800&q=80",
        "https://images.unsplash.com/photo-1600596542815-ffad4c1539a9?w=800&q=80",
    )
    THUMBNAIL_URL = "https://images.unsplash.com/photo-1568605114967-8130f3a36994?w=400&q=80"

    # (label, grades, rating range, distance range in miles)
    SCHOOLS = (
        ("Elementary", "K-5", (7, 9), (0.5, 2.5)),
        ("Middle", "6-8", (6, 9), (1.0, 4.0)),
        ("High", "9-12", (7, 9), (2.0, 6.0)),
    )

    LISTED_DATE = date(2024, 11, 1)
    PRICE_CHANGE_DATE = date(2024, 10, 15)

    def __init__(
        self,
        seed: int | None = None,
        rng: random.Random | None = None,
        locale: str = "en_US",
        clock: Callable[[], datetime] | None = None,
        bbox: BoundingBox | None = None,
    ) -> None:
        super().__init__(seed=seed, rng=rng, locale=locale)
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._address_factory = FloridaAddressFactory(self.fake, self.rng, bbox=bbox)

    def generate(self, city: str) -> PropertyRecord:
        """Generate a single listing in ``city``.

        Returns
        -------
        PropertyRecord
            Generated listing.
        """
        return self._generate_one(city)

    def generate_batch(self, city: str, count: int) -> Iterator[PropertyRecord]:
        """Generate ``count`` listings in ``city``.

        Parameters
        ----------
        city : str
            City name, echoed into every record.
        count : int
            Number of listings. Zero yields nothing.

        Returns
        -------
        Iterator[PropertyRecord]
            Lazily generated listings.

        Raises
        ------
        InvalidCountError
            If ``count`` is negative.
        """
        if count < 0:
            raise InvalidCountError(f"count must be >= 0, got {count}")

        logger.debug("Generating %d listings for %s", count, city)
        return (self._generate_one(city) for _ in range(count))

    def _generate_one(self, city: str) -> PropertyRecord:
        """Generate a single listing."""
        rng = self.rng

        bedrooms = rng.randint(2, 5)
        bathrooms = rng.randint(1, 3) + (0.5 if rng.random() > 0.5 else 0.0)
        sqft = rng.randint(1000, 3499)
        price_per_sqft = 150 + rng.random() * 150
        price = math.floor(sqft * price_per_sqft / 1000) * 1000
        lot_size = math.floor(sqft * (2 + rng.random() * 3))
        property_type = rng.choice(self.PROPERTY_TYPES)
        address = self._address_factory.generate(city)

        return PropertyRecord(
            property_id=f"ZPID{rng.randint(0, 99_999_999)}",
            mls_id=f"MLS{rng.randint(0, 999_999)}",
            street_address=address.street_address,
            city=address.city,
            state=address.state,
            zip_code=address.zip_code,
            latitude=address.latitude,
            longitude=address.longitude,
            price=price,
            bedrooms=bedrooms,
            bathrooms=bathrooms,
            sqft=sqft,
            lot_size=lot_size,
            year_built=rng.randint(1980, 2023),
            property_type=property_type,
            listing_status=ListingStatus.FOR_SALE,
            days_on_market=rng.randint(0, 89),
            hoa_fee=rng.randint(50, 349) if rng.random() > 0.5 else None,
            zestimate=math.floor(price * (0.95 + rng.random() * 0.1)),
            rent_zestimate=math.floor(price * RENT_RATIO),
            price_history=self._price_history(price),
            tax_history=self._tax_history(price),
            agent=rng.choice(self.AGENTS),
            images=self.IMAGES,
            thumbnail_url=self.THUMBNAIL_URL,
            description=self._description(city, bedrooms, bathrooms, sqft, property_type),
            schools=self._schools(city),
            listing_link=f"https://example.com/property/{self._slug()}",
            scraped_at=self._clock(),
        )

    def _price_history(self, price: int) -> tuple[PriceEvent, ...]:
        return (
            PriceEvent(self.LISTED_DATE, price, "Listed for sale"),
            PriceEvent(self.PRICE_CHANGE_DATE, math.floor(price * 1.05), "Price change"),
        )

    def _tax_history(self, price: int) -> tuple[TaxRecord, ...]:
        return (
            TaxRecord(2024, math.floor(price * 0.85), math.floor(price * 0.012)),
            TaxRecord(2023, math.floor(price * 0.82), math.floor(price * 0.011)),
        )

    def _schools(self, city: str) -> tuple[School, ...]:
        schools = []
        for label, grades, (low, high), (near, far) in self.SCHOOLS:
            schools.append(
                School(
                    name=f"{city} {label} School",
                    rating=self.rng.randint(low, high),
                    distance=round(near + self.rng.random() * (far - near), 2),
                    grades=grades,
                )
            )
        return tuple(schools)

    def _description(
        self,
        city: str,
        bedrooms: int,
        bathrooms: float,
        sqft: int,
        property_type: PropertyType,
    ) -> str:
        condition = (
            "Recently renovated with new appliances and flooring."
            if self.rng.random() > 0.5
            else "Move-in ready with excellent curb appeal."
        )
        audience = "large families" if bedrooms >= 4 else "first-time buyers or investors"
        return (
            f"Beautiful {bedrooms} bedroom, {format_bathrooms(bathrooms)} bathroom "
            f"{property_type.value.lower()} in {city}. This stunning property features "
            f"{sqft} sq ft of living space with modern amenities, updated kitchen, and "
            f"spacious living areas. Great location close to schools, shopping, and "
            f"entertainment. {condition} Perfect for {audience}."
        )

    def _slug(self) -> str:
        return self.fake.lexify("?????????", letters="abcdefghijklmnopqrstuvwxyz0123456789")


def format_bathrooms(bathrooms: float) -> str:
    """Render ``2.0`` as ``"2"`` and ``2.5`` as ``"2.5"``."""
    return str(int(bathrooms)) if float(bathrooms).is_integer() else str(bathrooms)


def generate_properties(
    city: str,
    count: int,
    rng: random.Random | None = None,
) -> list[PropertyRecord]:
    """Generate ``count`` listings for ``city`` with a throwaway generator."""
    return list(PropertyGenerator(rng=rng).generate_batch(city, count))
