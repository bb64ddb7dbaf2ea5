"""Pytest configuration and fixtures."""

from datetime import datetime, timezone

import pytest

from property_gen.generators import PropertyGenerator

FIXED_NOW = datetime(2024, 11, 2, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def fixed_clock():
    """Clock that always returns the same instant."""
    return lambda: FIXED_NOW


@pytest.fixture
def generator(seed: int, fixed_clock) -> PropertyGenerator:
    """Seeded generator with a pinned clock."""
    return PropertyGenerator(seed=seed, clock=fixed_clock)
