"""Base generator class for all listing generators."""

from __future__ import annotations

import random
from abc import ABC

from faker import Faker


class BaseGenerator(ABC):
    """Base class for all listing generators.

    Owns the random source and a Faker instance seeded from it, so one
    ``random.Random`` drives every value a generator produces. The
    module-level ``random`` state is never touched.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility. Ignored when ``rng`` is given.
    rng : random.Random | None
        Injected random source. Takes precedence over ``seed``.
    locale : str
        Faker locale (default ``en_US``).
    """

    def __init__(
        self,
        seed: int | None = None,
        rng: random.Random | None = None,
        locale: str = "en_US",
    ) -> None:
        self.rng = rng if rng is not None else random.Random(seed)
        self.fake = Faker(locale)
        self.fake.seed_instance(self.rng.getrandbits(32))
