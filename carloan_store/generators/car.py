"""Car generator."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Iterator

from carloan_store.generators.base import BaseGenerator
from carloan_store.models import Car


class CarGenerator(BaseGenerator):
    """Generate synthetic cars for the inventory."""

    # (make, model, category, price range in PHP, mpg range)
    CATALOG = [
        ("Toyota", "Vios", "Sedan", (740_000, 1_100_000), (30, 38)),
        ("Toyota", "Fortuner", "SUV", (1_800_000, 2_500_000), (18, 24)),
        ("Honda", "City", "Sedan", (850_000, 1_200_000), (30, 36)),
        ("Honda", "CR-V", "SUV", (1_750_000, 2_400_000), (24, 30)),
        ("Ford", "Everest", "SUV", (1_900_000, 2_600_000), (18, 24)),
        ("Nissan", "Navara", "Pickup", (1_100_000, 1_800_000), (20, 26)),
        ("Mitsubishi", "Xpander", "MPV", (1_000_000, 1_300_000), (26, 32)),
        ("Suzuki", "Ertiga", "MPV", (800_000, 1_100_000), (28, 34)),
        ("Kia", "Seltos", "Crossover", (1_100_000, 1_500_000), (26, 32)),
        ("Isuzu", "D-Max", "Pickup", (1_150_000, 1_850_000), (20, 26)),
    ]

    COLORS = ["White", "Black", "Silver", "Gray", "Red", "Blue", "Brown"]

    def generate(self) -> Car:
        """Generate a single car."""
        return self._generate_one()

    def generate_batch(self, count: int) -> Iterator[Car]:
        """Generate multiple cars.

        Parameters
        ----------
        count : int
            Number of cars to generate.

        Yields
        ------
        Car
            Generated cars.
        """
        for _ in range(count):
            yield self._generate_one()

    def _generate_one(self) -> Car:
        make, model, category, (low, high), (mpg_low, mpg_high) = self.rng.choice(self.CATALOG)
        # Round to the nearest thousand like dealer list prices
        price = Decimal(self.rng.randint(low // 1000, high // 1000) * 1000)
        return Car(
            make=make,
            model=model,
            year=self.rng.randint(date.today().year - 3, date.today().year),
            price=price,
            category=category,
            color=self.rng.choice(self.COLORS),
            mpg=self.rng.randint(mpg_low, mpg_high),
            notes=self.fake.sentence(nb_words=6) if self.rng.random() < 0.3 else None,
            available=True,
        )
