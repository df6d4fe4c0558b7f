"""Customer generator."""

from __future__ import annotations

from typing import Iterator

from carloan_store.generators.base import BaseGenerator
from carloan_store.models import Customer


class CustomerGenerator(BaseGenerator):
    """Generate synthetic customers.

    Generated customers have id ``0`` and no timestamp; inserting them
    through the repository assigns both.
    """

    EMAIL_DOMAINS = ["email.com", "mail.ph", "inbox.com"]

    def generate(self) -> Customer:
        """Generate a single customer."""
        return self._generate_one()

    def generate_batch(self, count: int) -> Iterator[Customer]:
        """Generate multiple customers.

        Parameters
        ----------
        count : int
            Number of customers to generate.

        Yields
        ------
        Customer
            Generated customers.
        """
        for _ in range(count):
            yield self._generate_one()

    def _generate_one(self) -> Customer:
        first = self.fake.first_name()
        last = self.fake.last_name()
        handle = f"{first}.{last}".lower().replace(" ", "")
        return Customer(
            full_name=f"{first} {last}",
            contact_number=self.fake.mobile_number(),
            email=f"{handle}@{self.rng.choice(self.EMAIL_DOMAINS)}",
            # One line per record: multi-line addresses are flattened
            address=", ".join(part.strip() for part in self.fake.address().splitlines()),
        )
