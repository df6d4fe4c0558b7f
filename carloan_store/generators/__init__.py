"""Synthetic record generators."""

from carloan_store.generators.car import CarGenerator
from carloan_store.generators.customer import CustomerGenerator

__all__ = ["CarGenerator", "CustomerGenerator"]
