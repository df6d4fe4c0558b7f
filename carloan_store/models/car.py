"""Car inventory model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass
class Car:
    """Vehicle offered for financing."""

    make: str
    model: str
    year: int
    price: Decimal
    category: str = ""
    color: str = ""
    mpg: int = 0  # Fuel efficiency rating
    image_path: str | None = None
    notes: str | None = None
    available: bool = True
    car_id: int = 0  # Assigned on insert
    created_at: datetime | None = None

    @property
    def full_name(self) -> str:
        """Display name, e.g. ``2024 Toyota Camry``."""
        return f"{self.year} {self.make} {self.model}"
