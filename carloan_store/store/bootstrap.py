"""First-run setup: data directory, default settings and sample records."""

from __future__ import annotations

import logging
from decimal import Decimal
from pathlib import Path
from typing import TYPE_CHECKING

from carloan_store.exceptions import StorageError
from carloan_store.models import Car, Customer
from carloan_store.store import settings as keys

if TYPE_CHECKING:
    from carloan_store.store.repository import CarLoanRepository

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: dict[str, str] = {
    keys.CURRENCY_SYMBOL: "₱",
    keys.DEFAULT_APR: "6.5",
    keys.DEFAULT_TERM: "36",
    keys.DEFAULT_PENALTY_RATE: "2.0",
    keys.DEFAULT_PENALTY_TYPE: "percent_per_month",
    keys.DEFAULT_GRACE_PERIOD: "5",
    keys.APP_VERSION: "3.0.0",
}

# make, model, year, price, category, color, mpg, image
_SAMPLE_CARS = (
    ("Toyota", "Camry", 2024, "2100000", "Sedan", "White", 28, "toyota_camry.png"),
    ("Honda", "Civic", 2024, "1350000", "Sedan", "Black", 32, "honda_civic.png"),
    ("Ford", "Ranger", 2024, "1680000", "Pickup", "Blue", 22, "ford_ranger.png"),
    ("Mitsubishi", "Montero Sport", 2024, "2050000", "SUV", "Gray", 20, "mitsubishi_montero.png"),
    ("Mazda", "CX-5", 2024, "1890000", "SUV", "Red", 26, "mazda_cx5.png"),
    ("Hyundai", "Accent", 2024, "898000", "Sedan", "Silver", 35, "hyundai_accent.png"),
)

# full name, phone, email, address
_SAMPLE_CUSTOMERS = (
    ("Juan Carlos Dela Cruz", "+63 917 123 4567", "juan.delacruz@email.com", "123 Rizal Avenue, Makati City"),
    ("Maria Santos Garcia", "+63 918 234 5678", "maria.garcia@email.com", "456 EDSA, Quezon City"),
    ("Jose Andres Reyes", "+63 919 345 6789", "jose.reyes@email.com", "789 Ayala Avenue, BGC, Taguig"),
    ("Ana Patricia Villanueva", "+63 920 456 7890", "ana.villanueva@email.com", "321 Session Road, Baguio City"),
)


def sample_cars() -> list[Car]:
    """Fresh, unsaved sample cars."""
    return [
        Car(
            make=make,
            model=model,
            year=year,
            price=Decimal(price),
            category=category,
            color=color,
            mpg=mpg,
            image_path=image,
            available=True,
        )
        for make, model, year, price, category, color, mpg, image in _SAMPLE_CARS
    ]


def sample_customers() -> list[Customer]:
    """Fresh, unsaved sample customers."""
    return [
        Customer(full_name=name, contact_number=phone, email=email, address=address)
        for name, phone, email, address in _SAMPLE_CUSTOMERS
    ]


class Bootstrapper:
    """Prepares a data directory and seeds a fresh store."""

    def ensure_data_dir(self, data_dir: Path) -> None:
        """Create *data_dir* if it is missing.

        Raises
        ------
        StorageError
            If the directory cannot be created.
        """
        if data_dir.is_dir():
            return
        try:
            data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot create data directory {data_dir}: {e}") from e
        logger.info("Created data directory: %s", data_dir)

    def seed(self, repository: "CarLoanRepository") -> bool:
        """Write default settings and sample records if there are no cars.

        Records go through the normal insert path so they get real ids and
        timestamps. Returns ``True`` if anything was inserted.
        """
        if repository.get_car_count() > 0:
            return False

        logger.info("Inserting default data...")
        repository.settings.set_many(DEFAULT_SETTINGS)
        for car in sample_cars():
            repository.insert_car(car)
        for customer in sample_customers():
            repository.insert_customer(customer)
        logger.info(
            "Default data inserted: %d cars, %d customers",
            len(_SAMPLE_CARS),
            len(_SAMPLE_CUSTOMERS),
        )
        return True
