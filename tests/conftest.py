"""Pytest configuration and fixtures."""

from datetime import date, datetime
from decimal import Decimal
from pathlib import Path

import pytest

from carloan_store.config import StoreConfig
from carloan_store.models import AmortizationRow, Car, Customer, Loan, Payment
from carloan_store.store import CarLoanRepository


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Store directory that does not exist yet."""
    return tmp_path / ".vismera_data"


@pytest.fixture
def config(data_dir: Path) -> StoreConfig:
    """Config for an empty store without sample data."""
    return StoreConfig(data_dir=data_dir, seed_defaults=False)


@pytest.fixture
def repo(config: StoreConfig) -> CarLoanRepository:
    """Opened empty repository."""
    return CarLoanRepository.open(config)


@pytest.fixture
def make_car():
    """Factory for unsaved cars."""

    def _make(**overrides) -> Car:
        values = {
            "make": "Toyota",
            "model": "Camry",
            "year": 2024,
            "price": Decimal("2100000.00"),
            "category": "Sedan",
            "color": "White",
            "mpg": 28,
            "available": True,
        }
        values.update(overrides)
        return Car(**values)

    return _make


@pytest.fixture
def make_customer():
    """Factory for unsaved customers."""

    def _make(**overrides) -> Customer:
        values = {
            "full_name": "Juan Carlos Dela Cruz",
            "contact_number": "+63 917 123 4567",
            "email": "juan.delacruz@email.com",
            "address": "123 Rizal Avenue, Makati City",
        }
        values.update(overrides)
        return Customer(**values)

    return _make


@pytest.fixture
def make_loan():
    """Factory for unsaved loans."""

    def _make(customer_id: int, car_id: int, **overrides) -> Loan:
        values = {
            "customer_id": customer_id,
            "car_id": car_id,
            "principal": Decimal("1680000.00"),
            "apr": Decimal("6.5"),
            "term_months": 36,
            "start_date": date(2024, 1, 15),
            "penalty_rate": Decimal("2.0"),
            "monthly_payment": Decimal("51490.12"),
            "total_interest": Decimal("173644.32"),
            "total_amount": Decimal("1853644.32"),
            "status": "active",
        }
        values.update(overrides)
        return Loan(**values)

    return _make


@pytest.fixture
def make_payment():
    """Factory for unsaved payments."""

    def _make(loan_id: int, **overrides) -> Payment:
        values = {
            "loan_id": loan_id,
            "payment_date": date(2024, 2, 15),
            "amount": Decimal("5000.00"),
            "applied_to_period": 1,
            "principal_applied": Decimal("4000.00"),
            "interest_applied": Decimal("1000.00"),
        }
        values.update(overrides)
        return Payment(**values)

    return _make


@pytest.fixture
def make_row():
    """Factory for unsaved amortization rows."""

    def _make(loan_id: int, period_index: int, **overrides) -> AmortizationRow:
        values = {
            "loan_id": loan_id,
            "period_index": period_index,
            "due_date": date(2024, 1, 15).replace(month=period_index % 12 + 1),
            "opening_balance": Decimal("100000.00"),
            "scheduled_payment": Decimal("3000.00"),
            "principal_paid": Decimal("2500.00"),
            "interest_paid": Decimal("500.00"),
            "closing_balance": Decimal("97500.00"),
        }
        values.update(overrides)
        return AmortizationRow(**values)

    return _make


@pytest.fixture
def fixed_timestamp() -> datetime:
    return datetime(2024, 6, 15, 10, 30, 0, 123456)
