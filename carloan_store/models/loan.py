"""Loan models."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal

from carloan_store.models.car import Car
from carloan_store.models.customer import Customer
from carloan_store.models.enums import Compounding, LoanStatus, PenaltyType


@dataclass
class Loan:
    """Car loan contract.

    ``customer_id`` and ``car_id`` are plain identifiers; nothing stops the
    referenced customer or car from being deleted while the loan remains.
    """

    customer_id: int
    car_id: int
    principal: Decimal
    apr: Decimal  # Annual rate in percent (6.5 means 6.5%)
    compounding: str = Compounding.MONTHLY.value
    term_months: int = 36
    payment_frequency: str = "monthly"
    start_date: date | None = None
    penalty_rate: Decimal = Decimal("0")
    penalty_type: str = PenaltyType.PERCENT_PER_MONTH.value
    grace_period_days: int = 5
    down_payment: Decimal = Decimal("0")
    trade_in_value: Decimal = Decimal("0")
    sales_tax_rate: Decimal = Decimal("0")
    registration_fee: Decimal = Decimal("0")
    monthly_payment: Decimal = Decimal("0")
    total_interest: Decimal = Decimal("0")
    total_amount: Decimal = Decimal("0")
    status: str = LoanStatus.ACTIVE.value
    loan_id: int = 0  # Assigned on insert
    created_at: datetime | None = None

    def has_status(self, status: str) -> bool:
        """Case-insensitive status comparison."""
        return (self.status or "").lower() == status.lower()


@dataclass
class LoanDetails:
    """A loan joined with its customer and car.

    ``customer`` or ``car`` is ``None`` when the referenced record no
    longer exists.
    """

    loan: Loan
    customer: Customer | None = field(default=None)
    car: Car | None = field(default=None)
