"""Payment model."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from carloan_store.models.enums import PaymentType


@dataclass
class Payment:
    """Payment recorded against a loan."""

    loan_id: int
    payment_date: date
    amount: Decimal
    applied_to_period: int = 0
    payment_type: str = PaymentType.REGULAR.value
    penalty_applied: Decimal = Decimal("0")
    principal_applied: Decimal = Decimal("0")
    interest_applied: Decimal = Decimal("0")
    note: str | None = None
    recorded_by: str = "System"
    payment_id: int = 0  # Assigned on insert
    recorded_at: datetime | None = None
