"""Amortization schedule model."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass
class AmortizationRow:
    """One period of a loan's stored payment schedule."""

    loan_id: int
    period_index: int  # 1-based
    due_date: date
    opening_balance: Decimal
    scheduled_payment: Decimal
    principal_paid: Decimal = Decimal("0")
    interest_paid: Decimal = Decimal("0")
    penalty_amount: Decimal = Decimal("0")
    extra_payment: Decimal = Decimal("0")
    closing_balance: Decimal = Decimal("0")
    paid: bool = False
    paid_date: date | None = None
    row_id: int = 0  # Assigned on insert

    @property
    def total_payment(self) -> Decimal:
        """Scheduled payment plus penalty and extra payment."""
        return self.scheduled_payment + self.penalty_amount + self.extra_payment

    def is_overdue(self, today: date | None = None) -> bool:
        """Unpaid and past its due date."""
        if self.paid:
            return False
        return (today or date.today()) > self.due_date
