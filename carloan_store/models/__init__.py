"""Car loan domain models."""

from carloan_store.models.amortization import AmortizationRow
from carloan_store.models.car import Car
from carloan_store.models.customer import Customer
from carloan_store.models.enums import (
    OPEN_LOAN_STATUSES,
    Compounding,
    LoanStatus,
    PaymentType,
    PenaltyType,
)
from carloan_store.models.loan import Loan, LoanDetails
from carloan_store.models.payment import Payment

__all__ = [
    "AmortizationRow",
    "Car",
    "Compounding",
    "Customer",
    "Loan",
    "LoanDetails",
    "LoanStatus",
    "OPEN_LOAN_STATUSES",
    "Payment",
    "PaymentType",
    "PenaltyType",
]
