"""Enumeration types for car loan entities.

Records store these as plain lowercase strings; the enums name the values
the application writes, not a closed set the store enforces.
"""

from enum import Enum


class LoanStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"
    PAID_OFF = "paid_off"
    CLOSED = "closed"
    DEFAULTED = "defaulted"
    CANCELLED = "cancelled"
    ARCHIVED = "archived"


class Compounding(str, Enum):
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    SEMI_ANNUALLY = "semi-annually"
    ANNUALLY = "annually"


class PenaltyType(str, Enum):
    PERCENT_PER_MONTH = "percent_per_month"
    PERCENT_PER_DAY = "percent_per_day"
    FLAT = "flat"


class PaymentType(str, Enum):
    REGULAR = "regular"
    PARTIAL = "partial"
    ADVANCE = "advance"
    LATE = "late"
    FULL = "full"
    EXTRA = "extra"
    EARLY_PAYOFF = "early_payoff"
    PENALTY_ONLY = "penalty_only"


# Statuses that tie a car or customer to a loan in the active-loan checks
OPEN_LOAN_STATUSES = frozenset({LoanStatus.ACTIVE.value, LoanStatus.PENDING.value})
