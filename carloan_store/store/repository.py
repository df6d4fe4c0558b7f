"""File-backed car loan repository with cross-entity queries."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Iterable

from carloan_store.config import StoreConfig
from carloan_store.models import (
    OPEN_LOAN_STATUSES,
    AmortizationRow,
    Car,
    Customer,
    Loan,
    LoanDetails,
    LoanStatus,
    Payment,
)
from carloan_store.store import sequences as seq
from carloan_store.store.bootstrap import Bootstrapper
from carloan_store.store.entity_store import EntityStore, LoadResult
from carloan_store.store.records import (
    AMORTIZATION_CODEC,
    CAR_CODEC,
    CUSTOMER_CODEC,
    LOAN_CODEC,
    PAYMENT_CODEC,
)
from carloan_store.store.sequences import SequenceAllocator
from carloan_store.store.settings import SettingsStore

logger = logging.getLogger(__name__)

CARS_FILE = "cars.txt"
CUSTOMERS_FILE = "customers.txt"
LOANS_FILE = "loans.txt"
PAYMENTS_FILE = "payments.txt"
AMORTIZATION_FILE = "amortization.txt"


class CarLoanRepository:
    """Data-access facade over cars, customers, loans, payments,
    amortization rows and settings.

    Construct one instance per process with :meth:`open` and hand it to
    every consumer. Foreign keys (loan to customer and car, payment and
    amortization row to loan) are not enforced: deleting a customer or car
    leaves loans pointing at a missing id, and joins report it as ``None``.

    Parameters
    ----------
    config : StoreConfig
        Data directory and write options.
    bootstrapper : Bootstrapper | None
        First-run seeding; a default one is used when omitted.
    """

    def __init__(self, config: StoreConfig, bootstrapper: Bootstrapper | None = None) -> None:
        self.config = config
        self.bootstrapper = bootstrapper or Bootstrapper()
        data_dir = config.data_dir
        atomic = config.atomic_writes

        self.sequences = SequenceAllocator(data_dir, atomic=atomic)
        self.cars: EntityStore[Car] = EntityStore(
            data_dir / CARS_FILE, CAR_CODEC, self.sequences, seq.CARS, "created_at", atomic
        )
        self.customers: EntityStore[Customer] = EntityStore(
            data_dir / CUSTOMERS_FILE, CUSTOMER_CODEC, self.sequences, seq.CUSTOMERS, "created_at", atomic
        )
        self.loans: EntityStore[Loan] = EntityStore(
            data_dir / LOANS_FILE, LOAN_CODEC, self.sequences, seq.LOANS, "created_at", atomic
        )
        self.payments: EntityStore[Payment] = EntityStore(
            data_dir / PAYMENTS_FILE, PAYMENT_CODEC, self.sequences, seq.PAYMENTS, "recorded_at", atomic
        )
        self.amortization: EntityStore[AmortizationRow] = EntityStore(
            data_dir / AMORTIZATION_FILE, AMORTIZATION_CODEC, self.sequences, seq.AMORTIZATION, None, atomic
        )
        self.settings = SettingsStore(data_dir, atomic=atomic)
        self.load_results: dict[str, LoadResult] = {}
        self.settings_error: OSError | None = None

    @classmethod
    def open(cls, config: StoreConfig | None = None) -> "CarLoanRepository":
        """Create a repository and load it from ``config.data_dir``.

        Raises
        ------
        StorageError
            If the data directory cannot be created.
        """
        repository = cls(config or StoreConfig())
        repository.initialize()
        return repository

    @property
    def data_dir(self) -> Path:
        return self.config.data_dir

    def initialize(self) -> None:
        """Ensure the directory exists, load everything, seed if fresh."""
        self.bootstrapper.ensure_data_dir(self.data_dir)
        self.sequences.load()
        self.load_results = {
            seq.CARS: self.cars.load(),
            seq.CUSTOMERS: self.customers.load(),
            seq.LOANS: self.loans.load(),
            seq.PAYMENTS: self.payments.load(),
            seq.AMORTIZATION: self.amortization.load(),
        }
        self.settings_error = self.settings.load()

        if self.config.seed_defaults and len(self.cars) == 0:
            if self.load_results[seq.CARS].ok:
                self.bootstrapper.seed(self)
            else:
                logger.warning("Car file failed to load; skipping default data")

        logger.info("Text file store opened at %s", self.data_dir)

    def clear_all_data(self) -> None:
        """Delete every record, setting and counter, then reinitialize."""
        for store in (self.cars, self.customers, self.loans, self.payments, self.amortization):
            store.clear()
        self.settings.clear()
        self.sequences.clear()
        self.initialize()

    def summary(self) -> dict[str, int]:
        """Return counts of all entities."""
        return {
            "cars": len(self.cars),
            "customers": len(self.customers),
            "loans": len(self.loans),
            "payments": len(self.payments),
            "amortization_rows": len(self.amortization),
            "settings": len(self.settings),
        }

    # Cars

    def get_all_cars(self) -> list[Car]:
        return self.cars.all()

    def get_car_by_id(self, car_id: int) -> Car | None:
        return self.cars.get(car_id)

    def insert_car(self, car: Car) -> int:
        return self.cars.insert(car)

    def update_car(self, car: Car) -> bool:
        return self.cars.update(car)

    def delete_car(self, car_id: int) -> bool:
        """Delete a car. Loans referencing it are left untouched."""
        return self.cars.delete(car_id)

    def get_available_cars(self) -> list[Car]:
        """Cars flagged available and not tied to an ``active`` loan.

        Only ``active`` excludes a car here; a ``pending`` loan does not,
        unlike :meth:`is_car_in_active_loan`. The status match is exact.
        """
        cars_in_active_loans = {
            loan.car_id for loan in self.loans.all() if loan.status == LoanStatus.ACTIVE.value
        }
        return self.cars.filter(
            lambda car: car.available and car.car_id not in cars_in_active_loans
        )

    def search_cars(self, query: str | None) -> list[Car]:
        """Case-insensitive substring match on make, model, year and category."""
        if query is None or not query.strip():
            return self.get_all_cars()
        needle = query.lower()
        return self.cars.filter(
            lambda car: needle in (car.make or "").lower()
            or needle in (car.model or "").lower()
            or query in str(car.year)
            or needle in (car.category or "").lower()
        )

    def find_cars_by_category(self, category: str) -> list[Car]:
        return self.cars.filter(lambda car: (car.category or "").lower() == category.lower())

    def find_cars_by_year(self, year: int) -> list[Car]:
        return self.cars.filter(lambda car: car.year == year)

    def get_car_count(self) -> int:
        return len(self.cars)

    def get_available_car_count(self) -> int:
        return len(self.get_available_cars())

    def get_distinct_categories(self) -> list[str]:
        return sorted({car.category for car in self.cars.all() if car.category})

    def get_distinct_years(self) -> list[int]:
        return sorted({car.year for car in self.cars.all()}, reverse=True)

    def is_car_in_active_loan(self, car_id: int) -> bool:
        """True if a loan for *car_id* is ``active`` or ``pending`` (any case)."""
        return self.loans.any(lambda loan: loan.car_id == car_id and _is_open(loan))

    # Customers

    def get_all_customers(self) -> list[Customer]:
        return self.customers.all()

    def get_customer_by_id(self, customer_id: int) -> Customer | None:
        return self.customers.get(customer_id)

    def insert_customer(self, customer: Customer) -> int:
        return self.customers.insert(customer)

    def update_customer(self, customer: Customer) -> bool:
        return self.customers.update(customer)

    def delete_customer(self, customer_id: int) -> bool:
        """Delete a customer. Loans referencing it are left untouched."""
        return self.customers.delete(customer_id)

    def search_customers(self, query: str | None) -> list[Customer]:
        """Case-insensitive substring match on name, phone and email."""
        if query is None or not query.strip():
            return self.get_all_customers()
        needle = query.lower()
        return self.customers.filter(
            lambda customer: needle in (customer.full_name or "").lower()
            or needle in (customer.contact_number or "").lower()
            or needle in (customer.email or "").lower()
        )

    def get_customer_count(self) -> int:
        return len(self.customers)

    def customer_has_active_loans(self, customer_id: int) -> bool:
        """True if a loan for *customer_id* is ``active`` or ``pending`` (any case)."""
        return self.loans.any(lambda loan: loan.customer_id == customer_id and _is_open(loan))

    def customer_has_loans(self, customer_id: int) -> bool:
        return self.loans.any(lambda loan: loan.customer_id == customer_id)

    # Loans

    def get_all_loans(self) -> list[Loan]:
        return self.loans.all()

    def get_loan_by_id(self, loan_id: int) -> Loan | None:
        return self.loans.get(loan_id)

    def get_loan_with_details(self, loan_id: int) -> LoanDetails | None:
        loan = self.loans.get(loan_id)
        if loan is None:
            return None
        return self._join(loan)

    def get_all_loans_with_details(self) -> list[LoanDetails]:
        return [self._join(loan) for loan in self.loans.all()]

    def get_loans_by_status(self, status: str) -> list[LoanDetails]:
        """Loans whose status matches *status* (any case), joined."""
        return [self._join(loan) for loan in self.loans.filter(lambda loan: loan.has_status(status))]

    def get_loans_by_customer_id(self, customer_id: int) -> list[Loan]:
        return self.loans.filter(lambda loan: loan.customer_id == customer_id)

    def get_active_loans(self) -> list[Loan]:
        return self.loans.filter(lambda loan: loan.has_status(LoanStatus.ACTIVE.value))

    def count_loans_by_status(self, status: str) -> int:
        return len(self.loans.filter(lambda loan: loan.has_status(status)))

    def get_total_outstanding(self) -> Decimal:
        """Sum over active loans of total amount minus payments made."""
        total = Decimal("0")
        for loan in self.get_active_loans():
            total += loan.total_amount - self.get_total_paid_for_loan(loan.loan_id)
        return total

    def insert_loan(self, loan: Loan) -> int:
        return self.loans.insert(loan)

    def update_loan(self, loan: Loan) -> bool:
        return self.loans.update(loan)

    def update_loan_status(self, loan_id: int, status: str) -> bool:
        """Set a loan's status directly; any value is accepted."""
        loan = self.loans.get(loan_id)
        if loan is None:
            return False
        loan.status = status
        self.loans.save()
        return True

    def delete_loan(self, loan_id: int) -> bool:
        """Delete a loan. Its payments and amortization rows stay."""
        return self.loans.delete(loan_id)

    # Payments

    def get_all_payments(self) -> list[Payment]:
        return self.payments.all()

    def get_payment_by_id(self, payment_id: int) -> Payment | None:
        return self.payments.get(payment_id)

    def get_payments_by_loan_id(self, loan_id: int) -> list[Payment]:
        """Payments for *loan_id* ordered by payment date."""
        payments = self.payments.filter(lambda payment: payment.loan_id == loan_id)
        return sorted(payments, key=lambda payment: payment.payment_date)

    def get_payments_in_date_range(self, start: date, end: date) -> list[Payment]:
        """Payments dated within ``[start, end]`` ordered by payment date."""
        payments = self.payments.filter(lambda payment: start <= payment.payment_date <= end)
        return sorted(payments, key=lambda payment: payment.payment_date)

    def get_total_in_date_range(self, start: date, end: date) -> Decimal:
        return sum(
            (payment.amount for payment in self.get_payments_in_date_range(start, end)),
            Decimal("0"),
        )

    def get_total_paid_for_loan(self, loan_id: int) -> Decimal:
        return sum(
            (payment.amount for payment in self.payments.all() if payment.loan_id == loan_id),
            Decimal("0"),
        )

    def get_penalties_paid_for_loan(self, loan_id: int) -> Decimal:
        return sum(
            (payment.penalty_applied for payment in self.payments.all() if payment.loan_id == loan_id),
            Decimal("0"),
        )

    def get_last_payment(self, loan_id: int) -> Payment | None:
        """Latest payment for *loan_id*; the higher id wins on the same date."""
        payments = self.payments.filter(lambda payment: payment.loan_id == loan_id)
        if not payments:
            return None
        return max(payments, key=lambda payment: (payment.payment_date, payment.payment_id))

    def get_payment_count_for_loan(self, loan_id: int) -> int:
        return len(self.payments.filter(lambda payment: payment.loan_id == loan_id))

    def insert_payment(self, payment: Payment) -> int:
        return self.payments.insert(payment)

    def update_payment(self, payment: Payment) -> bool:
        return self.payments.update(payment)

    def delete_payment(self, payment_id: int) -> bool:
        return self.payments.delete(payment_id)

    # Amortization

    def get_amortization_by_loan_id(self, loan_id: int) -> list[AmortizationRow]:
        """Rows for *loan_id* ordered by period index."""
        rows = self.amortization.filter(lambda row: row.loan_id == loan_id)
        return sorted(rows, key=lambda row: row.period_index)

    def get_amortization_row(self, loan_id: int, period_index: int) -> AmortizationRow | None:
        for row in self.amortization.all():
            if row.loan_id == loan_id and row.period_index == period_index:
                return row
        return None

    def get_unpaid_rows(self, loan_id: int) -> list[AmortizationRow]:
        return [row for row in self.get_amortization_by_loan_id(loan_id) if not row.paid]

    def get_overdue_rows(self, loan_id: int, today: date | None = None) -> list[AmortizationRow]:
        """Unpaid rows for *loan_id* whose due date is before *today*."""
        today = today or date.today()
        return [row for row in self.get_unpaid_rows(loan_id) if row.is_overdue(today)]

    def get_next_unpaid_row(self, loan_id: int) -> AmortizationRow | None:
        """Unpaid row with the smallest period index, or ``None``."""
        unpaid = self.amortization.filter(lambda row: row.loan_id == loan_id and not row.paid)
        if not unpaid:
            return None
        return min(unpaid, key=lambda row: row.period_index)

    def get_last_period_index(self, loan_id: int) -> int:
        rows = self.amortization.filter(lambda row: row.loan_id == loan_id)
        return max((row.period_index for row in rows), default=0)

    def get_paid_period_count(self, loan_id: int) -> int:
        return len(self.amortization.filter(lambda row: row.loan_id == loan_id and row.paid))

    def get_total_period_count(self, loan_id: int) -> int:
        return len(self.amortization.filter(lambda row: row.loan_id == loan_id))

    def insert_amortization_rows(self, rows: Iterable[AmortizationRow]) -> list[int]:
        """Insert rows, each with a fresh id, with one file rewrite."""
        return self.amortization.insert_many(rows)

    def update_amortization_row(self, row: AmortizationRow) -> bool:
        return self.amortization.update(row)

    def mark_period_paid(self, loan_id: int, period_index: int, paid_date: date | None = None) -> bool:
        row = self.get_amortization_row(loan_id, period_index)
        if row is None:
            return False
        row.paid = True
        row.paid_date = paid_date or date.today()
        self.amortization.save()
        return True

    def delete_amortization_by_loan_id(self, loan_id: int) -> int:
        """Remove every row of *loan_id* with one file rewrite; returns the count."""
        return self.amortization.delete_where(lambda row: row.loan_id == loan_id)

    # Settings

    def get_setting(self, key: str, default: str | None = None) -> str | None:
        return self.settings.get(key, default)

    def set_setting(self, key: str, value: str) -> bool:
        return self.settings.set(key, value)

    def delete_setting(self, key: str) -> bool:
        return self.settings.delete(key)

    def has_setting(self, key: str) -> bool:
        return key in self.settings

    def get_all_settings(self) -> dict[str, str]:
        return self.settings.as_dict()

    def _join(self, loan: Loan) -> LoanDetails:
        return LoanDetails(
            loan=loan,
            customer=self.customers.get(loan.customer_id),
            car=self.cars.get(loan.car_id),
        )


def _is_open(loan: Loan) -> bool:
    return (loan.status or "").lower() in OPEN_LOAN_STATUSES
