"""Customer model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Customer:
    """Loan applicant."""

    full_name: str
    contact_number: str = ""
    email: str = ""
    address: str = ""
    customer_id: int = 0  # Assigned on insert
    created_at: datetime | None = None
