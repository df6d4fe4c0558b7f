"""Column layouts of the five entity files.

Field order is part of the file format; append new columns at the end as
``trailing`` so existing files keep loading.
"""

from carloan_store.models import AmortizationRow, Car, Customer, Loan, Payment
from carloan_store.store.codec import FieldSpec, RecordCodec

CAR_CODEC: RecordCodec[Car] = RecordCodec(
    Car,
    id_field="car_id",
    fields=(
        FieldSpec("car_id", "int"),
        FieldSpec("make"),
        FieldSpec("model"),
        FieldSpec("year", "int"),
        FieldSpec("price", "decimal"),
        FieldSpec("category"),
        FieldSpec("color"),
        FieldSpec("mpg", "int"),
        FieldSpec("image_path", optional=True),
        FieldSpec("notes", optional=True),
        FieldSpec("available", "bool"),
        FieldSpec("created_at", "datetime", optional=True, trailing=True),
    ),
)

CUSTOMER_CODEC: RecordCodec[Customer] = RecordCodec(
    Customer,
    id_field="customer_id",
    fields=(
        FieldSpec("customer_id", "int"),
        FieldSpec("full_name"),
        FieldSpec("contact_number"),
        FieldSpec("email"),
        FieldSpec("address"),
        FieldSpec("created_at", "datetime", optional=True, trailing=True),
    ),
)

LOAN_CODEC: RecordCodec[Loan] = RecordCodec(
    Loan,
    id_field="loan_id",
    fields=(
        FieldSpec("loan_id", "int"),
        FieldSpec("customer_id", "int"),
        FieldSpec("car_id", "int"),
        FieldSpec("principal", "decimal"),
        FieldSpec("apr", "decimal"),
        FieldSpec("compounding"),
        FieldSpec("term_months", "int"),
        FieldSpec("payment_frequency", default="monthly"),
        FieldSpec("start_date", "date", optional=True),
        FieldSpec("penalty_rate", "decimal"),
        FieldSpec("penalty_type", default="percent_per_month"),
        FieldSpec("grace_period_days", "int"),
        FieldSpec("down_payment", "decimal"),
        FieldSpec("trade_in_value", "decimal"),
        FieldSpec("sales_tax_rate", "decimal"),
        FieldSpec("registration_fee", "decimal"),
        FieldSpec("monthly_payment", "decimal"),
        FieldSpec("total_interest", "decimal"),
        FieldSpec("total_amount", "decimal"),
        FieldSpec("status"),
        FieldSpec("created_at", "datetime", optional=True, trailing=True),
    ),
)

PAYMENT_CODEC: RecordCodec[Payment] = RecordCodec(
    Payment,
    id_field="payment_id",
    fields=(
        FieldSpec("payment_id", "int"),
        FieldSpec("loan_id", "int"),
        FieldSpec("payment_date", "date"),
        FieldSpec("amount", "decimal"),
        FieldSpec("applied_to_period", "int"),
        FieldSpec("payment_type"),
        FieldSpec("penalty_applied", "decimal"),
        FieldSpec("principal_applied", "decimal"),
        FieldSpec("interest_applied", "decimal"),
        FieldSpec("note", optional=True),
        FieldSpec("recorded_by", default="System"),
        FieldSpec("recorded_at", "datetime", optional=True, trailing=True),
    ),
)

AMORTIZATION_CODEC: RecordCodec[AmortizationRow] = RecordCodec(
    AmortizationRow,
    id_field="row_id",
    fields=(
        FieldSpec("row_id", "int"),
        FieldSpec("loan_id", "int"),
        FieldSpec("period_index", "int"),
        FieldSpec("due_date", "date"),
        FieldSpec("opening_balance", "decimal"),
        FieldSpec("scheduled_payment", "decimal"),
        FieldSpec("principal_paid", "decimal"),
        FieldSpec("interest_paid", "decimal"),
        FieldSpec("penalty_amount", "decimal"),
        FieldSpec("extra_payment", "decimal"),
        FieldSpec("closing_balance", "decimal"),
        FieldSpec("paid", "bool"),
        FieldSpec("paid_date", "date", optional=True),
    ),
)
