"""Domain entity: a patient invoice identified by a human-readable number."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import uuid4


@dataclass
class Invoice:
    """Billing document for a patient.

    ``invoice_number`` has the form ``INV-<digits>`` and is unique across all
    invoices (enforced by the store, see InvoiceNumberGenerator).
    """

    invoice_number: str
    patient_id: str
    total_amount: float
    tax: float | None = None
    discount: float | None = None
    paid_amount: float | None = 0
    status: str | None = "Unpaid"
    due_date: date | None = None
    notes: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    invoice_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
