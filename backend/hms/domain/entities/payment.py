"""Domain entity: money received against an invoice."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class Payment:
    """One payment row. Payments are only ever appended; the invoice keeps the running total."""

    invoice_id: str
    amount: float
    payment_method: str | None = None
    reference_number: str | None = None
    notes: str | None = None
    status: str | None = "completed"
    id: str = field(default_factory=lambda: str(uuid4()))
    payment_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
