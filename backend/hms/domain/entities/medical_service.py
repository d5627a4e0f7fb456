"""Domain entity: a billable medical service offered by the hospital."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class MedicalService:
    """Catalogue entry (consultation, lab test, procedure...) with a base price."""

    service_code: str
    service_name: str
    service_type: str
    base_price: float
    currency: str = "TZS"
    description: str | None = None
    is_active: bool = True
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
