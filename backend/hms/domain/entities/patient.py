"""Domain entity: a registered patient."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import uuid4


@dataclass
class Patient:
    full_name: str
    date_of_birth: date
    phone: str
    gender: str | None = None
    email: str | None = None
    address: str | None = None
    blood_group: str | None = None
    allergies: str | None = None
    medical_history: str | None = None
    emergency_contact_name: str | None = None
    emergency_contact_phone: str | None = None
    status: str | None = "Active"
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
