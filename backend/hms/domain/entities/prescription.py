"""Domain entity: a medication prescribed to a patient by a doctor."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class Prescription:
    patient_id: str
    doctor_id: str
    medication_name: str
    dosage: str
    frequency: str
    duration: str
    quantity: int
    instructions: str | None = None
    status: str | None = "Pending"
    id: str = field(default_factory=lambda: str(uuid4()))
    prescribed_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
