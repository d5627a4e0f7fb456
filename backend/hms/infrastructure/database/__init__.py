from .base import Base
from .session import engine, async_session_factory, get_db_session
from .models import (
    ActivityLogModel,
    InvoiceModel,
    MedicalServiceModel,
    PatientModel,
    PaymentModel,
    PrescriptionModel,
)

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "get_db_session",
    "ActivityLogModel",
    "InvoiceModel",
    "MedicalServiceModel",
    "PatientModel",
    "PaymentModel",
    "PrescriptionModel",
]
