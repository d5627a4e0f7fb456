from .activity_log import ActivityLog
from .invoice import Invoice
from .medical_service import MedicalService
from .patient import Patient
from .payment import Payment
from .prescription import Prescription

__all__ = [
    "ActivityLog",
    "Invoice",
    "MedicalService",
    "Patient",
    "Payment",
    "Prescription",
]
