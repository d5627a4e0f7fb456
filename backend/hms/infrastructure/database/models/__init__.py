from .activity_log import ActivityLogModel
from .invoice import InvoiceModel
from .medical_service import MedicalServiceModel
from .patient import PatientModel
from .payment import PaymentModel
from .prescription import PrescriptionModel

__all__ = [
    "ActivityLogModel",
    "InvoiceModel",
    "MedicalServiceModel",
    "PatientModel",
    "PaymentModel",
    "PrescriptionModel",
]
