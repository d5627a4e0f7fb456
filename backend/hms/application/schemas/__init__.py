from .activity_log import ActivityLogResponse, ActivityLogStatsResponse
from .invoice import InvoiceCreate, InvoiceResponse, InvoiceUpdate
from .medical_service import (
    MedicalServiceCreate,
    MedicalServiceResponse,
    MedicalServiceUpdate,
    ToggleStatusRequest,
)
from .patient import PatientCreate, PatientResponse, PatientUpdate
from .payment import PaymentCreate, PaymentResponse
from .prescription import PrescriptionCreate, PrescriptionResponse, PrescriptionUpdate

__all__ = [
    "ActivityLogResponse",
    "ActivityLogStatsResponse",
    "InvoiceCreate",
    "InvoiceResponse",
    "InvoiceUpdate",
    "MedicalServiceCreate",
    "MedicalServiceResponse",
    "MedicalServiceUpdate",
    "ToggleStatusRequest",
    "PatientCreate",
    "PatientResponse",
    "PatientUpdate",
    "PaymentCreate",
    "PaymentResponse",
    "PrescriptionCreate",
    "PrescriptionResponse",
    "PrescriptionUpdate",
]
