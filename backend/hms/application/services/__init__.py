from .activity_log_service import ActivityLogService
from .activity_logger import ActivityLogger
from .audited_crud_service import ActivatableCrudService, AuditedCrudService
from .invoice_number_generator import InvoiceNumberGenerator
from .invoice_service import InvoiceService
from .medical_service_service import MedicalServiceService
from .operation_result import OperationResult
from .patient_service import PatientService
from .prescription_service import PrescriptionService

__all__ = [
    "ActivatableCrudService",
    "ActivityLogService",
    "ActivityLogger",
    "AuditedCrudService",
    "InvoiceNumberGenerator",
    "InvoiceService",
    "MedicalServiceService",
    "OperationResult",
    "PatientService",
    "PrescriptionService",
]
