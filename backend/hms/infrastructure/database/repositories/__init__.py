from .activity_log_repository import SQLAlchemyActivityLogRepository
from .entity_repository import SQLAlchemyEntityRepository
from .invoice_repository import SQLAlchemyInvoiceRepository
from .medical_service_repository import SQLAlchemyMedicalServiceRepository
from .patient_repository import SQLAlchemyPatientRepository
from .payment_repository import SQLAlchemyPaymentRepository
from .prescription_repository import SQLAlchemyPrescriptionRepository

__all__ = [
    "SQLAlchemyActivityLogRepository",
    "SQLAlchemyEntityRepository",
    "SQLAlchemyInvoiceRepository",
    "SQLAlchemyMedicalServiceRepository",
    "SQLAlchemyPatientRepository",
    "SQLAlchemyPaymentRepository",
    "SQLAlchemyPrescriptionRepository",
]
