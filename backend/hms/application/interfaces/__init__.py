from .activity_log_repository import ActivityLogRepository
from .current_user_provider import CurrentUserProvider
from .entity_repository import EntityRepository
from .invoice_repository import InvoiceRepository
from .payment_repository import PaymentRepository

__all__ = [
    "ActivityLogRepository",
    "CurrentUserProvider",
    "EntityRepository",
    "InvoiceRepository",
    "PaymentRepository",
]
