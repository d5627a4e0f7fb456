"""Abstract repository interface for invoices."""

from abc import abstractmethod

from hms.application.interfaces.entity_repository import EntityRepository
from hms.domain.entities import Invoice


class InvoiceRepository(EntityRepository[Invoice]):
    """Invoice persistence plus the lookup used for invoice number collisions."""

    @abstractmethod
    async def exists_by_number(self, invoice_number: str) -> bool:
        """Return True if any invoice already carries ``invoice_number``."""
        ...
