"""Abstract repository interface for invoice payments."""

from abc import ABC, abstractmethod

from hms.domain.entities import Payment


class PaymentRepository(ABC):
    """Port: append-only persistence for payments."""

    @abstractmethod
    async def create(self, payment: Payment) -> Payment:
        """Persist a new payment and return it."""
        ...

    @abstractmethod
    async def get_by_invoice(self, invoice_id: str) -> list[Payment]:
        """Payments recorded against ``invoice_id``, oldest first."""
        ...
