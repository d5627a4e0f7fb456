"""Concrete repository implementation for Invoice backed by SQLAlchemy."""

from sqlalchemy import select

from hms.application.interfaces import InvoiceRepository
from hms.domain.entities import Invoice
from hms.infrastructure.database.models import InvoiceModel
from hms.infrastructure.database.repositories.entity_repository import SQLAlchemyEntityRepository
from hms.infrastructure.database.repositories.errors import translate_store_errors


class SQLAlchemyInvoiceRepository(SQLAlchemyEntityRepository[Invoice], InvoiceRepository):
    """Invoices, newest first, plus the invoice number lookup."""

    entity_cls = Invoice
    model_cls = InvoiceModel
    order_column = "created_at"
    order_descending = True

    async def exists_by_number(self, invoice_number: str) -> bool:
        stmt = (
            select(InvoiceModel.id)
            .where(InvoiceModel.invoice_number == invoice_number)
            .limit(1)
        )
        with translate_store_errors("select", self._table):
            result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None
