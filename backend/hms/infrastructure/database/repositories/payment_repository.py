"""Concrete repository for invoice payments backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hms.application.interfaces import PaymentRepository
from hms.domain.entities import Payment
from hms.infrastructure.database.models import PaymentModel
from hms.infrastructure.database.repositories.errors import translate_store_errors

_TABLE = PaymentModel.__tablename__


class SQLAlchemyPaymentRepository(PaymentRepository):
    """Implements the PaymentRepository port using SQLAlchemy."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: PaymentModel) -> Payment:
        return Payment(
            id=model.id,
            invoice_id=model.invoice_id,
            amount=model.amount,
            payment_method=model.payment_method,
            reference_number=model.reference_number,
            notes=model.notes,
            status=model.status,
            payment_date=model.payment_date,
            created_at=model.created_at,
        )

    def _to_model(self, entity: Payment) -> PaymentModel:
        return PaymentModel(
            id=entity.id,
            invoice_id=entity.invoice_id,
            amount=entity.amount,
            payment_method=entity.payment_method,
            reference_number=entity.reference_number,
            notes=entity.notes,
            status=entity.status,
            payment_date=entity.payment_date,
            created_at=entity.created_at,
        )

    async def create(self, payment: Payment) -> Payment:
        model = self._to_model(payment)
        with translate_store_errors("insert", _TABLE):
            async with self._session.begin_nested():
                self._session.add(model)
        return self._to_entity(model)

    async def get_by_invoice(self, invoice_id: str) -> list[Payment]:
        stmt = (
            select(PaymentModel)
            .where(PaymentModel.invoice_id == invoice_id)
            .order_by(PaymentModel.payment_date.asc())
        )
        with translate_store_errors("select", _TABLE):
            result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]
