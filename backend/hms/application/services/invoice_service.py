"""Application service (use case) for invoices and the payments recorded against them."""

import time
from datetime import datetime, timezone

from hms.application.interfaces import InvoiceRepository, PaymentRepository
from hms.application.schemas.invoice import InvoiceCreate
from hms.application.services.activity_logger import ActivityLogger
from hms.application.services.audited_crud_service import AuditedCrudService
from hms.application.services.invoice_number_generator import InvoiceNumberGenerator
from hms.application.services.operation_result import OperationResult
from hms.domain.entities import Invoice, Payment
from hms.domain.exceptions import EntityNotFoundError

DEFAULT_TAX_RATE = 0.1
PAYMENT_RECEIVED_ACTION = "billing.payment.received"


def payment_status(paid_amount: float, total_amount: float) -> str:
    """Invoice status implied by the running paid total."""
    if paid_amount >= total_amount:
        return "Paid"
    if paid_amount > 0:
        return "Partially Paid"
    return "Unpaid"


class InvoiceService(AuditedCrudService[Invoice]):
    """Audited invoice CRUD; new invoices get a generated invoice number.

    Payments are appended through ``record_payment``, which keeps the invoice's
    ``paid_amount`` and ``status`` in step with what has been received.
    """

    table_name = "invoices"
    label = "invoice"
    entity_type = "Invoice"
    name_field = "invoice_number"

    def __init__(
        self,
        repository: InvoiceRepository,
        activity_logger: ActivityLogger,
        number_generator: InvoiceNumberGenerator,
        payment_repository: PaymentRepository,
    ):
        super().__init__(repository, activity_logger)
        self._number_generator = number_generator
        self._payments = payment_repository

    async def create_invoice(
        self, data: InvoiceCreate, user_id: str | None = None
    ) -> OperationResult[Invoice]:
        tax = data.tax if data.tax is not None else round(data.total_amount * DEFAULT_TAX_RATE, 2)
        invoice = Invoice(
            invoice_number=await self._number_generator.generate(),
            patient_id=data.patient_id,
            total_amount=data.total_amount,
            tax=tax,
            discount=data.discount,
            due_date=data.due_date,
            notes=data.notes,
        )
        return await self.create(invoice, user_id)

    async def record_payment(
        self,
        invoice_id: str,
        amount: float,
        method: str,
        reference: str | None = None,
        *,
        notes: str | None = None,
        user_id: str | None = None,
    ) -> OperationResult[Invoice]:
        """Store a payment, add it to ``paid_amount`` and re-derive ``status``.

        When no reference is given one is built as ``<METHOD>-<epoch ms>``
        ("MPESA-1717430400000"). A successful payment is audited as
        ``billing.payment.received``.
        """
        what = "recording invoice payment"
        try:
            invoice = await self._repository.get_by_id(invoice_id)
        except Exception as exc:
            return self._fail(what, exc)
        if invoice is None:
            return self._fail(what, EntityNotFoundError(self.entity_type, invoice_id))

        if reference is None:
            reference = f"{''.join(method.split()).upper()}-{int(time.time() * 1000)}"
        payment = Payment(
            invoice_id=invoice_id,
            amount=amount,
            payment_method=method,
            reference_number=reference,
            notes=notes,
        )
        paid_amount = round((invoice.paid_amount or 0) + amount, 2)

        try:
            await self._payments.create(payment)
            updated = await self._repository.update(
                invoice_id,
                {
                    "paid_amount": paid_amount,
                    "status": payment_status(paid_amount, invoice.total_amount),
                    "updated_at": datetime.now(timezone.utc),
                },
            )
        except Exception as exc:
            return self._fail(what, exc)
        if updated is None:
            return self._fail(what, EntityNotFoundError(self.entity_type, invoice_id))

        await self._activity_logger.log_activity(
            PAYMENT_RECEIVED_ACTION,
            {
                "invoice_id": invoice_id,
                "patient_id": invoice.patient_id,
                "amount": amount,
                "payment_method": method,
                "transaction_id": reference,
                "invoice_number": invoice.invoice_number,
            },
            user_id=user_id,
        )
        return OperationResult.success(updated)

    async def list_payments(self, invoice_id: str) -> OperationResult[list[Payment]]:
        invoice = await self.get_by_id(invoice_id)
        if not invoice.ok:
            return OperationResult.failure(invoice.error)
        try:
            payments = await self._payments.get_by_invoice(invoice_id)
        except Exception as exc:
            return self._fail("fetching invoice payments", exc)
        return OperationResult.success(payments)
