"""Invoice endpoints. Invoice numbers are assigned by the server."""

from fastapi import APIRouter, Depends, Query, status

from hms.application.schemas.invoice import InvoiceCreate, InvoiceResponse, InvoiceUpdate
from hms.application.schemas.payment import PaymentCreate, PaymentResponse
from hms.application.services import InvoiceService
from hms.infrastructure.dependencies import get_current_user_id, get_invoice_service
from hms.presentation.api.v1.errors import raise_for_error

router = APIRouter(prefix="/invoices", tags=["Invoices"])


@router.get("", response_model=list[InvoiceResponse])
async def list_invoices(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    service: InvoiceService = Depends(get_invoice_service),
) -> list[InvoiceResponse]:
    """Newest invoices first."""
    result = await service.list_all(skip=skip, limit=limit)
    raise_for_error(result)
    return [InvoiceResponse.model_validate(i, from_attributes=True) for i in result.data]


@router.get("/{invoice_id}", response_model=InvoiceResponse)
async def get_invoice(
    invoice_id: str,
    service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceResponse:
    result = await service.get_by_id(invoice_id)
    raise_for_error(result)
    return InvoiceResponse.model_validate(result.data, from_attributes=True)


@router.post("", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
async def create_invoice(
    data: InvoiceCreate,
    user_id: str | None = Depends(get_current_user_id),
    service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceResponse:
    result = await service.create_invoice(data, user_id)
    raise_for_error(result)
    return InvoiceResponse.model_validate(result.data, from_attributes=True)


@router.put("/{invoice_id}", response_model=InvoiceResponse)
async def update_invoice(
    invoice_id: str,
    data: InvoiceUpdate,
    user_id: str | None = Depends(get_current_user_id),
    service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceResponse:
    result = await service.update(invoice_id, data.model_dump(exclude_unset=True), user_id)
    raise_for_error(result)
    return InvoiceResponse.model_validate(result.data, from_attributes=True)


@router.delete("/{invoice_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_invoice(
    invoice_id: str,
    user_id: str | None = Depends(get_current_user_id),
    service: InvoiceService = Depends(get_invoice_service),
) -> None:
    result = await service.delete(invoice_id, user_id)
    raise_for_error(result)


@router.post("/{invoice_id}/payments", response_model=InvoiceResponse)
async def record_payment(
    invoice_id: str,
    data: PaymentCreate,
    user_id: str | None = Depends(get_current_user_id),
    service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceResponse:
    """Record money received; returns the invoice with its new paid amount and status."""
    result = await service.record_payment(
        invoice_id,
        data.amount,
        data.payment_method,
        data.reference_number,
        notes=data.notes,
        user_id=user_id,
    )
    raise_for_error(result)
    return InvoiceResponse.model_validate(result.data, from_attributes=True)


@router.get("/{invoice_id}/payments", response_model=list[PaymentResponse])
async def list_payments(
    invoice_id: str,
    service: InvoiceService = Depends(get_invoice_service),
) -> list[PaymentResponse]:
    result = await service.list_payments(invoice_id)
    raise_for_error(result)
    return [PaymentResponse.model_validate(p, from_attributes=True) for p in result.data]
