"""Pydantic DTOs for recording invoice payments."""

from datetime import datetime

from pydantic import BaseModel, Field


class PaymentCreate(BaseModel):
    amount: float = Field(..., gt=0, examples=[20000])
    payment_method: str = Field(..., min_length=1, max_length=50, examples=["M-Pesa"])
    reference_number: str | None = Field(
        None, max_length=100, description="Generated from the method and time when omitted"
    )
    notes: str | None = None


class PaymentResponse(BaseModel):
    id: str
    invoice_id: str
    amount: float
    payment_method: str | None
    reference_number: str | None
    notes: str | None
    status: str | None
    payment_date: datetime
    created_at: datetime

    model_config = {"from_attributes": True}
