"""Pydantic DTOs for the Invoice feature.

The invoice number is never client-supplied; it is generated on create.
"""

from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator


class InvoiceCreate(BaseModel):
    patient_id: str = Field(..., max_length=36)
    total_amount: float = Field(..., ge=0, examples=[50000])
    tax: float | None = Field(None, ge=0, description="Defaults to 10% of total_amount")
    discount: float | None = Field(None, ge=0)
    due_date: date | None = None
    notes: str | None = None


class InvoiceUpdate(BaseModel):
    total_amount: float | None = Field(None, ge=0)
    tax: float | None = Field(None, ge=0)
    discount: float | None = Field(None, ge=0)
    paid_amount: float | None = Field(None, ge=0)
    status: str | None = Field(None, max_length=50, examples=["Partially Paid"])
    due_date: date | None = None
    notes: str | None = None

    @field_validator("total_amount")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v


class InvoiceResponse(BaseModel):
    id: str
    invoice_number: str
    patient_id: str
    total_amount: float
    tax: float | None
    discount: float | None
    paid_amount: float | None
    status: str | None
    due_date: date | None
    notes: str | None
    invoice_date: datetime
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
