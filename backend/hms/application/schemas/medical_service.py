"""Pydantic DTOs (Data Transfer Objects) for the MedicalService feature."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class MedicalServiceCreate(BaseModel):
    """Schema for creating a new medical service."""

    service_code: str = Field(..., min_length=1, max_length=50, examples=["CONS-001"])
    service_name: str = Field(..., min_length=1, max_length=255, examples=["General Consultation"])
    service_type: str = Field(..., min_length=1, max_length=100, examples=["Consultation"])
    description: str | None = None
    base_price: float = Field(..., ge=0, examples=[20000])
    currency: str = Field("TZS", min_length=3, max_length=3)
    is_active: bool = True


class MedicalServiceUpdate(BaseModel):
    """Schema for updating a medical service: all fields optional."""

    service_code: str | None = Field(None, min_length=1, max_length=50)
    service_name: str | None = Field(None, min_length=1, max_length=255)
    service_type: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = None
    base_price: float | None = Field(None, ge=0)
    currency: str | None = Field(None, min_length=3, max_length=3)
    is_active: bool | None = None

    @field_validator(
        "service_code", "service_name", "service_type", "base_price", "currency", "is_active"
    )
    @classmethod
    def reject_null(cls, v):
        """Omit a field to leave it unchanged; these columns cannot be cleared."""
        if v is None:
            raise ValueError("may not be null")
        return v


class ToggleStatusRequest(BaseModel):
    """The active flag as the caller currently sees it; the service flips it."""

    current_status: bool


class MedicalServiceResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    service_code: str
    service_name: str
    service_type: str
    description: str | None
    base_price: float
    currency: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
