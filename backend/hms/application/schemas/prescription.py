"""Pydantic DTOs for the Prescription feature."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class PrescriptionCreate(BaseModel):
    patient_id: str = Field(..., max_length=36)
    doctor_id: str = Field(..., max_length=36)
    medication_name: str = Field(..., min_length=1, max_length=255, examples=["Amoxicillin"])
    dosage: str = Field(..., min_length=1, max_length=100, examples=["500mg"])
    frequency: str = Field(..., min_length=1, max_length=100, examples=["3 times daily"])
    duration: str = Field(..., min_length=1, max_length=100, examples=["7 days"])
    quantity: int = Field(..., ge=1)
    instructions: str | None = None
    status: str | None = "Pending"


class PrescriptionUpdate(BaseModel):
    medication_name: str | None = Field(None, min_length=1, max_length=255)
    dosage: str | None = Field(None, min_length=1, max_length=100)
    frequency: str | None = Field(None, min_length=1, max_length=100)
    duration: str | None = Field(None, min_length=1, max_length=100)
    quantity: int | None = Field(None, ge=1)
    instructions: str | None = None
    status: str | None = None

    @field_validator("medication_name", "dosage", "frequency", "duration", "quantity")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v


class PrescriptionResponse(BaseModel):
    id: str
    patient_id: str
    doctor_id: str
    medication_name: str
    dosage: str
    frequency: str
    duration: str
    quantity: int
    instructions: str | None
    status: str | None
    prescribed_date: datetime
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
