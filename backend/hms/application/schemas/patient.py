"""Pydantic DTOs for the Patient feature."""

from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator


class PatientCreate(BaseModel):
    full_name: str = Field(..., min_length=1, max_length=255, examples=["Amina Juma"])
    date_of_birth: date
    phone: str = Field(..., min_length=3, max_length=50)
    gender: str | None = Field(None, max_length=20)
    email: str | None = Field(None, max_length=255)
    address: str | None = None
    blood_group: str | None = Field(None, max_length=5)
    allergies: str | None = None
    medical_history: str | None = None
    emergency_contact_name: str | None = Field(None, max_length=255)
    emergency_contact_phone: str | None = Field(None, max_length=50)
    status: str | None = "Active"


class PatientUpdate(BaseModel):
    full_name: str | None = Field(None, min_length=1, max_length=255)
    date_of_birth: date | None = None
    phone: str | None = Field(None, min_length=3, max_length=50)
    gender: str | None = Field(None, max_length=20)
    email: str | None = Field(None, max_length=255)
    address: str | None = None
    blood_group: str | None = Field(None, max_length=5)
    allergies: str | None = None
    medical_history: str | None = None
    emergency_contact_name: str | None = Field(None, max_length=255)
    emergency_contact_phone: str | None = Field(None, max_length=50)
    status: str | None = None

    @field_validator("full_name", "date_of_birth", "phone")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v


class PatientResponse(BaseModel):
    id: str
    full_name: str
    date_of_birth: date
    phone: str
    gender: str | None
    email: str | None
    address: str | None
    blood_group: str | None
    allergies: str | None
    medical_history: str | None
    emergency_contact_name: str | None
    emergency_contact_phone: str | None
    status: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
