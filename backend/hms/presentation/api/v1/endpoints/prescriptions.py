"""Prescription endpoints."""

from fastapi import APIRouter, Depends, Query, status

from hms.application.schemas.prescription import (
    PrescriptionCreate,
    PrescriptionResponse,
    PrescriptionUpdate,
)
from hms.application.services import PrescriptionService
from hms.infrastructure.dependencies import get_current_user_id, get_prescription_service
from hms.presentation.api.v1.errors import raise_for_error

router = APIRouter(prefix="/prescriptions", tags=["Prescriptions"])


@router.get("", response_model=list[PrescriptionResponse])
async def list_prescriptions(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    service: PrescriptionService = Depends(get_prescription_service),
) -> list[PrescriptionResponse]:
    """Most recently prescribed first."""
    result = await service.list_all(skip=skip, limit=limit)
    raise_for_error(result)
    return [PrescriptionResponse.model_validate(p, from_attributes=True) for p in result.data]


@router.get("/{prescription_id}", response_model=PrescriptionResponse)
async def get_prescription(
    prescription_id: str,
    service: PrescriptionService = Depends(get_prescription_service),
) -> PrescriptionResponse:
    result = await service.get_by_id(prescription_id)
    raise_for_error(result)
    return PrescriptionResponse.model_validate(result.data, from_attributes=True)


@router.post("", response_model=PrescriptionResponse, status_code=status.HTTP_201_CREATED)
async def create_prescription(
    data: PrescriptionCreate,
    user_id: str | None = Depends(get_current_user_id),
    service: PrescriptionService = Depends(get_prescription_service),
) -> PrescriptionResponse:
    result = await service.prescribe(data, user_id)
    raise_for_error(result)
    return PrescriptionResponse.model_validate(result.data, from_attributes=True)


@router.put("/{prescription_id}", response_model=PrescriptionResponse)
async def update_prescription(
    prescription_id: str,
    data: PrescriptionUpdate,
    user_id: str | None = Depends(get_current_user_id),
    service: PrescriptionService = Depends(get_prescription_service),
) -> PrescriptionResponse:
    result = await service.update(prescription_id, data.model_dump(exclude_unset=True), user_id)
    raise_for_error(result)
    return PrescriptionResponse.model_validate(result.data, from_attributes=True)


@router.delete("/{prescription_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_prescription(
    prescription_id: str,
    user_id: str | None = Depends(get_current_user_id),
    service: PrescriptionService = Depends(get_prescription_service),
) -> None:
    result = await service.delete(prescription_id, user_id)
    raise_for_error(result)
