"""Patient record endpoints."""

from fastapi import APIRouter, Depends, Query, status

from hms.application.schemas.patient import PatientCreate, PatientResponse, PatientUpdate
from hms.application.services import PatientService
from hms.infrastructure.dependencies import get_current_user_id, get_patient_service
from hms.presentation.api.v1.errors import raise_for_error

router = APIRouter(prefix="/patients", tags=["Patients"])


@router.get("", response_model=list[PatientResponse])
async def list_patients(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    service: PatientService = Depends(get_patient_service),
) -> list[PatientResponse]:
    result = await service.list_all(skip=skip, limit=limit)
    raise_for_error(result)
    return [PatientResponse.model_validate(p, from_attributes=True) for p in result.data]


@router.get("/{patient_id}", response_model=PatientResponse)
async def get_patient(
    patient_id: str,
    service: PatientService = Depends(get_patient_service),
) -> PatientResponse:
    result = await service.get_by_id(patient_id)
    raise_for_error(result)
    return PatientResponse.model_validate(result.data, from_attributes=True)


@router.post("", response_model=PatientResponse, status_code=status.HTTP_201_CREATED)
async def register_patient(
    data: PatientCreate,
    user_id: str | None = Depends(get_current_user_id),
    service: PatientService = Depends(get_patient_service),
) -> PatientResponse:
    result = await service.register_patient(data, user_id)
    raise_for_error(result)
    return PatientResponse.model_validate(result.data, from_attributes=True)


@router.put("/{patient_id}", response_model=PatientResponse)
async def update_patient(
    patient_id: str,
    data: PatientUpdate,
    user_id: str | None = Depends(get_current_user_id),
    service: PatientService = Depends(get_patient_service),
) -> PatientResponse:
    result = await service.update(patient_id, data.model_dump(exclude_unset=True), user_id)
    raise_for_error(result)
    return PatientResponse.model_validate(result.data, from_attributes=True)


@router.delete("/{patient_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_patient(
    patient_id: str,
    user_id: str | None = Depends(get_current_user_id),
    service: PatientService = Depends(get_patient_service),
) -> None:
    result = await service.delete(patient_id, user_id)
    raise_for_error(result)
