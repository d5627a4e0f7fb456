"""Medical service catalogue endpoints."""

from fastapi import APIRouter, Depends, Query, status

from hms.application.schemas.medical_service import (
    MedicalServiceCreate,
    MedicalServiceResponse,
    MedicalServiceUpdate,
    ToggleStatusRequest,
)
from hms.application.services import MedicalServiceService
from hms.infrastructure.dependencies import get_current_user_id, get_medical_service_service
from hms.presentation.api.v1.errors import raise_for_error

router = APIRouter(prefix="/medical-services", tags=["Medical Services"])


@router.get("", response_model=list[MedicalServiceResponse])
async def list_services(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    service: MedicalServiceService = Depends(get_medical_service_service),
) -> list[MedicalServiceResponse]:
    """All medical services, ordered by name."""
    result = await service.list_all(skip=skip, limit=limit)
    raise_for_error(result)
    return [MedicalServiceResponse.model_validate(s, from_attributes=True) for s in result.data]


@router.get("/{service_id}", response_model=MedicalServiceResponse)
async def get_service(
    service_id: str,
    service: MedicalServiceService = Depends(get_medical_service_service),
) -> MedicalServiceResponse:
    result = await service.get_by_id(service_id)
    raise_for_error(result)
    return MedicalServiceResponse.model_validate(result.data, from_attributes=True)


@router.post("", response_model=MedicalServiceResponse, status_code=status.HTTP_201_CREATED)
async def create_service(
    data: MedicalServiceCreate,
    user_id: str | None = Depends(get_current_user_id),
    service: MedicalServiceService = Depends(get_medical_service_service),
) -> MedicalServiceResponse:
    result = await service.create_service(data, user_id)
    raise_for_error(result)
    return MedicalServiceResponse.model_validate(result.data, from_attributes=True)


@router.put("/{service_id}", response_model=MedicalServiceResponse)
async def update_service(
    service_id: str,
    data: MedicalServiceUpdate,
    user_id: str | None = Depends(get_current_user_id),
    service: MedicalServiceService = Depends(get_medical_service_service),
) -> MedicalServiceResponse:
    """Partial update: only the fields present in the body are changed."""
    result = await service.update(service_id, data.model_dump(exclude_unset=True), user_id)
    raise_for_error(result)
    return MedicalServiceResponse.model_validate(result.data, from_attributes=True)


@router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_service(
    service_id: str,
    user_id: str | None = Depends(get_current_user_id),
    service: MedicalServiceService = Depends(get_medical_service_service),
) -> None:
    result = await service.delete(service_id, user_id)
    raise_for_error(result)


@router.post("/{service_id}/toggle-status", response_model=MedicalServiceResponse)
async def toggle_service_status(
    service_id: str,
    data: ToggleStatusRequest,
    user_id: str | None = Depends(get_current_user_id),
    service: MedicalServiceService = Depends(get_medical_service_service),
) -> MedicalServiceResponse:
    """Flip the service's active flag relative to ``current_status``."""
    result = await service.toggle_status(service_id, data.current_status, user_id)
    raise_for_error(result)
    return MedicalServiceResponse.model_validate(result.data, from_attributes=True)
