"""Application service (use case) for the medical service catalogue."""

from hms.application.schemas.medical_service import MedicalServiceCreate
from hms.application.services.audited_crud_service import ActivatableCrudService
from hms.application.services.operation_result import OperationResult
from hms.domain.entities import MedicalService


class MedicalServiceService(ActivatableCrudService[MedicalService]):
    """Audited CRUD plus activate/deactivate for catalogue entries."""

    table_name = "medical_services"
    label = "medical service"
    entity_type = "MedicalService"
    name_field = "service_name"
    active_field = "is_active"

    async def create_service(
        self, data: MedicalServiceCreate, user_id: str | None = None
    ) -> OperationResult[MedicalService]:
        return await self.create(MedicalService(**data.model_dump()), user_id)
