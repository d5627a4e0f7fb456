"""Application service (use case) for prescriptions."""

from hms.application.schemas.prescription import PrescriptionCreate
from hms.application.services.audited_crud_service import AuditedCrudService
from hms.application.services.operation_result import OperationResult
from hms.domain.entities import Prescription


class PrescriptionService(AuditedCrudService[Prescription]):
    table_name = "prescriptions"
    label = "prescription"
    entity_type = "Prescription"
    name_field = "medication_name"

    async def prescribe(
        self, data: PrescriptionCreate, user_id: str | None = None
    ) -> OperationResult[Prescription]:
        return await self.create(Prescription(**data.model_dump()), user_id)
