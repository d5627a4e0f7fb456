"""Application service (use case) for patient records."""

from hms.application.schemas.patient import PatientCreate
from hms.application.services.audited_crud_service import AuditedCrudService
from hms.application.services.operation_result import OperationResult
from hms.domain.entities import Patient


class PatientService(AuditedCrudService[Patient]):
    table_name = "patients"
    label = "patient"
    entity_type = "Patient"
    name_field = "full_name"

    async def register_patient(
        self, data: PatientCreate, user_id: str | None = None
    ) -> OperationResult[Patient]:
        return await self.create(Patient(**data.model_dump()), user_id)
