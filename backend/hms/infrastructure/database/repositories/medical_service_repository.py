"""Concrete repository implementation for MedicalService backed by SQLAlchemy."""

from hms.domain.entities import MedicalService
from hms.infrastructure.database.models import MedicalServiceModel
from hms.infrastructure.database.repositories.entity_repository import SQLAlchemyEntityRepository


class SQLAlchemyMedicalServiceRepository(SQLAlchemyEntityRepository[MedicalService]):
    entity_cls = MedicalService
    model_cls = MedicalServiceModel
    order_column = "service_name"
