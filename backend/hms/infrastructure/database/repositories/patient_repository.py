"""Concrete repository implementation for Patient backed by SQLAlchemy."""

from hms.domain.entities import Patient
from hms.infrastructure.database.models import PatientModel
from hms.infrastructure.database.repositories.entity_repository import SQLAlchemyEntityRepository


class SQLAlchemyPatientRepository(SQLAlchemyEntityRepository[Patient]):
    entity_cls = Patient
    model_cls = PatientModel
    order_column = "full_name"
