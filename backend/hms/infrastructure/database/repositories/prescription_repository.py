"""Concrete repository implementation for Prescription backed by SQLAlchemy."""

from hms.domain.entities import Prescription
from hms.infrastructure.database.models import PrescriptionModel
from hms.infrastructure.database.repositories.entity_repository import SQLAlchemyEntityRepository


class SQLAlchemyPrescriptionRepository(SQLAlchemyEntityRepository[Prescription]):
    entity_cls = Prescription
    model_cls = PrescriptionModel
    order_column = "prescribed_date"
    order_descending = True
