"""FastAPI dependency injection: wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from hms.config import get_settings
from hms.application.interfaces import CurrentUserProvider
from hms.application.services import (
    ActivityLogger,
    ActivityLogService,
    InvoiceNumberGenerator,
    InvoiceService,
    MedicalServiceService,
    PatientService,
    PrescriptionService,
)
from hms.infrastructure.auth.header_user_provider import HeaderUserProvider
from hms.infrastructure.database.session import get_db_session
from hms.infrastructure.database.repositories import (
    SQLAlchemyActivityLogRepository,
    SQLAlchemyInvoiceRepository,
    SQLAlchemyMedicalServiceRepository,
    SQLAlchemyPatientRepository,
    SQLAlchemyPaymentRepository,
    SQLAlchemyPrescriptionRepository,
)


def get_user_provider(request: Request) -> CurrentUserProvider:
    """Resolves the acting user from the configured auth header."""
    return HeaderUserProvider(request.headers, get_settings().user_id_header)


async def get_current_user_id(
    user_provider: CurrentUserProvider = Depends(get_user_provider),
) -> str | None:
    return await user_provider.get_current_user_id()


async def get_activity_logger(
    session: AsyncSession = Depends(get_db_session),
    user_provider: CurrentUserProvider = Depends(get_user_provider),
) -> AsyncGenerator[ActivityLogger, None]:
    """Provides the audit recorder bound to the request's session and user."""
    yield ActivityLogger(SQLAlchemyActivityLogRepository(session), user_provider)


async def get_medical_service_service(
    session: AsyncSession = Depends(get_db_session),
    activity_logger: ActivityLogger = Depends(get_activity_logger),
) -> AsyncGenerator[MedicalServiceService, None]:
    repository = SQLAlchemyMedicalServiceRepository(session)
    yield MedicalServiceService(repository, activity_logger)


async def get_patient_service(
    session: AsyncSession = Depends(get_db_session),
    activity_logger: ActivityLogger = Depends(get_activity_logger),
) -> AsyncGenerator[PatientService, None]:
    repository = SQLAlchemyPatientRepository(session)
    yield PatientService(repository, activity_logger)


async def get_prescription_service(
    session: AsyncSession = Depends(get_db_session),
    activity_logger: ActivityLogger = Depends(get_activity_logger),
) -> AsyncGenerator[PrescriptionService, None]:
    repository = SQLAlchemyPrescriptionRepository(session)
    yield PrescriptionService(repository, activity_logger)


async def get_invoice_service(
    session: AsyncSession = Depends(get_db_session),
    activity_logger: ActivityLogger = Depends(get_activity_logger),
) -> AsyncGenerator[InvoiceService, None]:
    """Provides an InvoiceService; the number generator shares its repository."""
    repository = SQLAlchemyInvoiceRepository(session)
    yield InvoiceService(
        repository,
        activity_logger,
        InvoiceNumberGenerator(repository),
        SQLAlchemyPaymentRepository(session),
    )


async def get_activity_log_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ActivityLogService, None]:
    yield ActivityLogService(SQLAlchemyActivityLogRepository(session))
