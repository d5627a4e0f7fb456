"""Repository tests against an in-memory SQLite database (aiosqlite)."""

from datetime import date, datetime, timedelta, timezone

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from hms.domain.entities import ActivityLog, Invoice, MedicalService, Patient, Payment
from hms.domain.exceptions import ConstraintViolationError
from hms.infrastructure.database.base import Base
from hms.infrastructure.database.repositories import (
    SQLAlchemyActivityLogRepository,
    SQLAlchemyInvoiceRepository,
    SQLAlchemyMedicalServiceRepository,
    SQLAlchemyPatientRepository,
    SQLAlchemyPaymentRepository,
)
from hms.infrastructure.database.session import enable_sqlite_savepoints


@pytest_asyncio.fixture
async def session():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    enable_sqlite_savepoints(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
    await engine.dispose()


def _service(code: str, name: str) -> MedicalService:
    return MedicalService(
        service_code=code, service_name=name, service_type="Imaging", base_price=30000,
    )


@pytest.mark.asyncio
async def test_create_then_get_round_trip(session):
    repo = SQLAlchemyPatientRepository(session)
    patient = Patient(full_name="Amina Juma", date_of_birth=date(1990, 3, 4), phone="+255700000001")

    created = await repo.create(patient)
    session.expire_all()
    fetched = await repo.get_by_id(created.id)

    assert fetched is not None
    assert fetched.id == patient.id
    assert fetched.full_name == "Amina Juma"
    assert fetched.date_of_birth == date(1990, 3, 4)
    assert fetched.status == "Active"
    assert fetched.created_at is not None and fetched.updated_at is not None


@pytest.mark.asyncio
async def test_get_all_orders_by_display_name(session):
    repo = SQLAlchemyMedicalServiceRepository(session)
    await repo.create(_service("US-1", "Ultrasound"))
    await repo.create(_service("CT-1", "CT Scan"))
    await repo.create(_service("MR-1", "MRI"))

    names = [s.service_name for s in await repo.get_all()]

    assert names == ["CT Scan", "MRI", "Ultrasound"]


@pytest.mark.asyncio
async def test_update_and_missing_rows(session):
    repo = SQLAlchemyMedicalServiceRepository(session)
    created = await repo.create(_service("XR-1", "X-Ray"))

    updated = await repo.update(created.id, {"is_active": False, "base_price": 35000})

    assert updated.is_active is False
    assert updated.base_price == 35000
    assert await repo.update("missing", {"is_active": True}) is None
    with pytest.raises(ValueError):
        await repo.update(created.id, {"no_such_column": 1})


@pytest.mark.asyncio
async def test_delete_reports_whether_a_row_was_removed(session):
    repo = SQLAlchemyMedicalServiceRepository(session)
    created = await repo.create(_service("XR-1", "X-Ray"))

    assert await repo.delete(created.id) is True
    assert await repo.delete(created.id) is False
    assert await repo.get_by_id(created.id) is None


@pytest.mark.asyncio
async def test_invoice_number_lookup_and_unique_constraint(session):
    repo = SQLAlchemyInvoiceRepository(session)
    await repo.create(Invoice(invoice_number="INV-123456", patient_id="p-1", total_amount=100))

    assert await repo.exists_by_number("INV-123456") is True
    assert await repo.exists_by_number("INV-654321") is False

    with pytest.raises(ConstraintViolationError):
        await repo.create(Invoice(invoice_number="INV-123456", patient_id="p-2", total_amount=5))

    # The failed insert was confined to its savepoint; the session is still usable.
    await repo.create(Invoice(invoice_number="INV-654321", patient_id="p-2", total_amount=5))
    assert len(await repo.get_all()) == 2


@pytest.mark.asyncio
async def test_activity_log_filters_and_counts(session):
    repo = SQLAlchemyActivityLogRepository(session)
    now = datetime.now(timezone.utc)
    await repo.create(ActivityLog(action="create", details='{"a": 1}', user_id="u-1", created_at=now))
    await repo.create(ActivityLog(action="patient.update", user_id="u-2", created_at=now - timedelta(days=3)))
    old = await repo.create(ActivityLog(action="delete", created_at=now - timedelta(days=60)))

    assert old.id is not None
    assert await repo.count() == 3
    assert await repo.count(since=now - timedelta(days=7)) == 2

    recent = await repo.get_all(since=now - timedelta(days=7))
    assert [log.action for log in recent] == ["create", "patient.update"]
    assert recent[0].details == '{"a": 1}'

    updates = await repo.get_all(action="UPDATE")
    assert [log.user_id for log in updates] == ["u-2"]
    assert [log.action for log in await repo.get_all(user_id="u-1")] == ["create"]


@pytest.mark.asyncio
async def test_payments_are_listed_per_invoice_oldest_first(session):
    repo = SQLAlchemyPaymentRepository(session)
    first = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)
    await repo.create(Payment(invoice_id="inv-1", amount=60, payment_date=first + timedelta(hours=2)))
    await repo.create(
        Payment(
            invoice_id="inv-1",
            amount=40,
            payment_method="Cash",
            reference_number="R-1",
            payment_date=first,
        )
    )
    await repo.create(Payment(invoice_id="inv-2", amount=5, payment_date=first))

    payments = await repo.get_by_invoice("inv-1")

    assert [p.amount for p in payments] == [40, 60]
    assert payments[0].reference_number == "R-1"
    assert payments[0].status == "completed"
    assert await repo.get_by_invoice("inv-3") == []
