"""Unit tests for the audited CRUD operations, exercised through MedicalServiceService."""

import json
import logging
from unittest.mock import AsyncMock

import pytest

from hms.application.schemas import MedicalServiceCreate
from hms.application.services import (
    ActivatableCrudService,
    ActivityLogger,
    MedicalServiceService,
    PatientService,
)
from hms.domain.entities import MedicalService, Patient
from hms.domain.exceptions import EntityNotFoundError, StoreError
from tests.fakes import FakeActivityLogRepository, FakeEntityRepository


def _make_service(**overrides) -> MedicalService:
    defaults = {
        "service_code": "CONS-001",
        "service_name": "General Consultation",
        "service_type": "Consultation",
        "base_price": 20000,
    }
    defaults.update(overrides)
    return MedicalService(**defaults)


@pytest.fixture
def repo() -> FakeEntityRepository[MedicalService]:
    return FakeEntityRepository(table="medical_services")


@pytest.fixture
def log_repo() -> FakeActivityLogRepository:
    return FakeActivityLogRepository()


@pytest.fixture
def service(repo, log_repo) -> MedicalServiceService:
    return MedicalServiceService(repo, ActivityLogger(log_repo))


def _audit_details(log_repo: FakeActivityLogRepository, index: int = -1) -> dict:
    return json.loads(log_repo.logs[index].details)


# ── Create ──


@pytest.mark.asyncio
async def test_create_returns_data_and_writes_audit_entry(service, log_repo):
    result = await service.create(_make_service(), user_id="admin-1")

    assert result.error is None
    assert result.data.service_name == "General Consultation"
    assert len(log_repo.logs) == 1
    assert log_repo.logs[0].action == "create"
    assert log_repo.logs[0].user_id == "admin-1"
    assert _audit_details(log_repo) == {
        "table_name": "medical_services",
        "record_id": result.data.id,
        "description": "Created medical service: General Consultation",
    }


@pytest.mark.asyncio
async def test_create_from_schema(service, repo):
    data = MedicalServiceCreate(
        service_code="LAB-010",
        service_name="Full Blood Count",
        service_type="Laboratory",
        base_price=15000,
    )

    result = await service.create_service(data, "admin-1")

    assert result.ok
    assert repo.rows[result.data.id].currency == "TZS"
    assert repo.rows[result.data.id].is_active is True


@pytest.mark.asyncio
async def test_create_failure_returns_error_and_skips_audit(log_repo, caplog):
    service = MedicalServiceService(
        FakeEntityRepository(fail_on={"insert"}), ActivityLogger(log_repo)
    )

    with caplog.at_level(logging.ERROR):
        result = await service.create(_make_service(), user_id="admin-1")

    assert result.data is None
    assert isinstance(result.error, StoreError)
    assert log_repo.logs == []
    assert "Error creating medical service:" in caplog.text


@pytest.mark.asyncio
async def test_create_then_read_round_trip(service):
    entity = _make_service(description="Outpatient visit")
    created = await service.create(entity, user_id="admin-1")

    fetched = await service.get_by_id(created.data.id)

    assert fetched.error is None
    assert fetched.data == created.data
    assert fetched.data.description == "Outpatient visit"
    assert fetched.data.id and fetched.data.created_at and fetched.data.updated_at


@pytest.mark.asyncio
async def test_audit_failure_does_not_fail_the_mutation(repo):
    service = MedicalServiceService(repo, ActivityLogger(FakeActivityLogRepository(fail=True)))

    result = await service.create(_make_service(), user_id="admin-1")

    assert result.ok
    assert result.data.id in repo.rows


# ── Read ──


@pytest.mark.asyncio
async def test_get_missing_returns_not_found_error(service, log_repo):
    result = await service.get_by_id("missing")

    assert result.data is None
    assert isinstance(result.error, EntityNotFoundError)
    assert log_repo.logs == []


@pytest.mark.asyncio
async def test_list_all_returns_rows(service):
    await service.create(_make_service(service_code="A", service_name="X-Ray"))
    await service.create(_make_service(service_code="B", service_name="Ultrasound"))

    result = await service.list_all()

    assert result.ok
    assert {s.service_name for s in result.data} == {"X-Ray", "Ultrasound"}


# ── Update ──


@pytest.mark.asyncio
async def test_update_with_name_uses_new_name(service, log_repo):
    created = await service.create(_make_service())
    before = created.data.updated_at

    result = await service.update(
        created.data.id, {"service_name": "Specialist Consultation"}, user_id="admin-2"
    )

    assert result.ok
    assert result.data.service_name == "Specialist Consultation"
    assert result.data.updated_at >= before
    assert log_repo.logs[-1].action == "update"
    assert log_repo.logs[-1].user_id == "admin-2"
    assert _audit_details(log_repo)["description"] == (
        "Updated medical service: Specialist Consultation"
    )


@pytest.mark.asyncio
async def test_update_without_name_falls_back_to_id(service, log_repo):
    created = await service.create(_make_service())
    service_id = created.data.id

    result = await service.update(service_id, {"base_price": 25000}, user_id="admin-2")

    assert result.data.base_price == 25000
    assert _audit_details(log_repo)["description"] == f"Updated medical service: ID: {service_id}"


@pytest.mark.asyncio
async def test_update_missing_row_is_an_error_without_audit(service, log_repo):
    result = await service.update("missing", {"base_price": 1})

    assert isinstance(result.error, EntityNotFoundError)
    assert log_repo.logs == []


# ── Delete ──


@pytest.mark.asyncio
async def test_delete_existing_writes_audit_with_name(service, repo, log_repo):
    created = await service.create(_make_service(service_name="Dental Cleaning"))

    result = await service.delete(created.data.id, user_id="admin-1")

    assert result.error is None
    assert created.data.id not in repo.rows
    assert log_repo.logs[-1].action == "delete"
    assert _audit_details(log_repo)["description"] == "Deleted medical service: Dental Cleaning"


@pytest.mark.asyncio
async def test_delete_without_prior_record_skips_audit(repo):
    activity_logger = AsyncMock(spec=ActivityLogger)
    service = MedicalServiceService(repo, activity_logger)

    result = await service.delete("never-existed", user_id="admin-1")

    assert result.error is None
    assert repo.deleted == ["never-existed"]
    activity_logger.log_activity.assert_not_awaited()


@pytest.mark.asyncio
async def test_delete_failure_returns_error(log_repo, caplog):
    repo = FakeEntityRepository(fail_on={"delete"})
    service = MedicalServiceService(repo, ActivityLogger(log_repo))
    created = await service.create(_make_service())

    with caplog.at_level(logging.ERROR):
        result = await service.delete(created.data.id, user_id="admin-1")

    assert isinstance(result.error, StoreError)
    assert [log.action for log in log_repo.logs] == ["create"]
    assert "Error deleting medical service:" in caplog.text


# ── Toggle status ──


@pytest.mark.asyncio
async def test_toggle_active_service_deactivates_it(service, log_repo):
    created = await service.create(_make_service(service_name="MRI Scan"))

    result = await service.toggle_status(created.data.id, True, user_id="admin-1")

    assert result.data.is_active is False
    assert log_repo.logs[-1].action == "update"
    assert _audit_details(log_repo)["description"] == "Deactivated medical service: MRI Scan"


@pytest.mark.asyncio
async def test_toggle_inactive_service_activates_it(service, log_repo):
    created = await service.create(_make_service(service_name="MRI Scan", is_active=False))

    result = await service.toggle_status(created.data.id, False, user_id="admin-1")

    assert result.data.is_active is True
    assert _audit_details(log_repo)["description"] == "Activated medical service: MRI Scan"


@pytest.mark.asyncio
async def test_toggle_store_failure_is_returned(log_repo, caplog):
    service = MedicalServiceService(
        FakeEntityRepository(fail_on={"update"}), ActivityLogger(log_repo)
    )

    with caplog.at_level(logging.ERROR):
        result = await service.toggle_status("any", True)

    assert isinstance(result.error, StoreError)
    assert log_repo.logs == []
    assert "Error toggling medical service status:" in caplog.text


def test_only_services_with_an_active_flag_can_toggle():
    patients = PatientService(FakeEntityRepository[Patient](), ActivityLogger(FakeActivityLogRepository()))

    assert not isinstance(patients, ActivatableCrudService)
    assert not hasattr(patients, "toggle_status")
    assert issubclass(MedicalServiceService, ActivatableCrudService)
    assert MedicalServiceService.active_field == "is_active"
