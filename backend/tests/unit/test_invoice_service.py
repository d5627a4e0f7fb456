"""Unit tests for the InvoiceService."""

import json
import logging
import random
import re
from datetime import date

import pytest

from hms.application.schemas import InvoiceCreate
from hms.application.services import ActivityLogger, InvoiceNumberGenerator, InvoiceService
from hms.application.services.invoice_service import payment_status
from hms.domain.exceptions import EntityNotFoundError, StoreError
from tests.fakes import FakeActivityLogRepository, FakeInvoiceRepository, FakePaymentRepository


@pytest.fixture
def repo() -> FakeInvoiceRepository:
    return FakeInvoiceRepository()


@pytest.fixture
def log_repo() -> FakeActivityLogRepository:
    return FakeActivityLogRepository()


@pytest.fixture
def payment_repo() -> FakePaymentRepository:
    return FakePaymentRepository()


@pytest.fixture
def service(repo, log_repo, payment_repo) -> InvoiceService:
    generator = InvoiceNumberGenerator(repo, rng=random.Random(1))
    return InvoiceService(repo, ActivityLogger(log_repo), generator, payment_repo)


@pytest.mark.asyncio
async def test_create_invoice_assigns_generated_number(service, repo, log_repo):
    data = InvoiceCreate(patient_id="p-1", total_amount=50000, due_date=date(2024, 6, 1))

    result = await service.create_invoice(data, user_id="cashier-1")

    assert result.ok
    invoice = result.data
    assert re.fullmatch(r"INV-\d{6}", invoice.invoice_number)
    assert repo.number_checks == [invoice.invoice_number]
    assert invoice.status == "Unpaid"
    assert invoice.paid_amount == 0
    details = json.loads(log_repo.logs[-1].details)
    assert details["description"] == f"Created invoice: {invoice.invoice_number}"
    assert details["table_name"] == "invoices"


@pytest.mark.asyncio
async def test_tax_defaults_to_ten_percent(service):
    result = await service.create_invoice(InvoiceCreate(patient_id="p-1", total_amount=1234.5))

    assert result.data.tax == pytest.approx(123.45)


@pytest.mark.asyncio
async def test_explicit_tax_is_kept(service):
    result = await service.create_invoice(
        InvoiceCreate(patient_id="p-1", total_amount=1000, tax=0)
    )

    assert result.data.tax == 0


@pytest.mark.asyncio
async def test_insert_failure_is_returned_not_raised(log_repo):
    repo = FakeInvoiceRepository(fail_on={"insert"})
    service = InvoiceService(
        repo, ActivityLogger(log_repo), InvoiceNumberGenerator(repo), FakePaymentRepository()
    )

    result = await service.create_invoice(InvoiceCreate(patient_id="p-1", total_amount=10))

    assert result.data is None
    assert isinstance(result.error, StoreError)
    assert log_repo.logs == []


@pytest.mark.asyncio
async def test_update_payment_status(service, log_repo):
    created = await service.create_invoice(InvoiceCreate(patient_id="p-1", total_amount=100))

    result = await service.update(
        created.data.id, {"paid_amount": 40, "status": "Partially Paid"}, user_id="cashier-1"
    )

    assert result.data.status == "Partially Paid"
    assert json.loads(log_repo.logs[-1].details)["description"] == (
        f"Updated invoice: ID: {created.data.id}"
    )


# ── Payments ──


@pytest.mark.parametrize(
    ("paid", "total", "expected"),
    [
        (0, 100, "Unpaid"),
        (40, 100, "Partially Paid"),
        (100, 100, "Paid"),
        (120, 100, "Paid"),
    ],
)
def test_payment_status(paid, total, expected):
    assert payment_status(paid, total) == expected


@pytest.mark.asyncio
async def test_partial_then_full_payment(service, payment_repo, log_repo):
    created = await service.create_invoice(InvoiceCreate(patient_id="p-1", total_amount=100))
    invoice_id = created.data.id

    partial = await service.record_payment(
        invoice_id, 40, "Cash", "RCPT-1", notes="Deposit", user_id="cashier-1"
    )

    assert partial.ok
    assert partial.data.paid_amount == 40
    assert partial.data.status == "Partially Paid"

    full = await service.record_payment(invoice_id, 60, "M-Pesa", "MP-99", user_id="cashier-1")

    assert full.data.paid_amount == 100
    assert full.data.status == "Paid"
    assert [(p.amount, p.reference_number) for p in payment_repo.payments] == [
        (40, "RCPT-1"),
        (60, "MP-99"),
    ]
    assert payment_repo.payments[0].notes == "Deposit"

    entry = log_repo.logs[-1]
    assert entry.action == "billing.payment.received"
    assert entry.user_id == "cashier-1"
    assert json.loads(entry.details) == {
        "invoice_id": invoice_id,
        "patient_id": "p-1",
        "amount": 60,
        "payment_method": "M-Pesa",
        "transaction_id": "MP-99",
        "invoice_number": created.data.invoice_number,
    }


@pytest.mark.asyncio
async def test_payment_reference_is_generated_from_method(service, payment_repo):
    created = await service.create_invoice(InvoiceCreate(patient_id="p-1", total_amount=100))

    await service.record_payment(created.data.id, 10, "Airtel Money")

    assert re.fullmatch(r"AIRTELMONEY-\d{13}", payment_repo.payments[0].reference_number)


@pytest.mark.asyncio
async def test_payment_for_missing_invoice(service, payment_repo, log_repo):
    result = await service.record_payment("missing", 10, "Cash")

    assert isinstance(result.error, EntityNotFoundError)
    assert payment_repo.payments == []
    assert log_repo.logs == []


@pytest.mark.asyncio
async def test_payment_store_failure_leaves_invoice_unchanged(repo, log_repo, caplog):
    service = InvoiceService(
        repo,
        ActivityLogger(log_repo),
        InvoiceNumberGenerator(repo),
        FakePaymentRepository(fail=True),
    )
    created = await service.create_invoice(InvoiceCreate(patient_id="p-1", total_amount=100))

    with caplog.at_level(logging.ERROR):
        result = await service.record_payment(created.data.id, 50, "Cash")

    assert isinstance(result.error, StoreError)
    assert repo.rows[created.data.id].paid_amount == 0
    assert repo.rows[created.data.id].status == "Unpaid"
    assert [log.action for log in log_repo.logs] == ["create"]
    assert "Error recording invoice payment:" in caplog.text


@pytest.mark.asyncio
async def test_list_payments(service):
    created = await service.create_invoice(InvoiceCreate(patient_id="p-1", total_amount=100))
    await service.record_payment(created.data.id, 25, "Cash")

    listed = await service.list_payments(created.data.id)
    missing = await service.list_payments("missing")

    assert [p.amount for p in listed.data] == [25]
    assert isinstance(missing.error, EntityNotFoundError)
