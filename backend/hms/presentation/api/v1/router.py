"""V1 API router: aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from hms.presentation.api.v1.endpoints.health import router as health_router
from hms.presentation.api.v1.endpoints.activity_logs import router as activity_logs_router
from hms.presentation.api.v1.endpoints.invoices import router as invoices_router
from hms.presentation.api.v1.endpoints.medical_services import router as medical_services_router
from hms.presentation.api.v1.endpoints.patients import router as patients_router
from hms.presentation.api.v1.endpoints.prescriptions import router as prescriptions_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(medical_services_router)
router.include_router(patients_router)
router.include_router(prescriptions_router)
router.include_router(invoices_router)
router.include_router(activity_logs_router)
