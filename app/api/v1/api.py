from fastapi import APIRouter

from app.api.v1.endpoints import audit_logs, auth, schedules, visits
from app.api.v1.endpoints.crud import build_crud_router
from app.repositories import (
    AlertRepository,
    CaregiverRepository,
    ClientRepository,
    ConsentRepository,
    PhotoRepository,
)
from app.schemas import (
    AlertCreate,
    AlertFilter,
    AlertResponse,
    AlertUpdate,
    CaregiverCreate,
    CaregiverFilter,
    CaregiverResponse,
    CaregiverUpdate,
    ClientCreate,
    ClientFilter,
    ClientResponse,
    ClientUpdate,
    ConsentCreate,
    ConsentFilter,
    ConsentResponse,
    ConsentUpdate,
    PhotoCreate,
    PhotoFilter,
    PhotoResponse,
    PhotoUpdate,
)

# Router principal des ressources (les réponses d'erreur sont des Problem Details)
router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["auth"])

router.include_router(
    build_crud_router(
        CaregiverRepository,
        create_schema=CaregiverCreate,
        update_schema=CaregiverUpdate,
        response_schema=CaregiverResponse,
        filter_schema=CaregiverFilter,
    ),
    prefix="/caregivers",
    tags=["caregivers"],
)
router.include_router(
    build_crud_router(
        ClientRepository,
        create_schema=ClientCreate,
        update_schema=ClientUpdate,
        response_schema=ClientResponse,
        filter_schema=ClientFilter,
    ),
    prefix="/clients",
    tags=["clients"],
)
router.include_router(schedules.router, prefix="/schedules", tags=["schedules"])
router.include_router(visits.router, prefix="/visits", tags=["visits"])
router.include_router(
    build_crud_router(
        PhotoRepository,
        create_schema=PhotoCreate,
        update_schema=PhotoUpdate,
        response_schema=PhotoResponse,
        filter_schema=PhotoFilter,
    ),
    prefix="/photos",
    tags=["photos"],
)
router.include_router(
    build_crud_router(
        AlertRepository,
        create_schema=AlertCreate,
        update_schema=AlertUpdate,
        response_schema=AlertResponse,
        filter_schema=AlertFilter,
    ),
    prefix="/alerts",
    tags=["alerts"],
)
router.include_router(
    build_crud_router(
        ConsentRepository,
        create_schema=ConsentCreate,
        update_schema=ConsentUpdate,
        response_schema=ConsentResponse,
        filter_schema=ConsentFilter,
    ),
    prefix="/consents",
    tags=["consents"],
)
router.include_router(audit_logs.router, prefix="/audit-logs", tags=["audit-logs"])
