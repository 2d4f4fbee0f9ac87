"""Schemas Pydantic pour validation des donnees."""

from app.schemas.alert import AlertCreate, AlertFilter, AlertResponse, AlertUpdate
from app.schemas.audit_log import (
    AuditLogCreate,
    AuditLogFilter,
    AuditLogResponse,
    AuditLogUpdate,
)
from app.schemas.auth import LoginRequest, LogoutRequest, RefreshRequest, TokenResponse
from app.schemas.caregiver import (
    CaregiverCreate,
    CaregiverFilter,
    CaregiverResponse,
    CaregiverUpdate,
)
from app.schemas.client import ClientCreate, ClientFilter, ClientResponse, ClientUpdate
from app.schemas.consent import ConsentCreate, ConsentFilter, ConsentResponse, ConsentUpdate
from app.schemas.health import DatabaseHealthResponse, HealthResponse
from app.schemas.photo import PhotoCreate, PhotoFilter, PhotoResponse, PhotoUpdate
from app.schemas.schedule import ScheduleCreate, ScheduleFilter, ScheduleResponse, ScheduleUpdate
from app.schemas.visit import VisitCreate, VisitFilter, VisitResponse, VisitUpdate

__all__ = [
    "AlertCreate",
    "AlertFilter",
    "AlertResponse",
    "AlertUpdate",
    "AuditLogCreate",
    "AuditLogFilter",
    "AuditLogResponse",
    "AuditLogUpdate",
    "CaregiverCreate",
    "CaregiverFilter",
    "CaregiverResponse",
    "CaregiverUpdate",
    "ClientCreate",
    "ClientFilter",
    "ClientResponse",
    "ClientUpdate",
    "ConsentCreate",
    "ConsentFilter",
    "ConsentResponse",
    "ConsentUpdate",
    "DatabaseHealthResponse",
    "HealthResponse",
    "LoginRequest",
    "LogoutRequest",
    "PhotoCreate",
    "PhotoFilter",
    "PhotoResponse",
    "PhotoUpdate",
    "RefreshRequest",
    "ScheduleCreate",
    "ScheduleFilter",
    "ScheduleResponse",
    "ScheduleUpdate",
    "TokenResponse",
    "VisitCreate",
    "VisitFilter",
    "VisitResponse",
    "VisitUpdate",
]
