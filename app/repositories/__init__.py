"""Repositories d'accès aux données, un par entité."""

from app.repositories.alert import AlertRepository
from app.repositories.audit_log import AuditLogRepository
from app.repositories.base import Repository
from app.repositories.caregiver import CaregiverRepository
from app.repositories.client import ClientRepository
from app.repositories.consent import ConsentRepository
from app.repositories.deletion import DeletionKind, DeletionPolicy
from app.repositories.photo import PhotoRepository
from app.repositories.refresh_token import RefreshTokenRepository
from app.repositories.schedule import ScheduleRepository
from app.repositories.visit import VisitRepository

__all__ = [
    "AlertRepository",
    "AuditLogRepository",
    "CaregiverRepository",
    "ClientRepository",
    "ConsentRepository",
    "DeletionKind",
    "DeletionPolicy",
    "PhotoRepository",
    "RefreshTokenRepository",
    "Repository",
    "ScheduleRepository",
    "VisitRepository",
]
