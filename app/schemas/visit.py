"""Schémas Pydantic pour Visit."""

from datetime import date, datetime, time
from typing import Any

from pydantic import BaseModel, Field

from app.models.types import VisitSyncStatus
from app.schemas.utils import PartialUpdate


class VisitBase(BaseModel):
    """Schéma de base partagé pour Visit."""

    schedule_id: str = Field(..., description="Créneau planifié (une visite par créneau)")
    caregiver_id: str
    client_id: str
    visit_date: date
    start_time: time | None = None
    end_time: time | None = None
    documentation: dict[str, Any] = Field(
        default_factory=dict, description="Documentation clinique (objet JSON libre)"
    )
    photo_ids: list[str] = Field(default_factory=list)
    location: dict[str, Any] | None = Field(None, description="Coordonnées GPS au check-in")
    changed_fields: list[str] = Field(default_factory=list)
    copied_from_visit_id: str | None = Field(
        None, description="Visite source lorsque la documentation a été copiée"
    )


class VisitCreate(VisitBase):
    sync_status: VisitSyncStatus = "local"
    sync_version: int = Field(1, ge=1)


class VisitUpdate(PartialUpdate):
    non_nullable_fields = (
        "documentation",
        "photo_ids",
        "changed_fields",
        "sync_status",
        "sync_version",
    )

    start_time: time | None = None
    end_time: time | None = None
    documentation: dict[str, Any] | None = None
    photo_ids: list[str] | None = None
    location: dict[str, Any] | None = None
    changed_fields: list[str] | None = None
    sync_status: VisitSyncStatus | None = None
    synced_at: datetime | None = None
    sync_version: int | None = Field(None, ge=1)


class VisitResponse(VisitBase):
    id: str
    sync_status: VisitSyncStatus
    synced_at: datetime | None
    sync_version: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class VisitFilter(BaseModel):
    caregiver_id: str | None = None
    client_id: str | None = None
    visit_date: date | None = None
    sync_status: VisitSyncStatus | None = None
