"""Schémas Pydantic pour Schedule."""

from datetime import date, datetime, time

from pydantic import BaseModel, Field

from app.models.types import ScheduleStatus
from app.schemas.utils import PartialUpdate


class ScheduleBase(BaseModel):
    """Schéma de base partagé pour Schedule."""

    caregiver_id: str = Field(..., description="Soignant assigné")
    client_id: str = Field(..., description="Client visité")
    scheduled_date: date = Field(..., examples=["2026-10-19"])
    scheduled_time: time = Field(..., examples=["09:30:00"])
    duration_minutes: int = Field(..., gt=0, le=24 * 60, description="Durée prévue en minutes")


class ScheduleCreate(ScheduleBase):
    status: ScheduleStatus = "scheduled"


class ScheduleUpdate(PartialUpdate):
    non_nullable_fields = ("scheduled_date", "scheduled_time", "duration_minutes", "status")

    scheduled_date: date | None = None
    scheduled_time: time | None = None
    duration_minutes: int | None = Field(None, gt=0, le=24 * 60)
    status: ScheduleStatus | None = None
    completed_at: datetime | None = None


class ScheduleResponse(ScheduleBase):
    id: str
    status: ScheduleStatus
    completed_at: datetime | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ScheduleFilter(BaseModel):
    caregiver_id: str | None = None
    client_id: str | None = None
    scheduled_date: date | None = None
    status: ScheduleStatus | None = None
