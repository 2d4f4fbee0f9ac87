"""Schémas Pydantic pour Alert."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class AlertBase(BaseModel):
    """Schéma de base partagé pour Alert."""

    caregiver_id: str = Field(..., description="Soignant à l'origine de l'alerte")
    client_id: str
    coordinator_id: str = Field(..., description="Coordinateur contacté")
    initiated_at: datetime
    call_duration: int | None = Field(None, ge=0, description="Durée de l'appel en secondes")
    note: str | None = None
    location: dict[str, Any] | None = None


class AlertCreate(AlertBase):
    pass


class AlertUpdate(BaseModel):
    call_duration: int | None = Field(None, ge=0)
    note: str | None = None
    location: dict[str, Any] | None = None


class AlertResponse(AlertBase):
    id: str
    created_at: datetime

    model_config = {"from_attributes": True}


class AlertFilter(BaseModel):
    caregiver_id: str | None = None
    client_id: str | None = None
    coordinator_id: str | None = None
