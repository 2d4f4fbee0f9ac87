"""Schémas Pydantic pour AuditLog."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from app.models.types import ActorType


class AuditLogBase(BaseModel):
    """Schéma de base partagé pour AuditLog."""

    entity_type: str = Field(..., max_length=50, examples=["visit"])
    entity_id: str
    action: str = Field(..., max_length=50, examples=["updated"])
    actor_id: str
    actor_type: ActorType
    device_id: str
    before: dict[str, Any] | None = None
    after: dict[str, Any] | None = None
    ip_address: str | None = Field(None, max_length=45)
    user_agent: str | None = Field(None, max_length=512)


class AuditLogCreate(AuditLogBase):
    pass


class AuditLogUpdate(BaseModel):
    before: dict[str, Any] | None = None
    after: dict[str, Any] | None = None


class AuditLogResponse(AuditLogBase):
    id: str
    created_at: datetime

    model_config = {"from_attributes": True}


class AuditLogFilter(BaseModel):
    entity_type: str | None = None
    entity_id: str | None = None
    actor_id: str | None = None
    action: str | None = None
