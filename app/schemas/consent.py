"""Schémas Pydantic pour Consent."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.models.types import ConsentType
from app.schemas.utils import PartialUpdate


class ConsentBase(BaseModel):
    """Schéma de base partagé pour Consent."""

    client_id: str
    consent_type: ConsentType
    caregiver_id: str | None = Field(None, description="Soignant ayant recueilli le consentement")
    signature_url: str | None = None
    witness_name: str | None = None


class ConsentCreate(ConsentBase):
    granted: bool = False
    granted_at: datetime | None = None


class ConsentUpdate(PartialUpdate):
    non_nullable_fields = ("granted",)

    granted: bool | None = None
    granted_at: datetime | None = None
    signature_url: str | None = None
    witness_name: str | None = None


class ConsentResponse(ConsentBase):
    id: str
    granted: bool
    granted_at: datetime | None
    revoked_at: datetime | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ConsentFilter(BaseModel):
    client_id: str | None = None
    consent_type: ConsentType | None = None
    granted: bool | None = None
