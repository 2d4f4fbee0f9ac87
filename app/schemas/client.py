"""Schémas Pydantic pour Client."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.schemas.utils import PartialUpdate


class ClientBase(BaseModel):
    """Schéma de base partagé pour Client."""

    name: str = Field(..., min_length=1, max_length=255, description="Nom du client")
    address: str = Field(..., min_length=1, description="Adresse du domicile")
    organization_id: str = Field(..., min_length=1, max_length=64)
    photo_url: str | None = Field(None, max_length=1024)
    phone: str | None = Field(None, max_length=32)
    emergency_contact: str | None = Field(None, max_length=255, description="Contact d'urgence")


class ClientCreate(ClientBase):
    is_active: bool = True


class ClientUpdate(PartialUpdate):
    non_nullable_fields = ("name", "address", "organization_id", "is_active")

    name: str | None = Field(None, min_length=1, max_length=255)
    address: str | None = Field(None, min_length=1)
    organization_id: str | None = Field(None, min_length=1, max_length=64)
    photo_url: str | None = Field(None, max_length=1024)
    phone: str | None = Field(None, max_length=32)
    emergency_contact: str | None = Field(None, max_length=255)
    is_active: bool | None = None


class ClientResponse(ClientBase):
    id: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ClientFilter(BaseModel):
    organization_id: str | None = None
