"""Schémas Pydantic pour Caregiver."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from app.models.types import CaregiverRole
from app.schemas.utils import PartialUpdate


class CaregiverBase(BaseModel):
    """Schéma de base partagé pour Caregiver."""

    email: EmailStr = Field(..., description="Adresse email (identifiant de connexion)")
    name: str = Field(..., min_length=1, max_length=255, description="Nom complet")
    phone: str = Field(..., min_length=5, max_length=32, description="Téléphone")
    organization_id: str = Field(..., min_length=1, max_length=64)
    role: CaregiverRole = Field("caregiver", description="Rôle dans l'organisation")


class CaregiverCreate(CaregiverBase):
    is_active: bool = True
    password: str | None = Field(
        None, min_length=8, max_length=72, description="Mot de passe (stocké haché bcrypt)"
    )


class CaregiverUpdate(PartialUpdate):
    """Mise à jour partielle: seuls les champs fournis sont appliqués."""

    non_nullable_fields = (
        "email",
        "name",
        "phone",
        "organization_id",
        "role",
        "is_active",
        "password",
    )

    email: EmailStr | None = None
    name: str | None = Field(None, min_length=1, max_length=255)
    phone: str | None = Field(None, min_length=5, max_length=32)
    organization_id: str | None = Field(None, min_length=1, max_length=64)
    role: CaregiverRole | None = None
    is_active: bool | None = None
    password: str | None = Field(None, min_length=8, max_length=72)


class CaregiverResponse(CaregiverBase):
    id: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class CaregiverFilter(BaseModel):
    """Filtres de liste (query parameters)."""

    organization_id: str | None = None
    role: CaregiverRole | None = None
