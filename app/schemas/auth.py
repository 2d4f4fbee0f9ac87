"""Schémas Pydantic pour l'authentification."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=256)
    device_id: UUID = Field(..., description="Identifiant de l'appareil mobile")


class RefreshRequest(BaseModel):
    refresh_token: str = Field(..., min_length=1)
    device_id: UUID | None = Field(
        None, description="Si fourni, doit correspondre à l'appareil du jeton"
    )
    rotate: bool = Field(False, description="Remplace aussi le refresh token")


class LogoutRequest(BaseModel):
    refresh_token: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """Jetons émis; refresh_token est absent d'un rafraîchissement sans rotation."""

    access_token: str
    access_expires_at: datetime
    refresh_token: str | None = None
    refresh_expires_at: datetime | None = None
    token_type: Literal["bearer"] = "bearer"
    user_id: str
    device_id: str
    jti: str

    model_config = {"from_attributes": True}
