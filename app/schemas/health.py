"""Schémas de réponse des endpoints de santé."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: Literal["healthy", "unhealthy"] = Field(..., description="État du processus")
    timestamp: str = Field(..., description="Horodatage ISO-8601 UTC")
    uptime_seconds: int = Field(..., alias="uptimeSeconds", description="Uptime du processus")
    version: str = Field(..., description="Version du package")


class DatabaseHealthResponse(BaseModel):
    status: Literal["healthy", "unhealthy"]
    database: Literal["ok", "error"]
