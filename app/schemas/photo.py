"""Schémas Pydantic pour Photo."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.models.types import PhotoSyncStatus
from app.schemas.utils import PartialUpdate


class PhotoBase(BaseModel):
    """Schéma de base partagé pour Photo."""

    visit_id: str
    client_id: str
    caregiver_id: str
    mime_type: str = Field(..., examples=["image/jpeg"])
    size_bytes: int = Field(..., ge=0)
    compressed_size_bytes: int = Field(..., ge=0)
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    local_path: str | None = None
    s3_key: str | None = None


class PhotoCreate(PhotoBase):
    sync_status: PhotoSyncStatus = "local"


class PhotoUpdate(PartialUpdate):
    non_nullable_fields = ("sync_status",)

    local_path: str | None = None
    s3_key: str | None = None
    sync_status: PhotoSyncStatus | None = None
    uploaded_at: datetime | None = None


class PhotoResponse(PhotoBase):
    id: str
    sync_status: PhotoSyncStatus
    uploaded_at: datetime | None
    created_at: datetime

    model_config = {"from_attributes": True}


class PhotoFilter(BaseModel):
    visit_id: str | None = None
    client_id: str | None = None
    sync_status: PhotoSyncStatus | None = None
