"""Types de colonnes et valeurs énumérées partagés par les modèles."""

import uuid
from typing import Literal

from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB

# JSONB sur PostgreSQL, JSON générique ailleurs (SQLite en tests)
JSONType = JSON().with_variant(JSONB(), "postgresql")

CaregiverRole = Literal["caregiver", "coordinator"]
ScheduleStatus = Literal["scheduled", "completed", "cancelled"]
VisitSyncStatus = Literal["local", "syncing", "synced", "conflict"]
PhotoSyncStatus = Literal["local", "uploading", "synced", "failed"]
ActorType = Literal["caregiver", "coordinator", "system"]
ConsentType = Literal["care_services", "photo_documentation", "data_sharing", "emergency_contact"]


def new_id() -> str:
    """Identifiant UUID4 textuel généré à l'insertion."""
    return str(uuid.uuid4())
