# Modèles SQLAlchemy pour berthcare-backend
#
# Importer ce package enregistre toutes les tables sur Base.metadata
# (utilisé par Database.create_all et alembic/env.py).

from .alert import Alert
from .audit_log import AuditLog
from .caregiver import Caregiver
from .client import Client
from .consent import Consent
from .photo import Photo
from .refresh_token import RefreshToken
from .schedule import Schedule
from .visit import Visit

__all__ = [
    "Alert",
    "AuditLog",
    "Caregiver",
    "Client",
    "Consent",
    "Photo",
    "RefreshToken",
    "Schedule",
    "Visit",
]
