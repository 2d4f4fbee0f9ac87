from app.models import Alert
from app.repositories.base import Repository
from app.repositories.deletion import DeletionPolicy
from app.schemas.alert import AlertCreate, AlertUpdate


class AlertRepository(Repository[Alert, AlertCreate, AlertUpdate]):
    model = Alert
    deletion_policy = DeletionPolicy.timestamp("deleted_at")
