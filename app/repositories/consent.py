from app.models import Consent
from app.repositories.base import Repository
from app.repositories.deletion import DeletionPolicy
from app.schemas.consent import ConsentCreate, ConsentUpdate


class ConsentRepository(Repository[Consent, ConsentCreate, ConsentUpdate]):
    model = Consent
    # Supprimer un consentement le révoque
    deletion_policy = DeletionPolicy.timestamp(
        "deleted_at", stamps=("revoked_at",), values={"granted": False}
    )
