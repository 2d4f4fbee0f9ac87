from collections.abc import Mapping
from typing import Any

from app.core.config import settings
from app.core.security import hash_password
from app.models import Caregiver
from app.repositories.base import Repository, payload_values
from app.repositories.deletion import DeletionPolicy
from app.schemas.caregiver import CaregiverCreate, CaregiverUpdate


def _with_password_hash(values: dict[str, Any]) -> dict[str, Any]:
    # Le mot de passe en clair n'atteint jamais le modèle
    password = values.pop("password", None)
    if password is not None:
        values["password_hash"] = hash_password(password, settings.BCRYPT_SALT_ROUNDS)
    return values


class CaregiverRepository(Repository[Caregiver, CaregiverCreate, CaregiverUpdate]):
    model = Caregiver
    deletion_policy = DeletionPolicy.deactivate("is_active")

    async def create(self, data: CaregiverCreate | Mapping[str, Any]) -> Caregiver:
        return await super().create(_with_password_hash(payload_values(data)))

    async def update(
        self, record_id: str, data: CaregiverUpdate | Mapping[str, Any]
    ) -> Caregiver:
        return await super().update(record_id, _with_password_hash(payload_values(data)))

    async def find_by_email(self, email: str) -> Caregiver | None:
        """Soignant actif par email (comparaison exacte, l'appelant normalise)."""
        result = await self.session.execute(
            self._active_select().where(Caregiver.email == email)
        )
        return result.scalar_one_or_none()
