from collections.abc import Mapping
from typing import Any

from app.core.exceptions import RecordNotFoundError
from app.models import Visit
from app.repositories.base import Repository
from app.repositories.deletion import DeletionPolicy
from app.schemas.visit import VisitCreate, VisitUpdate


def merge_json_objects(current: Mapping[str, Any], patch: Mapping[str, Any]) -> dict[str, Any]:
    """
    Fusion récursive d'un patch JSON dans un objet existant.

    Les objets imbriqués présents des deux côtés sont fusionnés; toute autre
    valeur du patch (scalaire, liste, null) remplace la valeur courante.
    Les entrées ne sont pas modifiées.
    """
    result = dict(current)
    for key, value in patch.items():
        existing = result.get(key)
        if isinstance(value, Mapping) and isinstance(existing, Mapping):
            result[key] = merge_json_objects(existing, value)
        else:
            result[key] = value
    return result


class VisitRepository(Repository[Visit, VisitCreate, VisitUpdate]):
    model = Visit
    deletion_policy = DeletionPolicy.timestamp("deleted_at")

    async def find_last_by_client(self, client_id: str) -> Visit | None:
        """Visite la plus récente d'un client (sert à copier la documentation)."""
        stmt = self._active_select().where(Visit.client_id == client_id)
        stmt = self._order_by(stmt, ("-visit_date", "-created_at"))
        result = await self.session.execute(stmt.limit(1))
        return result.scalar_one_or_none()

    async def update_documentation(self, visit_id: str, patch: Mapping[str, Any]) -> Visit:
        """
        Applique un patch partiel sur la documentation JSON d'une visite.

        Raises:
            RecordNotFoundError: Visite inexistante ou supprimée
        """
        visit = await self.find_by_id(visit_id)
        if visit is None:
            raise RecordNotFoundError(self.entity, visit_id)

        # Nouvel objet: SQLAlchemy ne suit pas les mutations en place du JSON
        visit.documentation = merge_json_objects(visit.documentation or {}, patch)
        return await self._commit_and_refresh(visit)
