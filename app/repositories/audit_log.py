from app.models import AuditLog
from app.repositories.base import Repository
from app.repositories.deletion import DeletionPolicy
from app.schemas.audit_log import AuditLogCreate, AuditLogUpdate


class AuditLogRepository(Repository[AuditLog, AuditLogCreate, AuditLogUpdate]):
    model = AuditLog
    # TODO: passer en append-only (update/soft_delete refusés) une fois la rétention décidée
    deletion_policy = DeletionPolicy.hard()

    async def find_by_entity(self, entity_type: str, entity_id: str) -> list[AuditLog]:
        """Historique d'une entité, du plus récent au plus ancien."""
        stmt = self._active_select().where(
            AuditLog.entity_type == entity_type,
            AuditLog.entity_id == entity_id,
        )
        stmt = self._order_by(stmt, ("-created_at",))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
