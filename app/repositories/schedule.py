from datetime import date

from app.models import Schedule
from app.repositories.base import Repository
from app.repositories.deletion import DeletionPolicy
from app.schemas.schedule import ScheduleCreate, ScheduleUpdate


class ScheduleRepository(Repository[Schedule, ScheduleCreate, ScheduleUpdate]):
    model = Schedule
    # Un créneau supprimé est aussi annulé pour les lecteurs qui ignorent deleted_at
    deletion_policy = DeletionPolicy.timestamp("deleted_at", values={"status": "cancelled"})

    async def find_by_date_and_caregiver(
        self, caregiver_id: str, scheduled_date: date
    ) -> list[Schedule]:
        """Journée d'un soignant, triée par heure de passage."""
        stmt = self._active_select().where(
            Schedule.caregiver_id == caregiver_id,
            Schedule.scheduled_date == scheduled_date,
        )
        stmt = self._order_by(stmt, ("scheduled_time",))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
