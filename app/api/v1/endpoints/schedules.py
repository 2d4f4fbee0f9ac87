from datetime import date

from fastapi import Depends

from app.api.v1.endpoints.crud import build_crud_router
from app.core.dependencies import repository_dependency
from app.repositories.schedule import ScheduleRepository
from app.schemas.schedule import (
    ScheduleCreate,
    ScheduleFilter,
    ScheduleResponse,
    ScheduleUpdate,
)

router = build_crud_router(
    ScheduleRepository,
    create_schema=ScheduleCreate,
    update_schema=ScheduleUpdate,
    response_schema=ScheduleResponse,
    filter_schema=ScheduleFilter,
)


@router.get("/by-caregiver/{caregiver_id}", response_model=list[ScheduleResponse])
async def list_caregiver_day(
    caregiver_id: str,
    scheduled_date: date,
    schedules: ScheduleRepository = Depends(repository_dependency(ScheduleRepository)),
):
    """Tournée d'un soignant pour une date, triée par heure."""
    return await schedules.find_by_date_and_caregiver(caregiver_id, scheduled_date)
