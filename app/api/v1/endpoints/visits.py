from typing import Any

from fastapi import Body, Depends

from app.api.v1.endpoints.crud import build_crud_router
from app.core.dependencies import repository_dependency
from app.core.exceptions import NotFoundError
from app.repositories.visit import VisitRepository
from app.schemas.visit import VisitCreate, VisitFilter, VisitResponse, VisitUpdate

get_visits = repository_dependency(VisitRepository)

router = build_crud_router(
    VisitRepository,
    create_schema=VisitCreate,
    update_schema=VisitUpdate,
    response_schema=VisitResponse,
    filter_schema=VisitFilter,
)


@router.get("/last-by-client/{client_id}", response_model=VisitResponse)
async def get_last_visit_for_client(
    client_id: str,
    visits: VisitRepository = Depends(get_visits),
):
    """Dernière visite d'un client (base de la copie de documentation)."""
    visit = await visits.find_last_by_client(client_id)
    if visit is None:
        raise NotFoundError(detail=f"No visit found for client {client_id}")
    return visit


@router.patch("/{visit_id}/documentation", response_model=VisitResponse)
async def patch_visit_documentation(
    visit_id: str,
    patch: dict[str, Any] = Body(..., description="Patch fusionné récursivement"),
    visits: VisitRepository = Depends(get_visits),
):
    return await visits.update_documentation(visit_id, patch)
