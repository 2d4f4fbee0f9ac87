from fastapi import Depends

from app.api.v1.endpoints.crud import build_crud_router
from app.core.dependencies import repository_dependency
from app.repositories.audit_log import AuditLogRepository
from app.schemas.audit_log import (
    AuditLogCreate,
    AuditLogFilter,
    AuditLogResponse,
    AuditLogUpdate,
)

router = build_crud_router(
    AuditLogRepository,
    create_schema=AuditLogCreate,
    update_schema=AuditLogUpdate,
    response_schema=AuditLogResponse,
    filter_schema=AuditLogFilter,
)


@router.get("/entity/{entity_type}/{entity_id}", response_model=list[AuditLogResponse])
async def list_entity_history(
    entity_type: str,
    entity_id: str,
    audit_logs: AuditLogRepository = Depends(repository_dependency(AuditLogRepository)),
):
    """Historique d'audit d'une entité, du plus récent au plus ancien."""
    return await audit_logs.find_by_entity(entity_type, entity_id)
