"""
Fabrique de routers CRUD au-dessus des repositories.

Chaque entité expose le même contrat HTTP que son repository:
POST /, GET /, GET /{id}, PATCH /{id}, DELETE /{id}.
"""

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from app.core.dependencies import repository_dependency
from app.core.exceptions import RecordNotFoundError
from app.repositories.base import Repository


def build_crud_router(
    repository_class: type[Repository],
    *,
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
    response_schema: type[BaseModel],
    filter_schema: type[BaseModel],
) -> APIRouter:
    """
    Construit le router CRUD d'une entité.

    Args:
        repository_class: Repository de l'entité
        create_schema: Corps de POST
        update_schema: Corps de PATCH (champs optionnels)
        response_schema: Modèle de réponse (from_attributes)
        filter_schema: Query parameters de la liste, convertis en filtre d'égalité

    Returns:
        APIRouter à monter sous le préfixe de l'entité
    """
    router = APIRouter()
    get_repository = repository_dependency(repository_class)
    entity = repository_class.model.__name__

    @router.post("/", response_model=response_schema, status_code=status.HTTP_201_CREATED)
    async def create_record(
        payload: create_schema,
        repository: Repository = Depends(get_repository),
    ):
        return await repository.create(payload)

    @router.get("/", response_model=list[response_schema])
    async def list_records(
        filters: filter_schema = Depends(),
        repository: Repository = Depends(get_repository),
    ):
        return await repository.find_many(filters.model_dump(exclude_none=True))

    @router.get("/{record_id}", response_model=response_schema)
    async def get_record(
        record_id: str,
        repository: Repository = Depends(get_repository),
    ):
        record = await repository.find_by_id(record_id)
        if record is None:
            raise RecordNotFoundError(entity, record_id)
        return record

    @router.patch("/{record_id}", response_model=response_schema)
    async def update_record(
        record_id: str,
        payload: update_schema,
        repository: Repository = Depends(get_repository),
    ):
        return await repository.update(record_id, payload)

    @router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_record(
        record_id: str,
        repository: Repository = Depends(get_repository),
    ) -> Response:
        await repository.soft_delete(record_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
