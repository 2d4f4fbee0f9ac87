"""Dependances FastAPI pour l'injection des repositories."""

from collections.abc import Callable
from typing import TypeVar

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_session
from app.repositories.base import Repository

R = TypeVar("R", bound=Repository)


def repository_dependency(repository_class: type[R]) -> Callable[..., R]:
    """
    Construit une dépendance FastAPI fournissant un repository.

    Le repository reçoit la session de la requête (une unité de travail par
    requête), elle-même issue de la Database portée par app.state.

    Example:
        ```python
        @router.get("/{client_id}")
        async def get_client(
            client_id: str,
            clients: ClientRepository = Depends(repository_dependency(ClientRepository)),
        ): ...
        ```
    """

    def _get_repository(session: AsyncSession = Depends(get_session)) -> R:
        return repository_class(session)

    return _get_repository
