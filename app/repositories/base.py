"""
Repository générique au-dessus de l'AsyncSession SQLAlchemy.

Contrat commun à toutes les entités: create, find_by_id, find_many, update,
soft_delete. Les sous-classes ne déclarent que le modèle, la politique de
suppression, l'ordre par défaut et leurs accesseurs spécialisés.
"""

import logging
from collections.abc import Mapping, Sequence
from datetime import UTC, datetime
from typing import Any, ClassVar, Generic, TypeVar

from opentelemetry import trace
from pydantic import BaseModel
from sqlalchemy import ColumnElement, Select, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import Base
from app.core.exceptions import ConstraintViolationError, InvalidFilterError, RecordNotFoundError
from app.repositories.deletion import DeletionKind, DeletionPolicy

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

ModelT = TypeVar("ModelT", bound=Base)
CreateT = TypeVar("CreateT", bound=BaseModel)
UpdateT = TypeVar("UpdateT", bound=BaseModel)

Filter = Mapping[str, Any]


def payload_values(data: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
    # Seuls les champs explicitement fournis: les défauts de colonne s'appliquent aux autres
    if isinstance(data, BaseModel):
        return data.model_dump(exclude_unset=True)
    return dict(data)


class Repository(Generic[ModelT, CreateT, UpdateT]):
    """
    Façade CRUD pour une entité.

    Args:
        session: Session du client de données partagé (Database.session())
    """

    model: ClassVar[type[Base]]
    deletion_policy: ClassVar[DeletionPolicy] = DeletionPolicy.hard()
    default_order_by: ClassVar[tuple[str, ...]] = ()

    def __init__(self, session: AsyncSession):
        self.session = session

    @property
    def entity(self) -> str:
        return self.model.__name__

    # ------------------------------------------------------------------
    # Construction des requêtes
    # ------------------------------------------------------------------

    def _active_select(self) -> Select[tuple[ModelT]]:
        stmt = select(self.model)
        clause = self.deletion_policy.active_clause(self.model)
        if clause is not None:
            stmt = stmt.where(clause)
        return stmt

    def _filter_clauses(self, filter: Filter) -> list[ColumnElement[bool]]:
        columns = self.model.__mapper__.columns
        unknown = [name for name in filter if name not in columns]
        if unknown:
            raise InvalidFilterError(self.entity, unknown)

        clauses = []
        for name, value in filter.items():
            column = getattr(self.model, name)
            if value is None:
                clauses.append(column.is_(None))
            elif isinstance(value, list | tuple | set | frozenset):
                clauses.append(column.in_(list(value)))
            else:
                clauses.append(column == value)
        return clauses

    def _order_by(self, stmt: Select, order_by: Sequence[str]) -> Select:
        for name in order_by:
            descending = name.startswith("-")
            column = getattr(self.model, name.lstrip("-"))
            stmt = stmt.order_by(column.desc() if descending else column.asc())
        return stmt

    async def _get_any(self, record_id: str) -> ModelT | None:
        """Ligne par clé primaire, y compris supprimée logiquement."""
        return await self.session.get(self.model, record_id)

    async def _commit_and_refresh(self, record: ModelT) -> ModelT:
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            logger.warning(
                "Constraint violation",
                extra={"entity": self.entity, "error": str(exc.orig)},
            )
            raise ConstraintViolationError(self.entity, str(exc.orig)) from exc
        await self.session.refresh(record)
        return record

    # ------------------------------------------------------------------
    # Contrat CRUD
    # ------------------------------------------------------------------

    async def create(self, data: CreateT | Mapping[str, Any]) -> ModelT:
        """
        Persiste un nouvel enregistrement.

        Raises:
            ConstraintViolationError: Unicité ou relation violée
        """
        with tracer.start_as_current_span(f"{self.entity}.create"):
            record = self.model(**payload_values(data))
            self.session.add(record)
            return await self._commit_and_refresh(record)

    async def find_by_id(self, record_id: str) -> ModelT | None:
        """Enregistrement actif ou None (les lignes supprimées sont exclues)."""
        with tracer.start_as_current_span(f"{self.entity}.find_by_id") as span:
            span.set_attribute("record.id", record_id)
            result = await self.session.execute(
                self._active_select().where(self.model.id == record_id)
            )
            return result.scalar_one_or_none()

    async def find_many(self, filter: Filter | None = None) -> list[ModelT]:
        """
        Liste les enregistrements actifs correspondant au filtre.

        Le prédicat d'exclusion de la politique de suppression est toujours
        combiné (AND) avec le filtre de l'appelant.

        Args:
            filter: colonne -> valeur (None: IS NULL, collection: IN, sinon égalité)

        Raises:
            InvalidFilterError: Colonne inconnue dans le filtre
        """
        with tracer.start_as_current_span(f"{self.entity}.find_many"):
            stmt = self._active_select().where(*self._filter_clauses(filter or {}))
            stmt = self._order_by(stmt, self.default_order_by)
            result = await self.session.execute(stmt)
            return list(result.scalars().all())

    async def update(self, record_id: str, data: UpdateT | Mapping[str, Any]) -> ModelT:
        """
        Mise à jour partielle.

        Raises:
            RecordNotFoundError: Identifiant inexistant
            ConstraintViolationError: Unicité ou relation violée
        """
        with tracer.start_as_current_span(f"{self.entity}.update") as span:
            span.set_attribute("record.id", record_id)
            record = await self._get_any(record_id)
            if record is None:
                raise RecordNotFoundError(self.entity, record_id)

            for field, value in payload_values(data).items():
                setattr(record, field, value)
            return await self._commit_and_refresh(record)

    async def soft_delete(self, record_id: str) -> None:
        """
        Supprime selon la politique de l'entité (physique ou logique).

        Idempotent pour les suppressions logiques: une ligne déjà supprimée
        n'est pas réécrite.

        Raises:
            RecordNotFoundError: Identifiant inexistant
        """
        with tracer.start_as_current_span(f"{self.entity}.soft_delete") as span:
            span.set_attribute("record.id", record_id)
            span.set_attribute("deletion.kind", self.deletion_policy.kind.value)
            record = await self._get_any(record_id)
            if record is None:
                raise RecordNotFoundError(self.entity, record_id)
            if self.deletion_policy.is_deleted(record):
                # Déjà supprimée: les horodatages d'origine sont conservés
                return

            if self.deletion_policy.kind is DeletionKind.HARD:
                await self.session.delete(record)
                await self.session.commit()
            else:
                changes = self.deletion_policy.deletion_values(datetime.now(UTC))
                for field, value in changes.items():
                    setattr(record, field, value)
                await self._commit_and_refresh(record)

            logger.info(
                "Record deleted",
                extra={
                    "entity": self.entity,
                    "record_id": record_id,
                    "deletion_kind": self.deletion_policy.kind.value,
                },
            )
