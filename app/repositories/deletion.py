"""
Politiques de suppression des repositories.

Chaque entité déclare explicitement comment `soft_delete` se comporte et quel
prédicat exclut les lignes supprimées des lectures par défaut:

- HARD: suppression physique, aucun prédicat d'exclusion
- TIMESTAMP: horodate une colonne (ex: deleted_at), exclusion `colonne IS NULL`
- DEACTIVATE: passe un booléen à False (ex: is_active), exclusion `colonne IS TRUE`
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any

from sqlalchemy import ColumnElement


class DeletionKind(str, Enum):
    """Type de suppression appliqué par `soft_delete`."""

    HARD = "hard"
    TIMESTAMP = "timestamp"
    DEACTIVATE = "deactivate"


@dataclass(frozen=True)
class DeletionPolicy:
    """
    Politique de suppression d'une entité.

    Attributes:
        kind: Type de suppression
        column: Colonne drapeau (deleted_at, is_active); None pour HARD
        stamps: Colonnes supplémentaires horodatées à la suppression
        values: Valeurs fixes écrites à la suppression (ex: status="cancelled")
    """

    kind: DeletionKind
    column: str | None = None
    stamps: tuple[str, ...] = ()
    values: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def hard(cls) -> "DeletionPolicy":
        return cls(DeletionKind.HARD)

    @classmethod
    def timestamp(
        cls,
        column: str = "deleted_at",
        *,
        stamps: tuple[str, ...] = (),
        values: Mapping[str, Any] | None = None,
    ) -> "DeletionPolicy":
        return cls(
            DeletionKind.TIMESTAMP,
            column=column,
            stamps=stamps,
            values=MappingProxyType(dict(values or {})),
        )

    @classmethod
    def deactivate(cls, column: str = "is_active") -> "DeletionPolicy":
        return cls(DeletionKind.DEACTIVATE, column=column)

    @property
    def is_soft(self) -> bool:
        """True si la ligne reste persistée après suppression."""
        return self.kind is not DeletionKind.HARD

    def active_clause(self, model: type) -> ColumnElement[bool] | None:
        """Prédicat retenant les lignes non supprimées; None pour HARD."""
        if self.kind is DeletionKind.TIMESTAMP:
            return getattr(model, self.column).is_(None)
        if self.kind is DeletionKind.DEACTIVATE:
            return getattr(model, self.column).is_(True)
        return None

    def is_deleted(self, record: Any) -> bool:
        """True si la ligne est déjà exclue par `active_clause`."""
        if self.kind is DeletionKind.TIMESTAMP:
            return getattr(record, self.column) is not None
        if self.kind is DeletionKind.DEACTIVATE:
            return getattr(record, self.column) is not True
        return False

    def deletion_values(self, now: datetime) -> dict[str, Any]:
        """Colonnes à écrire pour une suppression logique à l'instant `now`."""
        if self.kind is DeletionKind.TIMESTAMP:
            changes = {self.column: now}
            changes.update({stamp: now for stamp in self.stamps})
            changes.update(self.values)
            return changes
        if self.kind is DeletionKind.DEACTIVATE:
            return {self.column: False}
        raise ValueError("Hard deletion does not update columns")
