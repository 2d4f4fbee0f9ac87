"""Briques Pydantic partagées par les schémas de mise à jour."""

from typing import ClassVar

from pydantic import BaseModel, model_validator


class PartialUpdate(BaseModel):
    """
    Base des schémas de mise à jour partielle.

    Un champ absent n'est pas modifié. Un `null` explicite n'est accepté que
    pour les colonnes nullables: les champs listés dans `non_nullable_fields`
    le refusent avec une erreur de validation (422).
    """

    non_nullable_fields: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        nulls = [
            name
            for name in self.non_nullable_fields
            if name in self.model_fields_set and getattr(self, name) is None
        ]
        if nulls:
            raise ValueError(f"Champs non nullables: {', '.join(nulls)}")
        return self
