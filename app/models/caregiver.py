"""Modèle Caregiver: soignant ou coordinateur d'une organisation."""

from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base
from app.models.types import CaregiverRole, new_id


class Caregiver(Base):
    __tablename__ = "caregivers"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    # unique + index => index unique ix_caregivers_email
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(32), nullable=False)
    organization_id: Mapped[str] = mapped_column(String(64), nullable=False)
    role: Mapped[CaregiverRole] = mapped_column(String(20), nullable=False, default="caregiver")
    is_active: Mapped[bool] = mapped_column(nullable=False, default=True)
    # Hash bcrypt; None tant que le compte n'a pas de mot de passe (connexion refusée)
    password_hash: Mapped[str | None] = mapped_column(String(255), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self) -> str:
        return f"<Caregiver(id='{self.id}', role='{self.role}', active={self.is_active})>"
