"""Modèle Visit: documentation d'une visite réalisée (synchronisée depuis le mobile)."""

from datetime import date, datetime, time
from typing import Any

from sqlalchemy import Date, DateTime, ForeignKey, Index, String, Time, func
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base
from app.models.types import JSONType, VisitSyncStatus, new_id


class Visit(Base):
    __tablename__ = "visits"
    __table_args__ = (Index("ix_visits_client_id_visit_date", "client_id", "visit_date"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    # Une visite au plus par créneau
    schedule_id: Mapped[str] = mapped_column(ForeignKey("schedules.id"), unique=True, nullable=False)
    caregiver_id: Mapped[str] = mapped_column(ForeignKey("caregivers.id"), nullable=False)
    client_id: Mapped[str] = mapped_column(ForeignKey("clients.id"), nullable=False)
    visit_date: Mapped[date] = mapped_column(Date, nullable=False)
    start_time: Mapped[time | None] = mapped_column(Time, nullable=True)
    end_time: Mapped[time | None] = mapped_column(Time, nullable=True)
    documentation: Mapped[dict[str, Any]] = mapped_column(JSONType, nullable=False, default=dict)
    photo_ids: Mapped[list[str]] = mapped_column(JSONType, nullable=False, default=list)
    location: Mapped[dict[str, Any] | None] = mapped_column(JSONType, nullable=True)
    changed_fields: Mapped[list[str]] = mapped_column(JSONType, nullable=False, default=list)
    copied_from_visit_id: Mapped[str | None] = mapped_column(
        ForeignKey("visits.id"), nullable=True
    )
    sync_status: Mapped[VisitSyncStatus] = mapped_column(String(20), nullable=False, default="local")
    synced_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    sync_version: Mapped[int] = mapped_column(nullable=False, default=1)
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self) -> str:
        return f"<Visit(id='{self.id}', date={self.visit_date}, sync='{self.sync_status}')>"
