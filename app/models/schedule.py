"""Modèle Schedule: créneau de visite planifié pour un soignant et un client."""

from datetime import date, datetime, time

from sqlalchemy import Date, DateTime, ForeignKey, Index, String, Time, func
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base
from app.models.types import ScheduleStatus, new_id


class Schedule(Base):
    __tablename__ = "schedules"
    __table_args__ = (
        Index("ix_schedules_caregiver_id_scheduled_date", "caregiver_id", "scheduled_date"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    caregiver_id: Mapped[str] = mapped_column(ForeignKey("caregivers.id"), nullable=False)
    client_id: Mapped[str] = mapped_column(ForeignKey("clients.id"), nullable=False)
    scheduled_date: Mapped[date] = mapped_column(Date, nullable=False)
    scheduled_time: Mapped[time] = mapped_column(Time, nullable=False)
    duration_minutes: Mapped[int] = mapped_column(nullable=False)
    status: Mapped[ScheduleStatus] = mapped_column(String(20), nullable=False, default="scheduled")
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
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
        return (
            f"<Schedule(id='{self.id}', date={self.scheduled_date}, "
            f"time={self.scheduled_time}, status='{self.status}')>"
        )
