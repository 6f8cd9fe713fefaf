"""Goal model - weekly workout target on scheduled days, with streak."""

from __future__ import annotations

import uuid
from datetime import date, datetime, timezone

from sqlalchemy import JSON, Boolean, Date, DateTime, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Goal(Base):
    """Weekly goal. scheduled_days is a JSON array of weekday indices (0 = Sunday)."""

    __tablename__ = "goals"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    workouts_per_week: Mapped[int] = mapped_column(Integer, nullable=False)
    total_weeks: Mapped[int | None] = mapped_column(Integer, nullable=True)  # null = indefinite
    scheduled_days: Mapped[list[int]] = mapped_column(JSON, nullable=False, default=list)
    reminder_time: Mapped[str | None] = mapped_column(String(5), nullable=True)  # "18:00"
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    current_streak: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    last_evaluated_week: Mapped[date | None] = mapped_column(Date, nullable=True)  # Sunday of last settled week
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False, index=True)
