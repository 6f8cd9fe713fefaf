"""Exercise model - lift with a current max used for percentage-based sets."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class Exercise(Base):
    """Exercise definition: current max, rounding/progression increment, optional barbell."""

    __tablename__ = "exercises"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    max_weight: Mapped[float] = mapped_column(Numeric(8, 2, asdecimal=False), nullable=False)
    weight_increment: Mapped[float] = mapped_column(Numeric(6, 2, asdecimal=False), default=5.0, nullable=False)
    auto_progression: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    default_rest_time: Mapped[int | None] = mapped_column(Integer, nullable=True, default=90)  # seconds

    barbell_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("barbells.id", ondelete="SET NULL"), nullable=True, index=True
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    barbell: Mapped["Barbell | None"] = relationship("Barbell", back_populates="exercises")

    @property
    def barbell_weight(self) -> float:
        """Bar weight added to plates (0 when the exercise has no barbell)."""
        return float(self.barbell.weight) if self.barbell is not None else 0.0
