"""Body composition models: singleton profile and measurement entries."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base

# Singleton profile until there are users: one row with this id.
PROFILE_ID = uuid.UUID("00000000-0000-0000-0000-000000000001")


class UserProfile(Base):
    """Sex and height used by the body fat and BMI formulas."""

    __tablename__ = "user_profile"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=lambda: PROFILE_ID)
    sex: Mapped[str] = mapped_column(String(10), nullable=False, default="male")  # male / female
    height_in: Mapped[float] = mapped_column(Float, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )


class BodyComposition(Base):
    """One measurement entry (lbs / inches) with metrics computed at write time."""

    __tablename__ = "body_compositions"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    logged_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), index=True
    )
    weight: Mapped[float] = mapped_column(Float, nullable=False)
    waist: Mapped[float | None] = mapped_column(Float, nullable=True)
    neck: Mapped[float | None] = mapped_column(Float, nullable=True)
    hip: Mapped[float | None] = mapped_column(Float, nullable=True)

    body_fat_percent: Mapped[float | None] = mapped_column(Float, nullable=True)
    bmi: Mapped[float | None] = mapped_column(Float, nullable=True)
    lean_mass: Mapped[float | None] = mapped_column(Float, nullable=True)
