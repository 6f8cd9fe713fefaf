"""Routine models - ordered exercises, each with ordered set specifications."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.enums import WeightType
from app.db.base import Base


class Routine(Base):
    """Reusable workout template (e.g. "Squat Day")."""

    __tablename__ = "routines"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    exercises: Mapped[list["RoutineExercise"]] = relationship(
        "RoutineExercise",
        back_populates="routine",
        cascade="all, delete-orphan",
        order_by="RoutineExercise.order_index",
    )


class RoutineExercise(Base):
    """Exercise slot in a routine."""

    __tablename__ = "routine_exercises"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    routine_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("routines.id", ondelete="CASCADE"), nullable=False, index=True
    )
    exercise_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("exercises.id", ondelete="CASCADE"), nullable=False
    )
    order_index: Mapped[int] = mapped_column(Integer, default=0)

    routine: Mapped["Routine"] = relationship("Routine", back_populates="exercises")
    exercise: Mapped["Exercise"] = relationship("Exercise")
    sets: Mapped[list["RoutineSet"]] = relationship(
        "RoutineSet",
        back_populates="routine_exercise",
        cascade="all, delete-orphan",
        order_by="RoutineSet.order_index",
    )


class RoutineSet(Base):
    """Set specification: weight as % of max, a fixed weight, or the bar alone."""

    __tablename__ = "routine_sets"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    routine_exercise_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("routine_exercises.id", ondelete="CASCADE"), nullable=False, index=True
    )
    order_index: Mapped[int] = mapped_column(Integer, default=0)
    weight_type: Mapped[WeightType] = mapped_column(Enum(WeightType), nullable=False)
    weight_value: Mapped[float] = mapped_column(Numeric(8, 2, asdecimal=False), default=0.0, nullable=False)  # 60 (%) or 135 (lbs)
    reps: Mapped[int] = mapped_column(Integer, nullable=False)
    rest_time: Mapped[int | None] = mapped_column(Integer, nullable=True)  # null = exercise default

    routine_exercise: Mapped["RoutineExercise"] = relationship("RoutineExercise", back_populates="sets")
