"""Program models - routines cycled forever or for a fixed number of workouts."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Enum, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.enums import ProgramType
from app.db.base import Base


class Program(Base):
    """Ordered routine rotation. At most one program is active at a time."""

    __tablename__ = "programs"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[ProgramType] = mapped_column(Enum(ProgramType), nullable=False)
    total_workouts: Mapped[int | None] = mapped_column(Integer, nullable=True)  # finite only
    current_position: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, index=True)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    routines: Mapped[list["ProgramRoutine"]] = relationship(
        "ProgramRoutine",
        back_populates="program",
        cascade="all, delete-orphan",
        order_by="ProgramRoutine.order_index",
    )

    @property
    def ordered_routine_ids(self) -> list[uuid.UUID]:
        return [pr.routine_id for pr in sorted(self.routines, key=lambda pr: pr.order_index)]


class ProgramRoutine(Base):
    """Routine slot in a program."""

    __tablename__ = "program_routines"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    program_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("programs.id", ondelete="CASCADE"), nullable=False, index=True
    )
    routine_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("routines.id", ondelete="CASCADE"), nullable=False
    )
    order_index: Mapped[int] = mapped_column(Integer, nullable=False)

    program: Mapped["Program"] = relationship("Program", back_populates="routines")
    routine: Mapped["Routine"] = relationship("Routine")
