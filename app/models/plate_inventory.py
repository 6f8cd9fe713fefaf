"""Plate inventory - how many plates of each weight are owned."""

from __future__ import annotations

import uuid

from sqlalchemy import CheckConstraint, Integer, Numeric, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class PlateInventoryEntry(Base):
    """Plate denomination and individual plate count (loaded in pairs)."""

    __tablename__ = "plate_inventory"
    __table_args__ = (CheckConstraint("count >= 0", name="ck_plate_inventory_count_nonnegative"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    weight: Mapped[float] = mapped_column(Numeric(6, 2, asdecimal=False), nullable=False, unique=True)
    count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
