"""Program persistence around the rotation engine."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.enums import ProgramType
from app.core.errors import NotFoundError, ValidationError
from app.engine import rotation
from app.models.program import Program, ProgramRoutine
from app.models.routine import Routine
from app.schemas.program import ProgramCreate, ProgramRead, ProgramStatus, ProgramUpdate
from app.services.persistence import flush

logger = logging.getLogger(__name__)


def program_query():
    return select(Program).options(selectinload(Program.routines))


async def list_programs(db: AsyncSession) -> list[Program]:
    result = await db.execute(program_query().order_by(Program.name))
    return list(result.scalars().all())


async def get_program(db: AsyncSession, program_id: uuid.UUID, refresh: bool = False) -> Program:
    stmt = program_query().where(Program.id == program_id)
    if refresh:
        stmt = stmt.execution_options(populate_existing=True)
    result = await db.execute(stmt)
    program = result.scalar_one_or_none()
    if program is None:
        raise NotFoundError(f"Program {program_id} not found")
    return program


async def get_active_program(db: AsyncSession) -> Program | None:
    result = await db.execute(program_query().where(Program.is_active.is_(True)).limit(1))
    return result.scalar_one_or_none()


async def _ensure_routines_exist(db: AsyncSession, routine_ids: list[uuid.UUID]) -> None:
    result = await db.execute(select(Routine.id).where(Routine.id.in_(set(routine_ids))))
    missing = set(routine_ids) - set(result.scalars().all())
    if missing:
        raise NotFoundError(f"Routine(s) not found: {', '.join(sorted(str(m) for m in missing))}")


def _program_routines(routine_ids: list[uuid.UUID]) -> list[ProgramRoutine]:
    return [ProgramRoutine(routine_id=rid, order_index=i) for i, rid in enumerate(routine_ids)]


async def create_program(db: AsyncSession, payload: ProgramCreate) -> Program:
    await _ensure_routines_exist(db, payload.routine_ids)
    program = Program(
        name=payload.name,
        type=payload.type,
        total_workouts=payload.total_workouts,
        current_position=0,
        is_active=False,
        routines=_program_routines(payload.routine_ids),
    )
    db.add(program)
    await flush(db, "create program")
    return await get_program(db, program.id, refresh=True)


async def update_program(db: AsyncSession, program_id: uuid.UUID, payload: ProgramUpdate) -> Program:
    program = await get_program(db, program_id)
    data = payload.model_dump(exclude_unset=True)
    if "name" in data and data["name"] is not None:
        program.name = data["name"]
    if "total_workouts" in data and program.type == ProgramType.FINITE:
        if data["total_workouts"] is None:
            raise ValidationError("Finite programs need total_workouts")
        program.total_workouts = data["total_workouts"]
    if data.get("routine_ids") is not None:
        await _ensure_routines_exist(db, data["routine_ids"])
        program.routines.clear()
        await flush(db, "clear program routines")
        program.routines.extend(_program_routines(data["routine_ids"]))
    await flush(db, "update program")
    return await get_program(db, program_id, refresh=True)


async def activate_program(db: AsyncSession, program_id: uuid.UUID) -> Program:
    """Make this the only active program and restart it."""
    programs = await list_programs(db)
    program = next((p for p in programs if p.id == program_id), None)
    if program is None:
        raise NotFoundError(f"Program {program_id} not found")
    rotation.set_active(program, programs)
    await flush(db, "activate program")
    logger.info("Program %s activated", program.name)
    return program


async def decrement_program(db: AsyncSession, program_id: uuid.UUID) -> Program | None:
    """Undo one workout of progress; no-op when the program is gone."""
    programs = await list_programs(db)
    program = next((p for p in programs if p.id == program_id), None)
    if program is None:
        return None
    rotation.decrement(program, programs)
    await flush(db, "decrement program position")
    logger.info("Program %s moved back to position %s", program.name, program.current_position)
    return program


async def delete_program(db: AsyncSession, program_id: uuid.UUID) -> None:
    program = await get_program(db, program_id)
    await db.delete(program)
    await flush(db, "delete program")


def program_status(program: Program) -> ProgramStatus:
    next_routine = rotation.current_routine_id(program) if program.routines else None
    return ProgramStatus(
        program=ProgramRead.model_validate(program),
        next_routine_id=next_routine,
        is_complete=program.completed_at is not None or rotation.is_complete(program),
        remaining_workouts=rotation.remaining_workouts(program),
        progress=rotation.progress_fraction(program),
    )
