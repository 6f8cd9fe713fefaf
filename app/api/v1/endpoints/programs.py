"""Program endpoints: routine rotation, activation and status."""

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFoundError
from app.db.session import get_db
from app.schemas.program import ProgramCreate, ProgramRead, ProgramStatus, ProgramUpdate
from app.services import program_service

router = APIRouter()


@router.get("", response_model=list[ProgramRead])
async def list_programs(db: AsyncSession = Depends(get_db)):
    return await program_service.list_programs(db)


@router.get("/active", response_model=ProgramStatus)
async def get_active_program(db: AsyncSession = Depends(get_db)):
    """The active program with its next routine and progress."""
    program = await program_service.get_active_program(db)
    if program is None:
        raise NotFoundError("No active program")
    return program_service.program_status(program)


@router.get("/{program_id}", response_model=ProgramStatus)
async def get_program(
    program_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    program = await program_service.get_program(db, program_id)
    return program_service.program_status(program)


@router.post("", response_model=ProgramRead, status_code=201)
async def create_program(
    payload: ProgramCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a continuous (cycles forever) or finite (total_workouts) program."""
    return await program_service.create_program(db, payload)


@router.patch("/{program_id}", response_model=ProgramRead)
async def update_program(
    program_id: uuid.UUID,
    payload: ProgramUpdate,
    db: AsyncSession = Depends(get_db),
):
    return await program_service.update_program(db, program_id, payload)


@router.post("/{program_id}/activate", response_model=ProgramStatus)
async def activate_program(
    program_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Make this the only active program and restart it from its first routine."""
    program = await program_service.activate_program(db, program_id)
    return program_service.program_status(program)


@router.delete("/{program_id}", status_code=204)
async def delete_program(
    program_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    await program_service.delete_program(db, program_id)
    return None
