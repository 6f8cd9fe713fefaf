"""Program rotation: which routine is next, advancing, completion, undo.

Continuous programs cycle their routines forever and wrap current_position.
Finite programs keep an absolute workout counter (used for completion) but
still pick the routine by position modulo the routine count.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime, timezone

from app.core.enums import ProgramType
from app.core.errors import StateError, ValidationError
from app.engine.types import EntityId, ProgramAggregate

logger = logging.getLogger(__name__)


def _routine_count(program: ProgramAggregate) -> int:
    count = len(program.ordered_routine_ids)
    if count == 0:
        raise StateError(f"Program {program.id} has no routines")
    return count


def current_routine_id(program: ProgramAggregate) -> EntityId:
    """Routine to run next."""
    index = (program.current_position or 0) % _routine_count(program)
    return program.ordered_routine_ids[index]


def advance(program: ProgramAggregate) -> ProgramAggregate:
    """Move past the workout just finished."""
    count = _routine_count(program)
    position = program.current_position or 0
    if program.type == ProgramType.CONTINUOUS:
        program.current_position = (position + 1) % count
    else:
        program.current_position = position + 1
    logger.info("Program %s advanced to position %s", program.id, program.current_position)
    return program


def is_complete(program: ProgramAggregate) -> bool:
    """Finite programs are complete once the counter reaches total_workouts."""
    if program.type == ProgramType.CONTINUOUS:
        return False
    if program.total_workouts is None:
        raise ValidationError(f"Finite program {program.id} has no total_workouts")
    return (program.current_position or 0) >= program.total_workouts


def mark_complete(program: ProgramAggregate, now: datetime | None = None) -> ProgramAggregate:
    program.completed_at = now or datetime.now(timezone.utc)
    program.is_active = False
    logger.info("Program %s completed", program.id)
    return program


def decrement(
    program: ProgramAggregate,
    programs: Iterable[ProgramAggregate] = (),
) -> ProgramAggregate:
    """Undo one workout of progress (a completed workout was deleted).

    A completed program is reopened, and reactivated only when no other
    program is active.
    """
    program.current_position = max(0, (program.current_position or 0) - 1)
    if program.completed_at is not None:
        program.completed_at = None
        other_active = any(p.is_active for p in programs if p.id != program.id)
        if not other_active:
            program.is_active = True
    return program


def set_active(
    program: ProgramAggregate,
    programs: Iterable[ProgramAggregate] = (),
) -> ProgramAggregate:
    """Make program the only active one and restart it from the first routine.

    A completed program stays completed; it cannot be activated again.
    """
    if program.completed_at is not None:
        raise StateError(f"Program {program.id} is already completed")
    for other in programs:
        if other.id != program.id:
            other.is_active = False
    program.current_position = 0
    program.is_active = True
    return program


def remaining_workouts(program: ProgramAggregate) -> int | None:
    """Workouts left in a finite program; None for continuous ones."""
    if program.type == ProgramType.CONTINUOUS or program.total_workouts is None:
        return None
    return max(0, program.total_workouts - (program.current_position or 0))


def progress_fraction(program: ProgramAggregate) -> float:
    """Progress through a finite program (0-1), or through the current cycle."""
    if program.type == ProgramType.FINITE and program.total_workouts:
        return min(1.0, (program.current_position or 0) / program.total_workouts)
    count = len(program.ordered_routine_ids)
    if count == 0:
        return 0.0
    return ((program.current_position or 0) % count) / count
