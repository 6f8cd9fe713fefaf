"""Goal persistence, weekly progress and streak settlement."""

from __future__ import annotations

import logging
import uuid
from datetime import date

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFoundError
from app.engine.goals import (
    check_and_update_streak,
    goal_progress,
    is_scheduled,
    week_start,
    weekday_index,
)
from app.engine.types import GoalState
from app.models.goal import Goal
from app.schemas.goal import GoalCreate, GoalProgressRead, GoalUpdate, StreakCheckRead
from app.services.persistence import flush
from app.services.workout_service import count_workouts_in_week

logger = logging.getLogger(__name__)


def to_goal_state(goal: Goal) -> GoalState:
    return GoalState(
        id=goal.id,
        workouts_per_week=goal.workouts_per_week,
        scheduled_days=frozenset(goal.scheduled_days or []),
        current_streak=goal.current_streak,
        total_weeks=goal.total_weeks,
        is_active=goal.is_active,
        last_evaluated_week=goal.last_evaluated_week,
    )


def apply_goal_state(goal: Goal, state: GoalState) -> None:
    goal.current_streak = state.current_streak
    goal.last_evaluated_week = state.last_evaluated_week


async def get_goal(db: AsyncSession, goal_id: uuid.UUID) -> Goal:
    result = await db.execute(select(Goal).where(Goal.id == goal_id))
    goal = result.scalar_one_or_none()
    if goal is None:
        raise NotFoundError(f"Goal {goal_id} not found")
    return goal


async def get_active_goal(db: AsyncSession) -> Goal | None:
    result = await db.execute(
        select(Goal).where(Goal.is_active.is_(True)).order_by(Goal.start_date.desc()).limit(1)
    )
    return result.scalar_one_or_none()


async def require_active_goal(db: AsyncSession) -> Goal:
    goal = await get_active_goal(db)
    if goal is None:
        raise NotFoundError("No active goal")
    return goal


async def create_goal(db: AsyncSession, payload: GoalCreate) -> Goal:
    """New goals replace the active one."""
    await db.execute(update(Goal).where(Goal.is_active.is_(True)).values(is_active=False))
    goal = Goal(
        workouts_per_week=payload.workouts_per_week,
        scheduled_days=payload.scheduled_days,
        reminder_time=payload.reminder_time,
        total_weeks=payload.total_weeks,
        current_streak=0,
        is_active=True,
    )
    db.add(goal)
    await flush(db, "create goal")
    await db.refresh(goal)
    logger.info("Goal created: %s workouts/week on days %s", goal.workouts_per_week, goal.scheduled_days)
    return goal


async def update_goal(db: AsyncSession, goal_id: uuid.UUID, payload: GoalUpdate) -> Goal:
    goal = await get_goal(db, goal_id)
    for k, v in payload.model_dump(exclude_unset=True).items():
        if v is not None:
            setattr(goal, k, v)
    await flush(db, "update goal")
    await db.refresh(goal)
    return goal


async def deactivate_goal(db: AsyncSession, goal_id: uuid.UUID) -> Goal:
    goal = await get_goal(db, goal_id)
    goal.is_active = False
    await flush(db, "deactivate goal")
    return goal


async def delete_goal(db: AsyncSession, goal_id: uuid.UUID) -> None:
    goal = await get_goal(db, goal_id)
    await db.delete(goal)
    await flush(db, "delete goal")


async def goal_progress_for(db: AsyncSession, goal: Goal, today: date) -> GoalProgressRead:
    state = to_goal_state(goal)
    workouts = await count_workouts_in_week(db, week_start(today))
    day = weekday_index(today)
    progress = goal_progress(state, workouts, day)
    return GoalProgressRead(
        **progress.model_dump(),
        is_today_scheduled=is_scheduled(state, day),
    )


async def check_streak(db: AsyncSession, goal: Goal, today: date) -> StreakCheckRead:
    """Settle the current week against the goal, at most once per week."""
    state = to_goal_state(goal)
    current_week = week_start(today)
    workouts = await count_workouts_in_week(db, current_week)
    updated = check_and_update_streak(state, workouts, weekday_index(today), current_week)
    if updated:
        apply_goal_state(goal, state)
        await flush(db, "update goal streak")
    return StreakCheckRead(updated=updated, current_streak=goal.current_streak)
