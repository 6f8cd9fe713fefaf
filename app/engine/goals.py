"""Weekly goal progress and streak continuity.

Weekdays are indexed 0-6 starting on Sunday and weeks start on Sunday.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta

from app.core.constants import DAYS_PER_WEEK
from app.engine.types import GoalProgress, GoalState

logger = logging.getLogger(__name__)


def weekday_index(day: date) -> int:
    """0 = Sunday ... 6 = Saturday."""
    return (day.weekday() + 1) % DAYS_PER_WEEK


def week_start(day: date) -> date:
    """Sunday that starts the week containing day."""
    return day - timedelta(days=weekday_index(day))


def is_scheduled(goal: GoalState, today: int) -> bool:
    return today in goal.scheduled_days


def goal_progress(goal: GoalState, workouts_this_week: int, today: int) -> GoalProgress:
    """Where the week stands against the goal."""
    days = sorted(goal.scheduled_days)
    scheduled_days_passed = sum(1 for d in days if d < today)
    upcoming = [d for d in days if d >= today]
    if upcoming:
        next_day = upcoming[0]
    else:
        # Wraps to the first scheduled day of next week
        next_day = days[0] if days else None

    return GoalProgress(
        workouts_this_week=workouts_this_week,
        workouts_target=goal.workouts_per_week,
        streak_weeks=goal.current_streak,
        is_on_track=workouts_this_week >= scheduled_days_passed,
        next_scheduled_day=next_day,
        scheduled_days=days,
    )


def check_and_update_streak(
    goal: GoalState,
    workouts_this_week: int,
    today: int,
    current_week: date | None = None,
) -> bool:
    """Extend or break the streak; returns True when the week was settled.

    Met goal: streak + 1. Missed with every scheduled day behind us: reset to 0.
    Otherwise the week is still open and nothing changes. When current_week is
    given, a week that already changed the streak is not evaluated again.
    """
    if current_week is not None and goal.last_evaluated_week == current_week:
        return False

    if workouts_this_week >= goal.workouts_per_week:
        goal.current_streak += 1
    elif all(d < today for d in goal.scheduled_days):
        goal.current_streak = 0
    else:
        return False

    if current_week is not None:
        goal.last_evaluated_week = current_week
    logger.info("Goal %s streak is now %s", goal.id, goal.current_streak)
    return True
