"""Tests for weekly goal progress and streaks."""

from datetime import date

import pytest
from pydantic import ValidationError as PydanticValidationError

from app.engine.goals import (
    check_and_update_streak,
    goal_progress,
    is_scheduled,
    week_start,
    weekday_index,
)
from app.engine.types import GoalState

MON, WED, THU, FRI, SAT = 1, 3, 4, 5, 6


def _goal(**kwargs) -> GoalState:
    return GoalState(
        id="g1",
        workouts_per_week=kwargs.pop("workouts_per_week", 3),
        scheduled_days=frozenset(kwargs.pop("scheduled_days", {MON, WED, FRI})),
        **kwargs,
    )


def test_weekday_index_starts_on_sunday():
    assert weekday_index(date(2026, 10, 18)) == 0  # Sunday
    assert weekday_index(date(2026, 10, 19)) == 1
    assert weekday_index(date(2026, 10, 24)) == 6  # Saturday


def test_week_start_is_sunday():
    assert week_start(date(2026, 10, 22)) == date(2026, 10, 18)
    assert week_start(date(2026, 10, 18)) == date(2026, 10, 18)


def test_on_track_after_two_of_three_by_thursday():
    progress = goal_progress(_goal(), workouts_this_week=2, today=THU)
    assert progress.is_on_track
    assert progress.next_scheduled_day == FRI
    assert progress.workouts_target == 3
    assert progress.scheduled_days == [MON, WED, FRI]


def test_behind_when_scheduled_days_passed_without_workouts():
    progress = goal_progress(_goal(), workouts_this_week=1, today=THU)
    assert not progress.is_on_track


def test_next_scheduled_day_wraps_to_next_week():
    progress = goal_progress(_goal(), workouts_this_week=3, today=SAT)
    assert progress.next_scheduled_day == MON


def test_today_counts_as_upcoming():
    progress = goal_progress(_goal(), workouts_this_week=0, today=MON)
    assert progress.next_scheduled_day == MON
    assert progress.is_on_track
    assert is_scheduled(_goal(), MON)
    assert not is_scheduled(_goal(), THU)


def test_streak_extends_when_goal_met():
    goal = _goal(current_streak=2)
    assert check_and_update_streak(goal, workouts_this_week=3, today=FRI)
    assert goal.current_streak == 3


def test_streak_resets_when_week_is_lost():
    goal = _goal(current_streak=4)
    assert check_and_update_streak(goal, workouts_this_week=1, today=SAT)
    assert goal.current_streak == 0


def test_open_week_leaves_streak_alone():
    goal = _goal(current_streak=4)
    assert not check_and_update_streak(goal, workouts_this_week=1, today=WED)
    assert goal.current_streak == 4


def test_week_is_settled_only_once():
    week = date(2026, 10, 18)
    goal = _goal(current_streak=1)
    assert check_and_update_streak(goal, 3, FRI, current_week=week)
    assert not check_and_update_streak(goal, 3, SAT, current_week=week)
    assert goal.current_streak == 2
    assert goal.last_evaluated_week == week

    next_week = date(2026, 10, 25)
    assert check_and_update_streak(goal, 3, FRI, current_week=next_week)
    assert goal.current_streak == 3


def test_goal_needs_valid_scheduled_days():
    with pytest.raises(PydanticValidationError):
        _goal(scheduled_days=set())
    with pytest.raises(PydanticValidationError, match="0-6"):
        _goal(scheduled_days={MON, 7})
