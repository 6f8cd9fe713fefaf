"""Auto-progression: decide whether a session earns a higher max.

An exercise progresses when every one of its sets was completed with at least
the target reps. One missed rep or skipped set holds the max for this session.
The decision is pure; applying the new max exactly once is the caller's job.
"""

from __future__ import annotations

from collections.abc import Sequence

from app.engine.types import CompletedSet, ExerciseConfig, ProgressionDecision


def is_set_successful(completed_set: CompletedSet) -> bool:
    """Completed with target reps or more."""
    return (
        completed_set.completed
        and completed_set.actual_reps is not None
        and completed_set.actual_reps >= completed_set.target_reps
    )


def evaluate_progression(
    exercise: ExerciseConfig,
    sets: Sequence[CompletedSet],
) -> ProgressionDecision:
    """Return the progression decision for one exercise's sets in one session."""
    hold = dict(should_progress=False, new_max_weight=exercise.max_weight, increment=0.0)

    if not exercise.auto_progression_enabled:
        return ProgressionDecision(**hold, reason="Auto-progression disabled for this exercise")
    if not sets:
        return ProgressionDecision(**hold, reason="No sets logged")
    if not all(s.completed for s in sets):
        return ProgressionDecision(**hold, reason="Not all sets were completed")
    if not all(is_set_successful(s) for s in sets):
        return ProgressionDecision(**hold, reason="Not all sets achieved target reps")

    return ProgressionDecision(
        should_progress=True,
        new_max_weight=exercise.max_weight + exercise.weight_increment,
        increment=exercise.weight_increment,
        reason="All sets completed with target reps",
    )


def completion_rate(sets: Sequence[CompletedSet]) -> float:
    """Percentage of sets (0-100) completed with target reps."""
    if not sets:
        return 0.0
    return sum(1 for s in sets if is_set_successful(s)) / len(sets) * 100


def session_volume(sets: Sequence[CompletedSet]) -> float:
    """Total volume (actual weight x actual reps) over completed sets."""
    return sum(
        (
            s.actual_weight * s.actual_reps
            for s in sets
            if s.completed and s.actual_weight is not None and s.actual_reps is not None
        ),
        0.0,
    )
