"""Live workout session state machine.

IDLE -> ACTIVE -> FINISHED, or ACTIVE -> CANCELLED. While ACTIVE a rest timer
may be running. Target weights are resolved once at start(); progression and
program rotation run once at complete_workout(). The caller owns persistence:
it stores the finished session, the new maxes and the program position.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone

from app.core.enums import SessionState
from app.core.errors import NotFoundError, StateError, ValidationError
from app.engine import rotation
from app.engine.progression import evaluate_progression
from app.engine.rest_timer import RestTimer
from app.engine.types import (
    AutoProgressionResult,
    CompletedSet,
    EntityId,
    ExerciseConfig,
    ProgramAggregate,
    RoutineTemplate,
    SessionExercise,
    SessionSet,
    WorkoutSession,
)
from app.engine.weights import resolve_weight

logger = logging.getLogger(__name__)

DEFAULT_REST_SECONDS = 90


class SessionStateMachine:
    """One workout session from start to finish (or cancel)."""

    def __init__(
        self,
        rest_timer: RestTimer | None = None,
        default_rest_time: int = DEFAULT_REST_SECONDS,
    ) -> None:
        self.state = SessionState.IDLE
        self.session: WorkoutSession | None = None
        self.rest_timer = rest_timer or RestTimer()
        self.default_rest_time = default_rest_time
        self.current_exercise_index = 0
        self.current_set_index = 0
        self.progression_results: list[AutoProgressionResult] = []
        self._configs: dict[EntityId, ExerciseConfig] = {}

    @property
    def is_active(self) -> bool:
        return self.state == SessionState.ACTIVE

    def _require_active(self, action: str) -> WorkoutSession:
        if self.state != SessionState.ACTIVE or self.session is None:
            raise StateError(f"Cannot {action}: session is {self.state.value}")
        return self.session

    def _get_set(self, exercise_idx: int, set_idx: int) -> SessionSet:
        session = self._require_active("update a set")
        if not 0 <= exercise_idx < len(session.exercises):
            raise NotFoundError(f"No exercise at index {exercise_idx}")
        sets = session.exercises[exercise_idx].sets
        if not 0 <= set_idx < len(sets):
            raise NotFoundError(f"No set at index {set_idx} for exercise {exercise_idx}")
        return sets[set_idx]

    # ---- Lifecycle ----

    def start(
        self,
        routine: RoutineTemplate,
        exercise_configs: Mapping[EntityId, ExerciseConfig] | Iterable[ExerciseConfig],
        barbell_weights: Mapping[EntityId, float] | None = None,
        program_id: EntityId | None = None,
        started_at: datetime | None = None,
    ) -> WorkoutSession:
        """Materialize the routine into a concrete session.

        Every target weight is resolved before anything is exposed, so a
        failure leaves the machine IDLE with no partial session.
        """
        if self.state != SessionState.IDLE:
            raise StateError(f"Cannot start: session is {self.state.value}")
        if not routine.exercises:
            raise NotFoundError(f"Routine {routine.routine_id} has no exercises")

        if not isinstance(exercise_configs, Mapping):
            exercise_configs = {c.exercise_id: c for c in exercise_configs}
        barbell_weights = barbell_weights or {}

        configs: dict[EntityId, ExerciseConfig] = {}
        exercises: list[SessionExercise] = []
        for routine_exercise in routine.exercises:
            config = exercise_configs.get(routine_exercise.exercise_id)
            if config is None:
                raise NotFoundError(f"Exercise {routine_exercise.exercise_id} not found")
            if routine_exercise.exercise_id in barbell_weights:
                config = config.model_copy(
                    update={"barbell_weight": barbell_weights[routine_exercise.exercise_id]}
                )
            configs[config.exercise_id] = config

            sets = []
            for spec in routine_exercise.sets:
                resolved = resolve_weight(spec, config)
                rest_time = spec.rest_time
                if rest_time is None:
                    rest_time = config.default_rest_time
                if rest_time is None:
                    rest_time = self.default_rest_time
                sets.append(
                    SessionSet(
                        target_weight=resolved.target_weight,
                        target_reps=spec.reps,
                        percentage_of_max=resolved.percentage_of_max,
                        rest_time=rest_time,
                    )
                )
            exercises.append(
                SessionExercise(exercise_id=config.exercise_id, name=config.name, sets=sets)
            )

        self.session = WorkoutSession(
            routine_id=routine.routine_id,
            routine_name=routine.name,
            program_id=program_id,
            started_at=started_at or datetime.now(timezone.utc),
            exercises=exercises,
        )
        self._configs = configs
        self.current_exercise_index = 0
        self.current_set_index = 0
        self.progression_results = []
        self.state = SessionState.ACTIVE
        logger.info(
            "Session started for routine %s (%s exercises)", routine.routine_id, len(exercises)
        )
        return self.session

    def complete_set(
        self,
        exercise_idx: int,
        set_idx: int,
        actual_weight: float,
        actual_reps: int,
    ) -> SessionSet:
        """Log a set as done and start its rest countdown."""
        session_set = self._get_set(exercise_idx, set_idx)
        session_set.actual_weight = actual_weight
        session_set.actual_reps = actual_reps
        session_set.completed = True
        if session_set.rest_time > 0:
            self.rest_timer.start(session_set.rest_time)
        return session_set

    def update_set(
        self,
        exercise_idx: int,
        set_idx: int,
        actual_weight: float | None = None,
        actual_reps: int | None = None,
        notes: str | None = None,
    ) -> SessionSet:
        """Correct a set's logged values without touching completion or the timer."""
        session_set = self._get_set(exercise_idx, set_idx)
        if actual_weight is not None:
            session_set.actual_weight = actual_weight
        if actual_reps is not None:
            session_set.actual_reps = actual_reps
        if notes is not None:
            session_set.notes = notes
        return session_set

    def skip_rest_timer(self) -> None:
        self.rest_timer.cancel()

    def set_current_exercise(self, index: int) -> None:
        session = self._require_active("navigate")
        if not 0 <= index < len(session.exercises):
            raise ValidationError(
                f"Exercise index {index} out of range (0-{len(session.exercises) - 1})"
            )
        self.current_exercise_index = index
        self.current_set_index = 0

    def set_current_set(self, index: int) -> None:
        session = self._require_active("navigate")
        sets = session.exercises[self.current_exercise_index].sets
        if not 0 <= index < len(sets):
            raise ValidationError(f"Set index {index} out of range")
        self.current_set_index = index

    def complete_workout(
        self,
        program: ProgramAggregate | None = None,
        completed_at: datetime | None = None,
    ) -> list[AutoProgressionResult]:
        """Seal the session: evaluate progression and rotate the linked program."""
        session = self._require_active("complete workout")

        if session.program_id is not None:
            if program is None or program.id != session.program_id:
                raise NotFoundError(f"Program {session.program_id} not found")

        results: list[AutoProgressionResult] = []
        for exercise in session.exercises:
            config = self._configs[exercise.exercise_id]
            decision = evaluate_progression(
                config,
                [
                    CompletedSet(
                        percentage_of_max=s.percentage_of_max,
                        target_reps=s.target_reps,
                        actual_reps=s.actual_reps,
                        actual_weight=s.actual_weight,
                        completed=s.completed,
                    )
                    for s in exercise.sets
                ],
            )
            if decision.should_progress:
                results.append(
                    AutoProgressionResult(
                        exercise_id=exercise.exercise_id,
                        exercise_name=config.name,
                        previous_max=config.max_weight,
                        new_max=decision.new_max_weight,
                    )
                )

        if program is not None and session.program_id is not None:
            if rotation.is_complete(program):
                rotation.mark_complete(program)
            else:
                rotation.advance(program)

        self.rest_timer.cancel()
        session.completed_at = completed_at or datetime.now(timezone.utc)
        self.progression_results = results
        self.state = SessionState.FINISHED
        logger.info(
            "Session for routine %s finished, %s exercise(s) progressed",
            session.routine_id,
            len(results),
        )
        return results

    def reopen(self) -> WorkoutSession:
        """Put a FINISHED session back to ACTIVE when its results could not be stored.

        Logged sets are kept; the rest timer stays stopped. Program changes made
        by complete_workout() are the caller's to roll back.
        """
        if self.state != SessionState.FINISHED or self.session is None:
            raise StateError(f"Cannot reopen: session is {self.state.value}")
        self.session.completed_at = None
        self.progression_results = []
        self.state = SessionState.ACTIVE
        logger.warning("Session for routine %s reopened after a failed save", self.session.routine_id)
        return self.session

    def cancel_workout(self) -> None:
        """Discard the session: no progression, no program change."""
        session = self._require_active("cancel workout")
        self.rest_timer.cancel()
        self.session = None
        self._configs = {}
        self.state = SessionState.CANCELLED
        logger.info("Session for routine %s cancelled", session.routine_id)
