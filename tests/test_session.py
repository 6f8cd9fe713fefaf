"""Tests for the live session state machine."""

import uuid

import pytest

from app.core.enums import ProgramType, SessionState
from app.core.errors import NotFoundError, StateError, ValidationError
from app.engine.session import SessionStateMachine
from app.engine.types import (
    BarOnlySet,
    FixedSet,
    ProgramState,
    RoutineExerciseTemplate,
    RoutineTemplate,
)


@pytest.fixture
def machine() -> SessionStateMachine:
    return SessionStateMachine(default_rest_time=75)


def _complete_all(machine: SessionStateMachine, reps: int = 5) -> None:
    for e, exercise in enumerate(machine.session.exercises):
        for s, session_set in enumerate(exercise.sets):
            machine.complete_set(e, s, session_set.target_weight, reps)


def test_start_resolves_targets(machine, squat, squat_routine):
    session = machine.start(squat_routine, [squat])
    assert machine.state == SessionState.ACTIVE
    weights = [s.target_weight for s in session.exercises[0].sets]
    # 60/70/80% of 100 on a 45 lb bar
    assert weights == [60.0, 70.0, 80.0]
    assert [s.percentage_of_max for s in session.exercises[0].sets] == [60, 70, 80]
    assert session.exercises[0].name == "Squat"


def test_perfect_session_progresses_once(machine, squat, squat_routine):
    machine.start(squat_routine, {squat.exercise_id: squat})
    _complete_all(machine)
    results = machine.complete_workout()
    assert len(results) == 1
    assert results[0].previous_max == 100.0
    assert results[0].new_max == 105.0
    assert machine.state == SessionState.FINISHED
    assert machine.session.completed_at is not None
    with pytest.raises(StateError):
        machine.complete_workout()


def test_reopen_after_failed_save(machine, squat, squat_routine):
    machine.start(squat_routine, [squat])
    _complete_all(machine)
    with pytest.raises(StateError):
        machine.reopen()

    machine.complete_workout()
    session = machine.reopen()
    assert machine.state == SessionState.ACTIVE
    assert session.completed_at is None
    assert machine.progression_results == []
    assert all(s.completed for s in session.exercises[0].sets)
    # Sealing again gives the same result
    assert machine.complete_workout()[0].new_max == 105.0


def test_missed_reps_do_not_progress(machine, squat, squat_routine):
    machine.start(squat_routine, [squat])
    _complete_all(machine)
    machine.update_set(0, 2, actual_reps=3)
    assert machine.complete_workout() == []


def test_second_start_is_rejected(machine, squat, squat_routine):
    machine.start(squat_routine, [squat])
    with pytest.raises(StateError, match="Cannot start"):
        machine.start(squat_routine, [squat])


def test_missing_config_leaves_machine_idle(machine, squat_routine):
    with pytest.raises(NotFoundError):
        machine.start(squat_routine, [])
    assert machine.state == SessionState.IDLE
    assert machine.session is None


def test_empty_routine_is_rejected(machine, squat):
    empty = RoutineTemplate(routine_id=uuid.uuid4(), exercises=[])
    with pytest.raises(NotFoundError, match="no exercises"):
        machine.start(empty, [squat])


def test_rest_time_falls_back_to_exercise_then_default(machine, squat):
    no_rest_default = squat.model_copy(update={"default_rest_time": None})
    routine = RoutineTemplate(
        routine_id=uuid.uuid4(),
        exercises=[
            RoutineExerciseTemplate(
                exercise_id=squat.exercise_id,
                sets=[FixedSet(value=135, reps=5), BarOnlySet(reps=10, rest_time=30)],
            )
        ],
    )
    session = machine.start(routine, [squat])
    assert [s.rest_time for s in session.exercises[0].sets] == [120, 30]
    machine.cancel_workout()

    other = SessionStateMachine(default_rest_time=75)
    session = other.start(routine, [no_rest_default])
    assert session.exercises[0].sets[0].rest_time == 75


def test_barbell_override(machine, squat, squat_routine):
    session = machine.start(squat_routine, [squat], barbell_weights={squat.exercise_id: 75.0})
    assert session.exercises[0].sets[0].target_weight == 75.0


def test_completing_set_starts_rest_timer(machine, squat, squat_routine):
    machine.start(squat_routine, [squat])
    machine.complete_set(0, 0, 60.0, 5)
    assert machine.rest_timer.is_running
    assert machine.rest_timer.remaining_seconds == 90
    machine.skip_rest_timer()
    assert not machine.rest_timer.is_running


def test_bad_set_index(machine, squat, squat_routine):
    machine.start(squat_routine, [squat])
    with pytest.raises(NotFoundError):
        machine.complete_set(0, 3, 60.0, 5)
    with pytest.raises(NotFoundError):
        machine.complete_set(1, 0, 60.0, 5)


def test_navigation(machine, squat, squat_routine):
    machine.start(squat_routine, [squat])
    machine.set_current_set(2)
    assert machine.current_set_index == 2
    machine.set_current_exercise(0)
    assert machine.current_set_index == 0
    with pytest.raises(ValidationError):
        machine.set_current_exercise(1)
    with pytest.raises(ValidationError):
        machine.set_current_set(3)


def test_operations_require_active_session(machine):
    with pytest.raises(StateError):
        machine.complete_set(0, 0, 100.0, 5)
    with pytest.raises(StateError):
        machine.cancel_workout()


def test_cancel_discards_without_progression(machine, squat, squat_routine):
    machine.start(squat_routine, [squat])
    _complete_all(machine)
    machine.cancel_workout()
    assert machine.state == SessionState.CANCELLED
    assert machine.session is None
    assert machine.progression_results == []
    assert not machine.rest_timer.is_running


def test_program_advances_on_finish(squat, squat_routine):
    program = ProgramState(
        id="prog",
        type=ProgramType.CONTINUOUS,
        ordered_routine_ids=[squat_routine.routine_id, "deadlift-day"],
        is_active=True,
    )
    machine = SessionStateMachine()
    machine.start(squat_routine, [squat], program_id="prog")
    machine.complete_workout(program)
    assert program.current_position == 1


def test_finite_program_completes_on_final_workout(squat, squat_routine):
    program = ProgramState(
        id="prog",
        type=ProgramType.FINITE,
        ordered_routine_ids=[squat_routine.routine_id],
        total_workouts=2,
        current_position=2,
        is_active=True,
    )
    machine = SessionStateMachine()
    machine.start(squat_routine, [squat], program_id="prog")
    machine.complete_workout(program)
    assert program.completed_at is not None
    assert not program.is_active
    assert program.current_position == 2


def test_linked_program_must_be_supplied(squat, squat_routine):
    machine = SessionStateMachine()
    machine.start(squat_routine, [squat], program_id="prog")
    with pytest.raises(NotFoundError):
        machine.complete_workout(None)
    assert machine.state == SessionState.ACTIVE
