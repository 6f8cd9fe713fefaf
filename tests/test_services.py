"""Service-level tests against the in-memory database."""

import uuid

import pytest
from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import create_async_engine

from app.core.enums import SessionState
from app.core.errors import NotFoundError, PersistenceError, StateError
from app.db.session import enable_sqlite_foreign_keys, set_sqlite_pragma, settings
from app.db.session import engine as app_engine
from app.models.goal import Goal
from app.models.routine import Routine, RoutineExercise
from app.services import goal_service, plate_service, routine_service
from app.services.session_registry import SessionRegistry


async def test_seed_inventory_only_when_empty(db):
    seeded = await plate_service.seed_default_inventory(db)
    assert len(seeded) == 6
    await plate_service.set_plate_count(db, 45, 6)
    again = await plate_service.seed_default_inventory(db)
    assert len(again) == 6
    assert again[0].weight == 45 and again[0].count == 6


async def test_storage_failure_is_a_persistence_error(db):
    with pytest.raises(PersistenceError) as exc_info:
        await plate_service.set_plate_count(db, 45, -1)
    assert exc_info.value.original_error is not None
    await db.rollback()


async def test_goal_state_round_trip(db):
    goal = Goal(workouts_per_week=3, scheduled_days=[1, 3, 5], current_streak=2, is_active=True)
    state = goal_service.to_goal_state(goal)
    assert state.scheduled_days == frozenset({1, 3, 5})
    state.current_streak = 3
    goal_service.apply_goal_state(goal, state)
    assert goal.current_streak == 3


async def test_missing_goal(db):
    assert await goal_service.get_active_goal(db) is None
    with pytest.raises(NotFoundError):
        await goal_service.require_active_goal(db)


def test_registry_holds_one_active_session(squat, squat_routine):
    registry = SessionRegistry()
    with pytest.raises(NotFoundError):
        registry.current()

    machine = registry.new_machine()
    machine.start(squat_routine, [squat])
    assert registry.current() is machine
    with pytest.raises(StateError):
        registry.new_machine()

    machine.cancel_workout()
    replacement = registry.new_machine()
    assert replacement is not machine
    assert replacement.state == SessionState.IDLE


def test_registry_discards_machine_that_never_started():
    registry = SessionRegistry()
    machine = registry.new_machine()
    registry.discard(machine)
    assert registry.machine is None


def test_registry_shutdown_stops_timer(squat, squat_routine):
    registry = SessionRegistry()
    machine = registry.new_machine()
    machine.start(squat_routine, [squat])
    machine.complete_set(0, 0, 60.0, 5)
    registry.shutdown()
    assert not machine.rest_timer.is_running
    assert registry.machine is None


def test_routine_row_without_its_exercise_is_not_found():
    orphan = RoutineExercise(exercise_id=uuid.uuid4(), order_index=0, sets=[])
    routine = Routine(id=uuid.uuid4(), name="Orphaned", exercises=[orphan])
    with pytest.raises(NotFoundError, match=str(orphan.exercise_id)):
        routine_service.exercise_configs_for(routine)


async def test_sqlite_connections_enforce_foreign_keys():
    engine = create_async_engine("sqlite+aiosqlite://")
    enable_sqlite_foreign_keys(engine)
    async with engine.connect() as conn:
        assert (await conn.execute(text("PRAGMA foreign_keys"))).scalar() == 1
    await engine.dispose()


def test_app_engine_enforces_foreign_keys_on_sqlite():
    if settings.is_sqlite:
        assert event.contains(app_engine.sync_engine, "connect", set_sqlite_pragma)
