"""Shared fixtures: in-memory database, API client and engine building blocks."""

import uuid

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app import models  # noqa: F401 - register all models on Base.metadata
from app.db.base import Base
from app.db.session import enable_sqlite_foreign_keys, get_db
from app.engine.types import ExerciseConfig, PercentageSet, RoutineExerciseTemplate, RoutineTemplate
from app.main import app
from app.services.session_registry import SessionRegistry


@pytest.fixture
async def db_engine():
    """Fresh in-memory SQLite database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db(session_maker):
    """Session for service-level tests (not shared with API requests)."""
    async with session_maker() as session:
        yield session


@pytest.fixture
async def client(session_maker):
    """API client against the in-memory database, with a fresh session registry."""

    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    # ASGITransport does not run the lifespan
    app.state.session_registry = SessionRegistry(rest_timer_interval=60, default_rest_time=90)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.state.session_registry.shutdown()
    app.dependency_overrides.clear()


@pytest.fixture
def squat() -> ExerciseConfig:
    """Squat with a 100 lb max on a 45 lb bar, 5 lb steps."""
    return ExerciseConfig(
        exercise_id=uuid.uuid4(),
        name="Squat",
        max_weight=100.0,
        weight_increment=5.0,
        barbell_weight=45.0,
        default_rest_time=120,
    )


@pytest.fixture
def squat_routine(squat: ExerciseConfig) -> RoutineTemplate:
    """60/70/80% x 5 with 90 s rest."""
    return RoutineTemplate(
        routine_id=uuid.uuid4(),
        name="Squat Day",
        exercises=[
            RoutineExerciseTemplate(
                exercise_id=squat.exercise_id,
                sets=[PercentageSet(value=pct, reps=5, rest_time=90) for pct in (60, 70, 80)],
            )
        ],
    )


@pytest.fixture
def create_exercise(client):
    """POST an exercise (with its own barbell unless bar_weight is 0)."""

    async def _create(name="Squat", max_weight=100.0, increment=5.0, bar_weight=45.0, **extra):
        barbell_id = None
        if bar_weight:
            r = await client.post("/api/v1/barbells", json={"name": f"{name} bar", "weight": bar_weight})
            assert r.status_code == 201, r.text
            barbell_id = r.json()["id"]
        r = await client.post(
            "/api/v1/exercises",
            json={
                "name": name,
                "max_weight": max_weight,
                "weight_increment": increment,
                "barbell_id": barbell_id,
                **extra,
            },
        )
        assert r.status_code == 201, r.text
        return r.json()

    return _create


@pytest.fixture
def create_routine(client):
    """POST a single-exercise routine of percentage sets."""

    async def _create(name, exercise_id, percentages=(60, 70, 80), reps=5, rest_time=90):
        r = await client.post(
            "/api/v1/routines",
            json={
                "name": name,
                "exercises": [
                    {
                        "exercise_id": exercise_id,
                        "sets": [
                            {"weight_type": "percentage", "weight_value": p, "reps": reps, "rest_time": rest_time}
                            for p in percentages
                        ],
                    }
                ],
            },
        )
        assert r.status_code == 201, r.text
        return r.json()

    return _create
