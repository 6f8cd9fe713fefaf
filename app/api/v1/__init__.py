"""API v1 router aggregation."""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    barbells,
    body,
    exercises,
    goals,
    health,
    plates,
    programs,
    routines,
    sessions,
    workouts,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(exercises.router, prefix="/exercises", tags=["exercises"])
api_router.include_router(barbells.router, prefix="/barbells", tags=["barbells"])
api_router.include_router(plates.router, prefix="/plates", tags=["plates"])
api_router.include_router(routines.router, prefix="/routines", tags=["routines"])
api_router.include_router(programs.router, prefix="/programs", tags=["programs"])
api_router.include_router(goals.router, prefix="/goals", tags=["goals"])
api_router.include_router(sessions.router, prefix="/sessions", tags=["sessions"])
api_router.include_router(workouts.router, prefix="/workouts", tags=["workouts"])
api_router.include_router(body.router, prefix="/body", tags=["body"])
