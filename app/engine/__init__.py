"""Training engine: weight resolution, plates, progression, rotation, goals, sessions."""

from app.engine.goals import check_and_update_streak, goal_progress
from app.engine.plates import PlateEntry, PlateSolution, solve_plates
from app.engine.progression import evaluate_progression
from app.engine.session import SessionStateMachine
from app.engine.weights import resolve_weight

__all__ = [
    "PlateEntry",
    "PlateSolution",
    "SessionStateMachine",
    "check_and_update_streak",
    "evaluate_progression",
    "goal_progress",
    "resolve_weight",
    "solve_plates",
]
