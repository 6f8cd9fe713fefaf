"""ORM models - import all so Base.metadata is complete for migrations."""

from app.models.barbell import Barbell
from app.models.body_composition import BodyComposition, UserProfile
from app.models.exercise import Exercise
from app.models.goal import Goal
from app.models.plate_inventory import PlateInventoryEntry
from app.models.program import Program, ProgramRoutine
from app.models.routine import Routine, RoutineExercise, RoutineSet
from app.models.workout import Workout, WorkoutExercise, WorkoutSet

__all__ = [
    "Barbell",
    "BodyComposition",
    "Exercise",
    "Goal",
    "PlateInventoryEntry",
    "Program",
    "ProgramRoutine",
    "Routine",
    "RoutineExercise",
    "RoutineSet",
    "UserProfile",
    "Workout",
    "WorkoutExercise",
    "WorkoutSet",
]
