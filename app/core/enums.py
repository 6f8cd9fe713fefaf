"""Shared enums for models and API."""

from enum import Enum


class WeightType(str, Enum):
    """How a routine set expresses its weight."""

    PERCENTAGE = "percentage"  # % of the exercise max
    FIXED = "fixed"  # Absolute weight
    BAR = "bar"  # Empty bar only


class ProgramType(str, Enum):
    """How a program cycles through its routines."""

    CONTINUOUS = "continuous"  # Cycles forever
    FINITE = "finite"  # Ends after total_workouts


class SessionState(str, Enum):
    """Lifecycle of a live workout session."""

    IDLE = "idle"
    ACTIVE = "active"
    FINISHED = "finished"
    CANCELLED = "cancelled"
