"""Application constants."""

# Session limits (routine builder)
MAX_EXERCISES_PER_ROUTINE = 20
MAX_SETS_PER_EXERCISE = 10

# Standard Olympic plates (lbs), two of each by default
DEFAULT_PLATE_WEIGHTS = (45.0, 35.0, 25.0, 10.0, 5.0, 2.5)
DEFAULT_PLATE_COUNT = 2

# Warm-up ladder: 0 means the empty bar
WARMUP_PERCENTAGES = (0, 60, 70, 80, 90, 100)

# Float tolerance when comparing remaining weight against a plate
PLATE_TOLERANCE = 1e-9

DAYS_PER_WEEK = 7
