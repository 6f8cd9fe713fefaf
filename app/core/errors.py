"""Error taxonomy shared by the training engine, services and API."""


class EngineError(Exception):
    """Base exception for training engine errors."""

    pass


class ValidationError(EngineError):
    """Raised for malformed input (non-positive increment, bad set spec, bad index)."""

    pass


class NotFoundError(EngineError):
    """Raised when a routine, exercise, program or goal does not exist."""

    pass


class StateError(EngineError):
    """Raised on an invalid transition (inactive session, empty rotation, double finish)."""

    pass


class PersistenceError(EngineError):
    """Raised when a storage call fails.

    Attributes:
        original_error: Exception raised by the storage layer
    """

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        self.original_error = original_error
        super().__init__(message)
