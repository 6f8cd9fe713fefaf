"""Holder for the single live workout session of this process."""

from __future__ import annotations

import logging

from app.core.errors import NotFoundError, StateError
from app.engine.rest_timer import RestTimer
from app.engine.session import DEFAULT_REST_SECONDS, SessionStateMachine

logger = logging.getLogger(__name__)


class SessionRegistry:
    """One session at a time; finished or cancelled machines are replaced on the next start."""

    def __init__(
        self,
        rest_timer_interval: float = 1.0,
        default_rest_time: int = DEFAULT_REST_SECONDS,
    ) -> None:
        self.rest_timer_interval = rest_timer_interval
        self.default_rest_time = default_rest_time
        self._machine: SessionStateMachine | None = None

    @property
    def machine(self) -> SessionStateMachine | None:
        return self._machine

    def new_machine(self) -> SessionStateMachine:
        if self._machine is not None and self._machine.is_active:
            raise StateError("A workout session is already active")
        self._machine = SessionStateMachine(
            rest_timer=RestTimer(interval=self.rest_timer_interval),
            default_rest_time=self.default_rest_time,
        )
        return self._machine

    def current(self) -> SessionStateMachine:
        if self._machine is None:
            raise NotFoundError("No workout session")
        return self._machine

    def discard(self, machine: SessionStateMachine) -> None:
        """Forget a machine that never got past IDLE."""
        if self._machine is machine and machine.session is None:
            self._machine = None

    def shutdown(self) -> None:
        if self._machine is not None:
            self._machine.rest_timer.cancel()
            if self._machine.is_active:
                logger.warning("Shutting down with an unfinished workout session")
        self._machine = None
