"""Per-request state tracking from validation to a terminal outcome."""

from __future__ import annotations

import logging
import uuid
from contextlib import contextmanager
from enum import Enum
from typing import Iterator


logger = logging.getLogger(__name__)


class RequestState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    REJECTED = "rejected"
    DISPATCHING = "dispatching"
    EXTRACTING = "extracting"
    FAILED = "failed"
    READY = "ready"


_TRANSITIONS: dict[RequestState, frozenset[RequestState]] = {
    RequestState.IDLE: frozenset({RequestState.VALIDATING}),
    RequestState.VALIDATING: frozenset({RequestState.REJECTED, RequestState.DISPATCHING}),
    RequestState.DISPATCHING: frozenset({RequestState.FAILED, RequestState.EXTRACTING}),
    RequestState.EXTRACTING: frozenset({RequestState.FAILED, RequestState.READY}),
    RequestState.REJECTED: frozenset(),
    RequestState.FAILED: frozenset(),
    RequestState.READY: frozenset(),
}

TERMINAL_STATES = frozenset(
    state for state, targets in _TRANSITIONS.items() if not targets
)


class LifecycleError(RuntimeError):
    """Raised on a transition the state machine does not allow."""


class RequestLifecycle:
    """Track one request through its states. Never reused across requests."""

    def __init__(self, operation: str, *, request_id: str | None = None) -> None:
        self.operation = operation
        self.request_id = request_id or uuid.uuid4().hex[:12]
        self._state = RequestState.IDLE
        self.history: list[RequestState] = [RequestState.IDLE]

    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def is_terminal(self) -> bool:
        return self._state in TERMINAL_STATES

    def advance(self, target: RequestState) -> None:
        if target not in _TRANSITIONS[self._state]:
            raise LifecycleError(
                f"{self.operation} cannot move from {self._state.value} to {target.value}"
            )
        logger.debug(
            "%s[%s] %s -> %s",
            self.operation,
            self.request_id,
            self._state.value,
            target.value,
        )
        self._state = target
        self.history.append(target)

    @contextmanager
    def phase(self, state: RequestState, *, on_error: RequestState) -> Iterator[None]:
        """Enter ``state``; move to ``on_error`` if the block raises."""
        self.advance(state)
        try:
            yield
        except Exception:
            self.advance(on_error)
            raise


__all__ = [
    "LifecycleError",
    "RequestLifecycle",
    "RequestState",
    "TERMINAL_STATES",
]
