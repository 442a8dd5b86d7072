"""Interaction state machine for one operator session.

The session owns the current inputs and exactly one lifecycle phase:

    Idle ──submit──▶ Submitting ──success──▶ Resolved ──try_another──▶ Idle
                          │
                          └──failure──▶ Failed ──submit──▶ Submitting

Each outstanding request is bound to a token carried by the ``Submitting``
phase. A response is applied only while the phase still holds the same token,
so a late response after a reset or cancel is dropped instead
of reviving a stale view.
"""

from __future__ import annotations

import itertools
import logging
import threading
from concurrent.futures import Executor, Future
from dataclasses import dataclass, replace
from typing import Optional, Union

from .errors import REQUEST_FAILED_MESSAGE, ClassifierError, RequestError, ValidationError
from .models import ClassificationRequest, ClassificationResult, InputPair

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Phases
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Idle:
    """Inputs editable. May carry a validation message from a rejected submit."""

    error_message: Optional[str] = None


@dataclass(frozen=True)
class Submitting:
    token: int


@dataclass(frozen=True)
class Resolved:
    result: ClassificationResult


@dataclass(frozen=True)
class Failed:
    """Inputs editable; the error stays until the next submit or reset."""

    error_message: str = REQUEST_FAILED_MESSAGE


Phase = Union[Idle, Submitting, Resolved, Failed]


@dataclass(frozen=True)
class SessionState:
    inputs: InputPair = InputPair()
    phase: Phase = Idle()

    @property
    def result(self) -> Optional[ClassificationResult]:
        return self.phase.result if isinstance(self.phase, Resolved) else None

    @property
    def error_message(self) -> Optional[str]:
        if isinstance(self.phase, (Idle, Failed)):
            return self.phase.error_message
        return None

    @property
    def is_submitting(self) -> bool:
        return isinstance(self.phase, Submitting)

    @property
    def is_editable(self) -> bool:
        return isinstance(self.phase, (Idle, Failed))

    @property
    def phase_name(self) -> str:
        return type(self.phase).__name__


@dataclass(frozen=True)
class PendingRequest:
    """Handle for the single outstanding request."""

    token: int
    request: ClassificationRequest


# ---------------------------------------------------------------------------
# Machine
# ---------------------------------------------------------------------------


class ClassificationSession:
    """Owns the SessionState and performs every legal transition."""

    def __init__(self):
        self._state = SessionState()
        self._tokens = itertools.count(1)
        # Responses from ``submit_async`` land on executor threads.
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def inputs(self) -> InputPair:
        return self._state.inputs

    @property
    def result(self) -> Optional[ClassificationResult]:
        return self._state.result

    @property
    def error_message(self) -> Optional[str]:
        return self._state.error_message

    @property
    def is_submitting(self) -> bool:
        return self._state.is_submitting

    @property
    def shows_result(self) -> bool:
        return isinstance(self._state.phase, Resolved)

    @property
    def can_submit(self) -> bool:
        """Whether the submit control should be enabled."""
        return self._state.is_editable and self._state.inputs.is_complete

    def _set(self, state: SessionState) -> None:
        if state.phase_name != self._state.phase_name:
            logger.debug("Session %s -> %s", self._state.phase_name, state.phase_name)
        self._state = state

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def edit_query(self, text: str) -> None:
        with self._lock:
            self._set(replace(self._state, inputs=self._state.inputs.with_query(text)))

    def edit_description(self, text: str) -> None:
        with self._lock:
            self._set(
                replace(self._state, inputs=self._state.inputs.with_description(text))
            )

    def load_example(self, query: str, description: str) -> bool:
        """Replace both inputs and return to a clean Idle.

        Ignored while a request is outstanding; returns whether it applied.
        """
        with self._lock:
            if self._state.is_submitting:
                logger.debug("Example load ignored while submitting")
                return False
            self._set(SessionState(inputs=InputPair(query, description), phase=Idle()))
            return True

    def try_another(self) -> None:
        """Reset to empty inputs with no result or error, from any phase."""
        with self._lock:
            self._set(SessionState())

    def cancel(self) -> bool:
        """Abandon the outstanding request, keeping the inputs."""
        with self._lock:
            if not self._state.is_submitting:
                return False
            self._set(replace(self._state, phase=Idle()))
            return True

    # ------------------------------------------------------------------
    # Request lifecycle
    # ------------------------------------------------------------------

    def begin_submit(self) -> Optional[PendingRequest]:
        """Validate the inputs and move to Submitting.

        Returns ``None`` without any change when submission is disabled
        (a request is outstanding or a result is displayed). Raises
        ValidationError, after recording its message on the current phase,
        when either trimmed input is empty.
        """
        with self._lock:
            phase = self._state.phase
            if not isinstance(phase, (Idle, Failed)):
                logger.debug("Submit ignored in phase %s", self._state.phase_name)
                return None

            try:
                request = ClassificationRequest.from_inputs(self._state.inputs)
            except ValidationError as exc:
                if isinstance(phase, Failed):
                    self._set(replace(self._state, phase=Failed(exc.message)))
                else:
                    self._set(replace(self._state, phase=Idle(exc.message)))
                raise

            token = next(self._tokens)
            self._set(replace(self._state, phase=Submitting(token)))
            return PendingRequest(token=token, request=request)

    def _owns(self, token: int) -> bool:
        phase = self._state.phase
        return isinstance(phase, Submitting) and phase.token == token

    def complete(self, token: int, result: ClassificationResult) -> bool:
        """Apply a successful response; stale tokens are dropped."""
        with self._lock:
            if not self._owns(token):
                logger.info("Discarding stale classification response (token %s)", token)
                return False
            self._set(replace(self._state, phase=Resolved(result)))
            return True

    def fail(self, token: int, error: Optional[BaseException] = None) -> bool:
        """Apply a failed response; the message is always the generic one."""
        with self._lock:
            if not self._owns(token):
                logger.info("Discarding stale classification failure (token %s)", token)
                return False
            if error is not None:
                logger.warning("Classification request failed: %s", error)
            self._set(replace(self._state, phase=Failed(REQUEST_FAILED_MESSAGE)))
            return True

    def submit(self, client) -> SessionState:
        """Run one classification synchronously and return the new state.

        Validation and request errors end up on the state; nothing is raised
        for them.
        """
        try:
            pending = self.begin_submit()
        except ValidationError:
            return self._state
        if pending is None:
            return self._state

        try:
            result = client.classify(pending.request)
        except ClassifierError as exc:
            self.fail(pending.token, exc)
        except Exception as exc:  # client bug or unexpected library error
            logger.exception("Unexpected error from classifier client")
            self.fail(pending.token, RequestError(str(exc)))
        else:
            self.complete(pending.token, result)
        return self._state

    def submit_async(self, client, executor: Executor) -> Optional["Future[ClassificationResult]"]:
        """Dispatch the request to *executor* and apply it on completion.

        Returns the future, or ``None`` when nothing was dispatched (disabled
        or invalid inputs; the latter records the validation message).
        If the executor refuses the work the session moves to Failed and the
        executor's exception is re-raised.
        """
        try:
            pending = self.begin_submit()
        except ValidationError:
            return None
        if pending is None:
            return None

        try:
            future = executor.submit(client.classify, pending.request)
        except Exception as exc:
            # nothing was dispatched
            self.fail(pending.token, exc)
            raise

        def _apply(done: "Future[ClassificationResult]") -> None:
            if done.cancelled():
                self.fail(pending.token, RequestError("request cancelled"))
                return
            exc = done.exception()
            if exc is not None:
                self.fail(pending.token, exc)
            else:
                self.complete(pending.token, done.result())

        future.add_done_callback(_apply)
        return future
