from __future__ import annotations

import logging
import threading
import time
import uuid
from dataclasses import replace
from typing import Callable

from app.application.exceptions import (
    IncompleteSelectionError,
    SessionNotFoundError,
    SubmissionInFlightError,
)
from app.application.ports.form_store import FormStorePort
from app.domain.entities.classification_result import ClassificationResult
from app.domain.entities.form_state import FormState
from app.domain.entities.notification import Notification


class MemoryFormStore(FormStorePort):
    def __init__(
        self,
        session_ttl_seconds: float | None = None,
        notification_limit: int = 10,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._states: dict[str, FormState] = {}
        self._notifications: dict[str, list[Notification]] = {}
        self._session_ttl_seconds = session_ttl_seconds
        self._notification_limit = notification_limit
        self._clock = clock
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def create_session(self) -> str:
        session_id = uuid.uuid4().hex
        with self._lock:
            self._evict_expired()
            self._states[session_id] = FormState(updated_at=self._clock())
            self._notifications[session_id] = []
        return session_id

    def has_session(self, session_id: str) -> bool:
        with self._lock:
            state = self._states.get(session_id)
            return state is not None and not self._is_expired(state, self._clock())

    def get_state(self, session_id: str) -> FormState:
        with self._lock:
            return self._require(session_id)

    def update_state(self, session_id: str, fn: Callable[[FormState], FormState]) -> FormState:
        with self._lock:
            updated = replace(fn(self._require(session_id)), updated_at=self._clock())
            self._states[session_id] = updated
            return updated

    def begin_submission(self, session_id: str) -> FormState:
        with self._lock:
            state = self._require(session_id)
            missing = state.selection.missing_features()
            if missing:
                raise IncompleteSelectionError(missing)
            if state.result.is_pending:
                raise SubmissionInFlightError(f"Classification already in progress for {session_id}")
            pending = replace(state, result=ClassificationResult.pending(), updated_at=self._clock())
            self._states[session_id] = pending
            return pending

    def finish_submission(self, session_id: str, submission_id: int, state: FormState) -> bool:
        with self._lock:
            current = self._states.get(session_id)
            if current is None or current.submission_id != submission_id or not current.result.is_pending:
                return False
            # Selection edits made while waiting are kept; only the result comes from `state`
            self._states[session_id] = replace(current, result=state.result, updated_at=self._clock())
            return True

    def push_notification(self, session_id: str, notification: Notification) -> None:
        with self._lock:
            self._require(session_id)
            queue = self._notifications.setdefault(session_id, [])
            queue.append(notification)
            if len(queue) > self._notification_limit:
                self._notifications[session_id] = queue[-self._notification_limit :]

    def drain_notifications(self, session_id: str) -> list[Notification]:
        with self._lock:
            self._require(session_id)
            drained = self._notifications.get(session_id, [])
            self._notifications[session_id] = []
            return list(drained)

    def _require(self, session_id: str) -> FormState:
        state = self._states.get(session_id)
        if state is None:
            raise SessionNotFoundError(session_id)
        return state

    def _is_expired(self, state: FormState, now: float) -> bool:
        if self._session_ttl_seconds is None or state.updated_at is None:
            return False
        return now - state.updated_at > self._session_ttl_seconds

    def _evict_expired(self) -> None:
        now = self._clock()
        expired = [sid for sid, state in self._states.items() if self._is_expired(state, now)]
        for sid in expired:
            del self._states[sid]
            self._notifications.pop(sid, None)
        if expired:
            self._logger.info("Evicted expired form sessions", extra={"reason": f"count={len(expired)}"})
