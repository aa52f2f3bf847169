from abc import ABC, abstractmethod
from typing import Callable

from app.domain.entities.form_state import FormState
from app.domain.entities.notification import Notification


class FormStorePort(ABC):
    @abstractmethod
    def create_session(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def has_session(self, session_id: str) -> bool:
        """False for unknown and for expired sessions."""
        raise NotImplementedError

    @abstractmethod
    def get_state(self, session_id: str) -> FormState:
        """Return the session's state. Raises SessionNotFoundError for unknown ids."""
        raise NotImplementedError

    @abstractmethod
    def update_state(self, session_id: str, fn: Callable[[FormState], FormState]) -> FormState:
        """
        Apply `fn` to the current stored state and store its return value, atomically.

        Exceptions raised by `fn` propagate and leave the stored state unchanged.
        Returns the stored state.
        """
        raise NotImplementedError

    @abstractmethod
    def begin_submission(self, session_id: str) -> FormState:
        """
        Atomically validate the selection and move the session's result to pending.

        Raises IncompleteSelectionError if any catalog feature has no value, and
        SubmissionInFlightError if a request is already pending.
        Returns the stored pending state.
        """
        raise NotImplementedError

    @abstractmethod
    def finish_submission(self, session_id: str, submission_id: int, state: FormState) -> bool:
        """
        Store `state.result` only if the session is still pending on `submission_id`.

        Returns False when the session was reset, cleared or evicted meanwhile and
        the outcome was dropped.
        """
        raise NotImplementedError

    @abstractmethod
    def push_notification(self, session_id: str, notification: Notification) -> None:
        raise NotImplementedError

    @abstractmethod
    def drain_notifications(self, session_id: str) -> list[Notification]:
        raise NotImplementedError
