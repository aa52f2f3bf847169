from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from app.application.exceptions import IncompleteSelectionError
from app.application.ports.classifier import ClassifierPort
from app.application.ports.form_store import FormStorePort
from app.domain.entities.classification_result import UNKNOWN_LABEL, ClassificationResult
from app.domain.entities.form_state import FormState
from app.domain.entities.notification import Notification


PREDICTION_FAILED_MESSAGE = "Prediction failed. Please try again."


class SubmitClassificationUseCase:
    def __init__(self, classifier: ClassifierPort, store: FormStorePort) -> None:
        self._classifier = classifier
        self._store = store
        self._logger = logging.getLogger(__name__)

    def execute(self, session_id: str) -> FormState:
        """
        Validate the session's selection, call the classifier once and store the outcome.

        Raises IncompleteSelectionError (no network call, result untouched) or
        SubmissionInFlightError. Classifier failures never propagate: they become
        an errored result plus one notification.
        """
        try:
            pending = self._store.begin_submission(session_id)
        except IncompleteSelectionError as error:
            self._logger.info(
                "Submission rejected: incomplete selection",
                extra={"session_id": session_id, "missing": ",".join(error.missing)},
            )
            self._store.push_notification(session_id, Notification(level="error", message=str(error)))
            raise

        payload = pending.selection.as_payload()
        self._logger.info("Submitting selection to classifier", extra={"session_id": session_id})

        try:
            body = self._classifier.predict(payload)
            result = ClassificationResult.labeled(_extract_label(body))
        except Exception as e:
            self._logger.exception("Prediction failed", extra={"session_id": session_id, "reason": str(e)})
            result = ClassificationResult.errored()

        outcome = replace(pending, result=result)
        if not self._store.finish_submission(session_id, pending.submission_id, outcome):
            self._logger.info("Discarding stale classifier response", extra={"session_id": session_id})
        elif result.status == "errored":
            self._store.push_notification(
                session_id, Notification(level="error", message=PREDICTION_FAILED_MESSAGE)
            )
        else:
            self._logger.info("Classification finished", extra={"session_id": session_id, "label": result.label})
        return self._store.get_state(session_id)


def _extract_label(body: Any) -> str:
    if isinstance(body, dict) and body.get("predicted_class"):
        return str(body["predicted_class"])
    return UNKNOWN_LABEL
