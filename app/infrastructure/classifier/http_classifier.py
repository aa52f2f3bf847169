from __future__ import annotations

import logging
from typing import Any

import httpx

from app.application.exceptions import ClassifierContractError, ClassifierUpstreamError
from app.application.ports.classifier import ClassifierPort
from app.core.config import settings


class HttpClassifier(ClassifierPort):
    def __init__(
        self,
        predict_url: str | None = None,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._predict_url = predict_url or settings.CLASSIFIER_PREDICT_URL
        self._client = client or httpx.Client(
            timeout=timeout if timeout is not None else settings.CLASSIFIER_TIMEOUT_SECONDS
        )
        self._logger = logging.getLogger(__name__)

    def predict(self, features: dict[str, str]) -> dict[str, Any]:
        try:
            resp = self._client.post(
                self._predict_url,
                json=features,
                headers={"Content-Type": "application/json"},
            )
        except httpx.TimeoutException as e:
            raise ClassifierUpstreamError(f"Classifier timed out: {e}") from e
        except httpx.HTTPError as e:
            raise ClassifierUpstreamError(f"Classifier request failed: {e}") from e

        if resp.status_code >= 400:
            self._logger.error(
                "Classifier returned an error status",
                extra={"status_code": resp.status_code, "reason": resp.text[:200]},
            )
            raise ClassifierUpstreamError(f"Classifier returned HTTP {resp.status_code}")

        try:
            body = resp.json()
        except ValueError as e:
            raise ClassifierContractError("Classifier response is not valid JSON") from e

        self._logger.debug("Classifier response", extra={"reason": str(body)[:200]})
        if not isinstance(body, dict):
            return {}
        return body

    def close(self) -> None:
        self._client.close()
