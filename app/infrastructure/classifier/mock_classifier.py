from __future__ import annotations

import logging
from typing import Any

from app.application.ports.classifier import ClassifierPort


# Odors that only occur on edible specimens in the UCI mushroom data
_EDIBLE_ODORS = {"almond", "anise"}


class MockClassifier(ClassifierPort):
    """Offline stand-in for the remote model, driven by the odor rule of thumb."""

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def predict(self, features: dict[str, str]) -> dict[str, Any]:
        odor = features.get("odor")
        if odor in _EDIBLE_ODORS:
            label = "edible"
        elif odor == "none":
            label = "poisonous" if features.get("spore-print-color") == "green" else "edible"
        else:
            label = "poisonous"
        self._logger.info("Mock classification", extra={"label": label})
        return {"predicted_class": label}
