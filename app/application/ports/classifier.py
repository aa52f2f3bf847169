from abc import ABC, abstractmethod
from typing import Any


class ClassifierPort(ABC):
    @abstractmethod
    def predict(self, features: dict[str, str]) -> dict[str, Any]:
        """
        Classify one mushroom from its feature selection.

        Requirements:
        - Issue exactly one request per call; no retries
        - Return the decoded response body as-is; the caller interprets it
        - Raise ClassifierUpstreamError on transport failures, timeouts and non-2xx status
        - Raise ClassifierContractError when the body is not JSON

        Args:
            features: Mapping of every catalog feature name to its chosen value

        Returns:
            Decoded JSON object; normally contains "predicted_class"
        """
        raise NotImplementedError

    def close(self) -> None:
        """Release any held connections. Adapters without resources keep this no-op."""
        return None
