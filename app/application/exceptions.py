from app.domain.entities.feature_catalog import format_feature_name


class IncompleteSelectionError(ValueError):
    """Raised when a submission is attempted before every feature has a value."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        self.labels = [format_feature_name(f) for f in self.missing]
        super().__init__(f"Please fill all fields. Missing: {', '.join(self.labels)}")


class SubmissionInFlightError(RuntimeError):
    """Raised when a session already has a classification request pending."""
    pass


class SessionNotFoundError(KeyError):
    """Raised when a form session id is unknown to the store."""
    pass


class ClassifierUpstreamError(RuntimeError):
    """Raised when the classifier fails (timeouts, network errors, non-2xx status)."""
    pass


class ClassifierContractError(RuntimeError):
    """Raised when the classifier response cannot be parsed."""
    pass
