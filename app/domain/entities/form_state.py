from dataclasses import dataclass

from app.domain.entities.classification_result import ClassificationResult
from app.domain.entities.selection_state import SelectionState


@dataclass(frozen=True)
class FormState:
    selection: SelectionState = SelectionState()
    completed_groups: frozenset[str] = frozenset()
    result: ClassificationResult = ClassificationResult()
    # Bumped on reset/clear so a late classifier response can be recognised as stale
    submission_id: int = 0
    updated_at: float | None = None
