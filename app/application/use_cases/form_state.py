from __future__ import annotations

from dataclasses import replace

from app.domain.entities.classification_result import ClassificationResult
from app.domain.entities.feature_catalog import (
    FEATURE_GROUPS,
    MUSHROOM_FEATURES,
    format_feature_name,
    format_option_name,
    is_valid_selection,
)
from app.domain.entities.form_state import FormState
from app.domain.entities.selection_state import SelectionState


def completed_groups_for(selection: SelectionState) -> frozenset[str]:
    return frozenset(
        group.title
        for group in FEATURE_GROUPS
        if all(selection.has(feature) for feature in group.features)
    )


class FormStateController:
    """Pure transitions over FormState. Every method returns a new state."""

    def set_feature_value(self, state: FormState, feature: str, value: str) -> FormState:
        if feature not in MUSHROOM_FEATURES:
            raise ValueError(f"Unknown feature: {feature}")
        if not is_valid_selection(feature, value):
            raise ValueError(f"Invalid value for {feature}: {value}")

        selection = state.selection.with_value(feature, value)
        return replace(
            state,
            selection=selection,
            completed_groups=completed_groups_for(selection),
        )

    def compute_progress(self, state: FormState) -> tuple[int, int]:
        return len(state.selection), len(MUSHROOM_FEATURES)

    def progress_percentage(self, state: FormState) -> float:
        selected, total = self.compute_progress(state)
        return selected / total * 100

    def reset(self, state: FormState) -> FormState:
        return FormState(submission_id=state.submission_id + 1)

    def clear_result(self, state: FormState) -> FormState:
        return replace(
            state,
            result=ClassificationResult.absent(),
            submission_id=state.submission_id + 1,
        )

    def summary(self, state: FormState) -> list[tuple[str, str]]:
        return [
            (format_feature_name(feature), format_option_name(value))
            for feature, value in state.selection.values.items()
        ]
