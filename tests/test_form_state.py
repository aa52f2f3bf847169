"""
Tests for FormStateController transitions and derived completion.
"""

import random

import pytest

from app.application.use_cases.form_state import FormStateController, completed_groups_for
from app.domain.entities.classification_result import ClassificationResult
from app.domain.entities.feature_catalog import FEATURE_GROUPS, MUSHROOM_FEATURES
from app.domain.entities.form_state import FormState


def test_set_feature_value_does_not_mutate_previous_state():
    """Each selection produces a new mapping; the old state is left untouched."""
    controller = FormStateController()
    before = FormState()

    after = controller.set_feature_value(before, "cap-shape", "bell")

    assert before.selection.values == {}
    assert after.selection.values == {"cap-shape": "bell"}
    assert after.selection is not before.selection


def test_set_feature_value_is_idempotent():
    """Applying the same selection twice equals applying it once."""
    controller = FormStateController()
    once = controller.set_feature_value(FormState(), "odor", "almond")
    twice = controller.set_feature_value(once, "odor", "almond")

    assert once.selection == twice.selection
    assert once.completed_groups == twice.completed_groups


def test_set_feature_value_overwrites_previous_choice():
    """A new value replaces the old one for the same feature."""
    controller = FormStateController()
    state = controller.set_feature_value(FormState(), "odor", "almond")
    state = controller.set_feature_value(state, "odor", "foul")

    assert state.selection.values == {"odor": "foul"}


def test_group_completes_when_all_its_features_are_selected():
    """A group is complete only once all its features have values."""
    controller = FormStateController()
    state = controller.set_feature_value(FormState(), "bruises", "no")
    assert "Physical Properties" not in state.completed_groups

    state = controller.set_feature_value(state, "odor", "none")
    assert state.completed_groups == frozenset({"Physical Properties"})


@pytest.mark.parametrize("seed", range(10))
def test_completion_matches_groups_after_random_edits(seed):
    """CompletionSet is always exactly the fully-selected groups, resets included."""
    rng = random.Random(seed)
    controller = FormStateController()
    state = FormState()

    for _ in range(60):
        if rng.random() < 0.05:
            state = controller.reset(state)
        else:
            feature = rng.choice(list(MUSHROOM_FEATURES))
            state = controller.set_feature_value(state, feature, rng.choice(MUSHROOM_FEATURES[feature]))

        expected = {
            g.title for g in FEATURE_GROUPS if all(f in state.selection.values for f in g.features)
        }
        assert state.completed_groups == expected


def test_unknown_feature_or_value_rejected():
    """Unknown features and values raise ValueError."""
    controller = FormStateController()
    with pytest.raises(ValueError):
        controller.set_feature_value(FormState(), "cap-weight", "heavy")
    with pytest.raises(ValueError):
        controller.set_feature_value(FormState(), "odor", "sweet")


def test_compute_progress():
    """Progress counts selected features against the catalog size."""
    controller = FormStateController()
    state = controller.set_feature_value(FormState(), "cap-shape", "bell")
    state = controller.set_feature_value(state, "habitat", "woods")

    assert controller.compute_progress(state) == (2, 22)
    assert controller.progress_percentage(state) == pytest.approx(2 / 22 * 100)


def test_reset_clears_everything_and_bumps_submission():
    """Reset empties selection, completion and result from any state."""
    controller = FormStateController()
    state = FormState()
    for feature, options in MUSHROOM_FEATURES.items():
        state = controller.set_feature_value(state, feature, options[0])
    state = FormState(
        selection=state.selection,
        completed_groups=state.completed_groups,
        result=ClassificationResult.labeled("edible"),
        submission_id=4,
    )

    reset = controller.reset(state)

    assert reset.selection.values == {}
    assert reset.completed_groups == frozenset()
    assert reset.result.status == "absent"
    assert reset.submission_id == 5


def test_clear_result_keeps_selection():
    """Clear Result only drops the result."""
    controller = FormStateController()
    state = controller.set_feature_value(FormState(), "odor", "foul")
    state = FormState(selection=state.selection, result=ClassificationResult.errored())

    cleared = controller.clear_result(state)

    assert cleared.result.status == "absent"
    assert cleared.selection.values == {"odor": "foul"}


def test_summary_lists_selections_in_selection_order():
    """Summary follows the order the user picked features."""
    controller = FormStateController()
    state = controller.set_feature_value(FormState(), "habitat", "woods")
    state = controller.set_feature_value(state, "cap-shape", "bell")

    assert controller.summary(state) == [("Habitat", "Woods"), ("Cap Shape", "Bell")]


def test_completed_groups_for_empty_selection():
    """No selection means no complete groups."""
    assert completed_groups_for(FormState().selection) == frozenset()
