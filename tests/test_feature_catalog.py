"""
Tests for the static feature catalog and its display helpers.
"""

from app.domain.entities.feature_catalog import (
    FEATURE_GROUPS,
    MUSHROOM_FEATURES,
    feature_names,
    format_feature_name,
    format_option_name,
    is_valid_selection,
    options_for,
)


def test_catalog_has_22_features():
    """The classifier expects exactly the 22 UCI mushroom attributes."""
    assert len(MUSHROOM_FEATURES) == 22
    assert feature_names()[0] == "cap-shape"
    assert feature_names()[-1] == "habitat"


def test_every_feature_belongs_to_exactly_one_group():
    """Groups partition the catalog."""
    grouped = [f for group in FEATURE_GROUPS for f in group.features]
    assert sorted(grouped) == sorted(MUSHROOM_FEATURES)
    assert len(grouped) == len(set(grouped))


def test_group_titles_and_descriptions():
    """Groups keep their display order and derived descriptions."""
    titles = [g.title for g in FEATURE_GROUPS]
    assert titles == [
        "Cap Characteristics",
        "Physical Properties",
        "Gill Features",
        "Stalk Properties",
        "Veil & Ring",
        "Spores & Environment",
    ]
    assert FEATURE_GROUPS[4].description == "Select the characteristics for veil & ring"


def test_format_feature_name():
    """Feature keys become title-cased labels."""
    assert format_feature_name("cap-shape") == "Cap Shape"
    assert format_feature_name("stalk-color-above-ring") == "Stalk Color Above Ring"
    assert format_feature_name("odor") == "Odor"


def test_format_option_name_only_capitalizes_first_letter():
    """Option tokens only get their first letter capitalized."""
    assert format_option_name("bell") == "Bell"
    assert format_option_name("none") == "None"
    assert format_option_name("") == ""


def test_options_and_validity():
    """Option lookup and validity checks follow the catalog."""
    assert options_for("veil-type") == ("partial",)
    assert is_valid_selection("odor", "almond") is True
    assert is_valid_selection("odor", "sweet") is False
    assert is_valid_selection("cap-weight", "heavy") is False
