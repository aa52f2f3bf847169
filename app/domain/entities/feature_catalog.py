from __future__ import annotations

from dataclasses import dataclass


MUSHROOM_FEATURES: dict[str, tuple[str, ...]] = {
    "cap-shape": ("bell", "conical", "convex", "flat", "knobbed", "sunken"),
    "cap-surface": ("fibrous", "grooves", "scaly", "smooth"),
    "cap-color": ("brown", "buff", "cinnamon", "gray", "green", "pink", "purple", "red", "white", "yellow"),
    "bruises": ("bruises", "no"),
    "odor": ("almond", "anise", "creosote", "fishy", "foul", "musty", "none", "pungent", "spicy"),
    "gill-attachment": ("attached", "descending", "free", "notched"),
    "gill-spacing": ("close", "crowded", "distant"),
    "gill-size": ("broad", "narrow"),
    "gill-color": (
        "black",
        "brown",
        "buff",
        "chocolate",
        "gray",
        "green",
        "orange",
        "pink",
        "purple",
        "red",
        "white",
        "yellow",
    ),
    "stalk-shape": ("enlarging", "tapering"),
    "stalk-root": ("bulbous", "club", "cup", "equal", "rhizomorphs", "rooted", "missing"),
    "stalk-surface-above-ring": ("fibrous", "scaly", "silky", "smooth"),
    "stalk-surface-below-ring": ("fibrous", "scaly", "silky", "smooth"),
    "stalk-color-above-ring": ("brown", "buff", "cinnamon", "gray", "orange", "pink", "red", "white", "yellow"),
    "stalk-color-below-ring": ("brown", "buff", "cinnamon", "gray", "orange", "pink", "red", "white", "yellow"),
    "veil-type": ("partial",),
    "veil-color": ("brown", "orange", "white", "yellow"),
    "ring-number": ("none", "one", "two"),
    "ring-type": ("cobwebby", "evanescent", "flaring", "large", "none", "pendant", "sheathing", "zone"),
    "spore-print-color": ("black", "brown", "buff", "chocolate", "green", "orange", "purple", "white", "yellow"),
    "population": ("abundant", "clustered", "numerous", "scattered", "several", "solitary"),
    "habitat": ("grasses", "leaves", "meadows", "paths", "urban", "waste", "woods"),
}


@dataclass(frozen=True)
class FeatureGroup:
    title: str
    icon: str
    features: tuple[str, ...]

    @property
    def description(self) -> str:
        return f"Select the characteristics for {self.title.lower()}"


FEATURE_GROUPS: tuple[FeatureGroup, ...] = (
    FeatureGroup(
        title="Cap Characteristics",
        icon="mushroom",
        features=("cap-shape", "cap-surface", "cap-color"),
    ),
    FeatureGroup(
        title="Physical Properties",
        icon="eye",
        features=("bruises", "odor"),
    ),
    FeatureGroup(
        title="Gill Features",
        icon="layers",
        features=("gill-attachment", "gill-spacing", "gill-size", "gill-color"),
    ),
    FeatureGroup(
        title="Stalk Properties",
        icon="tree-pine",
        features=(
            "stalk-shape",
            "stalk-root",
            "stalk-surface-above-ring",
            "stalk-surface-below-ring",
            "stalk-color-above-ring",
            "stalk-color-below-ring",
        ),
    ),
    FeatureGroup(
        title="Veil & Ring",
        icon="palette",
        features=("veil-type", "veil-color", "ring-number", "ring-type"),
    ),
    FeatureGroup(
        title="Spores & Environment",
        icon="map-pin",
        features=("spore-print-color", "population", "habitat"),
    ),
)


def feature_names() -> list[str]:
    return list(MUSHROOM_FEATURES)


def options_for(feature: str) -> tuple[str, ...]:
    return MUSHROOM_FEATURES[feature]


def is_valid_selection(feature: str, value: str) -> bool:
    return value in MUSHROOM_FEATURES.get(feature, ())


def format_feature_name(feature: str) -> str:
    """'stalk-color-above-ring' -> 'Stalk Color Above Ring'."""
    return " ".join(word[:1].upper() + word[1:] for word in feature.split("-"))


def format_option_name(option: str) -> str:
    return option[:1].upper() + option[1:]
