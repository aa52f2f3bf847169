from __future__ import annotations

from dataclasses import dataclass, field

from app.domain.entities.feature_catalog import MUSHROOM_FEATURES


@dataclass(frozen=True)
class SelectionState:
    values: dict[str, str] = field(default_factory=dict)  # feature -> chosen value, in selection order

    def with_value(self, feature: str, value: str) -> SelectionState:
        updated = dict(self.values)
        updated[feature] = value
        return SelectionState(values=updated)

    def has(self, feature: str) -> bool:
        return bool(self.values.get(feature))

    def missing_features(self) -> list[str]:
        """Catalog keys without a selection, in catalog order."""
        return [feature for feature in MUSHROOM_FEATURES if not self.has(feature)]

    def as_payload(self) -> dict[str, str]:
        return dict(self.values)

    def __len__(self) -> int:
        return len(self.values)
