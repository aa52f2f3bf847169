from __future__ import annotations

from dataclasses import dataclass


UNKNOWN_LABEL = "Unknown"
ERROR_LABEL = "Error"


@dataclass(frozen=True)
class ClassificationResult:
    status: str = "absent"  # "absent", "pending", "labeled", "errored"
    label: str | None = None  # opaque label from the classifier; "Unknown" when missing

    @classmethod
    def absent(cls) -> "ClassificationResult":
        return cls()

    @classmethod
    def pending(cls) -> "ClassificationResult":
        return cls(status="pending")

    @classmethod
    def labeled(cls, label: str) -> "ClassificationResult":
        return cls(status="labeled", label=label)

    @classmethod
    def errored(cls) -> "ClassificationResult":
        return cls(status="errored", label=ERROR_LABEL)

    @property
    def is_pending(self) -> bool:
        return self.status == "pending"


@dataclass(frozen=True)
class SafetyNotice:
    tone: str  # "danger" | "caution"
    title: str
    lead: str
    emphasis: str
    body: str


POISONOUS_WARNING = SafetyNotice(
    tone="danger",
    title="Safety Warning",
    lead="",
    emphasis="DO NOT CONSUME",
    body=(
        "this mushroom. This classification suggests the mushroom may be toxic. "
        "Always consult with a mycologist or expert before consuming any wild mushrooms."
    ),
)

EDIBLE_NOTICE = SafetyNotice(
    tone="caution",
    title="Important Notice",
    lead="While this classification suggests the mushroom may be edible,",
    emphasis="never consume wild mushrooms",
    body="without expert identification. This tool is for educational purposes only.",
)


def safety_notice_for(result: ClassificationResult) -> SafetyNotice | None:
    if result.status != "labeled":
        return None
    if result.label == "poisonous":
        return POISONOUS_WARNING
    if result.label == "edible":
        return EDIBLE_NOTICE
    return None


def result_tone(result: ClassificationResult) -> str:
    """Colour tone of the result alert: only 'poisonous' renders as danger."""
    return "danger" if result.label == "poisonous" else "safe"
