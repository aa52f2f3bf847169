from __future__ import annotations

from pydantic import BaseModel, Field

from app.application.use_cases.form_state import FormStateController
from app.domain.entities.classification_result import result_tone, safety_notice_for
from app.domain.entities.feature_catalog import FEATURE_GROUPS
from app.domain.entities.form_state import FormState
from app.domain.entities.notification import Notification


class ProgressDTO(BaseModel):
    selected: int
    total: int
    percentage: float


class SafetyNoticeDTO(BaseModel):
    tone: str
    title: str
    lead: str = ""
    emphasis: str
    body: str


class ResultDTO(BaseModel):
    status: str
    label: str | None = None
    tone: str | None = None
    notice: SafetyNoticeDTO | None = None


class NotificationDTO(BaseModel):
    level: str
    message: str


class SummaryItemDTO(BaseModel):
    feature: str
    value: str


class FormViewDTO(BaseModel):
    session_id: str
    selected: dict[str, str] = Field(default_factory=dict)
    completed_groups: list[str] = Field(default_factory=list)
    summary: list[SummaryItemDTO] = Field(default_factory=list)
    progress: ProgressDTO
    result: ResultDTO
    notifications: list[NotificationDTO] = Field(default_factory=list)

    @classmethod
    def from_state(
        cls,
        session_id: str,
        state: FormState,
        notifications: list[Notification] | None = None,
        controller: FormStateController | None = None,
    ) -> FormViewDTO:
        controller = controller or FormStateController()
        selected, total = controller.compute_progress(state)

        notice = safety_notice_for(state.result)
        result = ResultDTO(
            status=state.result.status,
            label=state.result.label,
            tone=result_tone(state.result) if state.result.status in {"labeled", "errored"} else None,
            notice=SafetyNoticeDTO(**notice.__dict__) if notice else None,
        )

        return cls(
            session_id=session_id,
            selected=state.selection.as_payload(),
            completed_groups=[g.title for g in FEATURE_GROUPS if g.title in state.completed_groups],
            summary=[SummaryItemDTO(feature=f, value=v) for f, v in controller.summary(state)],
            progress=ProgressDTO(
                selected=selected,
                total=total,
                percentage=controller.progress_percentage(state),
            ),
            result=result,
            notifications=[NotificationDTO(level=n.level, message=n.message) for n in notifications or []],
        )
