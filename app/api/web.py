from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from app.application.dto.form_view import FormViewDTO
from app.application.exceptions import IncompleteSelectionError, SubmissionInFlightError
from app.application.ports.form_store import FormStorePort
from app.application.use_cases.form_state import FormStateController
from app.application.use_cases.submit_classification import SubmitClassificationUseCase
from app.core.config import settings
from app.domain.entities.feature_catalog import (
    FEATURE_GROUPS, MUSHROOM_FEATURES, format_feature_name, format_option_name,
)
from app.domain.entities.notification import Notification
from app.wiring.dependencies import get_form_controller, get_form_store, get_submit_use_case


router = APIRouter()
logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))
templates.env.filters["feature_name"] = format_feature_name
templates.env.filters["option_name"] = format_option_name


def _session_id(request: Request, store: FormStorePort) -> str:
    session_id = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if session_id and store.has_session(session_id):
        return session_id
    return store.create_session()


def _back_to_form(session_id: str) -> RedirectResponse:
    response = RedirectResponse(url="/", status_code=303)
    response.set_cookie(settings.SESSION_COOKIE_NAME, session_id, httponly=True, samesite="lax")
    return response


@router.get("/", response_class=HTMLResponse)
def index(
    request: Request,
    store: FormStorePort = Depends(get_form_store),
    controller: FormStateController = Depends(get_form_controller),
):
    session_id = _session_id(request, store)
    state = store.get_state(session_id)
    view = FormViewDTO.from_state(
        session_id,
        state,
        notifications=store.drain_notifications(session_id),
        controller=controller,
    )
    response = templates.TemplateResponse(
        request,
        "index.html",
        {
            "view": view,
            "groups": FEATURE_GROUPS,
            "features": MUSHROOM_FEATURES,
        },
    )
    response.set_cookie(settings.SESSION_COOKIE_NAME, session_id, httponly=True, samesite="lax")
    return response


@router.post("/select")
def select_feature(
    request: Request,
    feature: str = Form(...),
    value: str = Form(""),
    store: FormStorePort = Depends(get_form_store),
    controller: FormStateController = Depends(get_form_controller),
):
    session_id = _session_id(request, store)
    if value:
        try:
            store.update_state(session_id, lambda state: controller.set_feature_value(state, feature, value))
        except ValueError as e:
            logger.warning("Rejected selection", extra={"session_id": session_id, "feature": feature, "reason": str(e)})
            store.push_notification(session_id, Notification(level="error", message=str(e)))
    return _back_to_form(session_id)


@router.post("/classify")
def classify(
    request: Request,
    store: FormStorePort = Depends(get_form_store),
    uc: SubmitClassificationUseCase = Depends(get_submit_use_case),
):
    session_id = _session_id(request, store)
    try:
        uc.execute(session_id)
    except IncompleteSelectionError:
        # Already queued as a notification for the next render
        pass
    except SubmissionInFlightError:
        store.push_notification(
            session_id, Notification(level="info", message="Classification already in progress.")
        )
    return _back_to_form(session_id)


@router.post("/clear")
def clear_result(
    request: Request,
    store: FormStorePort = Depends(get_form_store),
    controller: FormStateController = Depends(get_form_controller),
):
    session_id = _session_id(request, store)
    store.update_state(session_id, controller.clear_result)
    return _back_to_form(session_id)


@router.post("/start-over")
def start_over(
    request: Request,
    store: FormStorePort = Depends(get_form_store),
    controller: FormStateController = Depends(get_form_controller),
):
    session_id = _session_id(request, store)
    store.update_state(session_id, controller.reset)
    return _back_to_form(session_id)
