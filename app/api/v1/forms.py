from fastapi import APIRouter, Depends, HTTPException

from app.api.v1.schemas import (
    CatalogResponseSchema, FeatureSchema, FeatureGroupSchema,
    SessionCreatedSchema, SetFeatureRequestSchema, MissingFieldsSchema,
)
from app.application.dto.form_view import FormViewDTO
from app.application.exceptions import (
    IncompleteSelectionError, SessionNotFoundError, SubmissionInFlightError,
)
from app.application.ports.form_store import FormStorePort
from app.application.use_cases.form_state import FormStateController
from app.application.use_cases.submit_classification import SubmitClassificationUseCase
from app.domain.entities.feature_catalog import (
    FEATURE_GROUPS, MUSHROOM_FEATURES, format_feature_name, format_option_name,
)
from app.wiring.dependencies import get_form_controller, get_form_store, get_submit_use_case

router = APIRouter()


def _load(store: FormStorePort, session_id: str):
    try:
        return store.get_state(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail=f"Unknown form session: {session_id}")


def _update(store: FormStorePort, session_id: str, fn) -> None:
    try:
        store.update_state(session_id, fn)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail=f"Unknown form session: {session_id}")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _view(store: FormStorePort, session_id: str, controller: FormStateController) -> FormViewDTO:
    state = _load(store, session_id)
    return FormViewDTO.from_state(
        session_id,
        state,
        notifications=store.drain_notifications(session_id),
        controller=controller,
    )


@router.get("/catalog", response_model=CatalogResponseSchema)
def catalog():
    return CatalogResponseSchema(
        features=[
            FeatureSchema(
                name=name,
                label=format_feature_name(name),
                options=list(options),
                option_labels=[format_option_name(o) for o in options],
            )
            for name, options in MUSHROOM_FEATURES.items()
        ],
        groups=[
            FeatureGroupSchema(
                title=g.title, icon=g.icon, description=g.description, features=list(g.features)
            )
            for g in FEATURE_GROUPS
        ],
    )


@router.post("/forms", response_model=SessionCreatedSchema, status_code=201)
def create_form(store: FormStorePort = Depends(get_form_store)):
    return SessionCreatedSchema(session_id=store.create_session())


@router.get("/forms/{session_id}", response_model=FormViewDTO)
def get_form(
    session_id: str,
    store: FormStorePort = Depends(get_form_store),
    controller: FormStateController = Depends(get_form_controller),
):
    return _view(store, session_id, controller)


@router.put("/forms/{session_id}/features/{feature}", response_model=FormViewDTO)
def set_feature(
    session_id: str,
    feature: str,
    req: SetFeatureRequestSchema,
    store: FormStorePort = Depends(get_form_store),
    controller: FormStateController = Depends(get_form_controller),
):
    _update(store, session_id, lambda state: controller.set_feature_value(state, feature, req.value))
    return _view(store, session_id, controller)


@router.post(
    "/forms/{session_id}/submit",
    response_model=FormViewDTO,
    responses={422: {"model": MissingFieldsSchema}},
)
def submit(
    session_id: str,
    store: FormStorePort = Depends(get_form_store),
    controller: FormStateController = Depends(get_form_controller),
    uc: SubmitClassificationUseCase = Depends(get_submit_use_case),
):
    _load(store, session_id)
    try:
        uc.execute(session_id)
    except IncompleteSelectionError as e:
        raise HTTPException(
            status_code=422,
            detail=MissingFieldsSchema(message=str(e), missing=e.missing, labels=e.labels).model_dump(),
        )
    except SubmissionInFlightError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _view(store, session_id, controller)


@router.post("/forms/{session_id}/clear", response_model=FormViewDTO)
def clear_result(
    session_id: str,
    store: FormStorePort = Depends(get_form_store),
    controller: FormStateController = Depends(get_form_controller),
):
    _update(store, session_id, controller.clear_result)
    return _view(store, session_id, controller)


@router.post("/forms/{session_id}/reset", response_model=FormViewDTO)
def reset(
    session_id: str,
    store: FormStorePort = Depends(get_form_store),
    controller: FormStateController = Depends(get_form_controller),
):
    _update(store, session_id, controller.reset)
    return _view(store, session_id, controller)
