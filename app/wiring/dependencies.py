from functools import lru_cache
import logging

from app.core.config import settings
from app.application.ports.classifier import ClassifierPort
from app.application.ports.form_store import FormStorePort
from app.application.use_cases.form_state import FormStateController
from app.application.use_cases.submit_classification import SubmitClassificationUseCase
from app.infrastructure.classifier.http_classifier import HttpClassifier
from app.infrastructure.classifier.mock_classifier import MockClassifier
from app.infrastructure.store.memory_store import MemoryFormStore


_form_store: MemoryFormStore | None = None


@lru_cache
def get_classifier() -> ClassifierPort:
    logger = logging.getLogger(__name__)
    if settings.CLASSIFIER_PROVIDER.lower() == "mock":
        logger.info("Using MockClassifier (CLASSIFIER_PROVIDER=mock)")
        return MockClassifier()
    logger.info("Using HttpClassifier url=%s", settings.CLASSIFIER_PREDICT_URL)
    return HttpClassifier()


def get_form_store() -> FormStorePort:
    global _form_store
    if _form_store is None:
        _form_store = MemoryFormStore(session_ttl_seconds=settings.SESSION_TTL_SECONDS)
    return _form_store


def get_form_controller() -> FormStateController:
    return FormStateController()


def get_submit_use_case() -> SubmitClassificationUseCase:
    return SubmitClassificationUseCase(classifier=get_classifier(), store=get_form_store())


def close_classifier() -> None:
    """Release the cached classifier's connections; a later get_classifier() builds a fresh one."""
    if get_classifier.cache_info().currsize:
        get_classifier().close()
        get_classifier.cache_clear()
