"""
Tests for the httpx-based classifier adapter.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from app.application.exceptions import ClassifierContractError, ClassifierUpstreamError
from app.core.config import settings
from app.infrastructure.classifier.http_classifier import HttpClassifier
from app.infrastructure.classifier.mock_classifier import MockClassifier
from app.main import app
from app.wiring.dependencies import close_classifier, get_classifier


URL = "https://classifier.test/predict"


def _client(handler) -> HttpClassifier:
    return HttpClassifier(predict_url=URL, client=httpx.Client(transport=httpx.MockTransport(handler)))


def test_predict_returns_decoded_body():
    """A JSON object body is returned unchanged."""
    classifier = _client(lambda request: httpx.Response(200, json={"predicted_class": "poisonous", "p": 0.9}))

    assert classifier.predict({"odor": "foul"}) == {"predicted_class": "poisonous", "p": 0.9}


def test_non_object_body_is_treated_as_empty():
    """A JSON array body is treated as an empty object."""
    classifier = _client(lambda request: httpx.Response(200, json=["edible"]))

    assert classifier.predict({"odor": "foul"}) == {}


def test_error_status_raises_upstream_error():
    """Non-2xx status raises ClassifierUpstreamError."""
    classifier = _client(lambda request: httpx.Response(503, text="unavailable"))

    with pytest.raises(ClassifierUpstreamError):
        classifier.predict({"odor": "foul"})


def test_transport_failure_raises_upstream_error():
    """Connection failures raise ClassifierUpstreamError."""
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ClassifierUpstreamError):
        _client(handler).predict({"odor": "foul"})


def test_timeout_raises_upstream_error():
    """Timeouts raise ClassifierUpstreamError."""
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(ClassifierUpstreamError):
        _client(handler).predict({"odor": "foul"})


def test_malformed_body_raises_contract_error():
    """A non-JSON body raises ClassifierContractError."""
    classifier = _client(lambda request: httpx.Response(200, text="<html>not json</html>"))

    with pytest.raises(ClassifierContractError):
        classifier.predict({"odor": "foul"})


def test_mock_classifier_odor_rule():
    """The offline classifier follows the odor rule of thumb."""
    classifier = MockClassifier()

    assert classifier.predict({"odor": "almond"}) == {"predicted_class": "edible"}
    assert classifier.predict({"odor": "foul"}) == {"predicted_class": "poisonous"}
    assert classifier.predict({"odor": "none", "spore-print-color": "green"}) == {"predicted_class": "poisonous"}
    assert classifier.predict({"odor": "none", "spore-print-color": "white"}) == {"predicted_class": "edible"}


def test_close_releases_http_client():
    """close() shuts the underlying httpx client."""
    classifier = _client(lambda request: httpx.Response(200, json={}))

    classifier.close()

    assert classifier._client.is_closed


def test_app_shutdown_closes_cached_classifier(monkeypatch):
    """Leaving the app lifespan closes the cached HttpClassifier and drops it from the cache."""
    monkeypatch.setattr(settings, "CLASSIFIER_PROVIDER", "http")
    get_classifier.cache_clear()

    with TestClient(app):
        classifier = get_classifier()
        assert isinstance(classifier, HttpClassifier)
        assert not classifier._client.is_closed

    assert classifier._client.is_closed
    assert get_classifier.cache_info().currsize == 0


def test_close_classifier_without_cached_instance_is_noop():
    """Shutdown before any classifier was built does nothing."""
    get_classifier.cache_clear()

    close_classifier()

    assert get_classifier.cache_info().currsize == 0
