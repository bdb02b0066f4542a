"""Integration test fixtures (app client and live-service prerequisites).

The API client runs the real FastAPI app with the service dependency
overridden by one wired to stub classifiers. Live classifier tests are
skipped unless a real Hugging Face token is configured.
"""

import pytest
from fastapi.testclient import TestClient

from sentiment_layer.api.dependencies import get_service
from sentiment_layer.config import ServiceConfig, settings
from sentiment_layer.main import app
from sentiment_layer.service import SentimentService


@pytest.fixture
def stub_service(local_config, make_primary, make_secondary, primary_payload, secondary_payload):
    """SentimentService without a credential, backed by stub classifiers."""
    return SentimentService(
        local_config,
        primary=make_primary(response=primary_payload),
        secondary=make_secondary(response=secondary_payload),
    )


@pytest.fixture
def client(stub_service):
    """TestClient with the service dependency overridden."""
    app.dependency_overrides[get_service] = lambda: stub_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture(scope="session")
def live_config() -> ServiceConfig:
    """Config from the environment; skips when no usable token is set."""
    config = ServiceConfig.from_settings(settings)
    if not config.has_credential:
        pytest.skip("HF_API_TOKEN not set (live classifier tests disabled)")
    return config
