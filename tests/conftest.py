import pytest

from mindwell.core.config import settings


@pytest.fixture(autouse=True)
def no_analysis_delay(monkeypatch):
    """Skip the simulated processing delay in every test."""
    monkeypatch.setattr(settings, "ANALYSIS_DELAY_SECONDS", 0.0)


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from main import app

    with TestClient(app) as test_client:
        yield test_client
