"""Shared test fixtures for the API test suite."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from btl_api.config.settings import ApiSettings
from btl_api.main import create_app


# ---------------------------------------------------------------------------
# Settings fixture
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> ApiSettings:
    """Test settings with a fixed version string."""
    return ApiSettings(version="1.2.3", log_level="DEBUG")


# ---------------------------------------------------------------------------
# App fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def client(settings: ApiSettings) -> TestClient:
    return TestClient(create_app(settings), raise_server_exceptions=False)

