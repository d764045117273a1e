"""Integration test fixtures.

Provides a TestClient bound to the real app with the identity date pinned.
"""

import pytest
from fastapi.testclient import TestClient

from bfhl_service.api.dependencies import get_current_user_info
from bfhl_service.main import app
from bfhl_service.processing.identity import get_user_info


@pytest.fixture
def client(test_settings, fixed_date):
    """TestClient with user_id pinned to fixed_date.

    Server exceptions are returned as 500 responses instead of re-raised, so
    tests can assert on the error envelope.
    """
    app.dependency_overrides[get_current_user_info] = lambda: get_user_info(
        test_settings, fixed_date
    )

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    app.dependency_overrides.clear()
