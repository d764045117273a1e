"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

import json
from datetime import date
from pathlib import Path
from typing import Any, Dict

import pytest

from bfhl_service.config import Settings


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults for local testing.

    Override specific settings in individual tests as needed:
        def test_something(test_settings):
            test_settings.FULL_NAME = "Ada Lovelace"
    """
    return Settings(
        # === Application ===
        APP_NAME="BFHL API",
        APP_VERSION="1.0.0",
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",

        # === Identity ===
        FULL_NAME="john_doe",
        EMAIL="john@xyz.com",
        ROLL_NUMBER="ABCD123",

        # === Monitoring ===
        PROMETHEUS_ENABLED=False,
    )


@pytest.fixture
def fixed_date() -> date:
    """Date stamped into user_id by tests that pin the clock."""
    return date(1999, 9, 17)


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_cases(fixtures_dir: Path) -> list[Dict[str, Any]]:
    """Load request/expected-result pairs.

    Each case is {"name": ..., "data": [...], "expected": {...CategorizationResult fields}}.
    """
    with open(fixtures_dir / "sample_cases.json") as f:
        return json.load(f)


@pytest.fixture
def sample_tokens() -> list[str]:
    """The canonical mixed example request."""
    return ["a", "1", "334", "4", "R", "$"]
