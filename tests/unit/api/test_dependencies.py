"""
Unit tests for API dependency injection.
"""

from datetime import date

from bfhl_service.api.dependencies import get_current_user_info, get_settings
from bfhl_service.config import Settings
from bfhl_service.processing.identity import UserInfo


def test_get_settings():
    """Test settings singleton."""
    settings1 = get_settings()
    settings2 = get_settings()

    # Should be same instance (cached)
    assert settings1 is settings2
    assert isinstance(settings1, Settings)


def test_get_current_user_info(test_settings):
    """Test identity block is built from the injected settings."""
    info = get_current_user_info(test_settings)

    assert isinstance(info, UserInfo)
    assert info.user_id == f"john_doe_{date.today().strftime('%d%m%Y')}"
    assert info.email == test_settings.EMAIL
    assert info.roll_number == test_settings.ROLL_NUMBER


def test_get_current_user_info_not_cached(test_settings):
    """Test a fresh identity block per call (user_id follows the date)."""
    info1 = get_current_user_info(test_settings)
    test_settings.FULL_NAME = "jane_roe"
    info2 = get_current_user_info(test_settings)

    assert info1.user_id.startswith("john_doe_")
    assert info2.user_id.startswith("jane_roe_")
