"""
FastAPI dependency injection for the BFHL service.

Tests swap these out through app.dependency_overrides, e.g. to pin the date
stamped into user_id.
"""

from functools import lru_cache

from fastapi import Depends

from bfhl_service.config import Settings, settings
from bfhl_service.processing.identity import UserInfo, get_user_info


@lru_cache()
def get_settings() -> Settings:
    """
    Get settings singleton.

    Returns:
        Settings instance
    """
    return settings


def get_current_user_info(settings: Settings = Depends(get_settings)) -> UserInfo:
    """
    Build the identity block for the current request.

    Not cached: user_id carries today's date and must roll over at midnight.

    Args:
        settings: Application settings (injected)

    Returns:
        UserInfo for the response body
    """
    return get_user_info(settings)
