"""
User identity fields attached to every POST /bfhl response.

These are configuration plus the current date, not classification output.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from bfhl_service.config import Settings


@dataclass(frozen=True)
class UserInfo:
    """Identity block merged into the POST /bfhl response."""

    user_id: str
    email: str
    roll_number: str

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "user_id": self.user_id,
            "email": self.email,
            "roll_number": self.roll_number,
        }


def generate_user_id(full_name: str, today: Optional[date] = None) -> str:
    """
    Build a user ID in the form fullname_ddmmyyyy.

    Args:
        full_name: Display or snake_case name; whitespace runs become "_"
        today: Date to stamp (defaults to the current local date)

    Returns:
        Lower-cased user ID, e.g. "john_doe_17091999"
    """
    today = today or date.today()
    name_part = "_".join(full_name.strip().lower().split())
    return f"{name_part}_{today.strftime('%d%m%Y')}"


def get_user_info(settings: Settings, today: Optional[date] = None) -> UserInfo:
    """Build the identity block from configuration."""
    return UserInfo(
        user_id=generate_user_id(settings.FULL_NAME, today),
        email=settings.EMAIL,
        roll_number=settings.ROLL_NUMBER,
    )
