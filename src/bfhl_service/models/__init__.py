"""
Pydantic data models for the BFHL service.

Includes:
- Input models (BfhlRequest and its size limits)
- Output models (CategorizationResult)
- Enums (TokenCategory)
"""

from bfhl_service.models.enums import TokenCategory
from bfhl_service.models.input_models import (
    MAX_ITEM_LENGTH,
    MAX_ITEMS,
    MIN_ITEM_LENGTH,
    MIN_ITEMS,
    BfhlRequest,
)
from bfhl_service.models.output_models import CategorizationResult

__all__ = [
    # Enums
    "TokenCategory",
    # Input models
    "BfhlRequest",
    "MIN_ITEMS",
    "MAX_ITEMS",
    "MIN_ITEM_LENGTH",
    "MAX_ITEM_LENGTH",
    # Output models
    "CategorizationResult",
]
