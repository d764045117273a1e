"""
Input data models for the BFHL service.

BfhlRequest is the shape contract for POST /bfhl. FastAPI validates the body
against it before the classifier runs, so the classifier only ever sees
well-formed data on the HTTP path.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

MIN_ITEMS = 1
MAX_ITEMS = 1000
MIN_ITEM_LENGTH = 1
MAX_ITEM_LENGTH = 100

Token = Annotated[
    str,
    StringConstraints(min_length=MIN_ITEM_LENGTH, max_length=MAX_ITEM_LENGTH),
]


class BfhlRequest(BaseModel):
    """Request body for POST /bfhl."""

    # Unknown top-level keys are dropped, not rejected
    model_config = ConfigDict(extra="ignore")

    data: list[Token] = Field(
        ...,
        min_length=MIN_ITEMS,
        max_length=MAX_ITEMS,
        description="Tokens to classify (1-1000 items, each 1-100 characters)",
        examples=[["a", "1", "334", "4", "R", "$"]],
    )
