"""
API-specific response models for FastAPI endpoints.

These models wrap the core CategorizationResult with the identity fields and
status flag the HTTP contract requires.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field

from bfhl_service.models.output_models import CategorizationResult
from bfhl_service.processing.identity import UserInfo


class BfhlResponse(BaseModel):
    """Response for POST /bfhl."""

    is_success: bool = Field(default=True, description="Always true on 200")
    user_id: str = Field(
        description="fullname_ddmmyyyy",
        examples=["john_doe_17091999"],
    )
    email: str = Field(examples=["john@xyz.com"])
    roll_number: str = Field(examples=["ABCD123"])
    odd_numbers: list[str] = Field(examples=[["1"]])
    even_numbers: list[str] = Field(examples=[["334", "4"]])
    alphabets: list[str] = Field(examples=[["A", "R"]])
    special_characters: list[str] = Field(examples=[["$"]])
    sum: str = Field(examples=["339"])
    concat_string: str = Field(examples=["Ra"])

    @classmethod
    def from_result(cls, result: CategorizationResult, user_info: UserInfo) -> "BfhlResponse":
        """Merge a classification result with the identity block."""
        return cls(
            is_success=True,
            **user_info.to_dict(),
            **result.model_dump(),
        )


class ApiInfoResponse(BaseModel):
    """Response for GET /bfhl (static API metadata)."""

    message: str = Field(examples=["BFHL API is running"])
    version: str = Field(examples=["1.0.0"])
    operation_code: int = Field(default=1)
    endpoints: dict[str, str] = Field(
        description="Method + path to short description",
    )
    example_request: dict[str, Any]
    example_response: dict[str, Any]


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str = Field(
        description="Overall health status",
        examples=["healthy"],
    )
    version: str = Field(examples=["1.0.0"])
    timestamp: datetime = Field(
        default_factory=datetime.utcnow,
        description="Health check timestamp (UTC)",
    )


class ValidationErrorDetail(BaseModel):
    """One itemized request validation failure."""

    field: str = Field(
        description="Dotted path into the request body ('' for the body itself)",
        examples=["data.3"],
    )
    message: str = Field(examples=["Each element cannot exceed 100 characters"])


class ErrorResponse(BaseModel):
    """Standard error response format."""

    is_success: bool = Field(default=False)
    error: str = Field(
        description="Short error summary",
        examples=["Validation failed", "Method not allowed", "Internal server error"],
    )
    details: Optional[list[ValidationErrorDetail]] = Field(
        default=None,
        description="Itemized validation failures (400 only)",
    )
    allowed_methods: Optional[list[str]] = Field(
        default=None,
        description="Methods supported by the path (405 only)",
    )
