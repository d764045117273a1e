"""
API routes for the /bfhl endpoint plus service info and health.
"""

import time
from datetime import datetime

import structlog
from fastapi import APIRouter, Depends, Response, status

from bfhl_service.api.dependencies import get_current_user_info, get_settings
from bfhl_service.api.models import (
    ApiInfoResponse,
    BfhlResponse,
    ErrorResponse,
    HealthResponse,
)
from bfhl_service.config import Settings
from bfhl_service.models.input_models import BfhlRequest
from bfhl_service.monitoring.metrics import (
    bfhl_classification_duration_seconds,
    bfhl_request_items,
    bfhl_requests_total,
    bfhl_tokens_classified_total,
)
from bfhl_service.processing.classifier import classify
from bfhl_service.processing.identity import UserInfo

logger = structlog.get_logger(__name__)

BFHL_PATH = "/bfhl"
BFHL_ALLOWED_METHODS = ["GET", "POST", "OPTIONS"]

EXAMPLE_REQUEST = {"data": ["a", "1", "334", "4", "R", "$"]}
EXAMPLE_RESPONSE = {
    "is_success": True,
    "user_id": "john_doe_17091999",
    "email": "john@xyz.com",
    "roll_number": "ABCD123",
    "odd_numbers": ["1"],
    "even_numbers": ["334", "4"],
    "alphabets": ["A", "R"],
    "special_characters": ["$"],
    "sum": "339",
    "concat_string": "Ra",
}

router = APIRouter()


@router.post(
    BFHL_PATH,
    response_model=BfhlResponse,
    status_code=status.HTTP_200_OK,
    summary="Classify tokens",
    description="""
    Split the tokens into odd numbers, even numbers, upper-cased alphabets
    and special characters, and return the numeric sum and the reversed,
    alternating-caps concatenation of the alphabets.
    """,
    responses={
        200: {"description": "Tokens classified"},
        400: {"model": ErrorResponse, "description": "Invalid request body"},
        413: {"model": ErrorResponse, "description": "Request body too large"},
        500: {"model": ErrorResponse, "description": "Unexpected failure"},
    },
)
async def process_data(
    request: BfhlRequest,
    user_info: UserInfo = Depends(get_current_user_info),
) -> BfhlResponse:
    """
    Classify the request tokens and attach the identity block.

    Args:
        request: Validated request body
        user_info: Identity block (injected)

    Returns:
        BfhlResponse
    """
    logger.info("BFHL request received", item_count=len(request.data))
    bfhl_request_items.observe(len(request.data))

    try:
        start_time = time.perf_counter()
        result = classify(request.data)
        bfhl_classification_duration_seconds.observe(time.perf_counter() - start_time)
    except Exception:
        bfhl_requests_total.labels(method="POST", status="error").inc()
        # Re-raise for exception handlers
        raise

    bfhl_tokens_classified_total.labels(category="odd").inc(len(result.odd_numbers))
    bfhl_tokens_classified_total.labels(category="even").inc(len(result.even_numbers))
    bfhl_tokens_classified_total.labels(category="alphabetic").inc(len(result.alphabets))
    bfhl_tokens_classified_total.labels(category="special").inc(len(result.special_characters))
    bfhl_requests_total.labels(method="POST", status="success").inc()

    logger.info(
        "BFHL request processed",
        odd=len(result.odd_numbers),
        even=len(result.even_numbers),
        alphabets=len(result.alphabets),
        specials=len(result.special_characters),
        sum=result.sum,
    )

    return BfhlResponse.from_result(result, user_info)


@router.get(
    BFHL_PATH,
    response_model=ApiInfoResponse,
    summary="API information",
)
async def api_info(settings: Settings = Depends(get_settings)) -> ApiInfoResponse:
    """Static API metadata; does not run the classifier."""
    bfhl_requests_total.labels(method="GET", status="success").inc()
    return ApiInfoResponse(
        message=f"{settings.APP_NAME} is running",
        version=settings.APP_VERSION,
        operation_code=1,
        endpoints={
            "POST /bfhl": "Process data array and return categorized results",
            "GET /bfhl": "API information and health check",
        },
        example_request=EXAMPLE_REQUEST,
        example_response=EXAMPLE_RESPONSE,
    )


@router.options(BFHL_PATH, include_in_schema=False)
async def preflight() -> Response:
    """Answer non-CORS OPTIONS requests; browser preflights stop at CORSMiddleware."""
    bfhl_requests_total.labels(method="OPTIONS", status="success").inc()
    return Response(
        status_code=status.HTTP_200_OK,
        headers={"Allow": ", ".join(BFHL_ALLOWED_METHODS)},
    )


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """The service has no downstream dependencies, so it is healthy if it answers."""
    return HealthResponse(
        status="healthy",
        version=settings.APP_VERSION,
        timestamp=datetime.utcnow(),
    )
