"""Monitoring and metrics instrumentation for the BFHL service."""

from bfhl_service.monitoring.metrics import (
    bfhl_classification_duration_seconds,
    bfhl_request_items,
    bfhl_requests_total,
    bfhl_tokens_classified_total,
)

__all__ = [
    "bfhl_requests_total",
    "bfhl_request_items",
    "bfhl_tokens_classified_total",
    "bfhl_classification_duration_seconds",
]
