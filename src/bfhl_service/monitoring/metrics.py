"""Custom Prometheus metrics for the BFHL service.

These metrics are exposed at /metrics alongside the default HTTP metrics from
prometheus-fastapi-instrumentator.
"""

from prometheus_client import Counter, Histogram

# === Request Metrics ===

bfhl_requests_total = Counter(
    "bfhl_requests_total",
    "Total /bfhl requests by method and outcome",
    ["method", "status"],
)
"""
Labels:
- method: GET, POST, OPTIONS
- status: success, validation_error, error
"""

bfhl_request_items = Histogram(
    "bfhl_request_items",
    "Number of tokens per POST /bfhl request",
    buckets=(1, 5, 10, 50, 100, 250, 500, 1000),
)

# === Classification Metrics ===

bfhl_tokens_classified_total = Counter(
    "bfhl_tokens_classified_total",
    "Total tokens classified by category",
    ["category"],
)
"""
Labels:
- category: odd, even, alphabetic, special
"""

bfhl_classification_duration_seconds = Histogram(
    "bfhl_classification_duration_seconds",
    "Time spent in classify() per request",
    buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1),
)
