"""
FastAPI API routes and endpoints.

- routes.py: POST/GET/OPTIONS /bfhl, GET /health
- dependencies.py: Dependency injection for settings and the identity block
- models.py: API-specific response models
- error_handlers.py: Exception handlers for structured error responses
- middleware.py: Request tracing and body size limit
"""

from bfhl_service.api import dependencies, error_handlers, models
from bfhl_service.api.routes import router

__all__ = [
    "router",
    "dependencies",
    "error_handlers",
    "models",
]
