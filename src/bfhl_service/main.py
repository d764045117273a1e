"""
FastAPI application entry point for the BFHL service.
"""

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from bfhl_service.api.error_handlers import EXCEPTION_HANDLERS
from bfhl_service.api.middleware import BodySizeLimitMiddleware, RequestTracingMiddleware
from bfhl_service.api.routes import BFHL_ALLOWED_METHODS
from bfhl_service.api.routes import router as bfhl_router
from bfhl_service.config import settings
from bfhl_service.logging_config import configure_logging

# Configure structured logging before the app emits anything
configure_logging(settings.LOG_LEVEL, settings.ENVIRONMENT)
logger = structlog.get_logger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Classifies string tokens into numbers, alphabets and special characters",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Middleware added last runs first: CORS, then tracing, then the size limit
app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=settings.MAX_BODY_BYTES)
app.add_middleware(RequestTracingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=False,
    allow_methods=BFHL_ALLOWED_METHODS,
    allow_headers=["Content-Type"],
)

for exc_class, handler in EXCEPTION_HANDLERS.items():
    app.add_exception_handler(exc_class, handler)

app.include_router(bfhl_router, tags=["bfhl"])


@app.on_event("startup")
async def startup():
    """Application startup."""
    logger.info(
        "Application startup",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        prometheus_enabled=settings.PROMETHEUS_ENABLED,
    )


@app.on_event("shutdown")
async def shutdown():
    """Application shutdown."""
    logger.info("Application shutdown")


if settings.PROMETHEUS_ENABLED:
    Instrumentator().instrument(app).expose(app)


@app.get("/")
async def root():
    """Root endpoint with API documentation links."""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "health": "/health",
        "bfhl": "/bfhl",
        "metrics": "/metrics" if settings.PROMETHEUS_ENABLED else None,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bfhl_service.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
