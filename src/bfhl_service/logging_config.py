"""structlog setup for the BFHL service.

Both structlog loggers and plain ``logging.getLogger`` users (uvicorn, the
error handlers) end up on one stdout handler. Production renders one JSON
object per line; anything else gets the colored console renderer.
"""

import logging
import sys

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

SERVICE_NAME = "bfhl-service"

# Third-party loggers that would otherwise repeat the request log lines
QUIET_LOGGERS = ("uvicorn.access",)


class ServiceContext:
    """Processor stamping every event with the service name and environment."""

    def __init__(self, service: str, environment: str):
        self.service = service
        self.environment = environment

    def __call__(
        self, logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        event_dict.setdefault("app", self.service)
        event_dict.setdefault("environment", self.environment)
        return event_dict


def is_production(environment: str) -> bool:
    return environment.strip().lower() == "production"


def build_processors(environment: str, service: str = SERVICE_NAME) -> list[Processor]:
    """Processors run for both structlog and stdlib records, before rendering."""
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        ServiceContext(service, environment),
    ]
    if is_production(environment):
        # JSON has no place for a rich traceback, render it to a string field
        processors.append(structlog.processors.format_exc_info)
    return processors


def select_renderer(environment: str) -> Processor:
    if is_production(environment):
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def configure_logging(
    log_level: str = "INFO",
    environment: str = "development",
    service: str = SERVICE_NAME,
) -> logging.Handler:
    """Route structlog and stdlib logging through one stdout handler.

    Args:
        log_level: Level name; unknown names fall back to INFO
        environment: "production" selects JSON output
        service: Value of the "app" key on every event

    Returns:
        The installed root handler
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    processors = build_processors(environment, service)

    structlog.configure(
        processors=[*processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # ExtraAdder surfaces the extra={...} fields of stdlib log calls
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            select_renderer(environment),
        ],
        foreign_pre_chain=[*processors, structlog.stdlib.ExtraAdder()],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    structlog.get_logger(__name__).debug(
        "Logging configured",
        log_level=logging.getLevelName(level),
        renderer="json" if is_production(environment) else "console",
    )
    return handler
