"""Contract Triage — wiring for a FastAPI host.

Configures structured logging, puts a report handler on the app state, and
registers the exception handlers that turn fatal validation outcomes into
HTTP errors.
"""

import logging
from typing import Optional

import structlog
from fastapi import FastAPI

from contract_triage.api.exception_handlers import register_exception_handlers
from contract_triage.config import Settings, get_settings
from contract_triage.triage.base import ValidationReportHandler
from contract_triage.triage.default_handler import create_report_handler

logger = structlog.get_logger()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog once for the process."""
    settings = settings or get_settings()
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown LOG_LEVEL '{settings.LOG_LEVEL}'")

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.DEBUG else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )


def install(
    app: FastAPI,
    settings: Optional[Settings] = None,
    handler: Optional[ValidationReportHandler] = None,
) -> ValidationReportHandler:
    """Attach a report handler and the contract-violation exception handlers to `app`.

    Routes and middleware reach the handler via `request.app.state.report_handler`.
    """
    settings = settings or get_settings()
    app.state.report_handler = handler or create_report_handler(settings)
    register_exception_handlers(app, settings)
    logger.info(
        "report_handler_installed",
        handler=type(app.state.report_handler).__name__,
        report_format=settings.REPORT_FORMAT,
    )
    return app.state.report_handler


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create a FastAPI app with logging configured and the report handler installed."""
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Contract Triage",
        description="Triage of API contract validation reports for requests and responses.",
        version="1.0.0",
    )
    install(app, settings)

    @app.get("/")
    async def root():
        """Root endpoint — API info."""
        return {
            "name": "Contract Triage",
            "version": "1.0.0",
            "report_format": settings.REPORT_FORMAT,
        }

    return app
