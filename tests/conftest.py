"""Shared test fixtures."""

import pytest
import structlog
from structlog.testing import LogCapture

from contract_triage.config import get_settings
from contract_triage.report.models import Location, MessageContext


@pytest.fixture
def log_output() -> LogCapture:
    """Captured structlog entries for the current test."""
    return LogCapture()


@pytest.fixture(autouse=True)
def configure_structlog(log_output: LogCapture):
    """Route all structlog output into `log_output`, at every level."""
    structlog.reset_defaults()
    structlog.configure(processors=[log_output])
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def request_context() -> MessageContext:
    return MessageContext(location=Location.REQUEST, request_method="post", request_path="/pets")
