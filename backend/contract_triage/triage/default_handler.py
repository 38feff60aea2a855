"""Default report handler — logs findings and raises on ERROR.

Outcome per report:
    - ERROR present          → log.error + raise RequestValidationFailed / ResponseValidationFailed
    - only WARN/INFO/IGNORE  → log.info, return normally
    - no findings            → log.debug that the exchange is valid

To change how findings are rendered, inject another ValidationReportFormat.
"""

from typing import Any, Callable, Optional

import structlog

from contract_triage.config import Settings, get_settings
from contract_triage.models.errors import ConstructionError, ValidationFailed
from contract_triage.report.formats import SIMPLE_FORMAT, ValidationReportFormat, get_report_format
from contract_triage.report.models import Level, Location, ValidationReport
from contract_triage.triage.base import ValidationReportHandler
from contract_triage.triage.policy import TriageAction, classify, join_levels

logger = structlog.get_logger()

LOG_EVENT = "openapi_validation"
VALID_EVENT = "openapi_validation_passed"


class DefaultValidationReportHandler(ValidationReportHandler):
    """Logs every report through structlog; fatal reports are raised as typed errors.

    Holds no state besides the injected format and logger, so one instance can
    serve concurrent requests.
    """

    def __init__(
        self,
        report_format: Optional[ValidationReportFormat] = SIMPLE_FORMAT,
        logger: Optional[Any] = None,
    ):
        """Initialize with a report format.

        Args:
            report_format: Strategy used to render findings. Defaults to the simple format.
            logger: structlog-compatible logger. Defaults to the module logger.

        Raises:
            ConstructionError: if report_format is None or has no callable render().
        """
        if report_format is None:
            raise ConstructionError("report_format must not be None")
        if not callable(getattr(report_format, "render", None)):
            raise ConstructionError(
                f"report_format must provide render(report), got {type(report_format).__name__}"
            )
        self._report_format = report_format
        self._logger = logger

    @property
    def report_format(self) -> ValidationReportFormat:
        return self._report_format

    def handle_request_report(self, key: str, report: ValidationReport) -> None:
        self.process_report(Location.REQUEST, key, report)

    def handle_response_report(self, key: str, report: ValidationReport) -> None:
        self.process_report(Location.RESPONSE, key, report)

    def process_report(self, location: Location, key: str, report: ValidationReport) -> None:
        """Triage one report: exactly one log call, plus a raise for ERROR."""
        log = self._logger if self._logger is not None else logger
        levels = report.sorted_levels()
        action = classify(levels)

        if action is TriageAction.FAIL:
            error = self.create_validation_exception(report, location)
            self._log_validation(log.error, location, key, levels, self._report_format.render(report))
            raise error

        if action is TriageAction.LOG:
            self._log_validation(log.info, location, key, levels, self._report_format.render(report))
            return

        log.debug(VALID_EVENT, key=key, location=location.value)

    def create_validation_exception(
        self, report: ValidationReport, location: Location
    ) -> ValidationFailed:
        """Build the location-typed error carrying the original report."""
        return ValidationFailed.for_location(location, report)

    @staticmethod
    def _log_validation(
        log_method: Callable[..., Any],
        location: Location,
        key: str,
        levels: tuple[Level, ...],
        message: str,
    ) -> None:
        log_method(
            LOG_EVENT,
            location=location.value,
            key=key,
            levels=join_levels(levels),
            message=message,
        )


def create_report_handler(settings: Optional[Settings] = None) -> DefaultValidationReportHandler:
    """Build a handler using the configured report format."""
    settings = settings or get_settings()
    return DefaultValidationReportHandler(get_report_format(settings.REPORT_FORMAT))
