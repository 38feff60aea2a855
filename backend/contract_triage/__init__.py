"""Contract Triage — decides what to do with API contract validation reports.

Usage:
    from contract_triage import DefaultValidationReportHandler, RequestValidationFailed

    handler = DefaultValidationReportHandler()
    try:
        handler.handle_request_report(request_id, report)
    except RequestValidationFailed as exc:
        # exc.report holds every finding
        ...
"""

from contract_triage.models.errors import (
    ConstructionError,
    ContractTriageError,
    RequestValidationFailed,
    ResponseValidationFailed,
    ValidationFailed,
)
from contract_triage.report import (
    Finding,
    Level,
    Location,
    MessageContext,
    ValidationReport,
    ValidationReportFormat,
)
from contract_triage.triage import DefaultValidationReportHandler, ValidationReportHandler

__all__ = [
    "ConstructionError",
    "ContractTriageError",
    "RequestValidationFailed",
    "ResponseValidationFailed",
    "ValidationFailed",
    "Finding",
    "Level",
    "Location",
    "MessageContext",
    "ValidationReport",
    "ValidationReportFormat",
    "DefaultValidationReportHandler",
    "ValidationReportHandler",
]
