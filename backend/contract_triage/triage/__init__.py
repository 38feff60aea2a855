"""Report triage — turns a finished validation report into fail / log / pass.

Usage:
    from contract_triage.triage import DefaultValidationReportHandler

    handler = DefaultValidationReportHandler()
    handler.handle_request_report("POST /pets", report)  # raises RequestValidationFailed on ERROR
"""

from contract_triage.triage.base import ValidationReportHandler
from contract_triage.triage.default_handler import DefaultValidationReportHandler, create_report_handler
from contract_triage.triage.policy import TriageAction, classify, join_levels

__all__ = [
    "ValidationReportHandler",
    "DefaultValidationReportHandler",
    "create_report_handler",
    "TriageAction",
    "classify",
    "join_levels",
]
