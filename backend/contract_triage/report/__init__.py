"""Validation reports and the formats that render them.

Usage:
    from contract_triage.report import ValidationReport, SIMPLE_FORMAT

    text = SIMPLE_FORMAT.render(report)
"""

from contract_triage.report.formats import (
    JSON_FORMAT,
    SIMPLE_FORMAT,
    JsonValidationReportFormat,
    SimpleValidationReportFormat,
    ValidationReportFormat,
    get_report_format,
)
from contract_triage.report.models import Finding, Level, Location, MessageContext, ValidationReport

__all__ = [
    "Finding",
    "Level",
    "Location",
    "MessageContext",
    "ValidationReport",
    "ValidationReportFormat",
    "SimpleValidationReportFormat",
    "JsonValidationReportFormat",
    "SIMPLE_FORMAT",
    "JSON_FORMAT",
    "get_report_format",
]
