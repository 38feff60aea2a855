"""Base report handler — the interface a hosting framework calls per exchange."""

from abc import ABC, abstractmethod

from contract_triage.report.models import ValidationReport


class ValidationReportHandler(ABC):
    """Decides what happens with the validation report of a request or response.

    Contract:
        - returns None when the exchange may proceed
        - raises a ValidationFailed subclass when it must be rejected
    """

    @abstractmethod
    def handle_request_report(self, key: str, report: ValidationReport) -> None:
        """Handle the report for an incoming request.

        Args:
            key: Opaque correlation key (endpoint id, request id, ...)
            report: Finished report from the contract-validation engine
        """
        ...

    @abstractmethod
    def handle_response_report(self, key: str, report: ValidationReport) -> None:
        """Handle the report for an outgoing response."""
        ...
