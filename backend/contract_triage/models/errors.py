"""Custom exception classes for contract triage."""

from contract_triage.report.models import Level, Location, ValidationReport


class ContractTriageError(Exception):
    """Base exception for this package."""


class ConstructionError(ContractTriageError):
    """A required collaborator was missing when building a component."""


class ValidationFailed(ContractTriageError):
    """A report contained ERROR findings.

    Carries the original report so callers can inspect individual findings.
    Match on the subclasses to tell requests from responses.
    """

    location: Location

    def __init__(self, report: ValidationReport) -> None:
        errors = sum(1 for f in report.findings if f.level is Level.ERROR)
        super().__init__(
            f"{self.location.value.capitalize()} validation failed: "
            f"{errors} error(s) in {len(report.findings)} finding(s)"
        )
        self.report = report

    @staticmethod
    def for_location(location: Location, report: ValidationReport) -> "ValidationFailed":
        """Build the error subclass matching `location`."""
        if location is Location.REQUEST:
            return RequestValidationFailed(report)
        return ResponseValidationFailed(report)


class RequestValidationFailed(ValidationFailed):
    """The request violated the API contract."""

    location = Location.REQUEST


class ResponseValidationFailed(ValidationFailed):
    """The response violated the API contract."""

    location = Location.RESPONSE
