"""API response models."""

from pydantic import BaseModel
from typing import Optional

from contract_triage.models.errors import ValidationFailed
from contract_triage.report.models import Finding, Location


class ContractViolationResponse(BaseModel):
    """Body returned when a request or response violates the API contract."""

    error: str  # "request_validation_failed" | "response_validation_failed"
    location: Location
    message: str
    findings: Optional[list[Finding]] = None

    @classmethod
    def from_exception(cls, exc: ValidationFailed, include_findings: bool = True) -> "ContractViolationResponse":
        return cls(
            error=f"{exc.location.value.lower()}_validation_failed",
            location=exc.location,
            message=str(exc),
            findings=list(exc.report.findings) if include_findings else None,
        )
