"""FastAPI exception handlers mapping fatal validation outcomes to HTTP responses."""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from contract_triage.config import Settings, get_settings
from contract_triage.models.errors import RequestValidationFailed, ResponseValidationFailed, ValidationFailed
from contract_triage.models.responses import ContractViolationResponse


def register_exception_handlers(app: FastAPI, settings: Optional[Settings] = None) -> None:
    """Register handlers for RequestValidationFailed and ResponseValidationFailed."""
    settings = settings or get_settings()

    def _violation_response(exc: ValidationFailed, status_code: int) -> JSONResponse:
        body = ContractViolationResponse.from_exception(
            exc, include_findings=settings.INCLUDE_FINDINGS_IN_RESPONSE
        )
        return JSONResponse(
            status_code=status_code,
            content=body.model_dump(mode="json", exclude_none=True),
        )

    @app.exception_handler(RequestValidationFailed)
    async def request_validation_failed_handler(request: Request, exc: RequestValidationFailed):
        """Reject a request that violates the contract."""
        return _violation_response(exc, settings.REQUEST_FAILURE_STATUS)

    @app.exception_handler(ResponseValidationFailed)
    async def response_validation_failed_handler(request: Request, exc: ResponseValidationFailed):
        """Replace a contract-violating response with an error."""
        return _violation_response(exc, settings.RESPONSE_FAILURE_STATUS)
