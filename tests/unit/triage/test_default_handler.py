"""Unit tests for DefaultValidationReportHandler."""

import pytest
from structlog.testing import LogCapture

from contract_triage.config import Settings
from contract_triage.models.errors import (
    ConstructionError,
    RequestValidationFailed,
    ResponseValidationFailed,
    ValidationFailed,
)
from contract_triage.report.formats import JSON_FORMAT, SIMPLE_FORMAT, ValidationReportFormat
from contract_triage.report.models import Level, Location, ValidationReport
from contract_triage.triage.default_handler import DefaultValidationReportHandler, create_report_handler
from tests.factories import make_finding, make_report


class CountingFormat(ValidationReportFormat):
    """Third-party style format that records every render call."""

    def __init__(self) -> None:
        self.calls: list[ValidationReport] = []

    @property
    def name(self) -> str:
        return "counting"

    def render(self, report: ValidationReport) -> str:
        self.calls.append(report)
        return f"{len(report.findings)} finding(s)"


@pytest.fixture
def report_format() -> CountingFormat:
    return CountingFormat()


@pytest.fixture
def handler(report_format: CountingFormat) -> DefaultValidationReportHandler:
    return DefaultValidationReportHandler(report_format)


class TestConstruction:
    def test_default_format(self) -> None:
        assert DefaultValidationReportHandler().report_format is SIMPLE_FORMAT

    def test_none_format_fails_fast(self) -> None:
        with pytest.raises(ConstructionError, match="must not be None"):
            DefaultValidationReportHandler(None)

    def test_format_without_render_fails_fast(self) -> None:
        with pytest.raises(ConstructionError, match="render"):
            DefaultValidationReportHandler(object())

    def test_create_report_handler_uses_configured_format(self) -> None:
        handler = create_report_handler(Settings(REPORT_FORMAT="json"))
        assert handler.report_format is JSON_FORMAT


class TestFatalOutcome:
    def test_request_error_and_warn(
        self,
        handler: DefaultValidationReportHandler,
        report_format: CountingFormat,
        log_output: LogCapture,
    ) -> None:
        report = make_report(Level.WARN, Level.ERROR, Level.WARN)

        with pytest.raises(RequestValidationFailed) as exc_info:
            handler.handle_request_report("POST /pets", report)

        assert exc_info.value.report is report
        assert exc_info.value.location is Location.REQUEST
        assert report_format.calls == [report]
        assert log_output.entries == [
            {
                "location": "REQUEST",
                "key": "POST /pets",
                "levels": "ERROR,WARN",
                "message": "3 finding(s)",
                "event": "openapi_validation",
                "log_level": "error",
            }
        ]

    @pytest.mark.parametrize(
        "levels",
        [
            (Level.ERROR,),
            (Level.ERROR, Level.INFO),
            (Level.IGNORE, Level.ERROR),
            (Level.ERROR, Level.WARN, Level.INFO, Level.IGNORE),
        ],
    )
    def test_response_error_always_raises(
        self, handler: DefaultValidationReportHandler, log_output: LogCapture, levels: tuple[Level, ...]
    ) -> None:
        with pytest.raises(ResponseValidationFailed):
            handler.handle_response_report("req-42", make_report(*levels))

        assert [e["log_level"] for e in log_output.entries] == ["error"]

    def test_error_is_catchable_as_common_type(self, handler: DefaultValidationReportHandler) -> None:
        report = make_report(Level.ERROR)
        for location in Location:
            with pytest.raises(ValidationFailed) as exc_info:
                handler.process_report(location, "k", report)
            assert exc_info.value.location is location
            assert exc_info.value.report.findings[0].level is Level.ERROR

    def test_subclass_can_override_exception(self, report_format: CountingFormat) -> None:
        class CustomError(RequestValidationFailed):
            pass

        class CustomHandler(DefaultValidationReportHandler):
            def create_validation_exception(self, report, location):
                return CustomError(report)

        with pytest.raises(CustomError):
            CustomHandler(report_format).handle_request_report("k", make_report(Level.ERROR))


class TestAdvisoryOutcome:
    def test_response_warn(
        self,
        handler: DefaultValidationReportHandler,
        report_format: CountingFormat,
        log_output: LogCapture,
    ) -> None:
        report = make_report(Level.WARN)

        assert handler.handle_response_report("GET /pets", report) is None

        assert report_format.calls == [report]
        assert log_output.entries == [
            {
                "location": "RESPONSE",
                "key": "GET /pets",
                "levels": "WARN",
                "message": "1 finding(s)",
                "event": "openapi_validation",
                "log_level": "info",
            }
        ]

    @pytest.mark.parametrize("level", [Level.WARN, Level.INFO, Level.IGNORE])
    def test_each_advisory_level_logs_once_at_info(
        self, handler: DefaultValidationReportHandler, log_output: LogCapture, level: Level
    ) -> None:
        handler.handle_request_report("k", make_report(level, level, level))

        assert len(log_output.entries) == 1
        assert log_output.entries[0]["log_level"] == "info"
        assert log_output.entries[0]["levels"] == level.value

    def test_field_order(self, handler: DefaultValidationReportHandler, log_output: LogCapture) -> None:
        handler.handle_request_report("k", make_report(Level.IGNORE, Level.INFO))

        entry = log_output.entries[0]
        fields = [name for name in entry if name not in ("event", "log_level")]
        assert fields == ["location", "key", "levels", "message"]
        assert entry["levels"] == "INFO,IGNORE"

    def test_key_passed_verbatim(self, handler: DefaultValidationReportHandler, log_output: LogCapture) -> None:
        key = "GET /pets?name={x}&q=%s\n"
        handler.handle_request_report(key, make_report(Level.INFO))
        assert log_output.entries[0]["key"] == key


class TestValidOutcome:
    def test_empty_request_report(
        self,
        handler: DefaultValidationReportHandler,
        report_format: CountingFormat,
        log_output: LogCapture,
    ) -> None:
        assert handler.handle_request_report("POST /pets", ValidationReport.empty()) is None

        assert report_format.calls == []
        assert log_output.entries == [
            {
                "key": "POST /pets",
                "location": "REQUEST",
                "event": "openapi_validation_passed",
                "log_level": "debug",
            }
        ]


class TestRendering:
    def test_message_stable_across_calls(self, log_output: LogCapture) -> None:
        handler = DefaultValidationReportHandler()
        report = ValidationReport.of(make_finding(Level.WARN, key="a"), make_finding(Level.INFO, key="b"))

        handler.handle_request_report("k", report)
        handler.handle_request_report("k", report)

        first, second = log_output.entries
        assert first["message"] == second["message"] == SIMPLE_FORMAT.render(report)

    def test_injected_logger(self, report_format: CountingFormat, log_output: LogCapture) -> None:
        calls: list[tuple[str, str, dict]] = []

        class Sink:
            def __getattr__(self, method_name):
                return lambda event, **kw: calls.append((method_name, event, kw))

        handler = DefaultValidationReportHandler(report_format, logger=Sink())
        handler.handle_response_report("k", make_report(Level.INFO))

        assert calls == [
            ("info", "openapi_validation", {"location": "RESPONSE", "key": "k", "levels": "INFO", "message": "1 finding(s)"})
        ]
        assert log_output.entries == []
