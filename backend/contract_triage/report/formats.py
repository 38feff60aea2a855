"""Report formats — pluggable strategies that render a ValidationReport to text.

The triage handler depends only on `ValidationReportFormat.render`; any
implementation can be injected at construction time.
"""

import json
from abc import ABC, abstractmethod

from contract_triage.report.models import Finding, ValidationReport

NO_FINDINGS = "No validation findings."


class ValidationReportFormat(ABC):
    """Abstract base for report formats.

    Contract:
        - render() is pure: same report content → same string
        - render() never raises for a well-formed report
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short name used in configuration."""
        ...

    @abstractmethod
    def render(self, report: ValidationReport) -> str:
        """Render all findings of the report into a single display string."""
        ...

    def __call__(self, report: ValidationReport) -> str:
        return self.render(report)


class SimpleValidationReportFormat(ValidationReportFormat):
    """Human-readable, one finding per line.

    Example:
        [ERROR][REQUEST][POST /pets][/name] validation.request.body.schema.required: Object has missing required properties
            * required: ["name"]   (indented with a tab)
    """

    @property
    def name(self) -> str:
        return "simple"

    def render(self, report: ValidationReport) -> str:
        if not report.findings:
            return NO_FINDINGS
        return "\n".join(self._render_finding(f) for f in report.findings)

    def _render_finding(self, finding: Finding) -> str:
        prefix = "".join(f"[{tag}]" for tag in self._tags(finding))
        message = finding.message.replace("\n", "\n\t")
        lines = [f"{prefix} {finding.key}: {message}"]
        lines.extend(f"\t* {info}" for info in finding.additional_info)
        return "\n".join(lines)

    @staticmethod
    def _tags(finding: Finding) -> list[str]:
        tags = [finding.level.value]
        ctx = finding.context
        if ctx is None:
            return tags

        if ctx.location is not None:
            tags.append(ctx.location.value)
        if ctx.request_method and ctx.request_path:
            tags.append(f"{ctx.request_method.upper()} {ctx.request_path}")
        elif ctx.request_path:
            tags.append(ctx.request_path)
        if ctx.response_status is not None:
            tags.append(str(ctx.response_status))
        if ctx.parameter:
            tags.append(ctx.parameter)
        elif ctx.pointer:
            tags.append(ctx.pointer)
        return tags


class JsonValidationReportFormat(ValidationReportFormat):
    """Compact JSON document: {"messages": [...]}, keys sorted, None fields omitted."""

    @property
    def name(self) -> str:
        return "json"

    def render(self, report: ValidationReport) -> str:
        messages = [f.model_dump(mode="json", exclude_none=True) for f in report.findings]
        return json.dumps({"messages": messages}, sort_keys=True, separators=(",", ":"))


# Module-level singletons — formats are stateless
SIMPLE_FORMAT = SimpleValidationReportFormat()
JSON_FORMAT = JsonValidationReportFormat()

_FORMATS: dict[str, ValidationReportFormat] = {
    SIMPLE_FORMAT.name: SIMPLE_FORMAT,
    JSON_FORMAT.name: JSON_FORMAT,
}


def get_report_format(name: str) -> ValidationReportFormat:
    """Resolve a configured format name ("simple" or "json")."""
    try:
        return _FORMATS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown report format '{name}'. Expected one of: {', '.join(sorted(_FORMATS))}"
        ) from None
