"""Report models — severity levels, message context, findings, and the validation report.

Reports are produced by an external contract-validation engine and are treated
as immutable values here: every "modifying" operation returns a new report.
"""

from enum import Enum
from typing import Iterable, Optional

from pydantic import BaseModel


class Level(str, Enum):
    """Finding severity levels, declared in natural order (most severe first)."""

    ERROR = "ERROR"    # Contract violated, the exchange must be rejected
    WARN = "WARN"      # Suspicious but tolerated
    INFO = "INFO"      # Informational only
    IGNORE = "IGNORE"  # Finding suppressed by the validation engine's level config

    @property
    def rank(self) -> int:
        """Position in the natural order — ERROR is 0."""
        return list(Level).index(self)

    def __str__(self) -> str:
        return self.value


class Location(str, Enum):
    """Which side of an HTTP exchange a report describes."""

    REQUEST = "REQUEST"
    RESPONSE = "RESPONSE"

    def __str__(self) -> str:
        return self.value


class MessageContext(BaseModel):
    """Where in the exchange a finding was raised."""

    model_config = {"frozen": True}

    location: Optional[Location] = None
    request_method: Optional[str] = None
    request_path: Optional[str] = None
    response_status: Optional[int] = None
    parameter: Optional[str] = None  # Parameter name, e.g. "query 'limit'"
    pointer: Optional[str] = None    # JSON pointer into the body, e.g. "/items/0/id"

    def fill_from(self, other: "MessageContext") -> "MessageContext":
        """Return a copy with missing fields taken from `other`."""
        own = self.model_dump(exclude_none=True)
        return MessageContext(**{**other.model_dump(exclude_none=True), **own})


class Finding(BaseModel):
    """A single contract-conformance issue."""

    model_config = {"frozen": True}

    key: str
    level: Level
    message: str
    additional_info: tuple[str, ...] = ()
    context: Optional[MessageContext] = None


class ValidationReport(BaseModel):
    """The complete set of findings for one request or response."""

    model_config = {"frozen": True}

    findings: tuple[Finding, ...] = ()

    @classmethod
    def empty(cls) -> "ValidationReport":
        return cls()

    @classmethod
    def of(cls, *findings: Finding) -> "ValidationReport":
        return cls(findings=tuple(findings))

    @property
    def levels(self) -> frozenset[Level]:
        """Distinct levels present across all findings."""
        return frozenset(f.level for f in self.findings)

    def sorted_levels(self) -> tuple[Level, ...]:
        """Distinct levels in natural order (ERROR, WARN, INFO, IGNORE)."""
        return sort_levels(self.levels)

    def has_errors(self) -> bool:
        return Level.ERROR in self.levels

    def merge(self, other: "ValidationReport") -> "ValidationReport":
        """Return a report with this report's findings followed by `other`'s."""
        return ValidationReport(findings=self.findings + other.findings)

    def with_context(self, context: MessageContext) -> "ValidationReport":
        """Attach `context` to every finding, keeping fields a finding already has."""
        findings = []
        for finding in self.findings:
            merged = finding.context.fill_from(context) if finding.context else context
            findings.append(finding.model_copy(update={"context": merged}))
        return ValidationReport(findings=tuple(findings))


def sort_levels(levels: Iterable[Level]) -> tuple[Level, ...]:
    """Deduplicate `levels` and order them by rank."""
    return tuple(sorted(set(levels), key=lambda level: level.rank))
