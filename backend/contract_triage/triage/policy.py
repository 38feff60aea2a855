"""Triage policy — reduces a report's distinct levels to a single action.

Rules, first match wins:
    1. ERROR present                  → FAIL  (raise, log at error)
    2. any of WARN / INFO / IGNORE    → LOG   (log at info, return normally)
    3. no levels at all               → PASS  (debug trace only)

The policy is fixed; swapping the report format never changes it.
"""

from enum import Enum
from typing import Iterable

from contract_triage.report.models import Level, sort_levels

LEVEL_DELIMITER = ","

ADVISORY_LEVELS = frozenset({Level.WARN, Level.INFO, Level.IGNORE})


class TriageAction(str, Enum):
    FAIL = "fail"
    LOG = "log"
    PASS = "pass"


def classify(levels: Iterable[Level]) -> TriageAction:
    distinct = set(levels)
    if Level.ERROR in distinct:
        return TriageAction.FAIL
    if distinct & ADVISORY_LEVELS:
        return TriageAction.LOG
    return TriageAction.PASS


def join_levels(levels: Iterable[Level]) -> str:
    """Distinct levels in natural order, e.g. "ERROR,WARN"."""
    return LEVEL_DELIMITER.join(level.value for level in sort_levels(levels))
