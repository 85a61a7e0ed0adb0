"""Core types: Optional (Present, Absent) and Outcome (Success, Failure)."""

from klaw_outcome.types.matcher import Matchable, OptionalMatcher, OutcomeMatcher
from klaw_outcome.types.optional import (
    ABSENT,
    AbsentType,
    Optional,
    Present,
    absent,
    from_nullable,
    present,
)
from klaw_outcome.types.outcome import Failure, Outcome, Success, collect, failure, success

__all__ = [
    "ABSENT",
    "AbsentType",
    "Failure",
    "Matchable",
    "Optional",
    "OptionalMatcher",
    "Outcome",
    "OutcomeMatcher",
    "Present",
    "Success",
    "absent",
    "collect",
    "failure",
    "from_nullable",
    "present",
    "success",
]
