"""klaw-outcome: Optional and Outcome types for Python 3.13+.

Flat imports (preferred):
    from klaw_outcome import present, absent, success, failure
    from klaw_outcome import Optional, Outcome, catch

Submodule imports (for organization):
    from klaw_outcome.types import Present, AbsentType, Success, Failure
    from klaw_outcome.errors import InvalidUnwrap, UnwrappedFailure
    from klaw_outcome.decorators import catch
"""

# Configuration and logging
from klaw_outcome._config import Config, get_config, init
from klaw_outcome._logging import configure_logging, get_logger

# Decorators
from klaw_outcome.decorators import catch, catch_async

# Errors
from klaw_outcome.errors import (
    InvalidUnwrap,
    MatcherError,
    UnwrapError,
    UnwrappedFailure,
    UnwrappedSuccess,
)

# Types
from klaw_outcome.types import (
    ABSENT,
    AbsentType,
    Failure,
    Matchable,
    Optional,
    OptionalMatcher,
    Outcome,
    OutcomeMatcher,
    Present,
    Success,
    absent,
    collect,
    failure,
    from_nullable,
    present,
    success,
)

__all__ = [
    "ABSENT",
    "AbsentType",
    "Config",
    "Failure",
    "InvalidUnwrap",
    "Matchable",
    "MatcherError",
    "Optional",
    "OptionalMatcher",
    "Outcome",
    "OutcomeMatcher",
    "Present",
    "Success",
    "UnwrapError",
    "UnwrappedFailure",
    "UnwrappedSuccess",
    "absent",
    "catch",
    "catch_async",
    "collect",
    "configure_logging",
    "failure",
    "from_nullable",
    "get_config",
    "get_logger",
    "init",
    "present",
    "success",
]
