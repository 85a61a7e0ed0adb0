"""The match() convention shared by Optional and Outcome.

Each type exposes `match(matcher)`, where `matcher` maps variant names to
handlers and the handler for the active variant is called:

    present(3).match({"Some": lambda v: v + 1, "None": lambda: 0})   # 4
    failure("x").match({"Ok": len, "Err": lambda e: -1})              # -1

Optional uses the keys "Some" and "None"; Outcome uses "Ok" and "Err".
`Matchable` exists for type annotations and isinstance checks only.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable

from klaw_outcome._logging import get_logger
from klaw_outcome.errors import MatcherError

__all__ = [
    "Matchable",
    "OptionalMatcher",
    "OutcomeMatcher",
    "dispatch",
]

logger = get_logger(__name__)

type OptionalMatcher[U] = Mapping[str, Callable[..., U]]
"""Handlers keyed "Some" (called with the value) and "None" (called with no arguments)."""

type OutcomeMatcher[U] = Mapping[str, Callable[..., U]]
"""Handlers keyed "Ok" (called with the value) and "Err" (called with the error)."""


@runtime_checkable
class Matchable(Protocol):
    """Anything with a `match(matcher)` method taking a variant-keyed mapping."""

    def match(self, matcher: Mapping[str, Callable[..., Any]]) -> Any: ...


def dispatch[U](matcher: Mapping[str, Callable[..., U]], variant: str, *args: Any) -> U:
    """Call the handler registered for `variant` with `args`.

    Raises:
        MatcherError: If `matcher` has no handler for `variant`.
    """
    try:
        handler = matcher[variant]
    except KeyError:
        logger.debug("matcher.missing_handler", variant=variant, provided=list(matcher))
        raise MatcherError(variant, matcher) from None
    return handler(*args)
