"""Unwrap error types raised when an Optional or Outcome is consumed unchecked."""

from __future__ import annotations

from collections.abc import Iterable

from klaw_outcome._config import get_config

__all__ = [
    "InvalidUnwrap",
    "MatcherError",
    "UnwrapError",
    "UnwrappedFailure",
    "UnwrappedSuccess",
    "describe",
]


def describe(payload: object) -> str:
    """Render a payload for an error message.

    Tries str(), then repr(), then a fixed placeholder, so a payload with a
    broken __str__ never masks the unwrap error being raised. The result is
    truncated to `Config.max_payload_chars` when that limit is set.

    Examples:
        >>> describe("boom")
        'boom'
        >>> describe(ValueError("bad input"))
        'bad input'
    """
    try:
        text = str(payload)
    except Exception:  # noqa: BLE001
        try:
            text = repr(payload)
        except Exception:  # noqa: BLE001
            text = f"<unprintable {type(payload).__name__} object>"

    limit = get_config().max_payload_chars
    if limit and len(text) > limit:
        return text[:limit] + "..."
    return text


class UnwrapError(RuntimeError):
    """Base class for unwrapping the wrong variant."""


class InvalidUnwrap(UnwrapError):
    """An absent Optional was unwrapped."""

    def __init__(self, message: str = "") -> None:
        self.message = message
        super().__init__(message)


class UnwrappedFailure(UnwrapError):
    """A failed Outcome was unwrapped. The raw failure payload is kept on `.error`."""

    def __init__(self, error: object, message: str | None = None) -> None:
        self.error = error
        super().__init__(message if message is not None else describe(error))


class UnwrappedSuccess(UnwrapError):
    """A successful Outcome was unwrapped as a failure. The raw value is kept on `.value`."""

    def __init__(self, value: object, message: str | None = None) -> None:
        self.value = value
        super().__init__(message if message is not None else describe(value))


class MatcherError(KeyError):
    """A match() handler mapping has no entry for the active variant."""

    def __init__(self, variant: str, provided: Iterable[object]) -> None:
        self.variant = variant
        self.provided = tuple(provided)
        super().__init__(variant, self.provided)

    def __str__(self) -> str:
        keys = ", ".join(repr(key) for key in self.provided) or "none"
        return f"No handler for variant {self.variant!r} (provided: {keys})"
