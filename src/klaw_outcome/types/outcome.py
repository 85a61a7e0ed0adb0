"""Outcome type: Success[T] | Failure[E] for explicit error handling."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, NoReturn, TypeIs

import msgspec

from klaw_outcome._logging import get_logger
from klaw_outcome.errors import UnwrappedFailure, UnwrappedSuccess, describe
from klaw_outcome.types.matcher import OutcomeMatcher, dispatch

if TYPE_CHECKING:
    from klaw_outcome.types.optional import AbsentType, Present

__all__ = [
    "Failure",
    "Outcome",
    "Success",
    "collect",
    "failure",
    "success",
]

logger = get_logger(__name__)


def _cause(payload: object) -> BaseException | None:
    return payload if isinstance(payload, BaseException) else None


class Success[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Outcome containing a value of type T.

    Success represents the successful result of an operation. It wraps a value
    that can be extracted, transformed, or passed along a chain of
    Outcome-returning operations.

    Examples:
        >>> res = success(42)
        >>> res.unwrap()
        42
        >>> res.map(lambda x: x * 2)
        Success(value=84)
    """

    value: T

    def is_success(self) -> TypeIs[Success[T]]:
        """Return True if the outcome is a success.

        This method provides type narrowing - after checking is_success(),
        the type checker knows the outcome is Success[T].
        """
        return True

    def is_failure(self) -> TypeIs[Failure[object]]:
        """Return False since this is Success."""
        return False

    def ok(self) -> Present[T]:
        """Convert to Optional, returning present(value)."""
        from klaw_outcome.types.optional import Present

        return Present(self.value)

    def err(self) -> AbsentType:
        """Convert to Optional, returning absent since this is Success."""
        from klaw_outcome.types.optional import ABSENT

        return ABSENT

    def map[U](self, f: Callable[[T], U]) -> Success[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the success value.

        Returns:
            Success containing f(value).
        """
        return Success(f(self.value))

    def map_err[F](self, _f: Callable[[object], F]) -> Success[T]:
        """Return self unchanged since this is Success."""
        return self

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return f(value); the default is ignored."""
        return f(self.value)

    def map_or_else[U](self, default_f: Callable[[object], U], f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return f(value) without calling default_f."""
        return f(self.value)

    def match[U](self, matcher: OutcomeMatcher[U]) -> U:
        """Call matcher["Ok"] with the contained value.

        Examples:
            >>> success(10).match({"Ok": lambda v: v + 10, "Err": lambda e: 100})
            20
        """
        return dispatch(matcher, "Ok", self.value)

    def and_[U, E](self, other: Success[U] | Failure[E]) -> Success[U] | Failure[E]:
        """Return other unchanged since this is Success."""
        return other

    def and_then[U, E](self, f: Callable[[T], Success[U] | Failure[E]]) -> Success[U] | Failure[E]:
        """Apply a function that returns an Outcome to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Outcome[U, E].

        Returns:
            The Outcome returned by f.
        """
        return f(self.value)

    def or_[F](self, _other: Success[T] | Failure[F]) -> Success[T]:
        """Return self since this is Success."""
        return self

    def or_else[F](self, _f: Callable[[object], Success[T] | Failure[F]]) -> Success[T]:
        """Return self without calling _f."""
        return self

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[object], T]) -> T:  # noqa: ARG002
        """Return the contained value without calling f."""
        return self.value

    def unwrap(self) -> T:
        """Return the contained value.

        Since this is Success, this always succeeds.
        """
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise UnwrappedSuccess carrying the value.

        Raises:
            UnwrappedSuccess: Always, since a Success has no error to unwrap.
        """
        text = describe(self.value)
        logger.debug("outcome.unwrap_err_failed", value=text)
        raise UnwrappedSuccess(self.value, text)

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def expect_err(self, msg: str) -> NoReturn:
        """Raise UnwrappedSuccess with `msg` and the rendered value.

        Raises:
            UnwrappedSuccess: Always.
        """
        text = describe(self.value)
        logger.debug("outcome.unwrap_err_failed", value=text, message=msg)
        raise UnwrappedSuccess(self.value, f"{msg}: {text}")

    def flatten[U, E](self: Success[Success[U] | Failure[E]]) -> Success[U] | Failure[E]:
        """Remove one level of nesting: Outcome[Outcome[U, E], E] -> Outcome[U, E]."""
        return self.value


class Failure[E](msgspec.Struct, frozen=True, gc=False):
    """Failure variant of Outcome containing an error of type E.

    Failure represents the failed result of an operation. Its error can be
    transformed, recovered from, or handed back to the caller unchanged.

    Examples:
        >>> res = failure("something went wrong")
        >>> res.is_failure()
        True
        >>> res.unwrap_or(0)
        0
    """

    error: E

    def is_success(self) -> TypeIs[Success[object]]:
        """Return False since this is Failure."""
        return False

    def is_failure(self) -> TypeIs[Failure[E]]:
        """Return True if the outcome is a failure.

        This method provides type narrowing - after checking is_failure(),
        the type checker knows the outcome is Failure[E].
        """
        return True

    def ok(self) -> AbsentType:
        """Convert to Optional, returning absent since this is Failure."""
        from klaw_outcome.types.optional import ABSENT

        return ABSENT

    def err(self) -> Present[E]:
        """Convert to Optional, returning present(error)."""
        from klaw_outcome.types.optional import Present

        return Present(self.error)

    def map[T, U](self, _f: Callable[[T], U]) -> Failure[E]:
        """Return self unchanged since this is Failure."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Failure[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error.

        Returns:
            Failure containing f(error).
        """
        return Failure(f(self.error))

    def map_or[T, U](self, default: U, _f: Callable[[T], U]) -> U:
        """Return the default without calling _f."""
        return default

    def map_or_else[T, U](self, default_f: Callable[[E], U], _f: Callable[[T], U]) -> U:
        """Return default_f(error) without calling _f."""
        return default_f(self.error)

    def match[U](self, matcher: OutcomeMatcher[U]) -> U:
        """Call matcher["Err"] with the contained error."""
        return dispatch(matcher, "Err", self.error)

    def and_[U](self, _other: Success[U] | Failure[E]) -> Failure[E]:
        """Return self since this is Failure."""
        return self

    def and_then[T, U](self, _f: Callable[[T], Success[U] | Failure[E]]) -> Failure[E]:
        """Return self without calling _f."""
        return self

    def or_[T, F](self, other: Success[T] | Failure[F]) -> Success[T] | Failure[F]:
        """Return other since this is Failure."""
        return other

    def or_else[T, F](self, f: Callable[[E], Success[T] | Failure[F]]) -> Success[T] | Failure[F]:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Outcome.

        Returns:
            The Outcome returned by f.
        """
        return f(self.error)

    def unwrap_or[T](self, default: T) -> T:
        """Return the default."""
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute a value from the error."""
        return f(self.error)

    def unwrap(self) -> NoReturn:
        """Raise UnwrappedFailure carrying the raw error.

        When the error is an exception it is chained as the cause.

        Raises:
            UnwrappedFailure: Always, since a Failure has no value to unwrap.
        """
        text = describe(self.error)
        logger.debug("outcome.unwrap_failed", error=text)
        raise UnwrappedFailure(self.error, text) from _cause(self.error)

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def expect(self, msg: str) -> NoReturn:
        """Raise UnwrappedFailure with message "{msg}: {error}".

        Args:
            msg: Message describing why success was expected.

        Raises:
            UnwrappedFailure: Always.
        """
        text = describe(self.error)
        logger.debug("outcome.unwrap_failed", error=text, message=msg)
        raise UnwrappedFailure(self.error, f"{msg}: {text}") from _cause(self.error)

    def expect_err(self, _msg: str) -> E:
        """Return the contained error, ignoring the message."""
        return self.error

    def flatten(self) -> Failure[E]:
        """Return self since there is nothing to flatten."""
        return self


type Outcome[T, E = Exception] = Success[T] | Failure[E]


def success[T](value: T) -> Success[T]:
    """Build a successful Outcome holding `value`."""
    return Success(value)


def failure[E](error: E) -> Failure[E]:
    """Build a failed Outcome holding `error`."""
    return Failure(error)


def collect[T, E](outcomes: Iterable[Success[T] | Failure[E]]) -> Success[list[T]] | Failure[E]:
    """Collect an iterable of Outcomes into an Outcome of list.

    Stops at the first Failure; later items are not consumed.

    Args:
        outcomes: An iterable of Outcome values.

    Returns:
        Success(list[T]) if every item succeeded, otherwise the first Failure.

    Examples:
        >>> collect([success(1), success(2), success(3)])
        Success(value=[1, 2, 3])
        >>> collect([success(1), failure("fail"), success(3)])
        Failure(error='fail')
    """
    values: list[T] = []
    for outcome in outcomes:
        if isinstance(outcome, Failure):
            return outcome
        values.append(outcome.value)
    return Success(values)
