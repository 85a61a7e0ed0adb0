"""Optional type: Present[T] | AbsentType for values that may be missing."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, NoReturn, TypeIs

import msgspec

from klaw_outcome._logging import get_logger
from klaw_outcome.errors import InvalidUnwrap
from klaw_outcome.types.matcher import OptionalMatcher, dispatch

if TYPE_CHECKING:
    from klaw_outcome.types.outcome import Failure, Success

__all__ = [
    "ABSENT",
    "AbsentType",
    "Optional",
    "Present",
    "absent",
    "from_nullable",
    "present",
]

logger = get_logger(__name__)


class Present[T](msgspec.Struct, frozen=True, gc=False):
    """Present variant of Optional containing a value of type T.

    The variant itself records presence, so falsy payloads such as 0, "",
    False or even None are still present.

    Examples:
        >>> opt = present(42)
        >>> opt.unwrap()
        42
        >>> opt.map(lambda x: x * 2)
        Present(value=84)
        >>> present(0).is_some()
        True
    """

    value: T

    def is_some(self) -> TypeIs[Present[T]]:
        """Return True if the optional holds a value.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the optional is Present[T].
        """
        return True

    def is_none(self) -> TypeIs[AbsentType]:
        """Return False since this is Present."""
        return False

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def unwrap(self) -> T:
        """Return the contained value.

        Since this is Present, this always succeeds.
        """
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value without calling the fallback."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Present[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the value.

        Returns:
            Present containing f(value).
        """
        return Present(f(self.value))

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return f(value); the default is ignored."""
        return f(self.value)

    def map_or_else[U](self, default_f: Callable[[], U], f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return f(value) without calling default_f."""
        return f(self.value)

    def match[U](self, matcher: OptionalMatcher[U]) -> U:
        """Call matcher["Some"] with the contained value.

        Examples:
            >>> present(45).match({"Some": lambda v: v + 5, "None": lambda: 10})
            50
        """
        return dispatch(matcher, "Some", self.value)

    def ok_or[E](self, _err: E) -> Success[T]:
        """Convert to Outcome, returning success(value).

        Args:
            _err: Ignored failure payload.
        """
        from klaw_outcome.types.outcome import Success

        return Success(self.value)

    def ok_or_else[E](self, _f: Callable[[], E]) -> Success[T]:
        """Convert to Outcome, returning success(value) without calling _f."""
        from klaw_outcome.types.outcome import Success

        return Success(self.value)

    def and_[U](self, other: Present[U] | AbsentType) -> Present[U] | AbsentType:
        """Return other unchanged since this is Present."""
        return other

    def and_then[U](self, f: Callable[[T], Present[U] | AbsentType]) -> Present[U] | AbsentType:
        """Apply a function that returns an Optional to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Optional[U].

        Returns:
            The Optional returned by f.
        """
        return f(self.value)

    def or_(self, _other: Present[T] | AbsentType) -> Present[T]:
        """Return self since this is Present."""
        return self

    def or_else(self, _f: Callable[[], Present[T] | AbsentType]) -> Present[T]:
        """Return self without calling _f."""
        return self

    def xor(self, other: Present[T] | AbsentType) -> Present[T] | AbsentType:
        """Return self if other is absent, else absent."""
        if isinstance(other, Present):
            return ABSENT
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Present[T] | AbsentType:
        """Keep the value only if predicate(value) is true.

        Args:
            predicate: Function that returns True to keep the value.

        Returns:
            self if predicate(value) is true, else absent.
        """
        if predicate(self.value):
            return self
        return ABSENT

    def zip[U](self, other: Present[U] | AbsentType) -> Present[tuple[T, U]] | AbsentType:
        """Pair two present values.

        Returns present((self.value, other.value)) if other is present,
        else absent.
        """
        if isinstance(other, Present):
            return Present((self.value, other.value))
        return ABSENT

    def flatten[U](self: Present[Present[U] | AbsentType]) -> Present[U] | AbsentType:
        """Remove one level of nesting: Optional[Optional[U]] -> Optional[U]."""
        return self.value


class AbsentType(msgspec.Struct, frozen=True, gc=False):
    """Absent variant of Optional. It carries no payload.

    Use `absent()` or the `ABSENT` constant rather than instantiating this
    class; all instances compare equal.

    Examples:
        >>> absent().is_none()
        True
        >>> absent().unwrap_or(0)
        0
    """

    def is_some(self) -> TypeIs[Present[object]]:
        """Return False since this is Absent."""
        return False

    def is_none(self) -> TypeIs[AbsentType]:
        """Return True since this is Absent.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the optional is AbsentType.
        """
        return True

    def expect(self, msg: str) -> NoReturn:
        """Raise InvalidUnwrap carrying the caller's message.

        Args:
            msg: Message describing why a value was expected.

        Raises:
            InvalidUnwrap: Always.
        """
        logger.debug("optional.unwrap_failed", message=msg)
        raise InvalidUnwrap(msg)

    def unwrap(self) -> NoReturn:
        """Raise InvalidUnwrap with an empty message.

        Prefer expect() or match() so the failure explains itself.

        Raises:
            InvalidUnwrap: Always.
        """
        logger.debug("optional.unwrap_failed", message="")
        raise InvalidUnwrap()

    def unwrap_or[T](self, default: T) -> T:
        """Return the default."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return the fallback."""
        return f()

    def map[T, U](self, _f: Callable[[T], U]) -> AbsentType:
        """Return self since there is no value to map."""
        return self

    def map_or[T, U](self, default: U, _f: Callable[[T], U]) -> U:
        """Return the default without calling _f."""
        return default

    def map_or_else[T, U](self, default_f: Callable[[], U], _f: Callable[[T], U]) -> U:
        """Return default_f() without calling _f."""
        return default_f()

    def match[U](self, matcher: OptionalMatcher[U]) -> U:
        """Call matcher["None"] with no arguments."""
        return dispatch(matcher, "None")

    def ok_or[E](self, err: E) -> Failure[E]:
        """Convert to Outcome, returning failure(err).

        Args:
            err: The failure payload to wrap.
        """
        from klaw_outcome.types.outcome import Failure

        return Failure(err)

    def ok_or_else[E](self, f: Callable[[], E]) -> Failure[E]:
        """Convert to Outcome, returning failure(f()).

        Args:
            f: Function that produces the failure payload.
        """
        from klaw_outcome.types.outcome import Failure

        return Failure(f())

    def and_[U](self, _other: Present[U] | AbsentType) -> AbsentType:
        """Return self since this is Absent."""
        return self

    def and_then[T, U](self, _f: Callable[[T], Present[U] | AbsentType]) -> AbsentType:
        """Return self without calling _f."""
        return self

    def or_[T](self, other: Present[T] | AbsentType) -> Present[T] | AbsentType:
        """Return other since this is Absent."""
        return other

    def or_else[T](self, f: Callable[[], Present[T] | AbsentType]) -> Present[T] | AbsentType:
        """Return the Optional produced by f."""
        return f()

    def xor[T](self, other: Present[T] | AbsentType) -> Present[T] | AbsentType:
        """Return other, which is present exactly when the pair has one value."""
        return other

    def filter[T](self, _predicate: Callable[[T], bool]) -> AbsentType:
        """Return self without calling the predicate."""
        return self

    def zip[U](self, _other: Present[U] | AbsentType) -> AbsentType:
        """Return self since this is Absent."""
        return self

    def flatten(self) -> AbsentType:
        """Return self since there is nothing to flatten."""
        return self


ABSENT: AbsentType = AbsentType()
"""Shared instance representing the absence of a value."""


type Optional[T] = Present[T] | AbsentType


def present[T](value: T) -> Present[T]:
    """Build an Optional holding `value`."""
    return Present(value)


def absent() -> AbsentType:
    """Build an Optional holding nothing."""
    return ABSENT


def from_nullable[T](value: T | None) -> Present[T] | AbsentType:
    """Map None to absent and anything else to present(value).

    Examples:
        >>> from_nullable({"a": 1}.get("a"))
        Present(value=1)
        >>> from_nullable({"a": 1}.get("b"))
        AbsentType()
    """
    if value is None:
        return ABSENT
    return Present(value)
