"""@catch and @catch_async decorators for routing exceptions into Failure."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from klaw_outcome._logging import get_logger
from klaw_outcome.types.outcome import Failure, Success

__all__ = ["catch", "catch_async"]

logger = get_logger(__name__)


@overload
def catch[**P, T](
    func: Callable[P, T],
) -> Callable[P, Success[T] | Failure[Exception]]: ...


@overload
def catch[**P, T, E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Success[T] | Failure[E]]]: ...


def catch[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[Any], ...] | None = None,
) -> Any:
    """Decorator that turns raised exceptions into Failure.

    Wraps a function so that it returns success(value) when it returns and
    failure(exception) when it raises one of `exceptions`. Anything else
    propagates.

    Can be used with or without arguments:
        @catch
        def risky(): ...

        @catch(exceptions=(ValueError, TypeError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).

    Returns:
        A wrapped function that returns Outcome[T, E] instead of T.

    Example:
        ```python
        @catch
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # Success(value=5.0)
        divide(10, 0)
        # Failure(error=ZeroDivisionError('division by zero'))
        ```
    """
    caught = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Success[T] | Failure[Any]:
        try:
            value = wrapped(*args, **kwargs)
        except caught as e:
            logger.debug("catch.failure", function=wrapped.__qualname__, error_type=type(e).__name__)
            return Failure(e)
        return Success(value)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def catch_async[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[Success[T] | Failure[Exception]]]: ...


@overload
def catch_async[**P, T, E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Success[T] | Failure[E]]]]: ...


def catch_async[**P, T](
    func: Callable[P, Awaitable[T]] | None = None,
    *,
    exceptions: tuple[type[Any], ...] | None = None,
) -> Any:
    """Async variant of @catch.

    Args:
        func: The async function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).

    Returns:
        A wrapped async function that returns Outcome[T, E] instead of T.
    """
    caught = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[P, Awaitable[T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Success[T] | Failure[Any]:
        try:
            value = await wrapped(*args, **kwargs)
        except caught as e:
            logger.debug("catch.failure", function=wrapped.__qualname__, error_type=type(e).__name__)
            return Failure(e)
        return Success(value)

    if func is not None:
        return wrapper(func)
    return wrapper
