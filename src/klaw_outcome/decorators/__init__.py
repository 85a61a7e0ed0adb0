"""Decorators: @catch and @catch_async."""

from klaw_outcome.decorators.catch import catch, catch_async

__all__ = [
    "catch",
    "catch_async",
]
