"""Tests for the match() convention and dispatch()."""

import pytest

from klaw_outcome import Matchable, MatcherError, absent, failure, present, success
from klaw_outcome.types.matcher import dispatch


class TestMatchable:
    """Tests for the Matchable protocol."""

    @pytest.mark.parametrize("value", [present(1), absent(), success(1), failure("e")])
    def test_both_types_are_matchable(self, value):
        """Every variant satisfies Matchable."""
        assert isinstance(value, Matchable)

    def test_plain_values_are_not_matchable(self):
        """Objects without match() do not satisfy Matchable."""
        assert not isinstance(5, Matchable)


class TestDispatch:
    """Tests for dispatch()."""

    def test_calls_handler_with_args(self):
        """The handler receives the positional arguments."""
        assert dispatch({"Ok": lambda a, b: a + b}, "Ok", 1, 2) == 3

    def test_extra_keys_ignored(self):
        """Handlers for other variants are not called."""
        calls = []
        matcher = {"Some": lambda v: v, "None": lambda: calls.append(1), "Other": lambda: calls.append(2)}
        assert dispatch(matcher, "Some", 7) == 7
        assert calls == []

    def test_missing_handler(self):
        """A missing handler raises MatcherError naming the variant."""
        with pytest.raises(MatcherError) as exc_info:
            dispatch({"Some": lambda v: v}, "None")
        assert exc_info.value.variant == "None"
        assert exc_info.value.provided == ("Some",)
        assert str(exc_info.value) == "No handler for variant 'None' (provided: 'Some')"

    def test_missing_handler_is_key_error(self):
        """MatcherError is a KeyError."""
        with pytest.raises(KeyError):
            dispatch({}, "Ok")

    def test_empty_matcher_message(self):
        """An empty mapping is reported as providing nothing."""
        with pytest.raises(MatcherError, match=r"provided: none"):
            dispatch({}, "Err")

    def test_handler_key_error_propagates(self):
        """A KeyError raised inside a handler is not mistaken for a missing handler."""

        def handler(v):
            return {}[v]

        with pytest.raises(KeyError) as exc_info:
            dispatch({"Ok": handler}, "Ok", "k")
        assert not isinstance(exc_info.value, MatcherError)


class TestMatchMissingHandler:
    """Tests for match() with incomplete matchers."""

    def test_optional_missing_none(self):
        """absent().match without a None handler fails loudly."""
        with pytest.raises(MatcherError):
            absent().match({"Some": lambda v: v})

    def test_outcome_missing_err(self):
        """failure().match without an Err handler fails loudly."""
        with pytest.raises(MatcherError):
            failure("e").match({"Ok": lambda v: v})

    def test_present_only_needs_some(self):
        """Only the active variant's handler is required."""
        assert present(1).match({"Some": lambda v: v + 1}) == 2
