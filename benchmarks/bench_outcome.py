"""Benchmarks for Outcome type.

Run with: pytest benchmarks/bench_outcome.py --benchmark-only -v
"""

from klaw_outcome import catch, collect, failure, success

# =============================================================================
# Method call benchmarks
# =============================================================================


class TestOutcomeMethods:
    """Benchmark Outcome method calls."""

    def test_success_creation(self, benchmark):
        """Benchmark success()."""
        benchmark(success, 42)

    def test_success_map(self, benchmark):
        """Benchmark Success.map."""
        benchmark(success(5).map, lambda x: x * 2)

    def test_failure_map(self, benchmark):
        """Benchmark Failure.map."""
        benchmark(failure("error").map, lambda x: x * 2)

    def test_failure_unwrap_or_else(self, benchmark):
        """Benchmark Failure.unwrap_or_else."""
        benchmark(failure("error").unwrap_or_else, len)


# =============================================================================
# Chaining and collection benchmarks
# =============================================================================


class TestOutcomeChaining:
    """Benchmark chained Outcome operations."""

    def test_success_chain_3(self, benchmark):
        """Benchmark 3-step chain on a success."""

        def chain():
            return success(5).map(lambda x: x + 1).and_then(lambda x: success(x * 2)).map_err(str)

        benchmark(chain)

    def test_failure_chain_3(self, benchmark):
        """Benchmark 3-step chain on a failure (short-circuits)."""

        def chain():
            return failure("error").map(lambda x: x + 1).and_then(lambda x: success(x * 2)).map_err(str)

        benchmark(chain)

    def test_collect_1000(self, benchmark):
        """Collect 1000 successes."""
        outcomes = [success(i) for i in range(1000)]
        benchmark(collect, outcomes)


class TestCatchOverhead:
    """Compare @catch overhead against a bare call."""

    def test_bare_call(self, benchmark):
        """Baseline: plain function call."""

        def parse(text: str) -> int:
            return int(text)

        benchmark(parse, "42")

    def test_caught_call(self, benchmark):
        """@catch-wrapped function call."""

        @catch(exceptions=(ValueError,))
        def parse(text: str) -> int:
            return int(text)

        benchmark(parse, "42")
