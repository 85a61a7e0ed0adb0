"""Benchmarks for Optional type.

Run with: pytest benchmarks/bench_optional.py --benchmark-only -v
"""

from klaw_outcome import absent, present

# =============================================================================
# Method call benchmarks
# =============================================================================


class TestOptionalMethods:
    """Benchmark Optional method calls."""

    def test_present_creation(self, benchmark):
        """Benchmark present()."""
        benchmark(present, 42)

    def test_present_map(self, benchmark):
        """Benchmark Present.map."""
        opt = present(5)
        benchmark(opt.map, lambda x: x * 2)

    def test_absent_map(self, benchmark):
        """Benchmark Absent.map."""
        benchmark(absent().map, lambda x: x * 2)

    def test_present_unwrap_or(self, benchmark):
        """Benchmark Present.unwrap_or."""
        benchmark(present(5).unwrap_or, 0)

    def test_absent_unwrap_or(self, benchmark):
        """Benchmark Absent.unwrap_or."""
        benchmark(absent().unwrap_or, 0)


# =============================================================================
# Chaining and matching benchmarks
# =============================================================================


class TestOptionalChaining:
    """Benchmark chained Optional operations."""

    def test_present_chain_3(self, benchmark):
        """Benchmark 3-step chain on a present value."""

        def chain():
            return present(5).map(lambda x: x + 1).map(lambda x: x * 2).and_then(lambda x: present(x - 1))

        benchmark(chain)

    def test_absent_chain_3(self, benchmark):
        """Benchmark 3-step chain on absent (short-circuits)."""

        def chain():
            return absent().map(lambda x: x + 1).map(lambda x: x * 2).and_then(lambda x: present(x - 1))

        benchmark(chain)

    def test_match_handlers(self, benchmark):
        """Benchmark match() with a handler mapping."""
        opt = present(42)
        matcher = {"Some": lambda v: v, "None": lambda: 0}
        benchmark(opt.match, matcher)

    def test_ok_or(self, benchmark):
        """Benchmark conversion to Outcome."""
        benchmark(present(42).ok_or, "error")
