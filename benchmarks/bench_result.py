"""Benchmarks for Result construction, combinators and wrappers.

Run with: pytest benchmarks/bench_result.py --benchmark-only -v
"""

from lib_result import Err, Ok, err_from_object, to_error, wrap, wrap_throwable

# =============================================================================
# Creation benchmarks
# =============================================================================


class TestCreation:
    """Benchmark Ok/Err creation."""

    def test_ok_creation(self, benchmark):
        benchmark(Ok, 42)

    def test_err_creation(self, benchmark):
        error = ValueError('error')
        benchmark(Err, error)

    def test_err_from_object(self, benchmark):
        benchmark(err_from_object, {'message': 'Not found', 'code': 404})


# =============================================================================
# Combinator benchmarks
# =============================================================================


class TestCombinators:
    """Benchmark common method calls."""

    def test_map(self, benchmark):
        ok = Ok(5)
        benchmark(ok.map, lambda x: x * 2)

    def test_map_capturing_exception(self, benchmark):
        """Cost of a callback that raises inside map."""
        ok = Ok('not a number')
        benchmark(ok.map, int)

    def test_pipe(self, benchmark):
        ok = Ok(5)
        benchmark(ok.pipe, lambda x: Ok(x * 2))

    def test_pipe_chain(self, benchmark):
        """Chain of 10 pipes."""

        def chain():
            result = Ok(0)
            for _ in range(10):
                result = result.pipe(lambda x: Ok(x + 1))
            return result

        benchmark(chain)

    def test_err_pipe_short_circuit(self, benchmark):
        err = Err(ValueError('error'))
        benchmark(err.pipe, lambda x: Ok(x * 2))

    def test_match(self, benchmark):
        ok = Ok(5)
        benchmark(ok.match, str, repr)

    def test_unwrap_or(self, benchmark):
        err = Err(ValueError('error'))
        benchmark(err.unwrap_or, 0)


# =============================================================================
# Wrapping and normalization benchmarks
# =============================================================================


class TestWrapping:
    """Benchmark the wrapping layer."""

    def test_wrap_success(self, benchmark):
        benchmark(wrap, lambda: 42)

    def test_wrap_failure(self, benchmark):
        def fail():
            raise ValueError('error')

        benchmark(wrap, fail)

    def test_wrap_throwable_call(self, benchmark):
        @wrap_throwable
        def parse(text: str) -> int:
            return int(text)

        benchmark(parse, '42')

    def test_to_error_mapping(self, benchmark):
        benchmark(to_error, {'message': 'Not found', 'code': 404})
