"""
Tests for the lazy Fibonacci and prime producers.

The producers keep their state in attributes, so tests drive them step
by step and inspect a, b / count, candidate between steps.
"""

import copy

import pytest

from cntcl.generators import (
    FibonacciGenerator, PrimeGenerator, fibonacci_sequence, generate_primes,
)


class TestFibonacci:
    """Fibonacci producer."""

    def test_first_ten(self):
        fib = fibonacci_sequence(10)
        values = []
        for _ in range(10):
            if fib.done():
                break
            values.append(fib.next())
        assert values == [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]
        assert fib.done()

    def test_state_steps(self):
        fib = FibonacciGenerator(5)
        assert (fib.a, fib.b) == (0, 1)
        assert fib.next() == 0
        assert (fib.a, fib.b) == (1, 1)
        assert fib.next() == 1
        assert (fib.a, fib.b) == (1, 2)

    def test_nothing_computed_before_request(self):
        fib = FibonacciGenerator(1000)
        assert fib.produced == 0
        assert (fib.a, fib.b) == (0, 1)

    def test_iterator_protocol(self):
        assert list(FibonacciGenerator(7)) == [0, 1, 1, 2, 3, 5, 8]

    def test_large_values_are_exact(self):
        values = list(FibonacciGenerator(94))
        assert values[-1] == 12200160415121876738


class TestPrimeGenerator:
    """Prime producer."""

    def test_first_ten(self):
        gen = generate_primes(10)
        values = []
        while not gen.done():
            values.append(gen.next())
        assert values == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]

    def test_state_steps(self):
        gen = PrimeGenerator(4)
        assert (gen.count, gen.candidate) == (0, 3)
        assert gen.next() == 2
        assert gen.count == 1
        assert gen.next() == 3
        assert (gen.count, gen.candidate) == (2, 5)
        assert gen.next() == 5
        assert gen.next() == 7
        assert gen.candidate == 9
        assert gen.done()

    def test_hundredth_prime(self):
        assert list(PrimeGenerator(100))[-1] == 541


class TestSharedContract:
    """Behaviour common to both producers."""

    @pytest.mark.parametrize("cls", [FibonacciGenerator, PrimeGenerator])
    def test_zero_count_is_done(self, cls):
        gen = cls(0)
        assert gen.done()
        assert list(gen) == []

    @pytest.mark.parametrize("cls", [FibonacciGenerator, PrimeGenerator])
    def test_exhausted_raises_stop_iteration(self, cls):
        gen = cls(2)
        gen.next()
        gen.next()
        with pytest.raises(StopIteration):
            gen.next()

    @pytest.mark.parametrize("cls", [FibonacciGenerator, PrimeGenerator])
    def test_negative_count_rejected(self, cls):
        with pytest.raises(ValueError):
            cls(-1)

    @pytest.mark.parametrize("cls", [FibonacciGenerator, PrimeGenerator])
    def test_copy_forks_state(self, cls):
        gen = cls(10)
        for _ in range(4):
            gen.next()
        fork = copy.copy(gen)
        assert list(fork) == list(gen)

    def test_not_restartable(self):
        gen = PrimeGenerator(3)
        assert list(gen) == [2, 3, 5]
        assert list(gen) == []


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
