"""
Lazy, pull-based sequence producers.

Responsibility: Fibonacci and prime sequences computed one element per
request. State is kept in plain attributes rather than a suspended
generator frame, so it can be inspected, copied and stepped in tests.

Neither class is thread-safe; confine an instance to one thread.
"""

from .arithmetic import check_integral


class _CountedProducer:
    """Shared count bookkeeping and iterator protocol."""

    def __init__(self, count: int):
        count = check_integral("count", count)
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        self.requested = count
        self.produced = 0

    def done(self) -> bool:
        """True once `requested` elements have been produced."""
        return self.produced >= self.requested

    def next(self) -> int:
        """Advance one step and return the next element."""
        if self.done():
            raise StopIteration
        value = self._step()
        self.produced += 1
        return value

    def _step(self) -> int:
        raise NotImplementedError

    def __iter__(self):
        return self

    def __next__(self) -> int:
        return self.next()


class FibonacciGenerator(_CountedProducer):
    """
    Yields the first `count` Fibonacci numbers: 0, 1, 1, 2, 3, 5, ...

    State: (a, b), starting at (0, 1). Each step yields a and moves to
    (b, a + b).
    """

    def __init__(self, count: int):
        super().__init__(count)
        self.a = 0
        self.b = 1

    def _step(self) -> int:
        value = self.a
        self.a, self.b = self.b, self.a + self.b
        return value

    def __repr__(self):
        return (f"FibonacciGenerator(a={self.a}, b={self.b}, "
                f"produced={self.produced}/{self.requested})")


class PrimeGenerator(_CountedProducer):
    """
    Yields the first `count` primes: 2, 3, 5, 7, ...

    State:
    - count: primes yielded so far
    - candidate: next odd number to test (2 is yielded without testing)
    """

    def __init__(self, count: int):
        super().__init__(count)
        self.count = 0
        self.candidate = 3

    @staticmethod
    def _odd_is_prime(num: int) -> bool:
        # num is odd and >= 3
        i = 3
        while i * i <= num:
            if num % i == 0:
                return False
            i += 2
        return True

    def _step(self) -> int:
        if self.count == 0:
            self.count = 1
            return 2

        while not self._odd_is_prime(self.candidate):
            self.candidate += 2
        value = self.candidate
        self.candidate += 2
        self.count += 1
        return value

    def __repr__(self):
        return (f"PrimeGenerator(count={self.count}, candidate={self.candidate}, "
                f"produced={self.produced}/{self.requested})")


def fibonacci_sequence(count: int) -> FibonacciGenerator:
    """Lazy producer of the first `count` Fibonacci numbers."""
    return FibonacciGenerator(count)


def generate_primes(count: int) -> PrimeGenerator:
    """Lazy producer of the first `count` primes."""
    return PrimeGenerator(count)
