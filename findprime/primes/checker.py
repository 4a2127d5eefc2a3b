# findprime/primes/checker.py
# Trial-division primality check bounded by ceil(sqrt(n)).
from dataclasses import dataclass
from math import isqrt
from typing import Optional


class InvalidArgument(ValueError):
    pass


@dataclass(frozen=True)
class PrimeChecker:
    n: int

    LOWER_BOUND = 2

    def __post_init__(self):
        if isinstance(self.n, bool) or not isinstance(self.n, int):
            raise InvalidArgument(f"Expected a non-negative integer, got {self.n!r}")
        if self.n < 0:
            raise InvalidArgument(f"Expected a non-negative integer, got {self.n}")

    def upper_bound(self) -> int:
        """Smallest u with u * u >= n, computed without floats."""
        r = isqrt(self.n)
        return r if r * r == self.n else r + 1

    def is_prime(self) -> bool:
        return self.n >= self.LOWER_BOUND and self.smallest_factor() is None

    def smallest_factor(self) -> Optional[int]:
        """First divisor in [2, upper_bound] that divides n, or None."""
        if self.n < self.LOWER_BOUND:
            return None
        for d in self._divisors():
            if self.n % d == 0:
                return d
        return None

    def _divisors(self) -> range:
        # capped at n - 1 so 2 and 3 are never tested against themselves
        upper = min(self.upper_bound(), self.n - 1)
        return range(self.LOWER_BOUND, upper + 1)
