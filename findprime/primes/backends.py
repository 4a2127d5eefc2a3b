# findprime/primes/backends.py
from abc import ABC, abstractmethod

from sympy import isprime

from .checker import PrimeChecker

BACKENDS = ("trial", "sympy")


class PrimalityBackend(ABC):
    name = ""

    @abstractmethod
    def is_prime(self, n: int) -> bool:
        ...


class TrialDivisionBackend(PrimalityBackend):
    name = "trial"

    def is_prime(self, n: int) -> bool:
        return PrimeChecker(n).is_prime()


class SympyBackend(PrimalityBackend):
    """sympy.isprime; selectable with --backend sympy and the reference for --verify."""

    name = "sympy"

    def is_prime(self, n: int) -> bool:
        # same input validation as trial division
        checker = PrimeChecker(n)
        return bool(isprime(checker.n))


def get_backend(name: str) -> PrimalityBackend:
    name = (name or "trial").lower()
    if name in ("trial", "default"):
        return TrialDivisionBackend()
    if name in ("sympy", "reference"):
        return SympyBackend()
    raise ValueError(f"Unknown backend: {name}")
