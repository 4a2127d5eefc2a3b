import pytest

from findprime.primes.backends import (
    BACKENDS,
    PrimalityBackend,
    SympyBackend,
    TrialDivisionBackend,
    get_backend,
)
from findprime.primes.checker import InvalidArgument


@pytest.mark.parametrize(
    "name, cls",
    [
        ("trial", TrialDivisionBackend),
        ("default", TrialDivisionBackend),
        ("TRIAL", TrialDivisionBackend),
        ("sympy", SympyBackend),
        ("reference", SympyBackend),
        (None, TrialDivisionBackend),
    ],
)
def test_get_backend(name, cls):
    backend = get_backend(name)
    assert isinstance(backend, cls)
    assert isinstance(backend, PrimalityBackend)


def test_get_backend_unknown():
    with pytest.raises(ValueError, match="Unknown backend: sieve"):
        get_backend("sieve")


def test_canonical_names_resolve():
    for name in BACKENDS:
        assert get_backend(name).name == name


def test_backends_agree():
    trial = TrialDivisionBackend()
    reference = SympyBackend()
    for n in range(0, 2000):
        assert trial.is_prime(n) == reference.is_prime(n), n


@pytest.mark.parametrize("backend", [TrialDivisionBackend(), SympyBackend()])
def test_backends_reject_negative(backend):
    with pytest.raises(InvalidArgument):
        backend.is_prime(-7)


def test_backend_is_abstract():
    with pytest.raises(TypeError):
        PrimalityBackend()
