# findprime/primes/cli.py
# Usage: python -m findprime.primes.cli [--backend trial|sympy] [--verify] [--explain] N [N ...]
# FINDPRIME_BACKEND sets the default backend.

import argparse
import os
import sys
import time

from findprime.primes.backends import BACKENDS, SympyBackend, get_backend
from findprime.primes.checker import PrimeChecker


def _format_result(n: int, result: bool, explain: bool) -> str:
    line = f"{n}: {'true' if result else 'false'}"
    if not explain:
        return line
    checker = PrimeChecker(n)
    if n < checker.LOWER_BOUND:
        return f"{line} (below {checker.LOWER_BOUND})"
    detail = f"upper bound {checker.upper_bound()}"
    # primes need no witness; skip the divisor search
    if not result:
        detail += f", divisible by {checker.smallest_factor()}"
    return f"{line} ({detail})"


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Trial-division primality check")
    parser.add_argument("numbers", type=int, nargs="+", metavar="N", help="Integers to test")
    parser.add_argument(
        "--backend",
        type=str,
        default=os.environ.get("FINDPRIME_BACKEND", "trial"),
        choices=list(BACKENDS),
        help="Primality backend to use (default: $FINDPRIME_BACKEND or trial)",
    )
    parser.add_argument("--verify", action="store_true", help="Cross-check every result against sympy")
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Show the upper bound, and for composites the smallest factor (found by trial division)",
    )
    parser.add_argument("--verbose", action="store_true", help="Print status lines to stderr")
    args = parser.parse_args(argv)

    try:
        backend = get_backend(args.backend)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    reference = SympyBackend() if args.verify else None
    if args.verbose:
        print(f"[findprime] Backend: {backend.name}", file=sys.stderr)

    status = 0
    t0 = time.time()
    for n in args.numbers:
        try:
            result = backend.is_prime(n)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2
        print(_format_result(n, result, args.explain))
        if reference is not None:
            expected = reference.is_prime(n)
            if expected != result:
                print(
                    f"Mismatch for {n}: {backend.name}={result} reference={expected}",
                    file=sys.stderr,
                )
                status = 1
    dt = time.time() - t0

    if args.verbose:
        print(f"[findprime] Checked {len(args.numbers)} number(s) in {dt:.3f}s", file=sys.stderr)
    return status


if __name__ == "__main__":
    raise SystemExit(main())
