"""Factor extraction from a recovered period."""

from typing import Tuple

from .utils import gcd, mod_pow


def factors_from_period(x: int, N: int, period: int) -> Tuple[int, int]:
    """
    Derive a factor pair of N from the period of x^a mod N.

    An odd period cannot split x^(r/2) ± 1, so the trivial pair (1, N) is
    returned. The result is not checked for triviality; callers decide
    whether to retry.

    x^(r/2) is reduced mod N before adding or subtracting 1. This leaves
    both gcds unchanged and keeps the arithmetic exact.

    Args:
        x: Base used by the oracle
        N: Number being factored
        period: Recovered period r

    Returns:
        Tuple (gcd(x^(r/2) + 1, N), gcd(x^(r/2) - 1, N)) or (1, N)
    """
    if period % 2 != 0:
        return (1, N)

    y = mod_pow(x, period // 2, N)
    return (abs(gcd(y + 1, N)), abs(gcd(y - 1, N)))
