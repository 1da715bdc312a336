"""
Algorithm parameters and register sizing.

Conditions for the algorithm to work:
- N should not be a prime number
- N should not be an even number
- N and x should be coprime integers (only common factor is 1)
- N^2 <= 2^t <= 2N^2
"""

from dataclasses import dataclass

from .errors import ConfigurationError
from .utils import gcd, is_coprime, is_prime


@dataclass(frozen=True)
class AlgorithmParameters:
    """
    Inputs of one factoring run.

    Attributes:
        x: Base of the modular exponentiation, coprime to N
        N: Odd composite integer to factor
        t: Register exponent; registers have T = 2^t entries
    """

    x: int
    N: int
    t: int

    @property
    def T(self) -> int:
        """Register size 2^t."""
        return 1 << self.t

    def validate(self) -> "AlgorithmParameters":
        """
        Check the preconditions of the algorithm.

        Returns:
            self, so construction and validation can be chained

        Raises:
            ConfigurationError: if any precondition is violated
        """
        x, N, t = self.x, self.N, self.t

        if x < 2:
            raise ConfigurationError(f"x must be >= 2, got {x}")
        if N < 3:
            raise ConfigurationError(f"N must be >= 3, got {N}")
        if N % 2 == 0:
            raise ConfigurationError(f"N must be odd, got {N}")
        if is_prime(N):
            raise ConfigurationError(f"N must be composite, {N} is prime")
        if not is_coprime(x, N):
            raise ConfigurationError(f"{x} and {N} must be coprime (gcd = {gcd(x, N)})")
        if t < 1:
            raise ConfigurationError(f"t must be >= 1, got {t}")
        check_register_size(N, self.T)
        return self


def check_register_size(N: int, T: int):
    """
    Ensure the register size satisfies N^2 <= T <= 2N^2.

    Raises:
        ConfigurationError: if T is outside the allowed range
    """
    if not N * N <= T <= 2 * N * N:
        raise ConfigurationError(
            f"T = {T} must satisfy N^2 <= T <= 2N^2 ({N * N} <= T <= {2 * N * N})"
        )


def choose_register_exponent(N: int) -> int:
    """
    Smallest t such that N^2 <= 2^t.

    The smallest power of two at or above N^2 is always below 2N^2,
    so the returned t also satisfies the upper bound.

    Args:
        N: Number to factor

    Returns:
        Register exponent t
    """
    if N < 2:
        raise ConfigurationError(f"N must be >= 2, got {N}")
    return (N * N - 1).bit_length()
