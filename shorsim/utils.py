"""
Number theory utilities.

This module provides helper functions for:
- Greatest common divisor and coprimality
- Exact modular exponentiation (square-and-multiply)
- Primality and multiplicative order checks used to validate inputs

All arithmetic stays in Python integers. Floating-point powers such as
float(x) ** a lose precision once x^a exceeds the 53-bit significand, so
they are never used here.
"""

from typing import Optional


# =============================================================================
# GCD
# =============================================================================

def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor using Euclidean algorithm.

    gcd(a, 0) = a, otherwise gcd(a, b) = gcd(b, a mod b).

    Args:
        a, b: Integers

    Returns:
        GCD of a and b
    """
    while b:
        a, b = b, a % b
    return a


def is_coprime(a: int, N: int) -> bool:
    """
    Check if a and N are coprime (share no common factors).

    Args:
        a, N: Integers to check

    Returns:
        True if gcd(a, N) == 1
    """
    return gcd(a, N) == 1


# =============================================================================
# Modular exponentiation
# =============================================================================

def mod_pow(base: int, exp: int, mod: int) -> int:
    """
    Exact modular exponentiation base^exp mod mod by repeated squaring.

    Args:
        base: Base (any integer)
        exp: Non-negative exponent
        mod: Positive modulus

    Returns:
        Integer in [0, mod)
    """
    if exp < 0:
        raise ValueError(f"exponent must be non-negative, got {exp}")
    if mod == 1:
        return 0

    result = 1
    base = base % mod
    while exp > 0:
        if exp & 1:
            result = (result * base) % mod
        exp >>= 1
        base = (base * base) % mod
    return result


# =============================================================================
# Input checks
# =============================================================================

def is_prime(n: int) -> bool:
    """Deterministic trial-division primality test."""
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0:
        return False

    d = 3
    while d * d <= n:
        if n % d == 0:
            return False
        d += 2
    return True


def find_order_classical(x: int, N: int) -> Optional[int]:
    """
    Find the multiplicative order of x mod N (classical brute force).

    Returns:
        Smallest r > 0 with x^r = 1 (mod N), or None if x and N share a factor
    """
    if gcd(x, N) != 1:
        return None

    r = 1
    value = x % N
    while value != 1:
        value = (value * x) % N
        r += 1
    return r
