"""
Exceptions raised by the factoring pipeline.

Two conditions are surfaced as exceptions:
- ConfigurationError: the caller supplied (x, N, t) that break the
  algorithm's preconditions. Raised before any register is built.
- ZeroPeriodError: the period sampler landed on index 0, so T / index is
  undefined. The run is discarded; retry with fresh randomness.

An odd period is not an error. It yields the trivial pair (1, N).
"""


class ShorError(Exception):
    """Base class for all errors raised by shorsim."""


class ConfigurationError(ShorError, ValueError):
    """Invalid algorithm parameters (x, N, t)."""


class ZeroPeriodError(ShorError, ArithmeticError):
    """
    The argument-register measurement selected index 0.

    The period would be T / 0, so this run cannot produce factors.
    """

    def __init__(self, T: int):
        self.T = T
        super().__init__(f"Sampled period index 0 (T={T}); retry the run")
