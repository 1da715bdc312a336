"""
Shor's factoring algorithm, simulated classically.

Shor's algorithm factors an integer N by finding the period of
a -> x^a mod N. The quantum computer's job is period finding; here every
quantum step is replaced by a classical stand-in:

1. Build the argument register [0, T) and the function register x^a mod N
2. Measure the function register (uniform random index)
3. Count distinct oracle outputs and locate the measured one
4. Extract argument values at stride = number of distinct outputs
5. Apply the frequency transform (QFT stand-in)
6. Measure the argument register: pick one of the lowest-weight outputs
7. Period = T / peak index; factors = gcd(x^(r/2) ± 1, N)

The output consists of any two factors of N. They may differ with every run
because of the random measurements, and a run may return the trivial pair
(1, N) or raise ZeroPeriodError. Callers retry with fresh randomness.
"""

from typing import Optional, Tuple

import numpy as np

from .errors import ZeroPeriodError
from .factors import factors_from_period
from .measurement import (
    default_rng,
    extract_values,
    measure_argument_register,
    measure_function_register,
    period_from_index,
    preprocess_pattern,
)
from .params import AlgorithmParameters
from .registers import build_registers
from .transform import frequency_transform
from .utils import find_order_classical

DEFAULT_NUM_RUNS = 10

# (x, N, t) examples; 33 uses t=11 since 2^12 > 2 * 33^2
EXAMPLE_RUNS = [
    (2, 21, 9),
    (2, 15, 8),
    (2, 33, 11),
]


class ShorAlgorithm:
    """
    One factoring setup: validated parameters and their two registers.

    The registers are built once at construction and never modified, so
    run() may be called repeatedly, each call drawing fresh randomness.

    Args:
        x: Base coprime to N
        N: Odd composite number to factor
        t: Register exponent, N^2 <= 2^t <= 2N^2

    Raises:
        ConfigurationError: if the parameters violate the preconditions
    """

    def __init__(self, x: int, N: int, t: int):
        self.params = AlgorithmParameters(x, N, t).validate()
        self.argument_register, self.function_register = build_registers(self.params)

    @property
    def T(self) -> int:
        return self.params.T

    def run(self, rng=None, verbose: bool = False) -> Tuple[int, int]:
        """
        Run the pipeline once.

        Args:
            rng: Random source with integers(low, high); a fresh numpy
                 Generator if not given
            verbose: If True, print detailed progress

        Returns:
            Tuple (factor1, factor2); possibly the trivial (1, N)

        Raises:
            ZeroPeriodError: if the sampled period index is 0
        """
        if rng is None:
            rng = default_rng()

        x, N, T = self.params.x, self.params.N, self.T

        if verbose:
            print(f"Shor's Algorithm: Factoring N={N} with x={x}, T=2^{self.params.t}={T}")

        measured = measure_function_register(self.function_register, rng)
        stats = preprocess_pattern(measured, self.function_register)

        if verbose:
            print(f"Measured function register value: {measured}")
            print(f"Distinct oracle values: {stats.distinct_count}, offset of measured value: {stats.offset}")

        extracted, a = extract_values(self.argument_register, stats)

        if verbose:
            print(f"Extracted {len(extracted)} argument values, informative outputs a = {a}")

        transform_output = frequency_transform(extracted, T, verbose=verbose)
        index = measure_argument_register(transform_output, a, stats.distinct_count, rng)

        if verbose:
            print(f"Measured argument register index: {index}")

        period = period_from_index(T, index)
        factors = factors_from_period(x, N, period)

        if verbose:
            print(f"Period candidate: r = {period}")
            if period % 2 != 0:
                print("Period is odd. Algorithm failed this run.")
            print(f"Some factors of {N} are: {list(factors)}")

        return factors


def shor_factor(x: int, N: int, t: int, rng=None, verbose: bool = False) -> Tuple[int, int]:
    """
    Build a ShorAlgorithm for (x, N, t) and run it once.

    Returns:
        Tuple (factor1, factor2); possibly the trivial (1, N)

    Raises:
        ConfigurationError: if the parameters are invalid
        ZeroPeriodError: if the sampled period index is 0
    """
    return ShorAlgorithm(x, N, t).run(rng=rng, verbose=verbose)


def is_nontrivial(factors: Tuple[int, int], N: int) -> bool:
    """True if both factors are proper divisors of N."""
    return all(1 < f < N and N % f == 0 for f in factors)


def shor_factor_multiple_runs(
    x: int,
    N: int,
    t: int,
    num_runs: int = DEFAULT_NUM_RUNS,
    rng=None,
    verbose: bool = False,
) -> Optional[Tuple[int, int]]:
    """
    Run the algorithm multiple times until non-trivial factors are found.

    Since the algorithm is probabilistic, multiple runs may be needed. The
    registers are built once; each attempt draws fresh randomness. Attempts
    that hit ZeroPeriodError or return trivial factors are discarded.

    Args:
        x, N, t: Algorithm parameters
        num_runs: Maximum number of attempts
        rng: Random source shared by all attempts
        verbose: If True, print progress

    Returns:
        Tuple (factor1, factor2) if successful, or None if all runs failed

    Raises:
        ConfigurationError: if the parameters are invalid
    """
    algorithm = ShorAlgorithm(x, N, t)
    if rng is None:
        rng = default_rng()

    for run in range(num_runs):
        if verbose:
            print(f"\n{'=' * 40}")
            print(f"Run {run + 1}/{num_runs}")
            print('=' * 40)

        try:
            result = algorithm.run(rng=rng, verbose=verbose)
        except ZeroPeriodError as e:
            if verbose:
                print(f"Run discarded: {e}")
            continue

        if is_nontrivial(result, N):
            if verbose:
                print(f"\nSuccess on run {run + 1}!")
            return result

    if verbose:
        print(f"\nFailed to find factors in {num_runs} runs")
    return None


def demo_shor_examples(num_runs: int = DEFAULT_NUM_RUNS, seed: Optional[int] = None):
    """Factor the example numbers, printing one line per example."""
    rng = np.random.default_rng(seed)

    print("=" * 45)
    for i, (x, N, t) in enumerate(EXAMPLE_RUNS, start=1):
        print(f"Example {i}: Factoring {N} (x={x}, t={t}, true period {find_order_classical(x, N)})")
        result = shor_factor_multiple_runs(x, N, t, num_runs=num_runs, rng=rng)
        if result is None:
            print(f"No non-trivial factors of {N} found in {num_runs} runs")
        else:
            print(f"Some factors of {N} are: {list(result)}")
        print("=" * 45)


if __name__ == "__main__":
    demo_shor_examples()
