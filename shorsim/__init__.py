"""
shorsim - A classical simulation of Shor's factoring algorithm.

This package emulates the registers, oracle, Fourier-transform period
finding and measurements of Shor's algorithm with plain arrays and
classical random sampling, then recovers factors of N by gcd.

Modules:
    params       - Algorithm parameters and precondition checks
    registers    - Argument and function registers (modular exponentiation oracle)
    measurement  - Simulated measurements, value extraction, peak sampling
    transform    - Frequency transform (QFT stand-in)
    factors      - Factor extraction from a period
    shor         - Full pipeline, retry driver and examples
    utils        - Number theory helpers (gcd, mod_pow, primality)
    errors       - Exception hierarchy

Quick Start:
    >>> from shorsim import shor_factor_multiple_runs
    >>> shor_factor_multiple_runs(2, 15, 8)  # (3, 5), (5, 3) or None
"""

# Errors
from .errors import (
    ShorError,
    ConfigurationError,
    ZeroPeriodError,
)

# Parameters
from .params import (
    AlgorithmParameters,
    check_register_size,
    choose_register_exponent,
)

# Registers
from .registers import (
    build_argument_register,
    evaluate_oracle,
    build_registers,
)

# Measurement
from .measurement import (
    PatternStats,
    measure_function_register,
    preprocess_pattern,
    extract_values,
    measurement_probabilities,
    lowest_k_indices,
    measure_argument_register,
    period_from_index,
)

# Transform
from .transform import (
    frequency_transform,
)

# Factors
from .factors import factors_from_period

# Utilities
from .utils import (
    gcd,
    is_coprime,
    mod_pow,
    is_prime,
    find_order_classical,
)

# Algorithm
from .shor import (
    ShorAlgorithm,
    shor_factor,
    shor_factor_multiple_runs,
    is_nontrivial,
    demo_shor_examples,
)

__version__ = "0.1.0"
__all__ = [
    # Errors
    "ShorError",
    "ConfigurationError",
    "ZeroPeriodError",
    # Parameters
    "AlgorithmParameters",
    "check_register_size",
    "choose_register_exponent",
    # Registers
    "build_argument_register",
    "evaluate_oracle",
    "build_registers",
    # Measurement
    "PatternStats",
    "measure_function_register",
    "preprocess_pattern",
    "extract_values",
    "measurement_probabilities",
    "lowest_k_indices",
    "measure_argument_register",
    "period_from_index",
    # Transform
    "frequency_transform",
    # Factors
    "factors_from_period",
    # Utils
    "gcd",
    "is_coprime",
    "mod_pow",
    "is_prime",
    "find_order_classical",
    # Algorithm
    "ShorAlgorithm",
    "shor_factor",
    "shor_factor_multiple_runs",
    "is_nontrivial",
    "demo_shor_examples",
]
