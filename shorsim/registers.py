"""
Argument and function registers.

The argument register holds every exponent a in [0, T), standing in for
the uniform superposition over the input register. The function register
holds the oracle output x^a mod N at the same index, standing in for the
entangled output register after modular exponentiation.

Both registers are numpy arrays marked read-only once populated.
"""

from typing import Tuple

import numpy as np

from .params import AlgorithmParameters, check_register_size
from .utils import mod_pow


def _freeze(register: np.ndarray) -> np.ndarray:
    register.setflags(write=False)
    return register


def build_argument_register(T: int) -> np.ndarray:
    """
    Argument register [0, 1, ..., T-1].

    Args:
        T: Register size

    Returns:
        Read-only int64 array of length T
    """
    return _freeze(np.arange(T, dtype=np.int64))


def evaluate_oracle(x: int, N: int, T: int) -> np.ndarray:
    """
    Function register: index a holds x^a mod N.

    Each entry is computed with exact square-and-multiply, so values are
    correct for any x, N and a.

    Args:
        x: Base
        N: Modulus
        T: Register size

    Returns:
        Read-only int64 array of length T with values in [0, N)
    """
    values = np.fromiter((mod_pow(x, a, N) for a in range(T)), dtype=np.int64, count=T)
    return _freeze(values)


def build_registers(params: AlgorithmParameters) -> Tuple[np.ndarray, np.ndarray]:
    """
    Build the argument and function registers for one run.

    Args:
        params: Algorithm parameters

    Returns:
        Tuple (argument_register, function_register)

    Raises:
        ConfigurationError: if T does not satisfy N^2 <= T <= 2N^2
    """
    T = params.T
    check_register_size(params.N, T)

    argument_register = build_argument_register(T)
    function_register = evaluate_oracle(params.x, params.N, T)
    return argument_register, function_register
