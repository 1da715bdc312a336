"""
Frequency transform over the extracted argument values.

This is the classical stand-in for the quantum Fourier transform applied to
the argument register. For each output index j it accumulates

    out[j] = (1/T) Σₖ v[k] · (cos θ + sin θ),   θ = 4πjk/T

The cosine and sine parts are folded into one real number per index. The
result models the relative weight of each measurement outcome rather than
a complex spectrum.
"""

from typing import Sequence

import numpy as np


def frequency_transform(values: Sequence[int], T: int, verbose: bool = False) -> np.ndarray:
    """
    Apply the combined cosine+sine transform to values.

    Args:
        values: Extracted argument-register values
        T: Register size (length of the output)
        verbose: If True, print a summary

    Returns:
        float64 array of length T
    """
    v = np.asarray(values, dtype=np.float64)

    if verbose:
        print(f"Frequency transform of {len(v)} values onto {T} outputs")

    output = np.zeros(T, dtype=np.float64)
    if len(v) == 0:
        return output

    k = np.arange(len(v), dtype=np.float64)
    # One row per output index keeps memory at O(|values|)
    for j in range(T):
        theta = 2 * np.pi * 2 * j * k / T
        output[j] = np.dot(v, np.cos(theta) + np.sin(theta)) / T

    return output
