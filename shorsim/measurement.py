"""
Measurement and period-sampling stages.

Two simulated measurements happen in each run:
- The function register is measured first. A uniformly random index is
  read, so each oracle value is seen with probability proportional to how
  often it occurs.
- After the frequency transform, the argument register is measured. One of
  the distinct_count lowest-weight outputs is picked at random and turned
  into a period.

Between the two, the argument values that could have produced the measured
oracle output are extracted at stride equal to the number of distinct
oracle outputs.

Every function takes its inputs explicitly and returns new values. The
random source is injected: any object with a numpy Generator compatible
integers(low, high) method.
"""

import heapq
from itertools import takewhile
from typing import List, NamedTuple, Sequence, Tuple

import numpy as np

from .errors import ZeroPeriodError


class PatternStats(NamedTuple):
    """Distinct oracle outputs and where the measured value sits among them."""

    distinct_count: int
    offset: int


def default_rng():
    """Fresh, OS-seeded numpy random generator."""
    return np.random.default_rng()


# =============================================================================
# Function register measurement
# =============================================================================

def measure_function_register(function_register: Sequence[int], rng) -> int:
    """
    Measure a random value from the function register.

    Args:
        function_register: Oracle outputs x^a mod N
        rng: Random source

    Returns:
        The value at a uniformly random index
    """
    index = int(rng.integers(0, len(function_register)))
    return int(function_register[index])


def preprocess_pattern(measured_value: int, function_register: Sequence[int]) -> PatternStats:
    """
    Count distinct oracle outputs and locate the measured value.

    Distinct values are kept in first-seen order, so the offset of the
    measured value equals the first exponent that produced it.

    Args:
        measured_value: Value returned by measure_function_register
        function_register: Oracle outputs

    Returns:
        PatternStats(distinct_count, offset)

    Raises:
        ValueError: if measured_value does not occur in the register
    """
    # dict preserves insertion order
    first_seen = dict.fromkeys(int(v) for v in function_register)
    distinct = list(first_seen)

    try:
        offset = distinct.index(measured_value)
    except ValueError:
        raise ValueError(
            f"Measured value {measured_value} does not occur in the function register"
        ) from None

    return PatternStats(len(distinct), offset)


# =============================================================================
# Value extraction
# =============================================================================

def extract_values(argument_register: Sequence[int], stats: PatternStats) -> Tuple[List[int], int]:
    """
    Extract the argument values consistent with the measured oracle output.

    Samples the argument register at stride distinct_count starting from
    offset. The first sample is kept at the front and the remainder is cut
    at the first zero entry, so the scan wraps at most once.

    The first sample always exists because offset < distinct_count <= T.
    When only that sample survives the result has length 1; the downstream
    distribution then has a single point and the run will most likely
    return the trivial factors.

    Args:
        argument_register: Identity register [0, ..., T-1]
        stats: Output of preprocess_pattern

    Returns:
        Tuple (extracted_values, a) where a bounds how many leading
        transform outputs carry information
    """
    T = len(argument_register)
    distinct_count, offset = stats

    working = []
    for i in range(T):
        index = distinct_count * i + offset
        if index >= T:
            break
        working.append(int(argument_register[index]))

    first, rest = working[0], working[1:]
    extracted = [first] + list(takewhile(lambda value: value != 0, rest))

    a = ((extracted[-1] - offset) // distinct_count) + 1
    return extracted, a


# =============================================================================
# Argument register measurement
# =============================================================================

def measurement_probabilities(transform_output: Sequence[float], a: int) -> np.ndarray:
    """
    Unnormalised outcome weights prob[j] = (out[j]^2 / T) / a for j < a.

    Args:
        transform_output: Output of the frequency transform (length T)
        a: Number of informative leading outputs

    Returns:
        float64 array of length a
    """
    output = np.asarray(transform_output, dtype=np.float64)
    T = len(output)
    return (output[:a] ** 2 / T) / a


def lowest_k_indices(probabilities: Sequence[float], k: int) -> List[int]:
    """
    Indices of the k smallest probabilities.

    Uses a bounded max-heap (heapq on negated weights): each index is pushed
    in order and the largest entry is evicted once the heap holds more than
    k items. Among equal probabilities the earliest index is evicted first.

    Args:
        probabilities: Outcome weights
        k: Number of indices to keep

    Returns:
        Sorted list of at most k indices
    """
    heap: List[Tuple[float, int]] = []
    for j, p in enumerate(probabilities):
        heapq.heappush(heap, (-float(p), j))
        if len(heap) > k:
            heapq.heappop(heap)
    return sorted(j for _, j in heap)


def measure_argument_register(transform_output: Sequence[float], a: int,
                              distinct_count: int, rng) -> int:
    """
    Measure the argument register after the transform.

    Picks uniformly among the distinct_count lowest-weight outcomes within
    the informative range.

    Args:
        transform_output: Output of frequency_transform
        a: Number of informative leading outputs
        distinct_count: Number of candidate outcomes to keep
        rng: Random source

    Returns:
        The selected index
    """
    probabilities = measurement_probabilities(transform_output, a)
    candidates = lowest_k_indices(probabilities, distinct_count)
    return candidates[int(rng.integers(0, len(candidates)))]


def period_from_index(T: int, index: int) -> int:
    """
    Period T // index.

    Raises:
        ZeroPeriodError: if index is 0
    """
    if index == 0:
        raise ZeroPeriodError(T)
    return T // index
