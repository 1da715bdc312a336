"""Tests for the simulated measurements and value extraction."""

import numpy as np
import pytest

from shorsim import (
    PatternStats, ZeroPeriodError, ShorError,
    build_argument_register, evaluate_oracle,
    measure_function_register, preprocess_pattern, extract_values,
    measurement_probabilities, lowest_k_indices, measure_argument_register,
    period_from_index,
)


@pytest.fixture
def register_15():
    """Function register of 2^a mod 15 with T = 256."""
    return evaluate_oracle(2, 15, 256)


class TestFunctionRegisterMeasurement:
    """Tests for measuring the function register."""

    def test_reads_value_at_sampled_index(self, register_15, scripted_rng):
        """The measured value is the register entry at the sampled index."""
        rng = scripted_rng(2, 7, 200)
        assert measure_function_register(register_15, rng) == 4
        assert measure_function_register(register_15, rng) == 8
        assert measure_function_register(register_15, rng) == 1
        assert rng.calls == [(0, 256)] * 3

    def test_values_vary(self, register_15):
        """Independent draws see more than one oracle value."""
        rng = np.random.default_rng(7)
        seen = {measure_function_register(register_15, rng) for _ in range(50)}
        assert seen <= {1, 2, 4, 8}
        assert len(seen) > 1


class TestPreprocessPattern:
    """Tests for counting distinct values and locating the measurement."""

    @pytest.mark.parametrize(
        "measured,expected_offset",
        [(1, 0), (2, 1), (4, 2), (8, 3)],
        ids=["1", "2", "4", "8"],
    )
    def test_offsets_mod_15(self, register_15, measured, expected_offset):
        """Offsets follow first-seen order 1, 2, 4, 8."""
        stats = preprocess_pattern(measured, register_15)
        assert stats == PatternStats(4, expected_offset)

    def test_mod_21(self):
        """2^a mod 21 has 6 distinct values; 11 is seen at a = 5."""
        stats = preprocess_pattern(11, evaluate_oracle(2, 21, 512))
        assert stats.distinct_count == 6
        assert stats.offset == 5

    def test_missing_value(self, register_15):
        """A value not in the register is a logic error."""
        with pytest.raises(ValueError):
            preprocess_pattern(3, register_15)


class TestExtractValues:
    """Tests for extracting period-aligned argument values."""

    def test_stride_and_offset(self):
        """Values are offset, offset + d, offset + 2d, ... below T."""
        extracted, a = extract_values(build_argument_register(256), PatternStats(4, 2))
        assert extracted == list(range(2, 256, 4))
        assert len(extracted) == 64
        assert a == 64

    def test_zero_offset_keeps_leading_zero(self):
        """A leading 0 is kept and does not truncate the scan."""
        extracted, a = extract_values(build_argument_register(256), PatternStats(4, 0))
        assert extracted[0] == 0
        assert extracted == list(range(0, 256, 4))
        assert a == 64

    def test_truncates_at_first_zero_after_first(self):
        """Scanning stops at the first zero after the first element."""
        extracted, a = extract_values([0, 3, 0, 6, 9], PatternStats(1, 0))
        assert extracted == [0, 3]
        assert a == 4

    def test_single_element(self):
        """Only the first element survives when the stride overshoots T."""
        extracted, a = extract_values(build_argument_register(4), PatternStats(4, 3))
        assert extracted == [3]
        assert a == 1


class TestArgumentRegisterMeasurement:
    """Tests for peak selection after the transform."""

    def test_probabilities(self):
        """prob[j] = (out[j]^2 / T) / a for the first a outputs."""
        probs = measurement_probabilities([2.0, -4.0, 1.0, 0.0], 2)
        assert np.allclose(probs, [0.5, 2.0])

    def test_lowest_k(self):
        """Keeps the k smallest, returned in index order."""
        assert lowest_k_indices([0.1, 0.5, 0.3, 0.9], 2) == [0, 2]
        assert lowest_k_indices([0.1, 0.5, 0.3, 0.9], 1) == [0]
        assert lowest_k_indices([0.9, 0.5, 0.3, 0.1], 2) == [2, 3]

    def test_lowest_k_more_than_available(self):
        """k larger than the input keeps everything."""
        assert lowest_k_indices([0.2, 0.1], 5) == [0, 1]

    def test_lowest_k_ties_evict_earliest(self):
        """Among equal probabilities the earliest index is evicted first."""
        assert lowest_k_indices([0.5, 0.5, 0.5], 2) == [1, 2]

    def test_measure_selects_among_lowest(self, scripted_rng):
        """The random draw indexes into the sorted lowest-k candidates."""
        # weights within a = 3: [1/3, 4/3, 1/12]; the two lowest are 0 and 2
        output = [2.0, -4.0, 1.0, 0.0]
        rng = scripted_rng(1, 0)
        assert measure_argument_register(output, 3, 2, rng) == 2
        assert measure_argument_register(output, 3, 2, rng) == 0
        assert rng.calls == [(0, 2), (0, 2)]

    def test_single_point_distribution(self, scripted_rng):
        """With a = 1 only index 0 can be selected."""
        rng = scripted_rng(0)
        assert measure_argument_register([0.25, 0.25, 0.25, 0.25], 1, 4, rng) == 0


class TestPeriodFromIndex:
    """Tests for converting a peak index into a period."""

    def test_period(self):
        assert period_from_index(256, 64) == 4
        assert period_from_index(256, 3) == 85
        assert period_from_index(512, 1) == 512

    def test_zero_index(self):
        """Index 0 raises a distinct arithmetic error."""
        with pytest.raises(ZeroPeriodError) as excinfo:
            period_from_index(256, 0)
        assert excinfo.value.T == 256
        assert isinstance(excinfo.value, ArithmeticError)
        assert isinstance(excinfo.value, ShorError)
