"""
Tests for the repetition driver.

Validates:
    - Collection length is exactly R, results in call order
    - R <= 0 (or non-integer) is rejected before any trial runs
    - The first trial failure propagates and aborts remaining trials
    - Optional dataset argument is passed to every call
    - Trial outputs must be scalars
"""

import numpy as np
import pytest

from pysimstats.core.exceptions import InvalidInputError
from pysimstats.montecarlo import replicate


class Counter:
    """Trial function recording how many times it was called."""

    def __init__(self, fail_at=None):
        self.calls = 0
        self.fail_at = fail_at

    def __call__(self):
        k = self.calls
        self.calls += 1
        if k == self.fail_at:
            raise ZeroDivisionError(f"trial {k} failed")
        return float(k)


class TestReplicateCollection:

    @pytest.mark.parametrize("R", [1, 2, 17, 2500])
    def test_length_exactly_R(self, R):
        res = replicate(Counter(), R)
        assert len(res.values) == R
        assert res.R == R
        assert len(res) == R

    def test_call_order_preserved(self):
        counter = Counter()
        res = replicate(counter, 10)
        np.testing.assert_array_equal(res.values, np.arange(10.0))
        assert counter.calls == 10

    def test_random_trials_with_seeded_generator(self):
        def run():
            gen = np.random.default_rng(11)
            return replicate(lambda: gen.normal(5.0, 1.0, 150).max(), 200).values

        np.testing.assert_array_equal(run(), run())

    def test_values_read_only(self):
        res = replicate(Counter(), 3)
        with pytest.raises(ValueError):
            res.values[0] = 1.0

    def test_accepts_numpy_scalars_and_size_one_arrays(self):
        outputs = iter([np.float32(1.5), np.array([2.5]), 3])
        res = replicate(lambda: next(outputs), 3)
        np.testing.assert_array_equal(res.values, [1.5, 2.5, 3.0])


class TestReplicateData:

    def test_data_passed_to_each_call(self):
        seen = []

        def trial(data):
            seen.append(data)
            return sum(data)

        data = (1.0, 2.0, 3.0)
        res = replicate(trial, 4, data=data)
        np.testing.assert_array_equal(res.values, 6.0)
        assert all(d is data for d in seen)
        assert res.info['takes_data'] is True

    def test_none_is_valid_data(self):
        res = replicate(lambda d: 1.0 if d is None else 0.0, 2, data=None)
        np.testing.assert_array_equal(res.values, [1.0, 1.0])

    def test_no_data_calls_without_argument(self):
        res = replicate(lambda: 7.0, 2)
        assert res.info['takes_data'] is False


class TestReplicateErrors:

    @pytest.mark.parametrize("R", [0, -1, -5000])
    def test_non_positive_R_before_any_call(self, R):
        counter = Counter()
        with pytest.raises(InvalidInputError, match="R must be >= 1"):
            replicate(counter, R)
        assert counter.calls == 0

    @pytest.mark.parametrize("R", [2.0, "10", None])
    def test_non_integer_R(self, R):
        counter = Counter()
        with pytest.raises(InvalidInputError, match="positive integer"):
            replicate(counter, R)
        assert counter.calls == 0

    def test_first_failure_propagates_and_aborts(self):
        counter = Counter(fail_at=3)
        with pytest.raises(ZeroDivisionError, match="trial 3 failed"):
            replicate(counter, 100)
        assert counter.calls == 4

    def test_not_callable(self):
        with pytest.raises(InvalidInputError, match="callable"):
            replicate(5.0, 10)

    def test_vector_output_rejected(self):
        with pytest.raises(InvalidInputError, match="must return a scalar"):
            replicate(lambda: np.array([1.0, 2.0]), 3)

    def test_non_numeric_output_rejected(self):
        with pytest.raises(InvalidInputError, match="non-numeric"):
            replicate(lambda: "high", 3)


class TestReplicateMetadata:

    def test_nan_outputs_warn(self):
        outputs = iter([1.0, float('nan'), 2.0])
        with pytest.warns(RuntimeWarning, match="1 of 3 trials"):
            res = replicate(lambda: next(outputs), 3)
        assert res._result.has_warning("NaN")

    def test_info_timing_summary(self):
        def coin():
            return 1.0

        res = replicate(coin, 5)
        assert res.info['trial'] == 'coin'
        assert res.backend_name == 'cpu_replicate'
        assert 'trials' in res.timing
        assert "Number of trials: 5" in res.summary()
        assert "coin" in repr(res)


class TestReplicateSummaries:

    def test_delegates_to_descriptive(self):
        res = replicate(Counter(), 101)
        assert res.quantile(0.5) == 50.0
        assert res.sd() == pytest.approx(np.std(np.arange(101.0), ddof=1))
        assert res.describe(probs=[0.5]).mean == 50.0

    def test_summaries_leave_collection_unchanged(self):
        res = replicate(Counter(), 20)
        before = res.values.copy()
        res.describe()
        res.quantile([0.1, 0.9])
        np.testing.assert_array_equal(res.values, before)

    def test_identical_results_have_zero_sd(self):
        res = replicate(lambda: 3.5, 2500)
        assert res.sd() == 0.0

    def test_identical_inexact_results_have_zero_sd(self):
        assert replicate(lambda: 0.1, 3).sd() == 0.0
        assert replicate(lambda: 7.3, 2500).describe().sd == 0.0
