"""
Tests for describe(), sd(), mean(), sem() and histogram().

Validates:
    - Unbiased (n-1) standard deviation; exactly 0 for identical values
    - describe() fields agree with the scalar helpers
    - Histogram hand-off: counts sum to n, len(edges) == bins + 1
    - Summaries never mutate the collection
    - InvalidInput on empty input, bad bins, bad probs
"""

import numpy as np
import pytest

from pysimstats.core.exceptions import InvalidInputError
from pysimstats.descriptive import (
    DescriptiveDesign,
    describe,
    histogram,
    mean,
    quantile,
    sd,
    sem,
)
from pysimstats.montecarlo import replicate


class TestSd:

    def test_known_value(self):
        # var(c(2,4,4,4,5,5,7,9)) = 32/7
        x = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]
        assert sd(x) == pytest.approx(np.sqrt(32.0 / 7.0), rel=1e-12)

    def test_matches_numpy_ddof1(self, rng):
        x = rng.normal(size=500)
        assert sd(x) == pytest.approx(np.std(x, ddof=1), rel=1e-12)

    @pytest.mark.parametrize("value, R", [
        (0.0, 2), (5.0, 2500), (-3.25, 17),
        (0.1, 3), (7.3, 2500), (1 / 3, 5000),
    ])
    def test_identical_values_exactly_zero(self, value, R):
        assert sd(np.full(R, value)) == 0.0

    def test_needs_two_values(self):
        with pytest.raises(InvalidInputError, match="at least 2"):
            sd([1.0])

    def test_empty(self):
        with pytest.raises(InvalidInputError, match="empty"):
            sd([])


class TestMeanSem:

    def test_mean(self):
        assert mean([1.0, 2.0, 3.0, 4.0]) == 2.5

    def test_sem(self):
        x = np.array([1.0, 2.0, 3.0, 4.0])
        assert sem(x) == pytest.approx(np.std(x, ddof=1) / 2.0, rel=1e-12)


class TestDescribe:

    def test_fields_consistent(self, rng):
        x = rng.normal(5.0, 2.0, size=1000)
        res = describe(x)
        assert res.n == 1000
        assert res.mean == pytest.approx(np.mean(x), rel=1e-12)
        assert res.sd == pytest.approx(sd(x), rel=1e-12)
        assert res.sem == pytest.approx(sd(x) / np.sqrt(1000), rel=1e-12)
        assert res.minimum == x.min()
        assert res.maximum == x.max()
        assert res.quantile_type == 7
        np.testing.assert_allclose(
            res.quantiles, quantile(x, res.quantile_probs), rtol=1e-12,
        )

    def test_quantile_at(self, rng):
        x = rng.normal(size=200)
        res = describe(x, probs=[0.5, 0.99])
        assert res.quantile_at(0.99) == quantile(x, 0.99)
        with pytest.raises(KeyError):
            res.quantile_at(0.75)

    def test_histogram_handoff(self, rng):
        x = rng.normal(size=300)
        res = describe(x, bins=12)
        assert len(res.hist_counts) == 12
        assert len(res.hist_edges) == 13
        assert res.hist_counts.sum() == 300
        assert res.hist_edges[0] == x.min()
        assert res.hist_edges[-1] == x.max()

    def test_does_not_mutate(self):
        x = np.array([5.0, 1.0, 3.0])
        before = x.copy()
        res = describe(x, probs=[0.5])
        np.testing.assert_array_equal(x, before)
        assert x.flags.writeable
        with pytest.raises(ValueError):
            res.values[0] = 0.0

    def test_single_value_sd_undefined(self):
        with pytest.warns(RuntimeWarning):
            res = describe([4.0], probs=[0.5])
        assert res.mean == 4.0
        assert np.isnan(res.sd)
        assert res.quantiles[0] == 4.0

    def test_tail_warning(self):
        with pytest.warns(RuntimeWarning, match="tail estimate"):
            res = describe(np.arange(20.0), probs=[0.01])
        assert res._result.has_warning("tail estimate")

    def test_accepts_design(self):
        design = DescriptiveDesign.from_values([1.0, 2.0, 3.0])
        assert describe(design, probs=[0.5]).n == 3

    def test_identical_inexact_values(self):
        res = describe(np.full(3, 0.1), probs=[0.5])
        assert res.sd == 0.0
        assert res.sem == 0.0

    def test_unwraps_values_attribute(self):
        res = replicate(lambda: 2.0, 4)
        assert describe(res, probs=[0.5]).n == 4

    def test_mapping_rejected(self):
        with pytest.raises(InvalidInputError, match="got dict"):
            describe({"a": 1.0, "b": 2.0})

    def test_summary_text(self, rng):
        text = describe(rng.normal(size=100), probs=[0.5]).summary()
        assert "n = 100" in text
        assert "Quantiles (type 7)" in text
        assert "Histogram: 30 bins" in text

    def test_timing(self, rng):
        res = describe(rng.normal(size=10), probs=[0.5])
        assert 'total_seconds' in res.timing
        assert res.backend_name == 'cpu_descriptive'


class TestDescribeErrors:

    def test_empty(self):
        with pytest.raises(InvalidInputError, match="empty"):
            describe([])

    @pytest.mark.parametrize("bins", [0, -2, 2.5])
    def test_bad_bins(self, bins):
        with pytest.raises(InvalidInputError, match="bins"):
            describe([1.0, 2.0], bins=bins)

    def test_bad_probs(self):
        with pytest.raises(InvalidInputError):
            describe([1.0, 2.0], probs=[0.0, 0.5])

    def test_2d(self):
        with pytest.raises(InvalidInputError):
            describe(np.zeros((2, 2)))


class TestHistogram:

    def test_counts_and_edges(self):
        counts, edges = histogram([0.0, 0.5, 1.0, 1.0], bins=2)
        np.testing.assert_array_equal(counts, [1, 3])
        np.testing.assert_allclose(edges, [0.0, 0.5, 1.0])
