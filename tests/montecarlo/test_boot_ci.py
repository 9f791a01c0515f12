"""
Tests for bootstrap confidence intervals.

Tests the normal, basic and percentile methods against their formulas.
"""

import numpy as np
import pytest
from scipy import stats as sp_stats

from pysimstats.core.defaults import EXACT
from pysimstats.core.exceptions import InvalidInputError
from pysimstats.descriptive import quantile
from pysimstats.montecarlo import boot_ci, bootstrap_mean


@pytest.fixture
def boot100():
    return bootstrap_mean(np.arange(1.0, 101.0), R=2000, rng=42)


class TestPercentileCI:

    def test_contains_true_mean(self, boot100):
        lo, hi = boot_ci(boot100, type="perc").ci["perc"]
        assert lo < 50.5 < hi

    def test_formula(self, boot100):
        lo, hi = boot_ci(boot100, conf_level=0.9, type="perc").ci["perc"]
        assert lo == pytest.approx(quantile(boot100.t, 0.05), rel=EXACT.rtol)
        assert hi == pytest.approx(quantile(boot100.t, 0.95), rel=EXACT.rtol)


class TestBasicCI:

    def test_formula(self, boot100):
        lo, hi = boot_ci(boot100, type="basic").ci["basic"]
        q = quantile(boot100.t, [0.025, 0.975])
        assert lo == pytest.approx(2 * boot100.t0 - q[1], rel=EXACT.rtol)
        assert hi == pytest.approx(2 * boot100.t0 - q[0], rel=EXACT.rtol)


class TestNormalCI:

    def test_formula(self, boot100):
        lo, hi = boot_ci(boot100, type="normal").ci["normal"]
        center = 2 * boot100.t0 - np.mean(boot100.t)
        z = sp_stats.norm.ppf(0.975)
        assert lo == pytest.approx(center - z * boot100.se, rel=EXACT.rtol)
        assert hi == pytest.approx(center + z * boot100.se, rel=EXACT.rtol)


class TestBootCI:

    def test_all_types(self, boot100):
        res = boot_ci(boot100, type="all")
        assert set(res.ci) == {"normal", "basic", "perc"}
        assert res.ci_conf_level == 0.95
        for lo, hi in res.ci.values():
            assert lo < hi

    def test_sequence_of_types(self, boot100):
        res = boot_ci(boot100, type=["perc", "basic"])
        assert set(res.ci) == {"perc", "basic"}

    def test_original_unchanged(self, boot100):
        boot_ci(boot100)
        assert boot100.ci is None

    def test_summary_lists_ci(self, boot100):
        assert "95% perc CI" in boot_ci(boot100).summary()

    def test_unknown_type(self, boot100):
        with pytest.raises(InvalidInputError, match="Unknown CI type"):
            boot_ci(boot100, type="bca")

    @pytest.mark.parametrize("level", [0.0, 1.0, 95])
    def test_bad_conf_level(self, boot100, level):
        with pytest.raises(InvalidInputError):
            boot_ci(boot100, conf_level=level)

    def test_few_replicates_warn(self):
        small = bootstrap_mean([1.0, 2.0, 3.0, 4.0], R=50, rng=0)
        with pytest.warns(RuntimeWarning, match="replicates per tail"):
            res = boot_ci(small)
        assert res._result.has_warning("per tail")

    def test_R_one_rejected(self):
        with pytest.warns(RuntimeWarning):
            one = bootstrap_mean([1.0, 2.0], R=1, rng=0)
        with pytest.raises(InvalidInputError, match="R >= 2"):
            boot_ci(one)
