"""
Tests for sampling with replacement.

Validates:
    - Output size (k = n default, k != n allowed)
    - Membership: every output element comes from the source dataset
    - Reproducibility with an int seed and with a shared Generator
    - InvalidInput for empty data and non-positive size
    - Immutability of the returned sample and of the caller's data
"""

import numpy as np
import pytest

from pysimstats.core.exceptions import DimensionError, InvalidInputError
from pysimstats.sampling import resample


class TestResampleShape:

    def test_default_size_is_n(self, rng):
        data = np.array([3.0, 1.0, 4.0, 1.0, 5.0, 9.0])
        out = resample(data, rng=rng)
        assert out.size == len(data)
        assert out.values.shape == (6,)
        assert len(out) == 6

    @pytest.mark.parametrize("k", [1, 3, 50])
    def test_size_differs_from_n(self, rng, k):
        out = resample([1.0, 2.0, 3.0, 4.0], k, rng=rng)
        assert out.size == k

    def test_membership(self, rng):
        data = np.array([0.5, 2.5, -1.0, 7.25, 3.0])
        for _ in range(20):
            out = resample(data, rng=rng)
            assert np.all(np.isin(out.values, data))

    def test_indices_map_back_to_values(self, rng):
        data = np.array([10.0, 20.0, 30.0])
        out = resample(data, 100, rng=rng)
        np.testing.assert_array_equal(data[out.indices], out.values)

    def test_duplicates_occur(self, rng):
        """With replacement, k > n forces repeated source elements."""
        out = resample([1.0, 2.0, 3.0], 10, rng=rng)
        assert out.info['n_unique'] <= 3

    def test_roughly_uniform(self, rng):
        out = resample(np.arange(4.0), 40000, rng=rng)
        counts = np.bincount(out.indices, minlength=4)
        np.testing.assert_allclose(counts / 40000, 0.25, atol=0.02)


class TestResampleReproducibility:

    def test_same_seed_same_sample(self):
        data = np.arange(10.0)
        a = resample(data, rng=123)
        b = resample(data, rng=123)
        np.testing.assert_array_equal(a.values, b.values)

    def test_different_seeds_differ(self):
        data = np.arange(100.0)
        a = resample(data, rng=1)
        b = resample(data, rng=2)
        assert not np.array_equal(a.values, b.values)

    def test_shared_generator_advances(self, rng):
        data = np.arange(100.0)
        a = resample(data, rng=rng)
        b = resample(data, rng=rng)
        assert not np.array_equal(a.values, b.values)


class TestResampleErrors:

    def test_empty_data(self):
        with pytest.raises(InvalidInputError, match="empty"):
            resample([], rng=1)

    @pytest.mark.parametrize("k", [0, -3])
    def test_non_positive_size(self, k):
        with pytest.raises(InvalidInputError, match="size must be >= 1"):
            resample([1.0, 2.0], k, rng=1)

    def test_2d_rejected(self):
        with pytest.raises(DimensionError):
            resample(np.zeros((3, 2)), rng=1)

    def test_non_numeric(self):
        with pytest.raises(InvalidInputError):
            resample(["a", "b"], rng=1)


class TestResampleImmutability:

    def test_values_read_only(self, rng):
        out = resample([1.0, 2.0, 3.0], rng=rng)
        with pytest.raises(ValueError):
            out.values[0] = 99.0

    def test_caller_data_untouched(self, rng):
        data = np.array([1.0, 2.0, 3.0])
        resample(data, rng=rng)
        assert data.flags.writeable
        np.testing.assert_array_equal(data, [1.0, 2.0, 3.0])


class TestResampleMetadata:

    def test_single_observation_warns(self):
        with pytest.warns(RuntimeWarning, match="single observation"):
            out = resample([4.0], 5, rng=0)
        np.testing.assert_array_equal(out.values, 4.0)
        assert out.warnings

    def test_info_and_timing(self, rng):
        out = resample([1.0, 2.0], 4, rng=rng)
        assert out.info['method'] == 'resample'
        assert out.info['n'] == 2
        assert out.backend_name == 'cpu_resample'
        assert 'total_seconds' in out.timing
        assert out.expected_mean is None
        assert "Resample with replacement" in out.summary()
