"""Tests for the envelope and moving-average computations."""

import numpy as np
import pytest

from simout import extremes, mavg, replication_mavg


class TestMavg:
    def test_window_zero_is_identity(self):
        v = np.array([3.0, 1.0, 4.0, 1.0, 5.0])
        np.testing.assert_allclose(mavg(v, 0), v)

    def test_known_values(self):
        np.testing.assert_allclose(mavg([1, 2, 3, 4, 5, 6], 2), [2, 3, 4, 5])

    @pytest.mark.parametrize("w", [1, 3, 8])
    def test_length_is_n_minus_w(self, w):
        assert mavg(np.arange(10.0), w).size == 10 - w

    def test_each_value_is_window_mean(self):
        v = np.random.default_rng(1).normal(size=20)
        out = mavg(v, 4)
        for i in range(out.size):
            assert out[i] == pytest.approx(v[i:i + 5].mean())

    @pytest.mark.parametrize("w", [-1, 5, 6])
    def test_window_out_of_range(self, w):
        with pytest.raises(ValueError):
            mavg(np.arange(5.0), w)


def test_extremes_bounds_ordered_and_attained():
    all_data = np.random.default_rng(2).normal(size=(3, 12, 5))
    d = extremes(all_data)
    assert d.shape == (3, 12, 2)
    assert np.all(d[..., 0] <= d[..., 1])
    for o in range(3):
        for t in range(12):
            assert d[o, t, 0] in all_data[o, t, :]
            assert d[o, t, 1] in all_data[o, t, :]


def test_replication_mavg_uses_cross_replication_mean():
    all_data = np.random.default_rng(3).uniform(size=(2, 10, 4))
    d = replication_mavg(all_data, 3)
    assert d.shape == (2, 7)
    np.testing.assert_allclose(d[1], mavg(all_data[1].mean(axis=1), 3))
