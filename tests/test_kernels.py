# tests/test_kernels.py
import numpy as np
import pytest

from loess1d import EmptyNeighborhoodError, Observation, WeightedNeighbor
from loess1d.kernels import compute_weights, tricube


def _neighbors(dists):
    return [WeightedNeighbor(Observation(d, 0.0), d) for d in dists]


def test_tricube_matches_tabulated_weights():
    dists = [0.0, 1.463908, 2.019506, 2.856209, 3.743589, 4.187020, 4.549559]
    correct = [
        1,
        0.903349061506753,
        0.7598896621661493,
        0.4262173725153165,
        0.0868617633725999,
        0.01072309994722968,
        0,
    ]
    w = compute_weights(_neighbors(dists))
    assert np.allclose(w, correct, atol=1e-4)


def test_weight_bounds():
    rng = np.random.default_rng(0)
    dists = rng.uniform(0, 3, 25)
    dists[3] = 0.0
    w = compute_weights(_neighbors(dists))
    assert len(w) == len(dists)
    assert np.all((w >= 0) & (w <= 1))
    assert w[np.argmax(dists)] == 0.0
    assert w[3] == 1.0


def test_unsorted_input_uses_true_maximum():
    w = compute_weights(_neighbors([2.0, 0.0, 1.0]))
    assert w[0] == 0.0
    assert w[1] == 1.0
    assert 0.0 < w[2] < 1.0


def test_all_zero_distances_give_unit_weights():
    w = compute_weights(_neighbors([0.0, 0.0, 0.0]))
    assert np.array_equal(w, np.ones(3))


def test_empty_neighborhood_rejected():
    with pytest.raises(EmptyNeighborhoodError):
        compute_weights([])


def test_tricube_zero_outside_support():
    u = np.array([-2.0, -1.0, 0.0, 0.5, 1.0, 1.5])
    w = tricube(u)
    assert w[0] == 0.0 and w[-1] == 0.0
    assert w[2] == 1.0
    assert np.isclose(w[3], (1 - 0.125) ** 3)
