import numpy as np
import pytest

from loess1d import (
    LengthMismatchError,
    Observation,
    SmoothedPoint,
    distance,
    observations_from_arrays,
    to_arrays,
)

X = [0.5578196, 2.0217271, 2.5773252, 3.4140288, 4.3014084, 4.7448394, 5.1073781]
Y = [18.63654, 103.49646, 150.35391, 190.51031, 208.70115, 213.71135, 228.49353]


def test_arrays_round_trip_keeps_values():
    obs = observations_from_arrays(X, Y)
    assert obs[1] == Observation(2.0217271, 103.49646)
    xs, ys = to_arrays(obs)
    assert np.array_equal(xs, X)
    assert np.array_equal(ys, Y)


def test_observations_from_arrays_length_mismatch():
    with pytest.raises(LengthMismatchError):
        observations_from_arrays([1.0, 2.0], [1.0])


def test_to_arrays_accepts_smoothed_points():
    xs, ys = to_arrays([SmoothedPoint(1.0, 2.0), SmoothedPoint(3.0, 4.0)])
    assert xs.tolist() == [1.0, 3.0]
    assert ys.tolist() == [2.0, 4.0]


def test_distances_from_first_point():
    correct = [0.0, 1.463908, 2.019506, 2.856209, 3.743589, 4.187020, 4.549559]
    for xi, expected in zip(X, correct):
        assert distance(X[0], xi) == pytest.approx(expected, abs=1e-6)


@pytest.mark.parametrize(
    "a,b,expected", [(-2.0, 3.0, 5.0), (3.0, -2.0, 5.0), (-1.5, -4.0, 2.5), (0.0, 0.0, 0.0)]
)
def test_distance_is_absolute_difference(a, b, expected):
    assert distance(a, b) == expected


def test_observation_is_hashable():
    assert len({Observation(1.0, 2.0), Observation(1.0, 2.0)}) == 1
