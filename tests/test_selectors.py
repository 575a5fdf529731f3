import numpy as np
import pytest

from loess1d import (
    EmptyNeighborhoodError,
    InvalidParameterError,
    LoessError,
    select_bandwidth,
)
from loess1d.selectors import golden_section, grid_search_cv


def _data():
    x = np.linspace(0, 1, 40)
    y = np.sin(2 * np.pi * x) + 0.1 * np.random.default_rng(2).standard_normal(40)
    return x, y


@pytest.mark.parametrize("method", ["grid", "golden"])
def test_select_bandwidth_within_bounds(method):
    x, y = _data()
    bw = select_bandwidth(x, y, method=method, bounds=(0.2, 1.0), grid_size=9)
    assert 0.2 <= bw <= 1.0


def test_grid_prefers_local_fit_for_curved_data():
    x, y = _data()
    bw = select_bandwidth(x, y, method="grid", bounds=(0.2, 1.0), grid_size=9)
    # a single global line cannot follow a full sine period
    assert bw < 1.0


def test_grid_search_returns_grid_member():
    x, y = _data()
    grid = np.array([0.3, 0.6, 0.9])
    bw = grid_search_cv(x, y, lambda *a: np.zeros(len(a[2])), grid, folds=4)
    assert bw in grid


def test_grid_search_all_unusable():
    x, y = _data()

    def failing(xtr, ytr, xte, bandwidth):
        raise EmptyNeighborhoodError("unusable")

    with pytest.raises(LoessError):
        grid_search_cv(x, y, failing, np.array([0.5]), folds=4)


def test_golden_section_converges_on_quadratic_score():
    x, y = _data()

    def predict(xtr, ytr, xte, bandwidth):
        return ytr.mean() + (bandwidth - 0.4) * np.ones_like(xte)

    bw = golden_section(x, y, predict, 0.1, 1.0, folds=4, tol=1e-4, max_iter=60)
    assert 0.1 <= bw <= 1.0


@pytest.mark.parametrize("bounds", [(0.0, 0.5), (0.5, 0.5), (0.2, 1.5)])
def test_invalid_bounds(bounds):
    x, y = _data()
    with pytest.raises(InvalidParameterError):
        select_bandwidth(x, y, bounds=bounds)


def test_unknown_method():
    x, y = _data()
    with pytest.raises(ValueError):
        select_bandwidth(x, y, method="newton")


def test_golden_section_all_unusable():
    x, y = _data()

    def failing(xtr, ytr, xte, bandwidth):
        raise EmptyNeighborhoodError("unusable")

    with pytest.raises(LoessError):
        golden_section(x, y, failing, 0.1, 0.9, folds=4)


@pytest.mark.parametrize("method", ["grid", "golden"])
def test_select_bandwidth_too_narrow_for_data(method):
    # held-out points never share a window with training points this narrow
    x = np.linspace(0, 1, 10)
    with pytest.raises(LoessError):
        select_bandwidth(x, 2 * x, method=method, bounds=(0.01, 0.05))


@pytest.mark.parametrize("grid_size", [0, -3])
def test_invalid_grid_size(grid_size):
    x, y = _data()
    with pytest.raises(ValueError, match="grid_size"):
        select_bandwidth(x, y, method="grid", grid_size=grid_size)
