"""Closed-form weighted least-squares line for one predictor."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from .exceptions import DegenerateWeightsError, LengthMismatchError
from .observations import LocalFit, WeightedNeighbor

__all__ = ["weighted_mean", "fit"]


def weighted_mean(values: np.ndarray, weights: np.ndarray) -> float:
    """Computes ``sum(w * v) / sum(w)``.

    Args:
        values: Values to average.
        weights: Non-negative weights aligned with ``values``.

    Returns:
        The weighted mean.

    Raises:
        LengthMismatchError: If the two inputs differ in length.
        DegenerateWeightsError: If the weights sum to zero.
    """
    values = np.asarray(values, dtype=float).ravel()
    weights = np.asarray(weights, dtype=float).ravel()
    if len(values) != len(weights):
        raise LengthMismatchError(
            f"weighted mean requires equal lengths, got {len(values)} values "
            f"and {len(weights)} weights"
        )
    total = weights.sum()
    if total == 0:
        raise DegenerateWeightsError("weights sum to zero")
    return float((weights * values).sum() / total)


def fit(neighbors: Sequence[WeightedNeighbor], weights: np.ndarray) -> LocalFit:
    """Fits a weighted least-squares line to a neighborhood.

    When every weighted x is identical the slope is undefined; the fit then
    falls back to the flat line through the weighted mean of y.

    Args:
        neighbors: Neighborhood of one query position.
        weights: Kernel weights aligned with ``neighbors``.

    Returns:
        The fitted slope and intercept.

    Raises:
        LengthMismatchError: If ``weights`` and ``neighbors`` differ in length.
        DegenerateWeightsError: If the weights sum to zero.
    """
    weights = np.asarray(weights, dtype=float).ravel()
    if len(weights) != len(neighbors):
        raise LengthMismatchError(
            f"fit requires one weight per neighbor, got {len(weights)} weights "
            f"for {len(neighbors)} neighbors"
        )
    x = np.array([n.observation.x for n in neighbors], dtype=float)
    y = np.array([n.observation.y for n in neighbors], dtype=float)

    mean_x = weighted_mean(x, weights)
    mean_y = weighted_mean(y, weights)

    dx = x - mean_x
    numerator = (weights * dx * (y - mean_y)).sum()
    denominator = (weights * dx * dx).sum()

    # rounding in mean_x can leave a tiny non-zero denominator for a single x
    if denominator == 0 or np.ptp(x[weights != 0]) == 0:
        slope = 0.0
    else:
        slope = float(numerator / denominator)
    intercept = mean_y - slope * mean_x
    return LocalFit(slope, intercept)
