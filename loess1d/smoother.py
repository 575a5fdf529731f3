from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any

import numpy as np

from .config import settings
from .fitting import fit
from .kernels import compute_weights
from .neighbors import select_from_sorted, sort_observations, validate_bandwidth
from .observations import Observation, SmoothedPoint, observations_from_arrays

__all__ = ["smooth", "loess_predict"]

logger = logging.getLogger(__name__)


def _normalize_workers(n_workers: Any) -> int:
    """Coerces ``n_workers`` to a positive integer, falling back to settings."""
    if n_workers is None:
        n_workers = settings.n_workers
    try:
        n = int(n_workers)
    except (TypeError, ValueError):
        n = 1
    return 1 if n < 1 else n


def _smooth_point(
    ordered: list[Observation],
    xs: np.ndarray,
    query_x: float,
    bandwidth: float,
) -> SmoothedPoint:
    neighbors = select_from_sorted(ordered, xs, query_x, bandwidth)
    weights = compute_weights(neighbors)
    local = fit(neighbors, weights)
    return SmoothedPoint(query_x, local.evaluate(query_x))


def smooth(
    query_points: Sequence[float],
    observations: Iterable[Observation],
    bandwidth: float,
    n_workers: int | None = None,
) -> list[SmoothedPoint]:
    """Computes the LOESS estimate at every query point.

    Each query point is smoothed independently: the observations inside the
    bandwidth window are tricube-weighted and a weighted least-squares line
    is evaluated at the query position. The call is all-or-nothing; the
    first failing query point aborts it.

    Args:
        query_points: Positions to estimate at. Need not coincide with
            observations.
        observations: Observation set; order does not matter and the
            collection is not modified.
        bandwidth: Fraction in ``(0, 1]`` of the total x range used as
            window width.
        n_workers: Number of threads used across query points. ``None``
            uses ``settings.n_workers``.

    Returns:
        One :class:`SmoothedPoint` per query point, in input order.

    Raises:
        InvalidParameterError: If the bandwidth is outside ``(0, 1]`` or
            there are no observations.
        EmptyNeighborhoodError: If a query point's window is empty.
        DegenerateWeightsError: If a query point's weights sum to zero.
    """
    bw = validate_bandwidth(bandwidth)
    ordered, xs = sort_observations(observations)
    queries = np.asarray(query_points, dtype=float).ravel()
    workers = _normalize_workers(n_workers)
    logger.debug(
        "Smoothing %d query points over %d observations (bandwidth=%s, workers=%d)",
        len(queries),
        len(ordered),
        bw,
        workers,
    )

    results: list[SmoothedPoint] = [None] * len(queries)  # type: ignore[list-item]
    if workers > 1 and len(queries) > 1:
        with ThreadPoolExecutor(max_workers=workers) as ex:
            futures = [
                ex.submit(_smooth_point, ordered, xs, float(q), bw) for q in queries
            ]
            for i, future in enumerate(futures):
                results[i] = future.result()
    else:
        for i, q in enumerate(queries):
            results[i] = _smooth_point(ordered, xs, float(q), bw)
    return results


def loess_predict(
    x_train: np.ndarray,
    y_train: np.ndarray,
    x_test: np.ndarray,
    bandwidth: float | None = None,
) -> np.ndarray:
    """Computes LOESS predictions.

    Args:
        x_train: Training input values.
        y_train: Training target values.
        x_test: Test input values.
        bandwidth: Window fraction; ``None`` uses ``settings.bandwidth``.

    Returns:
        The predicted values for x_test.
    """
    if bandwidth is None:
        bandwidth = settings.bandwidth
    points = smooth(
        np.asarray(x_test).ravel(),
        observations_from_arrays(x_train, y_train),
        bandwidth,
    )
    return np.array([p.y for p in points], dtype=float)
