"""Neighborhood selection for local regression.

A neighborhood is every observation whose x lies inside a window of width
``bandwidth * (max(x) - min(x))`` centred on the query position. The window
width is global: it does not adapt to the local density of points.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

import numpy as np

from .exceptions import EmptyNeighborhoodError, InvalidParameterError
from .observations import Observation, WeightedNeighbor

__all__ = [
    "validate_bandwidth",
    "sort_observations",
    "select_from_sorted",
    "select_neighbors",
]


def validate_bandwidth(bandwidth: float) -> float:
    """Returns ``bandwidth`` as a float, or raises if it is outside ``(0, 1]``."""
    try:
        bw = float(bandwidth)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError(
            f"bandwidth must be a real number, got {bandwidth!r}"
        ) from exc
    if not math.isfinite(bw) or bw <= 0 or bw > 1:
        raise InvalidParameterError(
            f"bandwidth must be > 0 and <= 1, got {bandwidth!r}"
        )
    return bw


def sort_observations(
    observations: Iterable[Observation],
) -> tuple[list[Observation], np.ndarray]:
    """Returns a new x-sorted list of observations and its x array.

    The input collection is never modified. Plain ``(x, y)`` pairs are
    accepted and converted to :class:`Observation`.

    Raises:
        InvalidParameterError: If ``observations`` is empty.
    """
    ordered = sorted(
        (Observation(float(x), float(y)) for x, y in observations),
        key=lambda obs: obs.x,
    )
    if not ordered:
        raise InvalidParameterError("at least one observation is required")
    xs = np.fromiter((obs.x for obs in ordered), dtype=float, count=len(ordered))
    return ordered, xs


def select_from_sorted(
    ordered: list[Observation],
    xs: np.ndarray,
    query_x: float,
    bandwidth: float,
) -> list[WeightedNeighbor]:
    """Selects the window around ``query_x`` from pre-sorted observations.

    Args:
        ordered: Observations sorted by x ascending.
        xs: The x values of ``ordered``.
        query_x: Position to smooth at.
        bandwidth: Fraction of the total x range used as window width.

    Returns:
        Neighbors inside the inclusive window, nearest first.

    Raises:
        EmptyNeighborhoodError: If the window holds no observation.
    """
    total_width = xs[-1] - xs[0]
    window_width = bandwidth * total_width
    lower = query_x - window_width / 2
    upper = query_x + window_width / 2

    idx = np.flatnonzero((xs >= lower) & (xs <= upper))
    if idx.size == 0:
        raise EmptyNeighborhoodError(
            f"no observation within [{lower}, {upper}] around x={query_x}"
        )
    dists = np.abs(query_x - xs[idx])
    order = np.argsort(dists, kind="stable")
    return [
        WeightedNeighbor(ordered[i], float(d)) for i, d in zip(idx[order], dists[order])
    ]


def select_neighbors(
    observations: Iterable[Observation],
    query_x: float,
    bandwidth: float,
) -> list[WeightedNeighbor]:
    """Selects the observations inside the bandwidth window around ``query_x``.

    Args:
        observations: Observation set; order does not matter.
        query_x: Position to smooth at.
        bandwidth: Fraction in ``(0, 1]`` of the total x range.

    Returns:
        Neighbors sorted by distance to ``query_x``, nearest first.

    Raises:
        InvalidParameterError: If the bandwidth is outside ``(0, 1]`` or
            ``observations`` is empty.
        EmptyNeighborhoodError: If the window holds no observation.
    """
    bw = validate_bandwidth(bandwidth)
    ordered, xs = sort_observations(observations)
    return select_from_sorted(ordered, xs, float(query_x), bw)
