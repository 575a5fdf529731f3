"""Value types shared by the smoothing stages and array helpers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

import numpy as np

from .exceptions import LengthMismatchError

__all__ = [
    "Observation",
    "WeightedNeighbor",
    "LocalFit",
    "SmoothedPoint",
    "distance",
    "observations_from_arrays",
    "to_arrays",
]


class Observation(NamedTuple):
    """One measured data point."""

    x: float
    y: float


class WeightedNeighbor(NamedTuple):
    """An observation tagged with its distance to a query position."""

    observation: Observation
    distance: float


class LocalFit(NamedTuple):
    """Weighted least-squares line fitted to one neighborhood."""

    slope: float
    intercept: float

    def evaluate(self, x: float) -> float:
        return self.slope * x + self.intercept


class SmoothedPoint(NamedTuple):
    """Smoothed estimate ``y`` at query position ``x``."""

    x: float
    y: float


def distance(a: float, b: float) -> float:
    """Absolute distance ``|a - b|``."""
    return abs(a - b)


def observations_from_arrays(x: np.ndarray, y: np.ndarray) -> list[Observation]:
    """Pairs parallel x and y arrays into observations.

    Args:
        x: Predictor values.
        y: Response values, aligned with ``x``.

    Returns:
        One :class:`Observation` per index, in input order.

    Raises:
        LengthMismatchError: If ``x`` and ``y`` differ in length.
    """
    x = np.asarray(x, dtype=float).ravel()
    y = np.asarray(y, dtype=float).ravel()
    if len(x) != len(y):
        raise LengthMismatchError(
            f"x and y must have equal length, got {len(x)} and {len(y)}"
        )
    return [Observation(float(xi), float(yi)) for xi, yi in zip(x, y)]


def to_arrays(
    points: Iterable[Observation] | Iterable[SmoothedPoint],
) -> tuple[np.ndarray, np.ndarray]:
    """Splits observations (or smoothed points) into x and y arrays."""
    pairs = list(points)
    xs = np.array([p.x for p in pairs], dtype=float)
    ys = np.array([p.y for p in pairs], dtype=float)
    return xs, ys
