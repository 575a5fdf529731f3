# kernels.py
# Tricube kernel weights for local regression.
# Conventions:
#   u = d / d_max, with d the distance of a neighbor to the query position
#       and d_max the largest such distance in the neighborhood
#   w(u) = (1 - |u|^3)^3 for |u| <= 1, and 0 outside
#
# The farthest neighbor therefore always gets weight 0 and a neighbor that
# coincides with the query position gets weight 1. A neighborhood where
# every distance is 0 gets uniform weights of 1.

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from .exceptions import EmptyNeighborhoodError
from .observations import WeightedNeighbor

__all__ = [
    "tricube",
    "compute_weights",
]


def tricube(u: np.ndarray) -> np.ndarray:
    """Tricube kernel (1-|u|^3)^3 on |u|<=1, zero elsewhere."""
    u = np.abs(np.asarray(u, dtype=float))
    return np.where(u <= 1.0, (1.0 - u**3) ** 3, 0.0)


def compute_weights(neighbors: Sequence[WeightedNeighbor]) -> np.ndarray:
    """
    Compute tricube weights for a neighborhood.

    The normalising distance is the maximum over ``neighbors``, computed
    directly, so the input does not need to be sorted by distance.

    Parameters
    ----------
    neighbors : sequence of WeightedNeighbor
        Neighborhood of one query position.

    Returns
    -------
    ndarray
        One weight in [0, 1] per neighbor, in input order.

    Raises
    ------
    EmptyNeighborhoodError
        If ``neighbors`` is empty.
    """
    if len(neighbors) == 0:
        raise EmptyNeighborhoodError("cannot weight an empty neighborhood")
    d = np.array([n.distance for n in neighbors], dtype=float)
    max_dist = d.max()
    if max_dist == 0:
        return np.ones_like(d)
    return tricube(d / max_dist)
