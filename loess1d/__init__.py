"""
loess1d: LOESS smoothing for univariate scatter data.

This package estimates a smooth curve through (x, y) observations by
fitting, at every query position, a weighted least-squares line to the
observations inside a bandwidth-scaled window. Neighbors are weighted with
a tricube kernel normalised by the farthest point of the window.

Key Features
------------
- Single global bandwidth expressed as a fraction of the x range
- Closed-form weighted linear fit with a flat-line fallback
- Optional thread pool across query points, output kept in query order
- Cross-validated bandwidth selection (grid and golden-section search)

Main Functions
--------------
smooth : Smoothed estimate at each query point
loess_predict : Array-in, array-out LOESS predictions
select_bandwidth : Select a bandwidth by K-fold cross-validation
select_neighbors : Observations inside the window around a query point
compute_weights : Tricube weights of a neighborhood
fit : Weighted least-squares line of a neighborhood

Example
-------
>>> from loess1d import Observation, smooth
>>> obs = [Observation(0.56, 18.64), Observation(2.02, 103.50),
...        Observation(2.58, 150.35), Observation(3.41, 190.51)]
>>> points = smooth([2.02], obs, bandwidth=0.5)
>>> round(points[0].y, 2)
103.5
"""

from .exceptions import (
    DegenerateWeightsError,
    EmptyNeighborhoodError,
    InvalidParameterError,
    LengthMismatchError,
    LoessError,
)
from .fitting import fit, weighted_mean
from .kernels import compute_weights, tricube
from .neighbors import select_neighbors, validate_bandwidth
from .observations import (
    LocalFit,
    Observation,
    SmoothedPoint,
    WeightedNeighbor,
    distance,
    observations_from_arrays,
    to_arrays,
)
from .selectors import golden_section, grid_search_cv, select_bandwidth
from .smoother import loess_predict, smooth

__all__ = [
    "smooth",
    "loess_predict",
    "select_bandwidth",
    "grid_search_cv",
    "golden_section",
    "select_neighbors",
    "validate_bandwidth",
    "compute_weights",
    "tricube",
    "fit",
    "weighted_mean",
    "Observation",
    "WeightedNeighbor",
    "LocalFit",
    "SmoothedPoint",
    "distance",
    "observations_from_arrays",
    "to_arrays",
    "LoessError",
    "InvalidParameterError",
    "LengthMismatchError",
    "DegenerateWeightsError",
    "EmptyNeighborhoodError",
]
