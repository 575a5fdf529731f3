from __future__ import annotations

import logging
from collections.abc import Callable

import numpy as np

from .cv import CVScorer
from .exceptions import InvalidParameterError, LoessError
from .smoother import loess_predict

__all__ = [
    "select_bandwidth",
    "grid_search_cv",
    "golden_section",
]

logger = logging.getLogger(__name__)

PredictFn = Callable[[np.ndarray, np.ndarray, np.ndarray, float], np.ndarray]

# ----------------------------------------------------------------------------
# Basic bandwidth selectors
# ----------------------------------------------------------------------------


def grid_search_cv(
    x: np.ndarray,
    y: np.ndarray,
    predict_fn: PredictFn,
    bandwidth_grid: np.ndarray,
    folds: int = 5,
) -> float:
    """Performs grid search for bandwidth selection.

    Args:
        x: Input values.
        y: Target values.
        predict_fn: Prediction function.
        bandwidth_grid: Grid of bandwidths to search over.
        folds: Number of folds for cross-validation.

    Returns:
        The best bandwidth found.

    Raises:
        LoessError: If no bandwidth in the grid has a finite score.
    """
    scorer = CVScorer(x, y, folds=folds)
    best_bw, best_score = None, np.inf
    for bw in bandwidth_grid:
        score = scorer.score(predict_fn, float(bw))
        if score < best_score:
            best_score, best_bw = score, bw
    if best_bw is None:
        raise LoessError("no bandwidth in the grid yields a usable fit")
    logger.debug("grid search picked %s (cv mse %s)", best_bw, best_score)
    return float(best_bw)


def golden_section(
    x: np.ndarray,
    y: np.ndarray,
    predict_fn: PredictFn,
    a: float,
    b: float,
    folds: int = 5,
    tol: float = 1e-3,
    max_iter: int = 20,
) -> float:
    """Golden-section search for bandwidth selection.

    Args:
        x: Input values.
        y: Target values.
        predict_fn: Prediction function.
        a: Lower bound of the search interval.
        b: Upper bound of the search interval.
        folds: Number of folds for cross-validation.
        tol: Tolerance for convergence.
        max_iter: Maximum number of iterations.

    Returns:
        The optimal bandwidth.

    Raises:
        LoessError: If no evaluated bandwidth has a finite score.
    """
    scorer = CVScorer(x, y, folds=folds)
    phi = (1 + np.sqrt(5)) / 2
    c, d = b - (b - a) / phi, a + (b - a) / phi
    f_c, f_d = scorer.score(predict_fn, c), scorer.score(predict_fn, d)
    best_score = min(f_c, f_d)
    for _ in range(max_iter):
        if abs(b - a) < tol:
            break
        if f_c < f_d:
            b, f_d = d, f_c
            d = c
            c = b - (b - a) / phi
            f_c = scorer.score(predict_fn, c)
            best_score = min(best_score, f_c)
        else:
            a, f_c = c, f_d
            c = d
            d = a + (b - a) / phi
            f_d = scorer.score(predict_fn, d)
            best_score = min(best_score, f_d)
    if not np.isfinite(best_score):
        raise LoessError(f"no bandwidth in [{a}, {b}] yields a usable fit")
    logger.debug("golden section converged after %d evaluations", scorer.evals)
    return float((a + b) / 2)


# ----------------------------------------------------------------------------
# High-level interface
# ----------------------------------------------------------------------------


def select_bandwidth(
    x: np.ndarray,
    y: np.ndarray,
    method: str = "grid",
    folds: int = 5,
    bounds: tuple[float, float] = (0.1, 1.0),
    grid_size: int = 10,
) -> float:
    """Selects the LOESS bandwidth minimising cross-validation error.

    Args:
        x: Input values (univariate predictor variable).
        y: Target values (response variable).
        method: ``'grid'`` for grid search or ``'golden'`` for golden-section
            search.
        folds: Number of folds for cross-validation.
        bounds: (min_bandwidth, max_bandwidth) search bounds inside ``(0, 1]``.
        grid_size: Number of grid points for the ``'grid'`` method.

    Returns:
        The bandwidth with the lowest cross-validation error.

    Raises:
        InvalidParameterError: If ``bounds`` are not inside ``(0, 1]``.
        ValueError: If ``method`` is unknown or ``grid_size`` is below 1.
        LoessError: If no candidate bandwidth has a finite score.
    """
    x = np.asarray(x, dtype=float).ravel()
    y = np.asarray(y, dtype=float).ravel()
    a, b = bounds
    if not (0 < a < b <= 1):
        raise InvalidParameterError(
            f"bounds must satisfy 0 < min < max <= 1, got {bounds!r}"
        )
    if method == "grid" and grid_size < 1:
        raise ValueError(f"`grid_size` must be at least 1, got {grid_size}")
    predict_fn = loess_predict

    if method == "grid":
        bw = grid_search_cv(x, y, predict_fn, np.linspace(a, b, grid_size), folds=folds)
    elif method == "golden":
        bw = golden_section(x, y, predict_fn, a, b, folds=folds)
    else:
        raise ValueError(f"Unknown method '{method}'.")
    logger.info("Selected bandwidth %.4f via %s search", bw, method)
    return bw
