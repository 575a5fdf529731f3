"""
Cross-validation utilities for LOESS bandwidth selection.

This module defines a CVScorer class that evaluates K-fold
cross-validation error of a LOESS predictor at a given bandwidth.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import numpy as np
from sklearn.metrics import mean_squared_error  # type: ignore
from sklearn.model_selection import KFold  # type: ignore

from .config import settings
from .exceptions import DegenerateWeightsError, EmptyNeighborhoodError

__all__ = ["CVScorer"]

logger = logging.getLogger(__name__)


class CVScorer:
    """Cross-validation scorer for LOESS smoothing.

    Args:
        x: Input values.
        y: Target values.
        folds: Number of folds for K-fold cross-validation.
    """

    def __init__(self, x: np.ndarray, y: np.ndarray, folds: int = 5) -> None:
        self.x = np.asarray(x, dtype=float).ravel()
        self.y = np.asarray(y, dtype=float).ravel()
        if not (2 <= folds <= len(self.x)):
            raise ValueError(
                f"`folds` must be between 2 and {len(self.x)}, got {folds}"
            )
        self.kf = KFold(n_splits=folds, shuffle=True, random_state=settings.random_seed)
        self.evals = 0

    def score(
        self,
        predict_fn: Callable[[np.ndarray, np.ndarray, np.ndarray, float], np.ndarray],
        bandwidth: float,
    ) -> float:
        """Computes the cross-validation MSE for a given bandwidth.

        A bandwidth that leaves some held-out point without a usable
        neighborhood scores ``inf``.

        Args:
            predict_fn: Function that takes ``(x_train, y_train, x_test,
                bandwidth)`` and returns predictions.
            bandwidth: Bandwidth value.

        Returns:
            Cross-validation mean squared error.
        """
        mses = []
        for train_idx, test_idx in self.kf.split(self.x):
            xtr, xte = self.x[train_idx], self.x[test_idx]
            ytr, yte = self.y[train_idx], self.y[test_idx]
            self.evals += 1
            try:
                ypred = predict_fn(xtr, ytr, xte, bandwidth)
            except (EmptyNeighborhoodError, DegenerateWeightsError) as exc:
                logger.debug("bandwidth %s not usable: %s", bandwidth, exc)
                return float("inf")
            mses.append(mean_squared_error(yte, ypred))
        return float(np.mean(mses))
