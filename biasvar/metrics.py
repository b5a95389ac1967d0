"""
Metrics

- test RMSE
- bias^2 and variance of predictions at a few sampled test points
"""

import numpy as np

from biasvar.config import N_POINTS
from biasvar.errors import SamplingError
from biasvar.models import PolynomialModel


def _check_finite(*arrays: np.ndarray) -> None:
    for arr in arrays:
        if arr.size == 0:
            raise ValueError("Empty input")
        if not np.isfinite(arr).all():
            raise ValueError("Non-finite values in input")


def _as_pair(y_true, y_pred) -> tuple[np.ndarray, np.ndarray]:
    y_true = np.asarray(y_true, dtype=np.float64)
    y_pred = np.asarray(y_pred, dtype=np.float64)
    if y_true.shape != y_pred.shape:
        raise ValueError(f"Need arrays of same shape: {y_true.shape}, {y_pred.shape}")
    _check_finite(y_true, y_pred)
    return y_true, y_pred


def rmse(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """Root mean squared error."""
    y_true, y_pred = _as_pair(y_true, y_pred)
    return np.sqrt(np.mean((y_true - y_pred) ** 2)).item()


def bias_squared(y_pred: np.ndarray, y_true: np.ndarray) -> float:
    """Squared difference between the average prediction and the average truth.

    The signed bias is averaged over the points before squaring, so this is
    (mean(pred) - mean(true))^2, not the mean of squared pointwise errors.
    """
    y_true, y_pred = _as_pair(y_true, y_pred)
    bias = np.mean(y_pred) - np.mean(y_true)
    return (bias**2).item()


def variance(y_pred: np.ndarray) -> float:
    """Sample variance (ddof=1) of the predictions."""
    y_pred = np.asarray(y_pred, dtype=np.float64)
    _check_finite(y_pred)
    if y_pred.size < 2:
        raise ValueError("Sample variance needs at least 2 values")
    return np.var(y_pred, ddof=1).item()


def sample_points(n_available: int, size: int = N_POINTS, seed=None) -> np.ndarray:
    """Draw `size` distinct positions in range(n_available).

    ## parameters
    - n_available (int): number of points to choose from (test set size).
    - size (int): number of points, at least 2.
    - seed (int|None): random seed.

    ## returns
    - indices (ndarray): positions, in the order they were drawn.
    """
    if size < 2:
        raise SamplingError(f"Needs at least 2 points for a variance, got {size}")
    if size > n_available:
        raise SamplingError(f"Cannot sample {size} points from {n_available}")

    rng = np.random.default_rng(seed)
    return rng.choice(n_available, size=size, replace=False)


def evaluate_models(
    models: dict[int, PolynomialModel],
    x_test: np.ndarray,
    y_test: np.ndarray,
    f_test: np.ndarray,
    point_indices: np.ndarray,
    reverse_bias_variance: bool = False,
) -> dict[int, dict[str, float]]:
    """Compute RMSE, bias^2 and variance for each model.

    ## parameters
    - models (dict[int, PolynomialModel]): fitted models by degree.
    - x_test, y_test (ndarray): test predictor and response.
    - f_test (ndarray): noise-free signal at the test predictor values.
    - point_indices (ndarray): positions in the test set used for bias/variance.
    - reverse_bias_variance (bool): attach bias^2/variance in reversed degree
        order (the highest degree's values go to the lowest degree). Only for
        matching the reference report.

    ## returns
    - metrics (dict): degree -> {"rmse", "bias2", "variance"}, ascending degree.
    """
    x_test = np.asarray(x_test, dtype=np.float64)
    y_test = np.asarray(y_test, dtype=np.float64)
    f_test = np.asarray(f_test, dtype=np.float64)
    if not len(x_test) == len(y_test) == len(f_test):
        raise ValueError("Inconsistent test sample count")

    point_indices = np.asarray(point_indices)
    if point_indices.size and point_indices.max() >= len(x_test):
        raise SamplingError(
            f"Point index {point_indices.max()} out of range for {len(x_test)} test points"
        )

    x0 = x_test[point_indices]
    fx0 = f_test[point_indices]

    degrees = sorted(models.keys())
    rmses = []
    bias2s = []
    variances = []
    for d in degrees:
        model = models[d]
        rmses.append(rmse(y_test, model.predict(x_test)))

        predx0 = model.predict(x0)
        bias2s.append(bias_squared(predx0, fx0))
        variances.append(variance(predx0))

    if reverse_bias_variance:
        bias2s.reverse()
        variances.reverse()

    return {
        d: {"rmse": r, "bias2": b, "variance": v}
        for d, r, b, v in zip(degrees, rmses, bias2s, variances)
    }
