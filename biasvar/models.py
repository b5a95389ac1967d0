from typing import Literal

import numpy as np
from numpy.polynomial import legendre, polyutils
from tqdm import tqdm

from biasvar.config import DEGREES
from biasvar.errors import FittingError

Basis = Literal["legendre", "monomial"]

WINDOW = (-1.0, 1.0)


class PolynomialModel:
    """Polynomial regression in one variable, fitted by least squares."""

    def __init__(
        self,
        x: np.ndarray,
        y: np.ndarray,
        degree: int = 1,
        basis: Basis = "legendre",
        verbose: int = 0,
    ) -> None:
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)

        if degree < 0:
            raise ValueError(f"Degree must be non-negative, got {degree}")
        if x.ndim != 1 or y.ndim != 1:
            raise ValueError("Expects 1-dimensional x and y")
        if x.shape[0] != y.shape[0]:
            raise ValueError(f"Inconsistent sample count: {len(x)} x, {len(y)} y")
        if not (np.isfinite(x).all() and np.isfinite(y).all()):
            raise ValueError("Non-finite values in training data")

        if len(x) < degree + 1:
            raise FittingError(f"Needs more samples: {len(x)}<{degree} + 1")

        lo, hi = float(x.min()), float(x.max())
        if lo == hi:
            if degree > 0:
                raise FittingError(f"Constant predictor, cannot fit degree {degree}")
            lo, hi = lo - 1, hi + 1

        self.degree = degree
        self.basis = basis
        self.domain = (lo, hi)
        self.x = x
        self.y = y

        self.X_poly = polynomial_features(x, degree, basis, self.domain)

        self._fit(verbose=verbose)

    def __str__(self) -> str:
        lines = [
            f"Polynomial model (degree: {self.degree}, basis: {self.basis})",
            f"{self.X_poly.shape[0]} samples",
        ]
        return "\n".join(lines)

    def _fit(self, verbose=0):
        """Fit model by least squares."""
        X = self.X_poly
        y = self.y
        M, N = X.shape

        if verbose >= 2:
            print(f"{M} samples\n{N} poly features")

        beta, res, rank, _ = np.linalg.lstsq(X, y, rcond=None)

        if rank < N:
            raise FittingError(
                f"Rank deficient design for degree {self.degree}: rank {rank} < {N}"
            )

        self.beta = beta
        self.residuals = res
        self.rank = rank

        if verbose >= 2:
            print(f"coefficients: {beta}, residuals: {res}")

    @property
    def polynomial(self) -> np.polynomial.Polynomial | np.polynomial.Legendre:
        """The fitted polynomial as a callable numpy series."""
        if self.basis == "legendre":
            return np.polynomial.Legendre(self.beta, domain=self.domain, window=WINDOW)

        return np.polynomial.Polynomial(self.beta)

    @property
    def yhat(self) -> np.ndarray:
        """Prediction of training data"""

        return self.X_poly @ self.beta

    def predict(self, x: np.ndarray) -> np.ndarray:
        """Predict new samples."""
        x = np.asarray(x, dtype=np.float64)
        X_poly = polynomial_features(x, self.degree, self.basis, self.domain)

        return X_poly @ self.beta


def polynomial_features(
    x: np.ndarray,
    d: int,
    basis: Basis = "legendre",
    domain: tuple[float, float] | None = None,
) -> np.ndarray:
    """Create polynomial features of terms up to a degree (including constant).
    ## parameters
    - x (ndarray): predictor values, shape (N,)
    - d (int): maximum degree
    - basis (str):
        - "monomial": 1, x, x^2, ..., x^d
        - "legendre": P_0(t), ..., P_d(t), with t = x mapped from `domain` to [-1, 1]
    - domain (tuple|None): (min, max) of the training inputs. Defaults to the
        range of `x`. Only used by the legendre basis.
    ## returns
    - X_new (ndarray): feature matrix, shape (N, d + 1)

    Both bases span the same space, so least squares gives the same fitted values.
    """
    x = np.asarray(x, dtype=np.float64)

    if basis == "monomial":
        return np.vander(x, d + 1, increasing=True)

    if basis == "legendre":
        if domain is None:
            domain = (float(x.min()), float(x.max()))
        t = polyutils.mapdomain(x, domain, WINDOW)
        return legendre.legvander(t, d)

    raise ValueError(f"Unsupported basis: {basis}")


def fit_models(
    x: np.ndarray,
    y: np.ndarray,
    degrees: tuple[int, ...] = DEGREES,
    basis: Basis = "legendre",
    verbose: int = 0,
) -> dict[int, PolynomialModel]:
    """Fit one polynomial model per degree.

    ## returns
    - models (dict[int, PolynomialModel]): fitted models, ascending degree.
    """
    degrees = sorted(degrees)

    if verbose >= 1:
        print(f"Fitting {len(degrees)} models on {len(x)} samples")
        degrees = tqdm(degrees)

    models = {}
    for d in degrees:
        models[d] = PolynomialModel(x, y, d, basis=basis, verbose=verbose)

    return models
