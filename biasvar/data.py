"""
Synthetic data

- sample from a noisy quadratic
- stratified train/test split
"""

import math
from dataclasses import dataclass

import numpy as np
import polars as pl

from biasvar.config import COEFFICIENTS, N_SAMPLES, TRAIN_FRACTION
from biasvar.errors import ConfigurationError


@dataclass(frozen=True, eq=False)
class Sample:
    """Predictor, noise, noise-free signal and response. Read-only."""

    x: np.ndarray
    e: np.ndarray
    f: np.ndarray
    y: np.ndarray

    def __post_init__(self):
        for name in ("x", "e", "f", "y"):
            arr = np.array(getattr(self, name), dtype=np.float64)
            if arr.ndim != 1:
                raise ValueError(f"`{name}` must be 1-dimensional, got {arr.shape}")
            arr.setflags(write=False)
            object.__setattr__(self, name, arr)

        if not len(self.x) == len(self.e) == len(self.f) == len(self.y):
            raise ValueError("Inconsistent sample count")

    def __len__(self) -> int:
        return len(self.x)

    def to_frame(self) -> pl.DataFrame:
        return pl.DataFrame({"x": self.x, "e": self.e, "f": self.f, "y": self.y})


@dataclass(frozen=True, eq=False)
class Split:
    """Disjoint train/test indices covering a sample."""

    train_indices: np.ndarray
    test_indices: np.ndarray

    def __post_init__(self):
        for name in ("train_indices", "test_indices"):
            idx = np.sort(np.array(getattr(self, name), dtype=np.int64))
            idx.setflags(write=False)
            object.__setattr__(self, name, idx)

        if len(self.train_indices) == 0 or len(self.test_indices) == 0:
            raise ConfigurationError(
                f"Degenerate split: {len(self.train_indices)} train, "
                f"{len(self.test_indices)} test"
            )
        if np.intersect1d(self.train_indices, self.test_indices).size > 0:
            raise ValueError("train and test indices overlap")

    def __str__(self) -> str:
        return f"Split: {len(self.train_indices)} train, {len(self.test_indices)} test"

    @property
    def train_fraction(self) -> float:
        n = len(self.train_indices) + len(self.test_indices)
        return len(self.train_indices) / n

    def train(self, sample: Sample) -> tuple[np.ndarray, np.ndarray]:
        """(x, y) of the training subset"""
        return sample.x[self.train_indices], sample.y[self.train_indices]

    def test(self, sample: Sample) -> tuple[np.ndarray, np.ndarray]:
        """(x, y) of the test subset"""
        return sample.x[self.test_indices], sample.y[self.test_indices]


def quadratic(x: np.ndarray, coefficients=COEFFICIENTS) -> np.ndarray:
    """Noise-free signal b0 + b1*x + b2*x^2."""
    b0, b1, b2 = coefficients
    return b0 + b1 * x + b2 * x**2


def generate_sample(
    seed: int,
    n: int = N_SAMPLES,
    coefficients: tuple[float, float, float] = COEFFICIENTS,
) -> Sample:
    """Draw a sample from y = b0 + b1*x + b2*x^2 + e.

    ## parameters
    - seed (int): random seed, the same seed gives identical arrays.
    - n (int): number of samples.
    - coefficients (tuple): (b0, b1, b2)

    ## returns
    - sample (Sample): x ~ N(0,1) and e ~ N(0,1), drawn in that order.
    """
    if n < 1:
        raise ConfigurationError(f"Needs at least 1 sample, got n={n}")

    rng = np.random.default_rng(seed)
    x = rng.normal(0.0, 1.0, n)
    e = rng.normal(0.0, 1.0, n)
    f = quadratic(x, coefficients)

    return Sample(x=x, e=e, f=f, y=f + e)


def stratified_split(
    x: np.ndarray,
    seed: int,
    train_fraction: float = TRAIN_FRACTION,
    groups: int = 5,
) -> Split:
    """Random train/test split, stratified on the values of `x`.

    The values are ranked and cut into `groups` bins of (almost) equal size.
    From each bin, ceil(size * train_fraction) indices are drawn without
    replacement for training. The rest is test data.

    ## parameters
    - x (ndarray): values to stratify on, shape (N,)
    - seed (int | SeedSequence): random seed for the draws.
    - train_fraction (float): in (0, 1)
    - groups (int): number of quantile bins, at most N.

    ## returns
    - split (Split)
    """
    if not 0 < train_fraction < 1:
        raise ConfigurationError(
            f"train_fraction must be in (0, 1), not {train_fraction}"
        )
    if groups < 1:
        raise ConfigurationError(f"Needs at least 1 group, got {groups}")

    x = np.asarray(x)
    n = len(x)
    if n == 0:
        raise ConfigurationError("Cannot split an empty sample")

    rng = np.random.default_rng(seed)
    order = np.argsort(x, kind="stable")

    train = []
    for stratum in np.array_split(order, min(groups, n)):
        k = math.ceil(round(len(stratum) * train_fraction, 9))
        train.append(rng.choice(stratum, size=k, replace=False))

    train_indices = np.sort(np.concatenate(train))
    test_indices = np.setdiff1d(np.arange(n), train_indices)

    return Split(train_indices=train_indices, test_indices=test_indices)
