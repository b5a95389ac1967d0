from dataclasses import dataclass
from typing import Literal

from biasvar.errors import ConfigurationError

# published study
N_SAMPLES = 200
TRAIN_FRACTION = 0.75
COEFFICIENTS = (1.0, 2.0, 3.0)
DEGREES = (1, 2, 3, 5, 10, 15, 20)
N_POINTS = 5

DATA_SEED = 2401
POINT_SEED = 12345


@dataclass(frozen=True)
class SimulationConfig:
    """Settings for one run of the bias-variance study.

    ## parameters
    - data_seed (int): seed for generating the sample and the split.
    - point_seed (int): seed for picking the test points used for bias/variance.
    - n (int): number of samples.
    - train_fraction (float): share of samples used for training, in (0, 1).
    - coefficients (tuple): (b0, b1, b2) of the quadratic ground truth.
    - degrees (tuple): polynomial degrees to fit, ascending.
    - n_points (int): number of test points for bias/variance.
    - basis (str): "legendre" (stable for high degree) or "monomial".
    - strata (int): number of quantile bins for the stratified split.
    - reverse_bias_variance (bool): reproduce the reversed bias/variance
        ordering of the reference report.
    """

    data_seed: int = DATA_SEED
    point_seed: int = POINT_SEED
    n: int = N_SAMPLES
    train_fraction: float = TRAIN_FRACTION
    coefficients: tuple[float, float, float] = COEFFICIENTS
    degrees: tuple[int, ...] = DEGREES
    n_points: int = N_POINTS
    basis: Literal["legendre", "monomial"] = "legendre"
    strata: int = 5
    reverse_bias_variance: bool = False

    def __post_init__(self):
        if self.n < 2:
            raise ConfigurationError(f"Needs at least 2 samples, got n={self.n}")
        if not 0 < self.train_fraction < 1:
            raise ConfigurationError(
                f"train_fraction must be in (0, 1), not {self.train_fraction}"
            )
        if len(self.coefficients) != 3:
            raise ConfigurationError(
                f"Expects coefficients as (b0, b1, b2), not {self.coefficients}"
            )
        if len(self.degrees) == 0:
            raise ConfigurationError("No degrees to fit")
        if any(d < 0 for d in self.degrees):
            raise ConfigurationError(f"Negative degree in {self.degrees}")
        if list(self.degrees) != sorted(set(self.degrees)):
            raise ConfigurationError(
                f"Degrees must be unique and ascending: {self.degrees}"
            )
        if self.basis not in ("legendre", "monomial"):
            raise ConfigurationError(f"Unsupported basis: {self.basis}")
        if self.strata < 1:
            raise ConfigurationError(f"Needs at least 1 stratum, got {self.strata}")
