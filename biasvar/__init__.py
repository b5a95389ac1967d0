"""biasvar: bias-variance trade-off of polynomial regression on simulated data."""

from biasvar.config import SimulationConfig
from biasvar.errors import ConfigurationError, FittingError, SamplingError
from biasvar.study import BiasVarianceStudy

__all__ = [
    "BiasVarianceStudy",
    "ConfigurationError",
    "FittingError",
    "SamplingError",
    "SimulationConfig",
]
