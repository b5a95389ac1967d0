"""Exceptions raised by the simulation pipeline."""


class BiasVarianceError(ValueError):
    """Base class, a ValueError so callers can catch bad input the usual way."""


class ConfigurationError(BiasVarianceError):
    """Invalid study settings, e.g. a split leaving train or test empty."""


class FittingError(BiasVarianceError):
    """Least squares fit is rank deficient."""


class SamplingError(BiasVarianceError):
    """Cannot draw the requested number of points."""
