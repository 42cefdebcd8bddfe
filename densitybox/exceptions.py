class DensityBoxError(Exception):
    """Base class for all errors raised by densitybox."""


class InsufficientDataError(DensityBoxError, ValueError):
    """Fewer than two usable observations, so no density can be estimated."""


class InvalidSampleError(DensityBoxError, ValueError):
    """Sample values or weights that cannot be summarised."""


class ConfigError(DensityBoxError):
    """Invalid or unknown plot configuration values."""


class DegenerateDistributionWarning(UserWarning):
    """The sample has zero variance; the comparison normal curve is skipped."""
