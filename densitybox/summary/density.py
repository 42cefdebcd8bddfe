# Standard library imports
import warnings
from dataclasses import dataclass
from typing import Union

# Third-party imports
import numpy as np
from scipy import stats

# Local application imports
from .sample import Sample

Bandwidth = Union[str, float]
BANDWIDTH_METHODS: tuple[str, ...] = ("nrd0", "scott", "silverman")
CHUNK_SIZE = 10_000


@dataclass(frozen=True)
class DensityEstimate:
    """Density curve evaluated on an evenly spaced grid."""

    x: np.ndarray
    density: np.ndarray
    bandwidth: float = float("nan")

    @property
    def n_points(self) -> int:
        return int(self.x.size)

    @property
    def max_density(self) -> float:
        return float(np.max(self.density)) if self.density.size else 0.0


def select_bandwidth(values: np.ndarray, method: Bandwidth = "nrd0") -> float:
    """
    Choose the Gaussian kernel bandwidth for ``values``.

    ``"nrd0"`` is Silverman's rule of thumb with the IQR guard,
    ``0.9 * min(sd, IQR / 1.34) * n ** -0.2``. When the spread is zero it
    falls back to the standard deviation, then to ``|x[0]|``, then to 1, so
    a constant sample still gets a positive bandwidth. ``"scott"`` and
    ``"silverman"`` use scipy's factors on the standard deviation.
    A positive number is used as is.

    Observation weights are not used: every rule works on the unweighted
    sample with the ddof=1 standard deviation.
    """
    values = np.asarray(values, dtype=float)
    if values.size < 2:
        raise ValueError("need at least 2 values to select a bandwidth")

    if not isinstance(method, str):
        bw = float(method)
        if not np.isfinite(bw) or bw <= 0:
            raise ValueError(f"bandwidth must be a positive number, got {method!r}")
        return bw

    if method not in BANDWIDTH_METHODS:
        raise ValueError(
            f"Unknown bandwidth method '{method}', expected one of {BANDWIDTH_METHODS}"
        )

    n = values.size
    sd = float(np.std(values, ddof=1))
    if method == "nrd0":
        q1, q3 = np.quantile(values, [0.25, 0.75])
        lo = min(sd, (q3 - q1) / 1.34)
        if not lo > 0:
            lo = sd or abs(values[0]) or 1.0
        return float(0.9 * lo * n ** -0.2)

    if method == "scott":
        factor = n ** (-1.0 / 5)
    else:
        factor = (n * 3 / 4.0) ** (-1.0 / 5)
    return float(sd * factor) if sd > 0 else select_bandwidth(values, "nrd0")


def _kernel_sum(
    x: np.ndarray,
    values: np.ndarray,
    weights: np.ndarray,
    bw: float,
    chunk_size: int = CHUNK_SIZE,
) -> np.ndarray:
    density = np.zeros_like(x)
    for start in range(0, values.size, chunk_size):
        stop = start + chunk_size
        # (n_points, chunk_size) block
        kernels = stats.norm.pdf(x[:, np.newaxis], loc=values[np.newaxis, start:stop], scale=bw)
        density += kernels @ weights[start:stop]
    return density


def estimate_density(
    sample: Sample,
    n_points: int = 512,
    bandwidth: Bandwidth = "nrd0",
    cut: float = 3.0,
) -> DensityEstimate:
    """
    Gaussian kernel density estimate of ``sample`` on ``n_points`` grid points.

    The grid spans ``[min - cut * bw, max + cut * bw]``. Weighted samples use
    their normalised weights as kernel masses. The estimate is evaluated by
    `scipy.stats.gaussian_kde` with its bandwidth factor scaled so that the
    kernel standard deviation equals ``bw``; samples without spread (or with
    all weight on a single value) are summed block by block instead.
    """
    if n_points < 2:
        raise ValueError(f"n_points must be at least 2, got {n_points}")

    values = sample.values
    weights = sample.weights
    bw = select_bandwidth(values, method=bandwidth)
    x = np.linspace(values.min() - cut * bw, values.max() + cut * bw, n_points)

    # same covariance scipy computes for the data
    with warnings.catch_warnings(), np.errstate(divide="ignore", invalid="ignore"):
        # a single weighted value leaves no degrees of freedom
        warnings.simplefilter("ignore", RuntimeWarning)
        data_sd = float(np.sqrt(np.cov(values, aweights=weights)))

    if np.isfinite(data_sd) and data_sd > 0:
        kde = stats.gaussian_kde(values, bw_method=bw / data_sd, weights=weights)
        density = kde(x)
    else:
        if weights is None:
            weights = np.full(values.size, 1.0 / values.size)
        density = _kernel_sum(x, values, weights, bw)

    x.setflags(write=False)
    density.setflags(write=False)
    return DensityEstimate(x=x, density=density, bandwidth=bw)
