# Standard library imports
from typing import Optional

# Third-party imports
import numpy as np
from scipy import stats

# Local application imports
from .density import DensityEstimate


def comparison_normal(
    values: np.ndarray,
    n_points: int = 512,
    spread: float = 3.1,
) -> Optional[DensityEstimate]:
    """
    Normal density matched to the mean and standard deviation of ``values``.

    Evaluated on ``n_points`` points over ``mean +/- spread * sd``. Returns
    None for a zero standard deviation, where no curve can be drawn.
    """
    values = np.asarray(values, dtype=float)
    mu = float(np.mean(values))
    sigma = float(np.std(values, ddof=1)) if values.size > 1 else 0.0
    if not sigma > 0:
        return None

    x = np.linspace(mu - spread * sigma, mu + spread * sigma, n_points)
    density = stats.norm.pdf(x, loc=mu, scale=sigma)
    x.setflags(write=False)
    density.setflags(write=False)
    return DensityEstimate(x=x, density=density)
