# Standard library imports
from dataclasses import dataclass

# Third-party imports
import numpy as np
import pandas as pd


@dataclass(frozen=True)
class OutlierSummary:
    """Quartiles, fences and the values lying outside the fences."""

    q1: float
    median: float
    q3: float
    coef: float
    lower_bound: float
    upper_bound: float
    whisker_low: float
    whisker_high: float
    outliers: np.ndarray
    mask: np.ndarray

    @property
    def iqr(self) -> float:
        return self.q3 - self.q1

    @property
    def outliers_count(self) -> int:
        return int(self.outliers.size)

    @property
    def has_outliers(self) -> bool:
        return self.outliers.size > 0


def compute_quantiles(values: np.ndarray) -> tuple[float, float, float]:
    """Return (Q1, median, Q3) using linear interpolation between order statistics."""
    column = pd.Series(values, dtype=float)
    q1, median, q3 = column.quantile([0.25, 0.5, 0.75])
    return float(q1), float(median), float(q3)


def classify_outliers(values: np.ndarray, coef: float = 1.5) -> OutlierSummary:
    """
    Split ``values`` into values inside the fences and outliers.

    The fences are ``Q1 - coef * IQR`` and ``Q3 + coef * IQR``; a value is an
    outlier when it lies strictly outside them. With a zero IQR the fences
    coincide with the quartiles, so an all-equal sample has no outliers.

    Parameters
    ----------
    values : np.ndarray
        Cleaned sample values.
    coef : float
        Fence coefficient, must be finite and non-negative.

    Returns
    -------
    OutlierSummary
    """
    coef = float(coef)
    if not np.isfinite(coef) or coef < 0:
        raise ValueError(f"coef must be a finite, non-negative number, got {coef}")

    values = np.asarray(values, dtype=float)
    if values.size == 0:
        raise ValueError("cannot classify outliers of an empty sample")

    q1, median, q3 = compute_quantiles(values)
    iqr = q3 - q1
    lower_bound = q1 - coef * iqr
    upper_bound = q3 + coef * iqr

    mask = (values < lower_bound) | (values > upper_bound)
    inside = values[~mask]
    # with coef == 0 on tiny samples every value can fall outside the box
    whisker_low = float(inside.min()) if inside.size else q1
    whisker_high = float(inside.max()) if inside.size else q3

    outliers = values[mask]
    outliers.setflags(write=False)
    mask.setflags(write=False)
    return OutlierSummary(
        q1=q1,
        median=median,
        q3=q3,
        coef=coef,
        lower_bound=lower_bound,
        upper_bound=upper_bound,
        whisker_low=whisker_low,
        whisker_high=whisker_high,
        outliers=outliers,
        mask=mask,
    )
