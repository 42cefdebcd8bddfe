# Standard library imports
import logging
import warnings
from dataclasses import dataclass
from typing import Any, Optional, Union

# Third-party imports
import numpy as np

# Local application imports
from densitybox.exceptions import DegenerateDistributionWarning
from densitybox.library import get_logger

from .density import Bandwidth, DensityEstimate, estimate_density
from .layout import LayoutProportions, compute_layout, jitter_outliers
from .normal import comparison_normal
from .outliers import OutlierSummary, classify_outliers
from .sample import Sample, Transform, prepare_sample


@dataclass(frozen=True)
class DensityBoxData:
    """Everything needed to draw one density-and-box-plot figure."""

    sample: Sample
    density: DensityEstimate
    outliers: OutlierSummary
    layout: LayoutProportions
    outlier_positions: np.ndarray
    normal: Optional[DensityEstimate] = None
    warnings: tuple[str, ...] = ()

    @property
    def name(self) -> str:
        return self.sample.name

    @property
    def quantiles(self) -> tuple[float, float, float]:
        return self.outliers.q1, self.outliers.median, self.outliers.q3


def summarize(
    values: Any,
    weights: Optional[Any] = None,
    coef: float = 1.5,
    name: Optional[str] = None,
    transform: Transform = "identity",
    bandwidth: Bandwidth = "nrd0",
    n_points: int = 512,
    normal: bool = False,
    random_state: Optional[Union[int, np.random.Generator]] = None,
    logger: Optional[logging.Logger] = None,
) -> DensityBoxData:
    """
    Derive the density curve, box-plot summary and layout for one variable.

    All quantities are computed on the scale of the prepared sample: with
    ``transform="log"`` the quartiles and fences are recomputed on the log
    values, never carried over from the original scale.

    Parameters
    ----------
    values : array-like or pd.Series
        Observations of the variable; missing values are discarded.
    weights : Optional[array-like]
        Observation weights, used by the density estimate only.
    coef : float
        Fence coefficient multiplying the IQR.
    name : Optional[str]
        Variable name (defaults to the Series name or ``"x"``).
    transform : {"identity", "log"}
        Scale on which the variable is summarised.
    bandwidth : str or float
        Bandwidth rule (``"nrd0"``, ``"scott"``, ``"silverman"``) or value.
    n_points : int
        Number of grid points of the density and normal curves.
    normal : bool
        Also compute the comparison normal curve.
    random_state : Optional[int or np.random.Generator]
        Seed for the outlier jitter.
    logger : Optional[logging.Logger]
        Logger for progress messages; defaults to the ``densitybox`` logger.

    Returns
    -------
    DensityBoxData
    """
    logger = get_logger(logger)
    sample = prepare_sample(values, weights=weights, name=name, transform=transform)
    logger.debug(
        f"{sample.name}: {sample.size} values ({sample.n_missing} missing dropped), "
        f"transform={sample.transform}"
    )

    notes: list[str] = []
    if sample.is_degenerate:
        message = f"{sample.name} has zero variance"
        if normal:
            message += "; the comparison normal curve is skipped"
        warnings.warn(message, DegenerateDistributionWarning, stacklevel=2)
        logger.warning(message)
        notes.append(message)

    density = estimate_density(sample, n_points=n_points, bandwidth=bandwidth)
    logger.debug(
        f"{sample.name}: bandwidth={density.bandwidth:.4g}, max density={density.max_density:.4g}"
    )

    outliers = classify_outliers(sample.values, coef=coef)
    logger.debug(
        f"{sample.name}: fences [{outliers.lower_bound:.4g}, {outliers.upper_bound:.4g}], "
        f"{outliers.outliers_count} outlier(s)"
    )

    layout = compute_layout(density.max_density, outliers.q1, outliers.q3)
    positions = jitter_outliers(outliers.outliers_count, layout, random_state=random_state)

    normal_curve = None
    if normal and not sample.is_degenerate:
        normal_curve = comparison_normal(sample.values, n_points=n_points)

    return DensityBoxData(
        sample=sample,
        density=density,
        outliers=outliers,
        layout=layout,
        outlier_positions=positions,
        normal=normal_curve,
        warnings=tuple(notes),
    )
