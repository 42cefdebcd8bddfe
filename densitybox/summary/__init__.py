# densitybox/summary/__init__.py

from .density import DensityEstimate, estimate_density, select_bandwidth
from .layout import LayoutProportions, compute_layout, jitter_outliers
from .normal import comparison_normal
from .outliers import OutlierSummary, classify_outliers, compute_quantiles
from .sample import Sample, prepare_sample
from .summary import DensityBoxData, summarize

__all__ = [
    "DensityEstimate",
    "estimate_density",
    "select_bandwidth",
    "LayoutProportions",
    "compute_layout",
    "jitter_outliers",
    "comparison_normal",
    "OutlierSummary",
    "classify_outliers",
    "compute_quantiles",
    "Sample",
    "prepare_sample",
    "DensityBoxData",
    "summarize",
]
