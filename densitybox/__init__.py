# densitybox/__init__.py

from .dataloader import PlotConfig, get_config, load_sample, read_data
from .exceptions import (
    ConfigError,
    DegenerateDistributionWarning,
    DensityBoxError,
    InsufficientDataError,
    InvalidSampleError,
)
from .library import Logger
from .plots import fig_to_base64, plot_density_box, render_density_box
from .summary import (
    DensityBoxData,
    DensityEstimate,
    LayoutProportions,
    OutlierSummary,
    Sample,
    classify_outliers,
    comparison_normal,
    compute_layout,
    compute_quantiles,
    estimate_density,
    prepare_sample,
    summarize,
)

__version__ = "0.1.0"

__all__ = [
    "PlotConfig",
    "get_config",
    "load_sample",
    "read_data",
    "ConfigError",
    "DegenerateDistributionWarning",
    "DensityBoxError",
    "InsufficientDataError",
    "InvalidSampleError",
    "Logger",
    "fig_to_base64",
    "plot_density_box",
    "render_density_box",
    "DensityBoxData",
    "DensityEstimate",
    "LayoutProportions",
    "OutlierSummary",
    "Sample",
    "classify_outliers",
    "comparison_normal",
    "compute_layout",
    "compute_quantiles",
    "estimate_density",
    "prepare_sample",
    "summarize",
]
