# Standard library imports
import logging
import numbers
import os
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional, Union

# Third-party imports
import matplotlib.colors as mcolors
import numpy as np
import pandas as pd
import yaml
from pandas import DataFrame, Series

# Local application imports
from densitybox.exceptions import ConfigError
from densitybox.library import get_logger

LINESTYLES = ("solid", "dashed", "dashdot", "dotted", "-", "--", "-.", ":")


def _is_number(value: Any) -> bool:
    return (
        isinstance(value, numbers.Real)
        and not isinstance(value, bool)
        and bool(np.isfinite(value))
    )


def _is_integer(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


@dataclass
class PlotConfig:
    """
    Styling and computation settings for a density-and-box-plot figure.

    Attributes
    ----------
    coef : float
        Fence coefficient multiplying the IQR.
    transform : str
        ``"identity"`` or ``"log"``.
    bandwidth : str | float
        Bandwidth rule or value for the density estimate.
    n_points : int
        Grid size of the density and normal curves.
    color, linetype, linewidth : str, str, float
        Style of the density line (and box outline).
    alpha : float
        Opacity of the density fill and the box fill.
    fill : bool
        Fill the area under the density curve.
    normal : bool
        Overlay the comparison normal curve.
    normal_color, normal_linetype, normal_linewidth : str, str, float
        Style of the comparison normal curve.
    legend_label : Optional[str]
        Legend entry of the density curve; defaults to the variable name.
    point_size : float
        Marker size of the outlier points.
    figsize : tuple[float, float]
        Figure size in inches when a new figure is created.
    title : Optional[str]
        Axes title.
    random_state : Optional[int]
        Seed for the outlier jitter.
    """

    coef: float = 1.5
    transform: str = "identity"
    bandwidth: Union[str, float] = "nrd0"
    n_points: int = 512
    color: str = "dodgerblue"
    linetype: str = "solid"
    linewidth: float = 1.5
    alpha: float = 0.3
    fill: bool = True
    normal: bool = False
    normal_color: str = "darkorange"
    normal_linetype: str = "dashed"
    normal_linewidth: float = 1.0
    legend_label: Optional[str] = None
    point_size: float = 12.0
    figsize: tuple[float, float] = (8.0, 5.0)
    title: Optional[str] = None
    random_state: Optional[int] = None

    def __iter__(self):
        for field in fields(self):
            yield field.name, getattr(self, field.name)

    def __post_init__(self) -> None:
        if isinstance(self.figsize, list):
            self.figsize = tuple(self.figsize)

    def update(self, **overrides: Any) -> "PlotConfig":
        """Return a copy with ``overrides`` applied; None values are ignored."""
        known = {field.name for field in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ConfigError(f"Unknown plot option(s): {', '.join(unknown)}")
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes).validate()

    def validate(self) -> "PlotConfig":
        """Check the option values, raising `ConfigError` on the first problem."""
        if not _is_number(self.coef) or self.coef < 0:
            raise ConfigError(f"coef must be a finite, non-negative number, got {self.coef!r}")
        if self.transform not in ("identity", "log"):
            raise ConfigError(f"transform must be 'identity' or 'log', got '{self.transform}'")
        if isinstance(self.bandwidth, str):
            if self.bandwidth not in ("nrd0", "scott", "silverman"):
                raise ConfigError(f"Unknown bandwidth method '{self.bandwidth}'")
        elif not _is_number(self.bandwidth) or self.bandwidth <= 0:
            raise ConfigError(f"bandwidth must be a positive number, got {self.bandwidth!r}")
        if not _is_integer(self.n_points) or self.n_points < 2:
            raise ConfigError(f"n_points must be an integer of at least 2, got {self.n_points!r}")
        if not _is_number(self.alpha) or not 0 <= self.alpha <= 1:
            raise ConfigError(f"alpha must be between 0 and 1, got {self.alpha!r}")
        for option in ("linewidth", "normal_linewidth", "point_size"):
            value = getattr(self, option)
            if not _is_number(value) or value <= 0:
                raise ConfigError(f"{option} must be a positive number, got {value!r}")
        for option in ("linetype", "normal_linetype"):
            if getattr(self, option) not in LINESTYLES:
                raise ConfigError(
                    f"{option} must be one of {LINESTYLES}, got '{getattr(self, option)}'"
                )
        for option in ("color", "normal_color"):
            if not mcolors.is_color_like(getattr(self, option)):
                raise ConfigError(f"{option} is not a color: {getattr(self, option)!r}")
        for option in ("fill", "normal"):
            if not isinstance(getattr(self, option), bool):
                raise ConfigError(f"{option} must be true or false, got {getattr(self, option)!r}")
        if (
            not isinstance(self.figsize, tuple)
            or len(self.figsize) != 2
            or not all(_is_number(v) and v > 0 for v in self.figsize)
        ):
            raise ConfigError(f"figsize must be two positive numbers, got {self.figsize!r}")
        if self.random_state is not None and not _is_integer(self.random_state):
            raise ConfigError(f"random_state must be an integer, got {self.random_state!r}")
        self.figsize = tuple(float(v) for v in self.figsize)
        return self

    def save_to_yaml(self, filename: Path) -> None:
        """Save the configuration to a YAML file, creating its folder if needed."""
        parent_dir = Path(filename).parent
        os.makedirs(parent_dir, exist_ok=True)

        data_dict = asdict(self)
        data_dict["figsize"] = list(self.figsize)

        with open(filename, "w", encoding="utf-8") as file:
            yaml.safe_dump(data_dict, file, sort_keys=False)

    @classmethod
    def load_from_yaml(cls, filename: Path) -> "PlotConfig":
        """
        Load a configuration from a YAML file.

        Raises FileNotFoundError, ConfigError on error.
        """
        with open(filename, "r", encoding="utf-8") as file:
            try:
                data = yaml.safe_load(file) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {filename}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"{filename} must contain a mapping of plot options")
        try:
            config = cls(**data)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid plot options in {filename}: {e}") from e
        return config.validate()


def get_config(config_file: Optional[Path] = None, **overrides: Any) -> PlotConfig:
    """
    Build a `PlotConfig` from an optional YAML file and explicit overrides.

    Parameters
    ----------
    config_file : Optional[Path]
        YAML file with plot options; defaults are used when None.
    **overrides : Any
        Options that take precedence over the file; None values are ignored.

    Returns
    -------
    PlotConfig
    """
    config = PlotConfig.load_from_yaml(config_file) if config_file else PlotConfig()
    return config.update(**overrides)


def read_data(file_path: Path, logger: Optional[logging.Logger] = None) -> DataFrame:
    """
    Read data from a CSV or Excel file into a pandas DataFrame.

    Parameters
    ----------
    file_path : Path
        Path to the data file.
    logger : Optional[logging.Logger]
        Logger for recording progress.

    Returns
    -------
    pd.DataFrame

    Raises
    ------
    FileNotFoundError
        The file does not exist.
    """
    logger = get_logger(logger)
    file_path = Path(file_path)
    logger.info(f"[BLUE]- Reading data from {file_path}")

    if file_path.suffix in (".xlsx", ".xls"):
        return pd.read_excel(io=file_path)
    return pd.read_csv(filepath_or_buffer=file_path)


def load_sample(
    file_path: Path,
    column: str,
    weights_column: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
) -> tuple[Series, Optional[Series]]:
    """Read ``column`` (and optionally a weights column) from a data file."""
    df = read_data(file_path=file_path, logger=logger)
    for name in (column, weights_column):
        if name is not None and name not in df.columns:
            raise KeyError(
                f"Column '{name}' not found in {file_path}; available: {', '.join(map(str, df.columns))}"
            )
    weights = df[weights_column] if weights_column is not None else None
    return df[column], weights
