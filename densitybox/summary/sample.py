# Standard library imports
from dataclasses import dataclass
from typing import Any, Literal, Optional

# Third-party imports
import numpy as np
import pandas as pd
from pandas import Series

# Local application imports
from densitybox.exceptions import InsufficientDataError, InvalidSampleError

Transform = Literal["identity", "log"]
TRANSFORMS: tuple[str, ...] = ("identity", "log")


@dataclass(frozen=True)
class Sample:
    """
    Cleaned observations of a single numeric variable.

    Attributes
    ----------
    values : np.ndarray
        Finite observations, missing values removed, in their original order
        (already log-transformed when ``transform == "log"``).
    weights : Optional[np.ndarray]
        Normalised weights (summing to 1), aligned with ``values``.
    name : str
        Variable name, used as default legend label and axis label.
    transform : str
        ``"identity"`` or ``"log"``.
    n_missing : int
        Number of observations dropped because they were missing.
    """

    values: np.ndarray
    weights: Optional[np.ndarray]
    name: str
    transform: str = "identity"
    n_missing: int = 0

    @property
    def size(self) -> int:
        return int(self.values.size)

    @property
    def mean(self) -> float:
        return float(np.mean(self.values))

    @property
    def std(self) -> float:
        # sample standard deviation (ddof=1)
        return float(np.std(self.values, ddof=1))

    @property
    def is_degenerate(self) -> bool:
        return bool(np.ptp(self.values) == 0)

    @property
    def axis_label(self) -> str:
        return f"log({self.name})" if self.transform == "log" else self.name


def _to_float_array(values: Any, what: str) -> np.ndarray:
    try:
        array = pd.to_numeric(Series(np.asarray(values, dtype=object).ravel()), errors="raise")
    except (TypeError, ValueError) as e:
        raise InvalidSampleError(f"{what} must be numeric: {e}") from e
    return array.to_numpy(dtype=float, na_value=np.nan)


def prepare_sample(
    values: Any,
    weights: Optional[Any] = None,
    name: Optional[str] = None,
    transform: Transform = "identity",
) -> Sample:
    """
    Clean a vector of observations into a `Sample`.

    Missing values are discarded (together with their weights). The log
    transform is applied here, so quantiles, fences and the density estimate
    are all computed on the transformed scale.

    Parameters
    ----------
    values : array-like or pd.Series
        Observations of the variable.
    weights : Optional[array-like]
        Non-negative observation weights, same length as ``values``.
    name : Optional[str]
        Variable name. Defaults to the Series name, else ``"x"``.
    transform : {"identity", "log"}
        Scale on which the sample is summarised.

    Returns
    -------
    Sample

    Raises
    ------
    InsufficientDataError
        Fewer than two non-missing values remain.
    InvalidSampleError
        Infinite values, invalid weights, or non-positive values under
        the log transform.
    """
    if transform not in TRANSFORMS:
        raise InvalidSampleError(
            f"Unknown transform '{transform}', expected one of {TRANSFORMS}"
        )
    if name is None:
        name = str(values.name) if isinstance(values, Series) and values.name is not None else "x"

    x = _to_float_array(values, what="values")
    keep = ~np.isnan(x)

    w = None
    if weights is not None:
        w = _to_float_array(weights, what="weights")
        if w.size != x.size:
            raise InvalidSampleError(
                f"weights must have the same length as values ({w.size} != {x.size})"
            )
        keep &= ~np.isnan(w)

    n_missing = int(x.size - keep.sum())
    x = x[keep]
    if np.isinf(x).any():
        raise InvalidSampleError(f"{name} contains infinite values")
    if x.size < 2:
        raise InsufficientDataError(
            f"{name} has {x.size} non-missing value(s); at least 2 are needed"
        )

    if w is not None:
        w = w[keep]
        if np.isinf(w).any() or (w < 0).any():
            raise InvalidSampleError("weights must be finite and non-negative")
        total = w.sum()
        if total <= 0:
            raise InvalidSampleError("weights must have a positive sum")
        w = w / total

    if transform == "log":
        if (x <= 0).any():
            raise InvalidSampleError(
                f"log transform requires strictly positive values in {name}"
            )
        x = np.log(x)

    x.setflags(write=False)
    if w is not None:
        w.setflags(write=False)
    return Sample(values=x, weights=w, name=name, transform=transform, n_missing=n_missing)
