# Standard library imports
from dataclasses import dataclass
from typing import Optional, Union

# Third-party imports
import numpy as np

BOX_WIDTH = 0.20
BOX_CENTER = -0.15
FILL_NEAR = -0.05
FILL_FAR = -0.25
JITTER = 0.075


@dataclass(frozen=True)
class LayoutProportions:
    """
    Placement of the box-plot band below the density curve.

    Every vertical coordinate is a fixed fraction of the peak density, so the
    band keeps the same visual weight whatever the scale of the density.
    """

    max_density: float
    box_width: float
    box_center: float
    fill_near: float
    fill_far: float
    fill_low: float
    fill_high: float
    jitter: float

    @property
    def band_bottom(self) -> float:
        return min(self.fill_far, self.box_center - self.jitter)


def compute_layout(max_density: float, q1: float, q3: float) -> LayoutProportions:
    """Derive the box-plot band geometry from the peak density and the quartiles."""
    peak = float(max_density)
    if not np.isfinite(peak) or peak < 0:
        peak = 0.0

    return LayoutProportions(
        max_density=peak,
        box_width=BOX_WIDTH * peak,
        box_center=BOX_CENTER * peak,
        fill_near=FILL_NEAR * peak,
        fill_far=FILL_FAR * peak,
        fill_low=float(q1),
        fill_high=float(q3),
        jitter=JITTER * peak,
    )


def jitter_outliers(
    n: int,
    layout: LayoutProportions,
    random_state: Optional[Union[int, np.random.Generator]] = None,
) -> np.ndarray:
    """Vertical positions for ``n`` outlier points, uniform in centre +/- jitter."""
    rng = np.random.default_rng(random_state)
    positions = layout.box_center + rng.uniform(-layout.jitter, layout.jitter, size=n)
    positions.setflags(write=False)
    return positions
