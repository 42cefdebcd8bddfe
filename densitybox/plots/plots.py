# Standard library imports
import base64
import html
import io
import logging
from typing import Any, Optional

# Third-party imports
import matplotlib.pyplot as plt
import seaborn as sns
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Rectangle

# Local application imports
from densitybox.dataloader import PlotConfig
from densitybox.library import get_logger
from densitybox.summary import DensityBoxData, summarize


def fig_to_base64(fig: Figure, alt_text: str) -> str:
    """Convert a matplotlib figure to a base64-encoded HTML image."""
    buf = io.BytesIO()
    fig.savefig(buf, format="png", bbox_inches="tight", transparent=True)
    buf.seek(0)
    img_base64 = base64.b64encode(buf.read()).decode("utf-8")
    plt.close(fig)
    return f'<img src="data:image/png;base64,{img_base64}" alt="{html.escape(alt_text, quote=True)}" class="responsive-img"/>'


def _draw_box(ax: Axes, data: DensityBoxData, config: PlotConfig) -> None:
    layout = data.layout
    summary = data.outliers
    center = layout.box_center
    half = layout.box_width / 2

    # box fill between the quartiles
    ax.add_patch(
        Rectangle(
            (layout.fill_low, layout.fill_far),
            layout.fill_high - layout.fill_low,
            layout.fill_near - layout.fill_far,
            facecolor=config.color,
            alpha=config.alpha,
            edgecolor="none",
            zorder=2,
        )
    )
    # box outline and median
    ax.add_patch(
        Rectangle(
            (summary.q1, center - half),
            summary.iqr,
            layout.box_width,
            facecolor="none",
            edgecolor=config.color,
            linewidth=config.linewidth,
            zorder=3,
        )
    )
    ax.plot(
        [summary.median, summary.median],
        [center - half, center + half],
        color=config.color,
        linewidth=config.linewidth * 1.5,
        solid_capstyle="butt",
        zorder=3,
    )
    # whiskers reach the most extreme values inside the fences
    ax.plot(
        [summary.whisker_low, summary.q1],
        [center, center],
        color=config.color,
        linewidth=config.linewidth,
        zorder=3,
    )
    ax.plot(
        [summary.q3, summary.whisker_high],
        [center, center],
        color=config.color,
        linewidth=config.linewidth,
        zorder=3,
    )


def render_density_box(
    data: DensityBoxData,
    config: Optional[PlotConfig] = None,
    ax: Optional[Axes] = None,
) -> Figure:
    """
    Draw precomputed `DensityBoxData` as a density curve above a box-plot band.

    Parameters
    ----------
    data : DensityBoxData
        Output of `summarize`.
    config : Optional[PlotConfig]
        Styling options; defaults to `PlotConfig()`.
    ax : Optional[Axes]
        Axes to draw on; a new figure is created when None.

    Returns
    -------
    Figure
        The figure holding the axes. Nothing is written to disk.
    """
    config = config or PlotConfig()
    if ax is None:
        fig, ax = plt.subplots(figsize=config.figsize)
    else:
        fig = ax.get_figure()

    density = data.density
    label = config.legend_label or data.name
    handles = []

    if config.fill:
        ax.fill_between(
            density.x,
            density.density,
            color=config.color,
            alpha=config.alpha,
            linewidth=0,
            zorder=1,
        )
    (line,) = ax.plot(
        density.x,
        density.density,
        color=config.color,
        linestyle=config.linetype,
        linewidth=config.linewidth,
        label=label,
        zorder=4,
    )
    handles.append(line)

    _draw_box(ax=ax, data=data, config=config)

    if data.outliers.has_outliers:
        ax.scatter(
            data.outliers.outliers,
            data.outlier_positions,
            s=config.point_size,
            color=config.color,
            alpha=max(config.alpha, 0.6),
            edgecolors="none",
            zorder=5,
        )

    if data.normal is not None:
        (normal_line,) = ax.plot(
            data.normal.x,
            data.normal.density,
            color=config.normal_color,
            linestyle=config.normal_linetype,
            linewidth=config.normal_linewidth,
            label="Normal",
            zorder=4,
        )
        handles.append(normal_line)

    # declutter: densities below zero are layout space, not data
    bottom = data.layout.band_bottom
    top = max(data.layout.max_density, data.normal.max_density if data.normal else 0.0)
    if top > 0:
        ax.set_ylim(bottom - 0.05 * top, top * 1.05)
    ax.set_yticks([])
    ax.set_ylabel("Density")
    ax.set_xlabel(data.sample.axis_label)
    ax.axhline(0, color="lightgrey", linewidth=0.8, zorder=0)
    sns.despine(ax=ax, left=True)
    ax.legend(handles=handles, frameon=False, loc="upper right")
    if config.title:
        ax.set_title(config.title)

    return fig


def plot_density_box(
    values: Any,
    weights: Optional[Any] = None,
    config: Optional[PlotConfig] = None,
    ax: Optional[Axes] = None,
    name: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
    **overrides: Any,
) -> Figure:
    """
    Density curve of one numeric variable with a box-plot band underneath.

    Parameters
    ----------
    values : array-like or pd.Series
        Observations of the variable; missing values are discarded.
    weights : Optional[array-like]
        Observation weights for the density estimate.
    config : Optional[PlotConfig]
        Base configuration; defaults to `PlotConfig()`.
    ax : Optional[Axes]
        Axes to draw on; a new figure is created when None.
    name : Optional[str]
        Variable name; defaults to the Series name or ``"x"``.
    logger : Optional[logging.Logger]
        Logger for progress messages.
    **overrides : Any
        Any `PlotConfig` option, e.g. ``coef=3``, ``normal=True``,
        ``color="seagreen"``.

    Returns
    -------
    Figure
    """
    logger = get_logger(logger)
    config = (config or PlotConfig()).update(**overrides)

    data = summarize(
        values,
        weights=weights,
        coef=config.coef,
        name=name,
        transform=config.transform,
        bandwidth=config.bandwidth,
        n_points=int(config.n_points),
        normal=config.normal,
        random_state=config.random_state,
        logger=logger,
    )
    fig = render_density_box(data=data, config=config, ax=ax)
    logger.info(
        f"[GREEN]- Plotted {data.name}: {data.sample.size} values, "
        f"{data.outliers.outliers_count} outlier(s)"
    )
    return fig
