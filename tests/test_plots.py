"""
Rendering tests, run on the Agg backend.
"""
import matplotlib.pyplot as plt
import numpy as np
import pytest
from matplotlib.collections import PathCollection
from matplotlib.figure import Figure
from matplotlib.patches import Rectangle

from densitybox.dataloader import PlotConfig
from densitybox.exceptions import ConfigError, DegenerateDistributionWarning
from densitybox.plots import fig_to_base64, plot_density_box, render_density_box
from densitybox.summary import summarize


def _scatter_layers(ax):
    return [c for c in ax.collections if isinstance(c, PathCollection)]


def _legend_labels(ax):
    return [text.get_text() for text in ax.get_legend().get_texts()]


class TestPlotDensityBox:

    def test_returns_figure_with_layers(self, known_sample):
        fig = plot_density_box(known_sample, random_state=0)
        assert isinstance(fig, Figure)
        ax = fig.axes[0]
        # density line, median, two whiskers
        assert len(ax.lines) >= 4
        assert len([p for p in ax.patches if isinstance(p, Rectangle)]) == 2
        assert len(_scatter_layers(ax)) == 1
        assert _legend_labels(ax) == ["x"]

    def test_without_outliers_skips_point_layer(self):
        fig = plot_density_box(np.arange(1.0, 21.0))
        assert _scatter_layers(fig.axes[0]) == []

    def test_outlier_points_sit_in_the_band(self, known_sample):
        fig = plot_density_box(known_sample, random_state=0)
        data = summarize(known_sample)
        offsets = _scatter_layers(fig.axes[0])[0].get_offsets()
        assert offsets[0][0] == 100.0
        layout = data.layout
        assert layout.box_center - layout.jitter <= offsets[0][1] <= layout.box_center + layout.jitter

    def test_normal_overlay_and_legend(self, normal_series):
        fig = plot_density_box(normal_series, normal=True, legend_label="Height (cm)")
        ax = fig.axes[0]
        assert _legend_labels(ax) == ["Height (cm)", "Normal"]
        assert any(line.get_label() == "Normal" for line in ax.lines)

    def test_fill_flag(self, known_sample):
        filled = plot_density_box(known_sample, fill=True).axes[0]
        plain = plot_density_box(known_sample, fill=False).axes[0]
        assert len(filled.collections) == len(plain.collections) + 1

    def test_styling_options(self, known_sample):
        fig = plot_density_box(known_sample, color="seagreen", linetype="dashed", linewidth=2.5)
        line = fig.axes[0].lines[0]
        assert line.get_color() == "seagreen"
        assert line.get_linestyle() == "--"
        assert line.get_linewidth() == 2.5

    def test_declutters_axes(self, known_sample):
        ax = plot_density_box(known_sample).axes[0]
        assert list(ax.get_yticks()) == []
        assert not ax.spines["left"].get_visible()
        assert ax.get_xlabel() == "x"

    def test_log_axis_label(self, lognormal_series):
        ax = plot_density_box(lognormal_series, transform="log").axes[0]
        assert ax.get_xlabel() == "log(income)"

    def test_draws_on_given_axes(self, known_sample):
        fig, (left, right) = plt.subplots(1, 2)
        result = plot_density_box(known_sample, ax=right)
        assert result is fig
        assert len(right.lines) > 0
        assert len(left.lines) == 0

    def test_degenerate_sample_renders(self):
        with pytest.warns(DegenerateDistributionWarning):
            fig = plot_density_box([5.0] * 10, normal=True)
        assert _legend_labels(fig.axes[0]) == ["x"]

    def test_unknown_option(self, known_sample):
        with pytest.raises(ConfigError):
            plot_density_box(known_sample, colour="red")

    def test_config_object(self, known_sample):
        config = PlotConfig(coef=100.0, title="Wide fences")
        ax = plot_density_box(known_sample, config=config).axes[0]
        assert _scatter_layers(ax) == []
        assert ax.get_title() == "Wide fences"


class TestRenderDensityBox:

    def test_render_precomputed_data(self, lognormal_series):
        data = summarize(lognormal_series, normal=True, random_state=0)
        ax = render_density_box(data).axes[0]
        bottom, top = ax.get_ylim()
        assert bottom < data.layout.fill_far
        assert top >= data.density.max_density


class TestFigToBase64:

    def test_html_image(self, known_sample):
        fig = plot_density_box(known_sample)
        html = fig_to_base64(fig, alt_text="sample")
        assert html.startswith('<img src="data:image/png;base64,')
        assert 'alt="sample"' in html
        assert not plt.fignum_exists(fig.number)

    def test_alt_text_is_escaped(self, known_sample):
        fig = plot_density_box(known_sample)
        html = fig_to_base64(fig, alt_text='income "net" <EUR>')
        assert 'alt="income &quot;net&quot; &lt;EUR&gt;"' in html
