"""
Tests for the proportional box-plot band layout and the outlier jitter.
"""
import numpy as np
import pytest

from densitybox.summary import compute_layout, jitter_outliers


class TestComputeLayout:

    def test_fractions_of_peak(self):
        layout = compute_layout(max_density=2.0, q1=3.0, q3=7.0)
        assert layout.box_width == pytest.approx(0.4)
        assert layout.box_center == pytest.approx(-0.3)
        assert layout.fill_near == pytest.approx(-0.1)
        assert layout.fill_far == pytest.approx(-0.5)
        assert layout.jitter == pytest.approx(0.15)
        assert (layout.fill_low, layout.fill_high) == (3.0, 7.0)

    @pytest.mark.parametrize("peak", [0.01, 0.5, 1.0, 37.0])
    def test_proportional_to_peak(self, peak):
        layout = compute_layout(max_density=peak, q1=0.0, q3=1.0)
        assert layout.box_width / peak == pytest.approx(0.20)
        assert layout.box_center / peak == pytest.approx(-0.15)
        assert layout.fill_near / peak == pytest.approx(-0.05)
        assert layout.fill_far / peak == pytest.approx(-0.25)
        assert layout.jitter / peak == pytest.approx(0.075)
        assert layout.box_width >= 0 and layout.jitter >= 0

    def test_box_sits_inside_fill_band(self):
        layout = compute_layout(max_density=1.0, q1=0.0, q3=1.0)
        half = layout.box_width / 2
        assert layout.box_center - half == pytest.approx(layout.fill_far)
        assert layout.box_center + half == pytest.approx(layout.fill_near)

    @pytest.mark.parametrize("peak", [0.0, -1.0, np.nan, np.inf])
    def test_degenerate_peak_gives_no_nan(self, peak):
        layout = compute_layout(max_density=peak, q1=1.0, q3=2.0)
        numbers = [
            layout.max_density,
            layout.box_width,
            layout.box_center,
            layout.fill_near,
            layout.fill_far,
            layout.jitter,
        ]
        assert all(np.isfinite(v) for v in numbers)
        assert layout.box_width == 0.0


class TestJitter:

    def test_positions_within_band(self):
        layout = compute_layout(max_density=1.0, q1=0.0, q3=1.0)
        positions = jitter_outliers(1000, layout, random_state=0)
        assert positions.shape == (1000,)
        assert positions.min() >= layout.box_center - layout.jitter
        assert positions.max() <= layout.box_center + layout.jitter

    def test_seeded_jitter_is_reproducible(self):
        layout = compute_layout(max_density=1.0, q1=0.0, q3=1.0)
        np.testing.assert_array_equal(
            jitter_outliers(5, layout, random_state=3),
            jitter_outliers(5, layout, random_state=3),
        )

    def test_no_outliers(self):
        layout = compute_layout(max_density=1.0, q1=0.0, q3=1.0)
        assert jitter_outliers(0, layout).size == 0

    def test_zero_peak_puts_points_on_centre(self):
        layout = compute_layout(max_density=0.0, q1=0.0, q3=1.0)
        np.testing.assert_array_equal(jitter_outliers(3, layout, random_state=1), [0.0, 0.0, 0.0])
