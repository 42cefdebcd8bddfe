# densitybox/plots/__init__.py

from .plots import fig_to_base64, plot_density_box, render_density_box

__all__ = [
    "fig_to_base64",
    "plot_density_box",
    "render_density_box",
]
