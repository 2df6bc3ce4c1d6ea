"""
Figure generation for the response surface tutorial.

All plotting functions accept precomputed tables or grids and do not fit
models themselves.

Modules:
    surface_plots:
        Congruence/incongruence line figure and the 3-D response surface.

    distribution_plots:
        Histograms of the simulated ratings.

Styling:
    STIX serif fonts, 300 DPI PNG output with PDF and SVG companions, and
    suppressed top/right spines.
"""

from .distribution_plots import plot_observation_distributions
from .style import apply_global_style
from .surface_plots import plot_response_surface, plot_surface_lines

__all__ = [
    "apply_global_style",
    "plot_observation_distributions",
    "plot_response_surface",
    "plot_surface_lines",
]
