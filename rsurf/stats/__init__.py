"""
Statistical utilities for the response surface tutorial.

This subpackage provides the numerical routines of the pipeline. All
functions operate on arrays or DataFrames; no plotting is included.

Modules:
    descriptives:
        Per-column summary statistics and correlations.

    screening:
        Discrepancy screen on z-standardized paired ratings.

    regression:
        QR-based ordinary least squares with parameter covariance, and the
        second-order response surface model.
"""

from .descriptives import correlation_matrix, describe_columns
from .regression import FitError, SurfaceFit, fit_ols, fit_response_surface
from .screening import DiscrepancyScreen, screen_discrepancy

__all__ = [
    "correlation_matrix",
    "describe_columns",
    "FitError",
    "SurfaceFit",
    "fit_ols",
    "fit_response_surface",
    "DiscrepancyScreen",
    "screen_discrepancy",
]
