"""
A Python package for polynomial regression and response surface analysis.

Simulates a couples dataset (relationship happiness versus the partners'
extroversion), fits a second-order polynomial regression and interprets the
fitted surface along the lines of congruence and incongruence.

Modules:
    - data_generation: Simulates observations and handles CSV round trips.
    - features: Centers predictors and builds polynomial terms.
    - stats: Descriptive statistics, discrepancy screen and OLS fitting.
    - surface: Evaluates the fitted surface along lines and over a grid.
    - plotting: Line, surface and distribution figures.
    - analysis: Runs the whole pipeline for one configuration.
"""

__version__ = "1.0.0"

from .analysis import run_analysis
from .config import AnalysisConfig
from .data_generation import (
    generate_observations,
    load_observations,
    save_observations,
)
from .features import build_polynomial_features, center_and_expand
from .random_source import RCompatibleUniform, make_random_source
from .stats import (
    DiscrepancyScreen,
    FitError,
    SurfaceFit,
    describe_columns,
    fit_response_surface,
    screen_discrepancy,
)
from .surface import (
    calculate_happy,
    evaluate_surface_grid,
    evaluate_surface_lines,
    surface_domain,
    surface_parameters,
)

__all__ = [
    # Configuration
    "AnalysisConfig",
    # Data
    "RCompatibleUniform",
    "make_random_source",
    "generate_observations",
    "load_observations",
    "save_observations",
    "build_polynomial_features",
    "center_and_expand",
    # Statistics
    "describe_columns",
    "DiscrepancyScreen",
    "screen_discrepancy",
    "FitError",
    "SurfaceFit",
    "fit_response_surface",
    # Surface
    "calculate_happy",
    "evaluate_surface_grid",
    "evaluate_surface_lines",
    "surface_domain",
    "surface_parameters",
    # Pipeline
    "run_analysis",
]
