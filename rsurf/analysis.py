"""
Polynomial regression and response surface analysis of simulated couples.

Pipeline:
- Simulate extroversion for both partners and relationship happiness.
- Describe the raw columns and screen the partners' ratings for discrepancy
  (diagnostic only; the run continues whatever the split).
- Center both ratings at the scale midpoint and add squared and interaction
  terms.
- Fit happy ~ ce_old + ce_young + xy + ysquared + xsquared by OLS.
- Evaluate the fitted surface along the congruence (y = x) and incongruence
  (y = -x) lines and over the full domain, then write tables and figures.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from .config import AnalysisConfig
from .data_generation import generate_observations
from .features import build_polynomial_features
from .output import save_data_to_csv, save_model_tables
from .plotting import (
    plot_observation_distributions,
    plot_response_surface,
    plot_surface_lines,
)
from .random_source import make_random_source
from .schema import COLUMNS
from .stats.descriptives import correlation_matrix, describe_columns
from .stats.regression import fit_response_surface
from .stats.screening import screen_discrepancy
from .surface import (
    evaluate_surface_grid,
    evaluate_surface_lines,
    surface_domain,
    surface_parameters,
)

MIN_DISCREPANT_PERCENT = 10.0
SURFACE_GRID_POINTS = 40


def run_analysis(config: AnalysisConfig, make_plots: bool = True) -> Dict[str, Any]:
    """Run the full tutorial pipeline for one configuration.

    Args:
        config (AnalysisConfig): Validated run settings.
        make_plots (bool): Render figure bundles when ``True``.

    Returns:
        dict: ``observations`` (featured table), ``descriptives``, ``correlations``,
        ``screen``, ``fit``, ``lines``, ``grid``, ``parameters``, ``tables``
        (CSV paths) and ``figures`` (PNG paths).

    Raises:
        FitError: If the regression design is rank-deficient.
    """
    rng = make_random_source(config.seed, config.rng)
    raw = generate_observations(config.n, rng)

    descriptives = describe_columns(raw, COLUMNS.raw)
    correlations = correlation_matrix(raw, COLUMNS.raw)

    screen = screen_discrepancy(
        raw[COLUMNS.extro_o], raw[COLUMNS.extro_y], threshold=config.threshold
    )
    logging.info(
        "Discrepancy screen: %.1f%% discrepant, %.1f%% in agreement",
        screen.discrepant_percent,
        screen.agreement_percent,
    )
    if screen.discrepant_percent < MIN_DISCREPANT_PERCENT:
        logging.warning(
            "Only %.1f%% of couples are discrepant; incongruence estimates rest on few rows",
            screen.discrepant_percent,
        )

    observations = build_polynomial_features(raw, center=config.centering_constant)

    fit = fit_response_surface(observations)
    logging.info(
        "Fitted response surface: intercept=%.4f, R^2=%.4f",
        fit.coef("intercept"),
        fit.r2,
    )

    lo, hi = surface_domain(observations)
    lines = evaluate_surface_lines(fit, lo, hi, n_points=config.n_points)
    grid = evaluate_surface_grid(fit, lo, hi, n_points=SURFACE_GRID_POINTS)
    parameters = surface_parameters(fit)

    tables = save_data_to_csv(observations, descriptives, config.output_dir)
    tables.update(save_model_tables(fit, lines, parameters, config.output_dir))

    figures: Dict[str, str] = {}
    if make_plots:
        figures["distributions"] = plot_observation_distributions(
            raw, config.output_dir
        )
        figures["surface_lines"] = plot_surface_lines(lines, config.output_dir)
        figures["response_surface"] = plot_response_surface(
            *grid, output_dir=config.output_dir, lines=lines
        )

    return {
        "config": config,
        "observations": observations,
        "descriptives": descriptives,
        "correlations": correlations,
        "screen": screen,
        "fit": fit,
        "lines": lines,
        "grid": grid,
        "parameters": parameters,
        "tables": tables,
        "figures": figures,
    }
