"""Write analysis outputs to reproducible CSV files.

This module is the output boundary between in-memory analysis and the
tables a reader inspects (or loads into a spreadsheet for significance
testing).
"""

from __future__ import annotations

import os
from typing import Dict

import pandas as pd

from .data_generation import save_observations
from .stats.regression import SurfaceFit

FLOAT_FORMAT = "%.10g"


def save_model_tables(
    fit: SurfaceFit,
    lines: pd.DataFrame,
    parameters: pd.DataFrame,
    output_dir: str = "output",
) -> Dict[str, str]:
    """Save coefficients, covariance, line evaluations and line parameters.

    Args:
        fit (SurfaceFit): Fitted response surface.
        lines (pandas.DataFrame): Output of ``evaluate_surface_lines``.
        parameters (pandas.DataFrame): Output of ``surface_parameters``.
        output_dir (str): Directory where CSV outputs are written.

    Returns:
        dict[str, str]: Paths keyed by ``coefficients``, ``covariance``,
        ``surface_lines`` and ``surface_parameters``.
    """
    os.makedirs(output_dir, exist_ok=True)
    paths = {
        "coefficients": os.path.join(output_dir, "coefficients.csv"),
        "covariance": os.path.join(output_dir, "covariance.csv"),
        "surface_lines": os.path.join(output_dir, "surface_lines.csv"),
        "surface_parameters": os.path.join(output_dir, "surface_parameters.csv"),
    }

    fit.coefficient_table().to_csv(
        paths["coefficients"], index=False, float_format=FLOAT_FORMAT
    )
    fit.covariance.to_csv(
        paths["covariance"], index_label="term", float_format=FLOAT_FORMAT
    )
    lines.to_csv(paths["surface_lines"], index=False, float_format=FLOAT_FORMAT)
    parameters.to_csv(
        paths["surface_parameters"], index=False, float_format=FLOAT_FORMAT
    )
    return paths


def save_data_to_csv(
    observations: pd.DataFrame,
    descriptives: pd.DataFrame,
    output_dir: str = "output",
) -> Dict[str, str]:
    """Save the observation table and its descriptive statistics.

    Returns:
        dict[str, str]: Paths keyed by ``observations`` and ``descriptives``.
    """
    os.makedirs(output_dir, exist_ok=True)
    obs_path = save_observations(
        observations, os.path.join(output_dir, "observations.csv")
    )
    desc_path = os.path.join(output_dir, "descriptives.csv")
    descriptives.to_csv(desc_path, index=False, float_format=FLOAT_FORMAT)
    return {"observations": obs_path, "descriptives": desc_path}
