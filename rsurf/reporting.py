"""Console report for a pipeline run.

Each section mirrors one step of the tutorial narrative: descriptive
statistics, the discrepancy screen, the regression table and the slopes and
curvatures along the congruence and incongruence lines.
"""

from __future__ import annotations

import pandas as pd

from .stats.regression import SurfaceFit
from .stats.screening import DiscrepancyScreen


def format_descriptives(descriptives: pd.DataFrame) -> list[str]:
    lines = ["Descriptive statistics:"]
    if descriptives.empty:
        lines.append("  (no data)")
        return lines
    for _, row in descriptives.iterrows():
        lines.append(
            f" - {row['variable']}: mean = {row['mean']:.3f}, SD = {row['sd']:.3f}, "
            f"range = [{row['min']:.3f}, {row['max']:.3f}] (n={int(row['n'])})"
        )
    return lines


def format_screen(screen: DiscrepancyScreen) -> list[str]:
    return [
        f"Discrepancy screen (|z_o - z_y| > {screen.threshold:g} SD):",
        f" - discrepant: {screen.discrepant_percent:.1f}% ({screen.n_discrepant} of {screen.n})",
        f" - in agreement: {screen.agreement_percent:.1f}%",
        f" - agreement:discrepancy split {screen.ratio_text}",
    ]


def format_fit(fit: SurfaceFit) -> list[str]:
    lines = [
        f"Polynomial regression of {fit.response} (n={fit.n}, df_res={fit.df_res}):",
        f"  {'term':<10} {'estimate':>10} {'SE':>10}",
    ]
    for _, row in fit.coefficient_table().iterrows():
        lines.append(f"  {row['term']:<10} {row['estimate']:>10.4f} {row['se']:>10.4f}")
    lines.append(
        f"  R^2 = {fit.r2:.4f}, adjusted R^2 = {fit.adj_r2:.4f}, "
        f"residual variance = {fit.sigma2:.4f}"
    )
    return lines


def format_surface_parameters(parameters: pd.DataFrame) -> list[str]:
    lines = ["Response surface along the lines of (in)congruence:"]
    for _, row in parameters.iterrows():
        lines.append(
            f" - {row['parameter']} ({row['description']}): "
            f"{row['estimate']:.4f} (SE {row['se']:.4f})"
        )
    return lines


def build_report(
    descriptives: pd.DataFrame,
    screen: DiscrepancyScreen,
    fit: SurfaceFit,
    parameters: pd.DataFrame,
) -> str:
    """Assemble the full plain-text report."""
    sections = [
        format_descriptives(descriptives),
        format_screen(screen),
        format_fit(fit),
        format_surface_parameters(parameters),
    ]
    return "\n\n".join("\n".join(section) for section in sections)


def print_report(
    descriptives: pd.DataFrame,
    screen: DiscrepancyScreen,
    fit: SurfaceFit,
    parameters: pd.DataFrame,
) -> None:
    print()
    print(build_report(descriptives, screen, fit, parameters))
