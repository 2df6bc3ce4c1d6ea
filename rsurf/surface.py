"""Evaluate and summarize a fitted second-order response surface.

The fitted model is

    happy(x, y) = b0 + b1*x + b2*y + b3*x*y + b4*y**2 + b5*x**2

with ``x = ce_old`` and ``y = ce_young``. Two slices carry most of the
interpretation:

- the congruence line ``y = x`` (partners equally extroverted), where the
  surface reduces to ``b0 + (b1 + b2) x + (b5 + b3 + b4) x**2``;
- the incongruence line ``y = -x`` (partners mirror each other around the
  midpoint), where it reduces to ``b0 + (b1 - b2) x + (b5 - b3 + b4) x**2``.
"""

from __future__ import annotations

import math
from typing import Tuple

import numpy as np
import pandas as pd

from .schema import COLUMNS, INTERCEPT, SURFACE_TERMS
from .stats.regression import SurfaceFit

COEFFICIENT_ORDER: tuple[str, ...] = (INTERCEPT, *SURFACE_TERMS)
RESPONSE_LIMITS = (1.0, 5.0)

# Linear combinations of (b0, b1, b2, b3, b4, b5) giving the line slopes and
# curvatures.
_LINE_CONTRASTS = {
    "a1": ("congruence slope", (0.0, 1.0, 1.0, 0.0, 0.0, 0.0)),
    "a2": ("congruence curvature", (0.0, 0.0, 0.0, 1.0, 1.0, 1.0)),
    "a3": ("incongruence slope", (0.0, 1.0, -1.0, 0.0, 0.0, 0.0)),
    "a4": ("incongruence curvature", (0.0, 0.0, 0.0, -1.0, 1.0, 1.0)),
}


def coefficient_vector(coefficients) -> np.ndarray:
    """Return ``(b0, ..., b5)`` from a fit, a named Series or a plain sequence."""
    if isinstance(coefficients, SurfaceFit):
        coefficients = coefficients.coefficients
    if isinstance(coefficients, pd.Series):
        missing = [t for t in COEFFICIENT_ORDER if t not in coefficients.index]
        if missing:
            raise ValueError(f"Coefficients missing terms {missing}.")
        return coefficients.reindex(list(COEFFICIENT_ORDER)).to_numpy(dtype=float)
    beta = np.asarray(coefficients, dtype=float).ravel()
    if beta.size != len(COEFFICIENT_ORDER):
        raise ValueError(
            f"Expected {len(COEFFICIENT_ORDER)} coefficients, got {beta.size}."
        )
    return beta


def calculate_happy(coefficients, x, y):
    """Evaluate the fitted surface at centered ratings ``(x, y)``.

    Accepts scalars or arrays (broadcast together). At the origin the
    result is exactly the intercept.
    """
    b0, b1, b2, b3, b4, b5 = coefficient_vector(coefficients)
    x_arr = np.asarray(x, dtype=float)
    y_arr = np.asarray(y, dtype=float)
    z = b0 + b1 * x_arr + b2 * y_arr + b3 * x_arr * y_arr + b4 * y_arr**2 + b5 * x_arr**2
    if np.ndim(z) == 0:
        return float(z)
    return z


def surface_domain(df: pd.DataFrame) -> Tuple[float, float]:
    """Smallest and largest centered rating across both partners."""
    values = df[[COLUMNS.ce_old, COLUMNS.ce_young]].to_numpy(dtype=float)
    if values.size == 0:
        raise ValueError("Cannot derive a surface domain from an empty table.")
    return float(np.min(values)), float(np.max(values))


def evaluate_surface_lines(
    coefficients, lo: float, hi: float, n_points: int = 100
) -> pd.DataFrame:
    """Predicted response along the congruence and incongruence lines.

    Returns:
        pandas.DataFrame: Columns ``x``, ``congruence`` (``y = x``) and
        ``incongruence`` (``y = -x``) over ``n_points`` evenly spaced ``x``
        values from ``lo`` to ``hi``.
    """
    if int(n_points) < 2:
        raise ValueError("n_points must be at least 2.")
    x = np.linspace(float(lo), float(hi), int(n_points))
    return pd.DataFrame(
        {
            "x": x,
            "congruence": calculate_happy(coefficients, x, x),
            "incongruence": calculate_happy(coefficients, x, -x),
        }
    )


def evaluate_surface_grid(
    coefficients, lo: float, hi: float, n_points: int = 40
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Meshgrid ``(X, Y, Z)`` of the surface over ``[lo, hi]`` in both axes."""
    axis = np.linspace(float(lo), float(hi), int(n_points))
    grid_x, grid_y = np.meshgrid(axis, axis)
    return grid_x, grid_y, calculate_happy(coefficients, grid_x, grid_y)


def surface_parameters(fit: SurfaceFit) -> pd.DataFrame:
    """Slopes and curvatures along both lines, with standard errors.

    Standard errors are ``sqrt(c' V c)`` for each contrast vector ``c`` and
    the fit's parameter covariance ``V``.
    """
    beta = coefficient_vector(fit)
    cov = fit.covariance.reindex(
        index=list(COEFFICIENT_ORDER), columns=list(COEFFICIENT_ORDER)
    ).to_numpy(dtype=float)

    rows = []
    for name, (label, weights) in _LINE_CONTRASTS.items():
        c = np.asarray(weights, dtype=float)
        var = float(c @ cov @ c)
        rows.append(
            {
                "parameter": name,
                "description": label,
                "estimate": float(c @ beta),
                "se": math.sqrt(var) if var > 0 else 0.0,
            }
        )
    return pd.DataFrame.from_records(rows)
