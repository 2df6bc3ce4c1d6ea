"""Render response surface figures: line slices and the full 3-D surface.

All functions take precomputed evaluations from :mod:`rsurf.surface` and only
draw them. The happiness axis is fixed to the 1-5 rating scale so figures
from different runs are comparable; predictions outside the scale are left
unchanged in the data and simply fall outside the visible range.
"""

from __future__ import annotations

import os

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from ..surface import RESPONSE_LIMITS
from .style import (
    LINE_COLORS,
    MATH_LABELS,
    STYLE,
    add_panel_label,
    apply_global_style,
    clean_axis,
    fig_size,
    save_figure_bundle,
    set_axis_labels,
)

REQUIRED_LINE_COLUMNS = ("x", "congruence", "incongruence")


def plot_surface_lines(lines: pd.DataFrame, output_dir: str = "output") -> str:
    """Plot predicted happiness along the congruence and incongruence lines.

    Args:
        lines (pandas.DataFrame): Output of
            :func:`rsurf.surface.evaluate_surface_lines`.
        output_dir (str): Directory for the figure bundle.

    Returns:
        str: Path to the saved PNG (PDF and SVG are written beside it).

    Raises:
        KeyError: If a required column is missing.
    """
    missing = [c for c in REQUIRED_LINE_COLUMNS if c not in lines.columns]
    if missing:
        raise KeyError(f"Surface line table missing columns: {missing}")

    apply_global_style()
    x = lines["x"].to_numpy(dtype=float)
    fig, axes = plt.subplots(1, 2, figsize=fig_size("wide"), sharey=True)

    panels = (
        ("congruence", "Congruence line ($y = x$)", MATH_LABELS["congruence_x"]),
        ("incongruence", "Incongruence line ($y = -x$)", MATH_LABELS["incongruence_x"]),
    )
    for idx, (ax, (key, title, xlabel)) in enumerate(zip(axes, panels)):
        ax.plot(x, lines[key].to_numpy(dtype=float), color=LINE_COLORS[key])
        ax.axvline(
            0.0,
            color=LINE_COLORS["guide"],
            linewidth=STYLE.LINEWIDTH_THIN,
            linestyle="--",
        )
        ax.set_ylim(*RESPONSE_LIMITS)
        ax.set_xlim(float(np.min(x)), float(np.max(x)))
        ax.set_title(title)
        set_axis_labels(ax, x=xlabel, y=MATH_LABELS["happy"] if idx == 0 else None)
        clean_axis(ax, grid_axis="both")
        add_panel_label(ax, f"({'ab'[idx]})")

    fig.tight_layout()
    os.makedirs(output_dir, exist_ok=True)
    out_path = save_figure_bundle(fig, os.path.join(output_dir, "surface_lines.png"))
    plt.close(fig)
    return out_path


def plot_response_surface(
    grid_x: np.ndarray,
    grid_y: np.ndarray,
    grid_z: np.ndarray,
    output_dir: str = "output",
    lines: pd.DataFrame | None = None,
) -> str:
    """Plot the fitted surface over the centered rating domain in 3-D.

    Args:
        grid_x, grid_y, grid_z (numpy.ndarray): Meshgrid from
            :func:`rsurf.surface.evaluate_surface_grid`.
        output_dir (str): Directory for the figure bundle.
        lines (pandas.DataFrame, optional): Line evaluations to trace on the
            surface.

    Returns:
        str: Path to the saved PNG.
    """
    grid_x = np.asarray(grid_x, dtype=float)
    grid_y = np.asarray(grid_y, dtype=float)
    grid_z = np.asarray(grid_z, dtype=float)
    if not (grid_x.shape == grid_y.shape == grid_z.shape) or grid_x.ndim != 2:
        raise ValueError("Surface grids must be 2-D arrays of identical shape.")

    apply_global_style()
    fig = plt.figure(figsize=fig_size("surface"))
    ax = fig.add_subplot(projection="3d")
    ax.plot_surface(
        grid_x,
        grid_y,
        np.clip(grid_z, *RESPONSE_LIMITS),
        cmap="viridis",
        linewidth=0.2,
        edgecolor="0.35",
        alpha=0.85,
    )
    if lines is not None:
        x = lines["x"].to_numpy(dtype=float)
        congruence = np.clip(lines["congruence"].to_numpy(dtype=float), *RESPONSE_LIMITS)
        incongruence = np.clip(
            lines["incongruence"].to_numpy(dtype=float), *RESPONSE_LIMITS
        )
        ax.plot(x, x, congruence, color=LINE_COLORS["congruence"], label="Congruence")
        ax.plot(
            x, -x, incongruence, color=LINE_COLORS["incongruence"], label="Incongruence"
        )
        ax.legend(loc="upper left")

    ax.set_zlim(*RESPONSE_LIMITS)
    ax.set_xlabel(MATH_LABELS["ce_old"])
    ax.set_ylabel(MATH_LABELS["ce_young"])
    ax.set_zlabel(MATH_LABELS["happy"])
    ax.view_init(elev=25, azim=-60)

    os.makedirs(output_dir, exist_ok=True)
    out_path = save_figure_bundle(fig, os.path.join(output_dir, "response_surface.png"))
    plt.close(fig)
    return out_path
