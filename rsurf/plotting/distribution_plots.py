"""Histograms of the raw observation columns."""

from __future__ import annotations

import os

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from ..data_generation import EXTRO_SCALE, HAPPY_SCALE
from ..schema import COLUMNS
from .style import (
    add_panel_label,
    apply_global_style,
    clean_axis,
    fig_size,
    save_figure_bundle,
    set_axis_labels,
)

_PANELS = (
    (COLUMNS.extro_o, "Extroversion (older)", EXTRO_SCALE),
    (COLUMNS.extro_y, "Extroversion (younger)", EXTRO_SCALE),
    (COLUMNS.happy, "Happiness", HAPPY_SCALE),
)


def plot_observation_distributions(
    df: pd.DataFrame, output_dir: str = "output", bins: int = 24
) -> str:
    """Plot one histogram per raw column on its rating scale.

    Returns:
        str: Path to the saved PNG.

    Raises:
        KeyError: If a raw column is missing.
    """
    missing = [col for col, _, _ in _PANELS if col not in df.columns]
    if missing:
        raise KeyError(f"Observation table missing columns: {missing}")

    apply_global_style()
    fig, axes = plt.subplots(1, 3, figsize=fig_size("triple"))
    for idx, (ax, (col, label, scale)) in enumerate(zip(axes, _PANELS)):
        values = df[col].to_numpy(dtype=float)
        ax.hist(
            values,
            bins=np.linspace(scale[0], scale[1], bins + 1),
            color="0.55",
            edgecolor="white",
        )
        ax.axvline(float(np.mean(values)), color="0.15", linestyle="--", linewidth=1.2)
        ax.set_xlim(*scale)
        set_axis_labels(ax, x=label, y="Count" if idx == 0 else None)
        clean_axis(ax, grid_axis="y")
        add_panel_label(ax, f"({'abc'[idx]})")

    fig.tight_layout()
    os.makedirs(output_dir, exist_ok=True)
    out_path = save_figure_bundle(
        fig, os.path.join(output_dir, "observation_distributions.png")
    )
    plt.close(fig)
    return out_path
