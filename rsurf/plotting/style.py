"""Centralized plotting style, labels, and save helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.ticker import MaxNLocator

OUTPUT_FORMATS: tuple[str, ...] = ("png", "pdf", "svg")
FIGURE_DPI = 300


@dataclass(frozen=True)
class StyleConfig:
    BASE_FONTSIZE: float = 12.0
    TITLE_FONTSIZE: float = 14.0
    LABEL_FONTSIZE: float = 12.0
    TICK_FONTSIZE: float = 11.0
    LEGEND_FONTSIZE: float = 11.0
    PANEL_FONTSIZE: float = 13.0
    LINEWIDTH: float = 2.0
    LINEWIDTH_THIN: float = 1.2
    MARKERSIZE: float = 6.0
    GRID_ALPHA: float = 0.20
    FIGSIZE_WIDE: tuple[float, float] = (9.5, 4.2)
    FIGSIZE_SURFACE: tuple[float, float] = (7.5, 6.0)


STYLE = StyleConfig()

FIG_SIZES: dict[str, tuple[float, float]] = {
    "wide": STYLE.FIGSIZE_WIDE,
    "triple": (12.0, 4.0),
    "surface": STYLE.FIGSIZE_SURFACE,
}

FONT_SIZES = {
    "base": STYLE.BASE_FONTSIZE,
    "title": STYLE.TITLE_FONTSIZE,
    "axis_label": STYLE.LABEL_FONTSIZE,
    "tick": STYLE.TICK_FONTSIZE,
    "legend": STYLE.LEGEND_FONTSIZE,
    "panel": STYLE.PANEL_FONTSIZE,
}

LINE_COLORS = {
    "congruence": "#1f77b4",
    "incongruence": "#d62728",
    "guide": "0.45",
}

MATH_LABELS = {
    "ce_old": r"$\mathrm{Extroversion_{old}} - 4$",
    "ce_young": r"$\mathrm{Extroversion_{young}} - 4$",
    "happy": r"$\widehat{\mathrm{Happiness}}$",
    "congruence_x": r"$x = y$ (centered extroversion)",
    "incongruence_x": r"$x = -y$ (older partner, centered)",
}


def apply_global_style(font_scale: float = 1.0) -> None:
    """Apply global Matplotlib style, scaled by ``font_scale``."""
    scale = float(font_scale)
    plt.rcParams.update(
        {
            "font.family": "STIXGeneral",
            "font.size": STYLE.BASE_FONTSIZE * scale,
            "axes.titlesize": STYLE.TITLE_FONTSIZE * scale,
            "figure.titlesize": STYLE.TITLE_FONTSIZE * scale,
            "axes.labelsize": STYLE.LABEL_FONTSIZE * scale,
            "xtick.labelsize": STYLE.TICK_FONTSIZE * scale,
            "ytick.labelsize": STYLE.TICK_FONTSIZE * scale,
            "legend.fontsize": STYLE.LEGEND_FONTSIZE * scale,
            "mathtext.fontset": "stix",
            "mathtext.default": "regular",
            "axes.titlepad": 8,
            "axes.labelpad": 6,
            "axes.linewidth": STYLE.LINEWIDTH_THIN,
            "axes.spines.top": False,
            "axes.spines.right": False,
            "grid.alpha": STYLE.GRID_ALPHA,
            "grid.linestyle": ":",
            "grid.linewidth": 0.7,
            "legend.frameon": False,
            "lines.linewidth": STYLE.LINEWIDTH,
            "lines.markersize": STYLE.MARKERSIZE,
            "figure.dpi": 120,
            "savefig.dpi": FIGURE_DPI,
            "savefig.bbox": "tight",
            "savefig.pad_inches": 0.12,
        }
    )


def fig_size(kind: str = "wide") -> tuple[float, float]:
    """Return a standard figure size by name."""
    if kind not in FIG_SIZES:
        raise ValueError(f"Unknown figure size '{kind}'. Expected one of {tuple(FIG_SIZES)}.")
    return FIG_SIZES[kind]


def add_panel_label(
    ax: Axes,
    label: str,
    x: float = 0.02,
    y: float = 0.98,
    *,
    fontsize: float | None = None,
) -> None:
    """Render a bold panel label in axes coordinates."""
    ax.text(
        x,
        y,
        label,
        transform=ax.transAxes,
        ha="left",
        va="top",
        fontsize=fontsize or FONT_SIZES["panel"],
        fontweight="bold",
        color="0.20",
    )


def clean_axis(
    ax: Axes,
    *,
    grid_axis: str = "y",
    nbins_x: int = 6,
    nbins_y: int = 6,
) -> None:
    """Apply consistent ticks, grid, and spine formatting to one 2-D axis."""
    ax.tick_params(axis="both", which="major", labelsize=FONT_SIZES["tick"], width=1.0)
    ax.xaxis.set_major_locator(MaxNLocator(nbins=nbins_x, min_n_ticks=4))
    ax.yaxis.set_major_locator(MaxNLocator(nbins=nbins_y, min_n_ticks=4))
    for side in ("left", "bottom"):
        ax.spines[side].set_linewidth(STYLE.LINEWIDTH_THIN)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    ax.grid(False)
    if grid_axis == "both":
        ax.grid(True, axis="both", alpha=STYLE.GRID_ALPHA, linestyle=":", linewidth=0.7)
    elif grid_axis in {"x", "y"}:
        ax.grid(
            True, axis=grid_axis, alpha=STYLE.GRID_ALPHA, linestyle=":", linewidth=0.7
        )


def set_axis_labels(ax: Axes, x: str | None = None, y: str | None = None) -> None:
    """Apply standardized axis labels with project typography."""
    if x is not None:
        ax.set_xlabel(x, fontsize=FONT_SIZES["axis_label"], labelpad=6)
    if y is not None:
        ax.set_ylabel(y, fontsize=FONT_SIZES["axis_label"], labelpad=6)


def save_figure(
    fig: Figure,
    savepath_base: str | Path,
    formats: Sequence[str] = OUTPUT_FORMATS,
    dpi: int = FIGURE_DPI,
    *,
    bbox_inches: str = "tight",
    pad_inches: float = 0.12,
) -> Path:
    """Save a figure to multiple formats using one extensionless base path."""
    base = Path(savepath_base)
    base.parent.mkdir(parents=True, exist_ok=True)
    for ext in formats:
        target = base.with_suffix(f".{ext}")
        fig.savefig(
            str(target),
            dpi=dpi if ext == "png" else None,
            bbox_inches=bbox_inches,
            pad_inches=pad_inches,
        )
    return base.with_suffix(".png")


def save_figure_bundle(fig: Figure, png_path: str) -> str:
    """Save synchronized PNG, PDF, and SVG files for a figure."""
    base = Path(os.path.splitext(png_path)[0])
    return str(save_figure(fig, base))
