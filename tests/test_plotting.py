"""Verify figure rendering and that plotting leaves its inputs untouched."""

import copy
import os
from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd
import pandas.testing as pdt
import pytest

from rsurf.data_generation import generate_observations
from rsurf.plotting import (
    plot_observation_distributions,
    plot_response_surface,
    plot_surface_lines,
)
from rsurf.plotting.style import FIG_SIZES, add_panel_label, fig_size, save_figure_bundle
from rsurf.random_source import make_random_source
from rsurf.surface import evaluate_surface_grid, evaluate_surface_lines

BETA = [3.6, -0.21, 0.17, 0.04, -0.02, 0.01]


def test_plot_surface_lines(tmp_path):
    lines = evaluate_surface_lines(BETA, -3.0, 3.0)
    snapshot = copy.deepcopy(lines)
    out = plot_surface_lines(lines, output_dir=str(tmp_path))
    assert out.endswith("surface_lines.png")
    for ext in ("png", "pdf", "svg"):
        assert os.path.exists(os.path.splitext(out)[0] + f".{ext}")
    pdt.assert_frame_equal(lines, snapshot)


def test_plot_surface_lines_requires_columns(tmp_path):
    with pytest.raises(KeyError):
        plot_surface_lines(pd.DataFrame({"x": [0.0, 1.0]}), output_dir=str(tmp_path))


def test_plot_response_surface(tmp_path):
    grid = evaluate_surface_grid(BETA, -3.0, 3.0, n_points=12)
    lines = evaluate_surface_lines(BETA, -3.0, 3.0, n_points=20)
    out = plot_response_surface(*grid, output_dir=str(tmp_path), lines=lines)
    assert out.endswith("response_surface.png")
    assert os.path.exists(out)


def test_plot_response_surface_rejects_mismatched_grids(tmp_path):
    gx, gy, gz = evaluate_surface_grid(BETA, -3.0, 3.0, n_points=5)
    with pytest.raises(ValueError):
        plot_response_surface(gx, gy, gz[:2], output_dir=str(tmp_path))


def test_plot_observation_distributions(tmp_path):
    df = generate_observations(200, make_random_source(918, "r"))
    out = plot_observation_distributions(df, output_dir=str(tmp_path))
    assert os.path.exists(out)


def test_save_figure_bundle_uses_tight_bounding(monkeypatch, tmp_path):
    """Ensure multi-format exports use tight bounding and expected padding."""
    fig, _ = plt.subplots()
    calls = []

    def _fake_savefig(path, **kwargs):
        calls.append((Path(path).suffix, kwargs))

    monkeypatch.setattr(fig, "savefig", _fake_savefig)

    saved = save_figure_bundle(fig, str(tmp_path / "bundle.png"))

    assert saved.endswith("bundle.png")
    assert [ext for ext, _ in calls] == [".png", ".pdf", ".svg"]
    for ext, kwargs in calls:
        assert kwargs.get("bbox_inches") == "tight"
        assert kwargs.get("pad_inches") == 0.12
        if ext == ".png":
            assert kwargs.get("dpi") == 300
        else:
            assert kwargs.get("dpi") is None

    plt.close(fig)


def test_add_panel_label_position():
    fig, ax = plt.subplots()
    add_panel_label(ax, "(a)")
    assert ax.texts[-1].get_position() == (0.02, 0.98)
    assert ax.texts[-1].get_text() == "(a)"
    plt.close(fig)


def test_fig_size_defaults_to_wide():
    assert fig_size() == FIG_SIZES["wide"]
    assert set(FIG_SIZES) == {"wide", "triple", "surface"}


def test_fig_size_rejects_unknown_kind():
    with pytest.raises(ValueError, match="Unknown figure size"):
        fig_size("single")
