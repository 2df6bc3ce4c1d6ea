import numpy as np
import pandas as pd
import pytest

from rsurf.features import build_polynomial_features
from rsurf.stats.regression import fit_response_surface
from rsurf.surface import (
    calculate_happy,
    coefficient_vector,
    evaluate_surface_grid,
    evaluate_surface_lines,
    surface_domain,
    surface_parameters,
)

BETA = [3.6, -0.2, 0.17, 0.05, -0.03, 0.02]


def _fit(seed=2):
    rng = np.random.default_rng(seed)
    raw = pd.DataFrame(
        {"extro_o": rng.uniform(1, 7, 300), "extro_y": rng.uniform(1, 7, 300)}
    )
    df = build_polynomial_features(raw)
    df["happy"] = (
        calculate_happy(BETA, df["ce_old"].to_numpy(), df["ce_young"].to_numpy())
        + rng.normal(scale=0.4, size=300)
    )
    return df, fit_response_surface(df)


def test_origin_returns_intercept_exactly():
    _, fit = _fit()
    assert calculate_happy(fit, 0, 0) == fit.coef("intercept")
    assert calculate_happy(BETA, 0.0, 0.0) == BETA[0]


def test_polynomial_evaluation():
    x, y = 1.5, -2.0
    expected = 3.6 - 0.2 * x + 0.17 * y + 0.05 * x * y - 0.03 * y**2 + 0.02 * x**2
    assert calculate_happy(BETA, x, y) == pytest.approx(expected)


def test_series_coefficients_are_reordered_by_name():
    _, fit = _fit()
    shuffled = fit.coefficients.iloc[::-1]
    assert np.array_equal(coefficient_vector(shuffled), fit.beta)


def test_wrong_coefficient_count_raises():
    with pytest.raises(ValueError, match="Expected 6 coefficients"):
        calculate_happy([1.0, 2.0], 0.0, 0.0)


def test_domain_spans_both_predictors():
    df = pd.DataFrame({"ce_old": [-1.0, 2.5], "ce_young": [-2.0, 1.0]})
    assert surface_domain(df) == (-2.0, 2.5)


def test_lines_have_requested_points_and_slices():
    lines = evaluate_surface_lines(BETA, -3.0, 3.0, n_points=100)
    assert len(lines) == 100
    assert lines["x"].iloc[0] == -3.0 and lines["x"].iloc[-1] == 3.0
    x = lines["x"].to_numpy()
    assert np.allclose(lines["congruence"], calculate_happy(BETA, x, x))
    assert np.allclose(lines["incongruence"], calculate_happy(BETA, x, -x))


def test_line_reductions_match_surface_parameters():
    _, fit = _fit()
    params = surface_parameters(fit).set_index("parameter")["estimate"]
    lines = evaluate_surface_lines(fit, -3.0, 3.0, n_points=7)
    x = lines["x"].to_numpy()
    b0 = fit.coef("intercept")
    assert np.allclose(lines["congruence"], b0 + params["a1"] * x + params["a2"] * x**2)
    assert np.allclose(lines["incongruence"], b0 + params["a3"] * x + params["a4"] * x**2)


def test_surface_parameter_standard_errors():
    _, fit = _fit()
    params = surface_parameters(fit).set_index("parameter")
    cov = fit.covariance
    var_a1 = (
        cov.loc["ce_old", "ce_old"]
        + cov.loc["ce_young", "ce_young"]
        + 2 * cov.loc["ce_old", "ce_young"]
    )
    assert params.loc["a1", "se"] == pytest.approx(np.sqrt(var_a1))
    assert (params["se"] > 0).all()


def test_grid_shape():
    gx, gy, gz = evaluate_surface_grid(BETA, -3.0, 3.0, n_points=15)
    assert gx.shape == gy.shape == gz.shape == (15, 15)
    assert gz[7, 7] == pytest.approx(BETA[0])


def test_lines_need_two_points():
    with pytest.raises(ValueError):
        evaluate_surface_lines(BETA, -1.0, 1.0, n_points=1)
