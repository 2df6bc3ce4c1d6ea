import logging
import warnings

import numpy as np
import pandas as pd
import pandas.testing as pdt
import pytest

from rsurf.data_generation import (
    generate_observations,
    load_observations,
    save_observations,
)
from rsurf.random_source import make_random_source


@pytest.mark.parametrize("kind", ["r", "numpy"])
def test_generated_values_stay_on_rating_scales(kind):
    df = generate_observations(1000, make_random_source(918, kind))
    assert len(df) == 1000
    assert list(df.columns) == ["extro_o", "extro_y", "happy"]
    assert df["happy"].between(1.0, 5.0).all()
    assert df["extro_o"].between(1.0, 7.0).all()
    assert df["extro_y"].between(1.0, 7.0).all()


@pytest.mark.parametrize("kind", ["r", "numpy"])
def test_generation_is_deterministic_for_a_seed(kind):
    first = generate_observations(1000, make_random_source(918, kind))
    second = generate_observations(1000, make_random_source(918, kind))
    assert first.to_csv(index=False) == second.to_csv(index=False)


def test_different_seeds_give_different_tables():
    a = generate_observations(50, make_random_source(1, "r"))
    b = generate_observations(50, make_random_source(2, "r"))
    assert not np.array_equal(a["happy"].to_numpy(), b["happy"].to_numpy())


def test_max_diff_is_recorded_as_batch_constant():
    df = generate_observations(200, make_random_source(5, "numpy"))
    expected = float(np.max(np.abs(df["extro_o"] - df["extro_y"])))
    assert df.attrs["max_diff"] == expected


def test_extroversion_draws_precede_happiness_draws():
    n = 10
    df = generate_observations(n, make_random_source(918, "r"))
    rng = make_random_source(918, "r")
    extro_o = rng.uniform(1.0, 7.0, size=n)
    extro_y = rng.uniform(1.0, 7.0, size=n)
    assert np.array_equal(df["extro_o"].to_numpy(), extro_o)
    assert np.array_equal(df["extro_y"].to_numpy(), extro_y)


def test_sensitive_rows_sit_near_top_of_scale():
    df = generate_observations(2000, make_random_source(11, "numpy"))
    older_less = df["extro_o"] < df["extro_y"]
    # Mixture of 5 - U(0, <=1) and U(1, 5) is clearly higher on average.
    assert df.loc[older_less, "happy"].mean() > df.loc[~older_less, "happy"].mean() + 0.5
    assert df.loc[~older_less, "happy"].mean() == pytest.approx(3.0, abs=0.2)


def test_single_row_max_diff_is_its_own_discrepancy():
    df = generate_observations(1, make_random_source(0, "r"))
    row = df.iloc[0]
    assert df.attrs["max_diff"] == abs(row["extro_o"] - row["extro_y"])
    assert 1.0 <= row["happy"] <= 5.0


class _MidpointSource:
    """Uniform source that always returns the middle of the interval."""

    def uniform(self, low=0.0, high=1.0, size=None):
        mid = 0.5 * (low + high)
        return mid if size is None else np.full(size, mid)


def test_zero_max_diff_when_partners_always_agree():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        df = generate_observations(5, _MidpointSource())
    assert df.attrs["max_diff"] == 0.0
    assert (df["extro_o"] == df["extro_y"]).all()
    assert df["happy"].between(1.0, 5.0).all()
    assert np.isfinite(df["happy"]).all()


@pytest.mark.parametrize("n", [0, -5, 2.5, True, "10"])
def test_invalid_sample_count_raises(n):
    with pytest.raises(ValueError, match="positive integer"):
        generate_observations(n, make_random_source(0, "r"))


def test_generation_logs_summary(caplog):
    caplog.set_level(logging.INFO)
    generate_observations(20, make_random_source(918, "r"))
    assert any("Generated 20 observations" in rec.message for rec in caplog.records)


def test_csv_round_trip_is_exact(tmp_path):
    df = generate_observations(100, make_random_source(918, "r"))
    path = save_observations(df, str(tmp_path / "nested" / "observations.csv"))
    loaded = load_observations(path)
    expected = df.copy()
    expected.attrs = {}
    pdt.assert_frame_equal(loaded, expected, check_exact=True)


def test_csv_round_trip_keeps_every_bit_of_numpy_draws(tmp_path):
    df = generate_observations(500, make_random_source(7, "numpy"))
    loaded = load_observations(save_observations(df, str(tmp_path / "obs.csv")))
    for column in ("extro_o", "extro_y", "happy"):
        assert np.array_equal(loaded[column].to_numpy(), df[column].to_numpy())


def test_load_rejects_missing_columns(tmp_path):
    path = tmp_path / "bad.csv"
    pd.DataFrame({"extro_o": [1.0], "happy": [2.0]}).to_csv(path, index=False)
    with pytest.raises(ValueError, match="missing columns"):
        load_observations(str(path))
