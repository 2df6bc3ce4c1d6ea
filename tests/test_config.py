import numpy as np
import pytest

from rsurf.config import AnalysisConfig


def test_defaults_match_reference_run():
    config = AnalysisConfig()
    assert config.seed == 918
    assert config.n == 1000
    assert config.centering_constant == 4.0
    assert config.rng == "r"
    assert config.n_points == 100


def test_numpy_integers_are_accepted():
    config = AnalysisConfig(seed=np.int64(5), n=np.int32(10))
    assert config.n == 10


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"n": 0}, "positive integer"),
        ({"n": -3}, "positive integer"),
        ({"n": 10.0}, "positive integer"),
        ({"seed": "0918"}, "integer"),
        ({"seed": 1.5}, "integer"),
        ({"seed": True}, "integer"),
        ({"seed": -1}, "seed must lie"),
        ({"centering_constant": float("nan")}, "finite"),
        ({"centering_constant": "mid"}, "real number"),
        ({"rng": "mt"}, "Unsupported rng"),
        ({"threshold": 0.0}, "threshold"),
        ({"n_points": 1}, "n_points"),
    ],
)
def test_invalid_configuration_is_rejected(kwargs, message):
    with pytest.raises(ValueError, match=message):
        AnalysisConfig(**kwargs)
