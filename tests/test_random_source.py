"""Tests for the seeded uniform random sources."""

import numpy as np
import pytest

from rsurf.random_source import RCompatibleUniform, make_random_source, r_seed_to_mt_key


@pytest.mark.parametrize(
    "seed, expected",
    [
        (1, [0.2655087, 0.3721239, 0.5728534]),
        (42, [0.9148060, 0.9370754, 0.2861395]),
        (123, [0.2875775, 0.7883051, 0.4089769]),
    ],
)
def test_matches_r_runif_after_set_seed(seed, expected):
    rng = RCompatibleUniform(seed)
    draws = rng.uniform(0.0, 1.0, size=3)
    assert np.allclose(draws, expected, atol=5e-8, rtol=0.0)


def test_scalar_and_vector_draws_share_one_stream():
    vector = RCompatibleUniform(918).uniform(1.0, 7.0, size=4)
    rng = RCompatibleUniform(918)
    scalars = [rng.uniform(1.0, 7.0) for _ in range(4)]
    assert np.array_equal(vector, np.asarray(scalars))


def test_equal_bounds_do_not_consume_draws():
    a = RCompatibleUniform(7)
    b = RCompatibleUniform(7)
    assert a.uniform(2.0, 2.0) == 2.0
    assert a.uniform() == b.uniform()


def test_draws_stay_inside_open_unit_interval():
    u = RCompatibleUniform(0).random(size=5000)
    assert np.all(u > 0.0)
    assert np.all(u < 1.0)


def test_invalid_bounds_raise():
    with pytest.raises(ValueError):
        RCompatibleUniform(1).uniform(5.0, 1.0)


def test_seed_key_has_mersenne_twister_length():
    key = r_seed_to_mt_key(918)
    assert key.shape == (624,)
    assert key.dtype == np.uint32


def test_make_random_source_kinds():
    assert isinstance(make_random_source(3, "r"), RCompatibleUniform)
    assert isinstance(make_random_source(3, "numpy"), np.random.Generator)
    with pytest.raises(ValueError, match="Unsupported random source"):
        make_random_source(3, "python")
