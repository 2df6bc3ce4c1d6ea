"""Seeded uniform random sources for the synthetic data generator.

Two sources are supported, both exposing ``uniform(low, high, size=None)`` so
the generator can take either as an explicit handle:

- ``numpy.random.default_rng(seed)``, the NumPy ``Generator`` (PCG64).
- :class:`RCompatibleUniform`, which replays the stream produced by R's
  ``set.seed(seed); runif(...)`` under the default Mersenne-Twister kind.
  R scrambles the integer seed with the congruential step
  ``seed = 69069 * seed + 1`` (50 warm-up steps, then one step per state
  word) and converts each tempered 32-bit output to a double by multiplying
  with ``2**-32``. Reproducing both details lets a tutorial run written in R
  be matched draw for draw.
"""

from __future__ import annotations

import numpy as np

MT_STATE_WORDS = 624
_LCG_MULTIPLIER = 69069
_UINT32_MASK = 0xFFFFFFFF
_SCRAMBLE_ROUNDS = 50
_UINT32_TO_UNIT = 2.3283064365386963e-10
_I2_32M1 = 2.328306437080797e-10


def r_seed_to_mt_key(seed: int) -> np.ndarray:
    """Return the Mersenne-Twister key R derives from ``set.seed(seed)``.

    R fills 625 words; the first one holds the stream position and is reset
    to 624, so only the remaining 624 words form the generator key.
    """
    state = int(seed) & _UINT32_MASK
    for _ in range(_SCRAMBLE_ROUNDS):
        state = (_LCG_MULTIPLIER * state + 1) & _UINT32_MASK
    words = []
    for _ in range(MT_STATE_WORDS + 1):
        state = (_LCG_MULTIPLIER * state + 1) & _UINT32_MASK
        words.append(state)
    return np.asarray(words[1:], dtype=np.uint32)


class RCompatibleUniform:
    """Uniform draws identical to R's default ``runif`` after ``set.seed``.

    Args:
        seed (int): Seed passed to ``set.seed`` in R.

    Note:
        Resolution is 32 bits per draw (as in R), not the 53 bits of NumPy's
        ``Generator.random``.
    """

    def __init__(self, seed: int):
        self.seed = int(seed)
        self._bitgen = np.random.MT19937()
        self._bitgen.state = {
            "bit_generator": "MT19937",
            "state": {"key": r_seed_to_mt_key(self.seed), "pos": MT_STATE_WORDS},
        }

    def random(self, size=None):
        """Draw values on the open interval (0, 1)."""
        count = 1 if size is None else int(np.prod(size))
        raw = np.asarray(self._bitgen.random_raw(count), dtype=np.float64)
        unit = raw * _UINT32_TO_UNIT
        # R never returns exactly 0 or 1.
        unit[unit <= 0.0] = 0.5 * _I2_32M1
        unit[(1.0 - unit) <= 0.0] = 1.0 - 0.5 * _I2_32M1
        if size is None:
            return float(unit[0])
        return unit.reshape(size)

    def uniform(self, low=0.0, high=1.0, size=None):
        """Draw ``low + (high - low) * u`` exactly as R's ``runif`` does."""
        low = float(low)
        high = float(high)
        if not (np.isfinite(low) and np.isfinite(high)) or high < low:
            raise ValueError(f"Invalid uniform bounds [{low}, {high}].")
        if low == high:
            # R returns the bound without consuming a draw.
            return low if size is None else np.full(size, low)
        return low + (high - low) * self.random(size)


def make_random_source(seed: int, kind: str = "r"):
    """Build the uniform random source named by ``kind``.

    Args:
        seed (int): Non-negative integer seed.
        kind (str): ``"r"`` for :class:`RCompatibleUniform`, ``"numpy"`` for
            ``numpy.random.default_rng``.

    Raises:
        ValueError: If ``kind`` is unknown.
    """
    if kind == "r":
        return RCompatibleUniform(seed)
    if kind == "numpy":
        return np.random.default_rng(seed)
    raise ValueError(f"Unsupported random source '{kind}'. Expected 'r' or 'numpy'.")
