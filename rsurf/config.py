"""Run configuration for the response surface tutorial pipeline."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

DEFAULT_SEED = 918
DEFAULT_N = 1000
SCALE_MIDPOINT = 4.0
DEFAULT_THRESHOLD = 0.5
DEFAULT_LINE_POINTS = 100
DEFAULT_OUTPUT_DIR = "output"
RNG_KINDS: tuple[str, ...] = ("r", "numpy")
MAX_SEED = 2**32 - 1


def _is_integer(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


@dataclass(frozen=True)
class AnalysisConfig:
    """Validated settings for one pipeline run.

    Attributes:
        seed: Non-negative integer seed for the random source.
        n: Number of simulated couples; must be positive.
        centering_constant: Value subtracted from both extroversion ratings
            before building polynomial terms (scale midpoint by default).
            Not checked against the rating range.
        rng: ``"r"`` for the R-compatible uniform stream or ``"numpy"`` for
            ``numpy.random.default_rng``.
        threshold: Standardized-difference cutoff used by the discrepancy
            screen.
        n_points: Number of evenly spaced points on each surface line.
        output_dir: Directory receiving tables and figures.

    Raises:
        ValueError: On any invalid field, at construction time.
    """

    seed: int = DEFAULT_SEED
    n: int = DEFAULT_N
    centering_constant: float = SCALE_MIDPOINT
    rng: str = "r"
    threshold: float = DEFAULT_THRESHOLD
    n_points: int = DEFAULT_LINE_POINTS
    output_dir: str = DEFAULT_OUTPUT_DIR

    def __post_init__(self) -> None:
        if not _is_integer(self.seed):
            raise ValueError(f"seed must be an integer, got {self.seed!r}")
        if not 0 <= int(self.seed) <= MAX_SEED:
            raise ValueError(
                f"seed must lie in [0, {MAX_SEED}], got {self.seed!r}"
            )
        if not _is_integer(self.n) or int(self.n) <= 0:
            raise ValueError(f"n must be a positive integer, got {self.n!r}")
        try:
            center = float(self.centering_constant)
        except (TypeError, ValueError) as exc:
            raise ValueError(
                f"centering_constant must be a real number, got {self.centering_constant!r}"
            ) from exc
        if not math.isfinite(center):
            raise ValueError("centering_constant must be finite.")
        if self.rng not in RNG_KINDS:
            raise ValueError(
                f"Unsupported rng '{self.rng}'. Expected one of {RNG_KINDS}."
            )
        if not (math.isfinite(float(self.threshold)) and float(self.threshold) > 0):
            raise ValueError(f"threshold must be finite and > 0, got {self.threshold!r}")
        if not _is_integer(self.n_points) or int(self.n_points) < 2:
            raise ValueError(f"n_points must be an integer >= 2, got {self.n_points!r}")
