"""Screen paired ratings for discrepancy on the standardized scale.

The screen is a sanity check before response surface modelling: if almost
no couple differs by more than half a standard deviation, the incongruence
part of the surface would rest on very little data.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from scipy import stats as scipy_stats

DEFAULT_THRESHOLD = 0.5


@dataclass(frozen=True)
class DiscrepancyScreen:
    """Container for discrepancy screen outputs."""

    n: int
    threshold: float
    n_discrepant: int
    discrepant_percent: float
    agreement_percent: float
    mean_a: float
    sd_a: float
    mean_b: float
    sd_b: float

    @property
    def ratio_text(self) -> str:
        """Agreement to discrepancy split, e.g. ``"1:2.7"``."""
        if self.agreement_percent <= 0:
            return "0:1"
        return f"1:{self.discrepant_percent / self.agreement_percent:.1f}"


def _validated_pair(a, b) -> tuple[np.ndarray, np.ndarray]:
    a_arr = np.asarray(a, dtype=float)
    b_arr = np.asarray(b, dtype=float)
    if a_arr.ndim != 1 or b_arr.ndim != 1:
        raise ValueError("Screened columns must be one-dimensional.")
    if a_arr.size == 0 or b_arr.size == 0:
        raise ValueError("Screened columns must not be empty.")
    if a_arr.size != b_arr.size:
        raise ValueError(
            f"Screened columns differ in length: {a_arr.size} vs {b_arr.size}."
        )
    if not (np.all(np.isfinite(a_arr)) and np.all(np.isfinite(b_arr))):
        raise ValueError("Screened columns must contain only finite values.")
    return a_arr, b_arr


def screen_discrepancy(a, b, threshold: float = DEFAULT_THRESHOLD) -> DiscrepancyScreen:
    """Report the share of rows whose z-scores differ by more than ``threshold``.

    Args:
        a: First column (for example ``extro_o``).
        b: Second column, same length as ``a``.
        threshold (float): Cutoff on ``|z_a - z_b|`` in standard deviations.

    Returns:
        DiscrepancyScreen: Discrepant and in-agreement percentages (summing
        to 100) and the sample mean/SD used for standardization.

    Raises:
        ValueError: If the columns are empty, differ in length, contain
            non-finite values, have fewer than two rows, or (unless
            identical) one of them has zero variance.

    Note:
        Standardization uses the sample standard deviation (``ddof=1``).
    """
    a_arr, b_arr = _validated_pair(a, b)
    n = int(a_arr.size)
    if n < 2:
        raise ValueError("At least two rows are required to standardize columns.")

    sd_a = float(np.std(a_arr, ddof=1))
    sd_b = float(np.std(b_arr, ddof=1))
    if np.array_equal(a_arr, b_arr):
        # Identical columns have identical z-scores, whatever their spread.
        n_discrepant = 0
    else:
        if sd_a <= 0 or sd_b <= 0:
            raise ValueError("Cannot standardize a column with zero variance.")
        z_a = scipy_stats.zscore(a_arr, ddof=1)
        z_b = scipy_stats.zscore(b_arr, ddof=1)
        discrepant = np.abs(z_a - z_b) > float(threshold)
        n_discrepant = int(np.sum(discrepant))

    discrepant_percent = 100.0 * n_discrepant / n
    return DiscrepancyScreen(
        n=n,
        threshold=float(threshold),
        n_discrepant=n_discrepant,
        discrepant_percent=discrepant_percent,
        agreement_percent=100.0 - discrepant_percent,
        mean_a=float(np.mean(a_arr)),
        sd_a=sd_a,
        mean_b=float(np.mean(b_arr)),
        sd_b=sd_b,
    )
