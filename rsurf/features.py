"""Center the paired predictors and derive second-order polynomial terms."""

from __future__ import annotations

from typing import Dict

import numpy as np
import pandas as pd

from .config import SCALE_MIDPOINT
from .schema import COLUMNS


def _as_column(values, label: str) -> np.ndarray:
    arr = np.asarray(values, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"{label} must be one-dimensional, got shape {arr.shape}.")
    if arr.size == 0:
        raise ValueError(f"{label} is empty.")
    return arr


def center_and_expand(a, b, center: float = SCALE_MIDPOINT) -> Dict[str, np.ndarray]:
    """Center two columns at ``center`` and build quadratic and interaction terms.

    Args:
        a: First predictor (older partner's rating).
        b: Second predictor (younger partner's rating).
        center (float): Constant subtracted from both columns. It is not
            checked against the data range.

    Returns:
        dict[str, numpy.ndarray]: Keys ``ce_old``, ``ce_young``, ``xsquared``,
        ``xy`` and ``ysquared``.

    Raises:
        ValueError: If either column is empty or their lengths differ.
    """
    a_arr = _as_column(a, "First predictor")
    b_arr = _as_column(b, "Second predictor")
    if len(a_arr) != len(b_arr):
        raise ValueError(
            f"Predictor lengths differ: {len(a_arr)} vs {len(b_arr)}."
        )

    ce_a = a_arr - float(center)
    ce_b = b_arr - float(center)
    return {
        COLUMNS.ce_old: ce_a,
        COLUMNS.ce_young: ce_b,
        COLUMNS.xsquared: ce_a**2,
        COLUMNS.xy: ce_a * ce_b,
        COLUMNS.ysquared: ce_b**2,
    }


def build_polynomial_features(
    df: pd.DataFrame, center: float = SCALE_MIDPOINT
) -> pd.DataFrame:
    """Return a copy of the observation table with the polynomial columns added.

    The input frame is left untouched; ``attrs`` (including ``max_diff``) are
    carried over.
    """
    missing = [c for c in (COLUMNS.extro_o, COLUMNS.extro_y) if c not in df.columns]
    if missing:
        raise ValueError(
            f"Observation table is missing columns {missing}. "
            f"Available columns: {list(df.columns)}"
        )

    terms = center_and_expand(df[COLUMNS.extro_o], df[COLUMNS.extro_y], center)
    out = df.copy()
    for name, values in terms.items():
        out[name] = values
    out.attrs = dict(df.attrs)
    out.attrs["centering_constant"] = float(center)
    return out
