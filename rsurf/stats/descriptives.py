"""Descriptive statistics for the observation table."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
import pandas as pd
from scipy import stats as scipy_stats


def describe_columns(df: pd.DataFrame, columns: Sequence[str]) -> pd.DataFrame:
    """Summarize each column: count, mean, sample SD, range, skewness, kurtosis.

    Args:
        df (pandas.DataFrame): Observation table.
        columns (Sequence[str]): Columns to summarize, in output order.

    Returns:
        pandas.DataFrame: One row per column with keys ``variable``, ``n``,
        ``mean``, ``sd``, ``min``, ``median``, ``max``, ``skew`` and
        ``kurtosis`` (excess, bias-corrected).

    Raises:
        ValueError: If a requested column is missing.
    """
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ValueError(
            f"Columns {missing} not found. Available columns: {list(df.columns)}"
        )

    rows = []
    for col in columns:
        values = pd.to_numeric(df[col], errors="coerce").to_numpy(dtype=float)
        values = values[np.isfinite(values)]
        n = int(len(values))
        rows.append(
            {
                "variable": col,
                "n": n,
                "mean": float(np.mean(values)) if n else math.nan,
                "sd": float(np.std(values, ddof=1)) if n > 1 else math.nan,
                "min": float(np.min(values)) if n else math.nan,
                "median": float(np.median(values)) if n else math.nan,
                "max": float(np.max(values)) if n else math.nan,
                "skew": float(scipy_stats.skew(values, bias=False)) if n > 2 else math.nan,
                "kurtosis": (
                    float(scipy_stats.kurtosis(values, bias=False)) if n > 3 else math.nan
                ),
            }
        )
    return pd.DataFrame.from_records(rows)


def correlation_matrix(df: pd.DataFrame, columns: Sequence[str]) -> pd.DataFrame:
    """Pearson correlations between ``columns``."""
    return df[list(columns)].astype(float).corr(method="pearson")
