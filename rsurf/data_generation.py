"""
Generates the synthetic couples dataset and handles its CSV round trip.
"""

# Algorithm summary: draw both partners' extroversion uniformly on the 1-7
# scale, take the batch-wide maximum absolute discrepancy, then give each
# couple a happiness score from a two-branch mixture: with probability 0.7
# couples whose older partner is less extroverted sit just under the top of
# the 1-5 scale (shrinking with normalized discrepancy); everyone else is
# uniform on 1-5.

import logging
import os

import numpy as np
import pandas as pd

from .schema import COLUMNS

EXTRO_SCALE = (1.0, 7.0)
HAPPY_SCALE = (1.0, 5.0)
P_SENSITIVE = 0.7


def generate_observations(n, rng):
    """Simulate ``n`` couples.

    Draw order is fixed so a seeded source always yields the same table:
    all ``extro_o`` values, then all ``extro_y`` values, then for each row in
    turn the branch draw ``p`` followed by the happiness draw.

    Args:
        n (int): Number of couples; must be positive.
        rng: Random source exposing ``uniform(low, high, size)``, for example
            ``numpy.random.default_rng(seed)`` or
            :class:`rsurf.random_source.RCompatibleUniform`.

    Returns:
        pd.DataFrame: Columns ``extro_o``, ``extro_y`` and ``happy``. The
        batch constant ``max_diff`` is stored in ``DataFrame.attrs``.

    Raises:
        ValueError: If ``n`` is not a positive integer.
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n <= 0:
        raise ValueError(f"Sample count must be a positive integer, got {n!r}")
    n = int(n)

    extro_o = np.asarray(rng.uniform(*EXTRO_SCALE, size=n), dtype=float)
    extro_y = np.asarray(rng.uniform(*EXTRO_SCALE, size=n), dtype=float)

    # max_diff must be known before any happiness value is drawn.
    extro_diff = np.abs(extro_o - extro_y)
    max_diff = float(np.max(extro_diff))
    if max_diff > 0:
        scaled_diff = extro_diff / max_diff
    else:
        scaled_diff = np.zeros(n)

    # Row-major: p_0, u_0, p_1, u_1, ...
    draws = np.asarray(rng.uniform(0.0, 1.0, size=(n, 2)), dtype=float)
    p = draws[:, 0]
    u = draws[:, 1]

    sensitive = (p < P_SENSITIVE) & (extro_o < extro_y)
    low, high = HAPPY_SCALE
    happy = np.where(
        sensitive,
        high - scaled_diff * u,
        low + (high - low) * u,
    )
    happy = np.clip(happy, low, high)

    df = pd.DataFrame(
        {
            COLUMNS.extro_o: extro_o,
            COLUMNS.extro_y: extro_y,
            COLUMNS.happy: happy,
        }
    )
    df.attrs["max_diff"] = max_diff
    logging.info(
        "Generated %d observations (max discrepancy %.4f, %d discrepancy-sensitive rows)",
        n,
        max_diff,
        int(np.sum(sensitive)),
    )
    return df


def save_observations(df, path):
    """
    Write the observation table to a CSV file.

    Args:
        df (pd.DataFrame): Observation table.
        path (str): Target CSV path; parent directories are created.

    Returns:
        str: The path written.
    """
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    df.to_csv(path, index=False, float_format="%.17g")
    return path


def load_observations(path):
    """
    Load an observation table written by :func:`save_observations`.

    Args:
        path (str): Path to the CSV file.

    Returns:
        pd.DataFrame: Loaded table with float columns.

    Raises:
        ValueError: If a raw column is missing or contains non-numeric values.
    """
    df = pd.read_csv(path, float_precision="round_trip")
    missing = [col for col in COLUMNS.raw if col not in df.columns]
    if missing:
        raise ValueError(
            f"Observation file {path} is missing columns {missing}. "
            f"Available columns: {list(df.columns)}"
        )
    for col in df.columns:
        df[col] = pd.to_numeric(df[col], errors="coerce")
    if df[list(COLUMNS.raw)].isna().any().any():
        raise ValueError(f"Observation file {path} contains non-numeric values.")
    return df
