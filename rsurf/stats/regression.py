"""Provide the ordinary least squares fit behind the response surface.

This module supports:
- a generic OLS fit on a named design matrix via QR decomposition, and
- the second-order response surface model
  ``happy ~ ce_old + ce_young + xy + ysquared + xsquared``.

Only estimates, residual variance and the parameter covariance matrix are
produced; significance testing is left to the reader.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np
import pandas as pd
from scipy.linalg import solve_triangular

from ..schema import COLUMNS, INTERCEPT, SURFACE_TERMS


class FitError(ValueError):
    """Raised when a regression cannot be estimated (e.g. rank-deficient design)."""


@dataclass(frozen=True)
class SurfaceFit:
    """Container for regression fit outputs."""

    response: str
    terms: Tuple[str, ...]
    beta: np.ndarray
    cov: np.ndarray
    yhat: np.ndarray
    resid: np.ndarray
    ss_res: float
    sigma2: float
    df_res: int
    n: int
    r2: float
    adj_r2: float

    @property
    def coefficients(self) -> pd.Series:
        return pd.Series(self.beta, index=list(self.terms), name="estimate")

    @property
    def covariance(self) -> pd.DataFrame:
        return pd.DataFrame(self.cov, index=list(self.terms), columns=list(self.terms))

    @property
    def std_errors(self) -> pd.Series:
        return pd.Series(
            np.sqrt(np.clip(np.diag(self.cov), 0.0, None)),
            index=list(self.terms),
            name="se",
        )

    def coef(self, term: str) -> float:
        """Return one coefficient by term name."""
        try:
            idx = self.terms.index(term)
        except ValueError as exc:
            raise KeyError(f"Unknown term '{term}'. Terms: {self.terms}") from exc
        return float(self.beta[idx])

    def coefficient_table(self) -> pd.DataFrame:
        """Estimates and standard errors, one row per term."""
        return pd.DataFrame(
            {
                "term": list(self.terms),
                "estimate": self.beta,
                "se": self.std_errors.to_numpy(),
            }
        )


def fit_ols(
    design: np.ndarray,
    y: np.ndarray,
    terms: Sequence[str],
    response: str = "y",
) -> SurfaceFit:
    """Fit ``y = design @ beta`` by least squares using a QR decomposition.

    Args:
        design (numpy.ndarray): ``(n, p)`` design matrix, including the
            intercept column if one is wanted.
        y (numpy.ndarray): Response vector of length ``n``.
        terms (Sequence[str]): Names of the ``p`` design columns.
        response (str): Response label stored on the result.

    Returns:
        SurfaceFit: Estimates, covariance ``sigma^2 (X'X)^-1`` with
        ``sigma^2 = SSE / (n - p)``, fitted values, residuals and R^2.

    Raises:
        FitError: If inputs are non-finite or mis-shaped, there are no
            residual degrees of freedom, or the design is rank-deficient.
    """
    x_arr = np.asarray(design, dtype=float)
    y_arr = np.asarray(y, dtype=float)
    if x_arr.ndim != 2 or y_arr.ndim != 1 or x_arr.shape[0] != y_arr.shape[0]:
        raise FitError(
            f"Design shape {x_arr.shape} does not match response shape {y_arr.shape}."
        )
    n, p = x_arr.shape
    if len(terms) != p:
        raise FitError(f"Expected {p} term names, got {len(terms)}.")
    if not (np.all(np.isfinite(x_arr)) and np.all(np.isfinite(y_arr))):
        raise FitError("Design matrix and response must be finite.")
    if n <= p:
        raise FitError(
            f"Insufficient observations for regression: n={n}, parameters={p}."
        )

    rank = int(np.linalg.matrix_rank(x_arr))
    if rank < p:
        raise FitError(
            f"Design matrix is rank-deficient (rank {rank} < {p} parameters)."
        )

    q, r = np.linalg.qr(x_arr)
    beta = solve_triangular(r, q.T @ y_arr)
    r_inv = solve_triangular(r, np.eye(p))
    xtx_inv = r_inv @ r_inv.T

    yhat = x_arr @ beta
    resid = y_arr - yhat
    ss_res = float(np.sum(np.square(resid)))
    df_res = int(n - p)
    sigma2 = ss_res / df_res

    ss_tot = float(np.sum(np.square(y_arr - np.mean(y_arr))))
    if ss_tot > 0:
        r2 = float(1.0 - ss_res / ss_tot)
        adj_r2 = float(1.0 - (1.0 - r2) * (n - 1) / df_res)
    else:
        r2 = math.nan
        adj_r2 = math.nan

    return SurfaceFit(
        response=response,
        terms=tuple(terms),
        beta=np.asarray(beta, dtype=float),
        cov=np.asarray(sigma2 * xtx_inv, dtype=float),
        yhat=np.asarray(yhat, dtype=float),
        resid=np.asarray(resid, dtype=float),
        ss_res=ss_res,
        sigma2=float(sigma2),
        df_res=df_res,
        n=int(n),
        r2=r2,
        adj_r2=adj_r2,
    )


def fit_response_surface(
    df: pd.DataFrame,
    response: str = COLUMNS.happy,
    terms: Sequence[str] = SURFACE_TERMS,
) -> SurfaceFit:
    """Fit the second-order response surface model on a featured table.

    Coefficients come back in the order intercept, ``ce_old``, ``ce_young``,
    ``xy``, ``ysquared``, ``xsquared`` (for the default ``terms``).

    Raises:
        ValueError: If a required column is missing.
        FitError: If the model cannot be estimated.
    """
    needed = [response, *terms]
    missing = [c for c in needed if c not in df.columns]
    if missing:
        raise ValueError(
            f"Columns {missing} not found for regression. "
            f"Available columns: {list(df.columns)}"
        )

    predictors = df[list(terms)].to_numpy(dtype=float)
    design = np.column_stack([np.ones(len(df)), predictors])
    return fit_ols(
        design,
        df[response].to_numpy(dtype=float),
        terms=(INTERCEPT, *terms),
        response=response,
    )
