#!/usr/bin/env python3
"""Regression table example: fit a few OLS models and print them side by side."""

import numpy as np

from textables import ModelSummary, regtable


def ols(y: np.ndarray, X: np.ndarray, names: list) -> ModelSummary:
    """Least squares with classical standard errors."""
    n, k = X.shape
    beta, *_ = np.linalg.lstsq(X, y, rcond=None)
    resid = y - X @ beta
    sigma2 = resid @ resid / (n - k)
    se = np.sqrt(np.diag(sigma2 * np.linalg.inv(X.T @ X)))
    r2 = 1 - resid @ resid / np.sum((y - y.mean()) ** 2)
    return ModelSummary(
        names=names,
        estimates=beta,
        standard_errors=se,
        dof=n - k,
        n_obs=n,
        r_squared=r2,
        metadata={"Estimator": "OLS"},
    )


rng = np.random.default_rng(0)
n = 30
raises, learning, privileges = rng.normal(60, 10, (3, n))
rating = 15 + 0.6 * raises + 0.3 * learning + rng.normal(0, 7, n)

const = np.ones(n)
m1 = ols(rating, np.column_stack([const, raises]), ["(Intercept)", "Raises"])
m2 = ols(
    rating,
    np.column_stack([const, raises, learning]),
    ["(Intercept)", "Raises", "Learning"],
)
m3 = ols(
    rating,
    np.column_stack([const, raises, learning, privileges]),
    ["(Intercept)", "Raises", "Learning", "Privileges"],
)

# Numbered (1)-(3) across both groups
table = regtable(
    ("Baseline", [m1]),
    ("Extended", [m2, m3]),
    meta=[("Estimator", lambda m: m.metadata["Estimator"])],
)

print(table.to_ascii())
print()
print(table.to_latex(se_pos="inline"))
