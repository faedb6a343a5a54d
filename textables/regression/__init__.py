"""Regression columns and tables built from fitted models."""

from .column import (
    DEFAULT_STATS,
    RegCol,
    assign_stars,
    reg_col,
    two_tailed_pvalue,
)
from .models import ModelSummary, RegressionModel
from .tables import regtable

__all__ = [
    "DEFAULT_STATS",
    "RegCol",
    "assign_stars",
    "reg_col",
    "two_tailed_pvalue",
    "ModelSummary",
    "RegressionModel",
    "regtable",
]
