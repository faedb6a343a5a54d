"""
Pytest configuration for the TexTables test suite.

This module configures pytest with a simple categorization:
- unit: Fast tests of individual components (default, unmarked)
- integration: End-to-end tests that build and render whole tables
"""

import pytest
import numpy as np
import pandas as pd
from typing import Any, List

from textables import ModelSummary, RegCol


def pytest_configure(config: Any) -> None:
    """Configure pytest with markers."""
    config.addinivalue_line(
        "markers",
        "integration: End-to-end tests that build and render whole tables",
    )


def pytest_addoption(parser: Any) -> None:
    """Add command line options."""
    parser.addoption(
        "--integration-only",
        action="store_true",
        default=False,
        help="Run only integration tests",
    )
    parser.addoption(
        "--unit-only",
        action="store_true",
        default=False,
        help="Skip integration tests",
    )


def pytest_collection_modifyitems(config: Any, items: List[Any]) -> None:
    """Filter tests based on command line options."""
    if config.getoption("--unit-only"):
        items[:] = [item for item in items if "integration" not in item.keywords]
    elif config.getoption("--integration-only"):
        items[:] = [item for item in items if "integration" in item.keywords]


# Common fixtures


@pytest.fixture
def my_column() -> RegCol:
    """Regression column with one entry in every block."""
    col = RegCol("My Column")
    col.set_coef("Coef 1", 1.32, 0.89)
    col.set_coef("Coef 2", -0.21, 0.01)
    col.set_meta("Estimator", "OLS")
    col.set_stats("$R^2$", 0.73)
    return col


@pytest.fixture
def nested_models() -> List[ModelSummary]:
    """Three nested models with growing coefficient lists."""
    common = dict(dof=27, n_obs=30)
    return [
        ModelSummary(
            names=["(Intercept)", "Raises"],
            estimates=[19.978, 0.691],
            standard_errors=[11.688, 0.179],
            r_squared=0.348,
            **common,
        ),
        ModelSummary(
            names=["(Intercept)", "Raises", "Learning"],
            estimates=[15.809, 0.379, 0.432],
            standard_errors=[11.084, 0.217, 0.193],
            r_squared=0.451,
            **common,
        ),
        ModelSummary(
            names=["(Intercept)", "Raises", "Learning", "Privileges"],
            estimates=[14.167, 0.352, 0.394, 0.105],
            standard_errors=[11.519, 0.224, 0.204, 0.168],
            r_squared=0.459,
            **common,
        ),
    ]


@pytest.fixture
def species_frame() -> pd.DataFrame:
    """Small frame with two numeric variables, a label and a group column."""
    rng = np.random.default_rng(42)
    n = 12
    return pd.DataFrame(
        {
            "length": np.round(rng.normal(5.0, 0.5, n), 2),
            "width": np.round(rng.normal(3.0, 0.3, n), 2),
            "name": [f"plant {i}" for i in range(n)],
            "species": ["setosa", "virginica", "versicolor"] * (n // 3),
        }
    )
