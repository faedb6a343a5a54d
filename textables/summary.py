"""
Summary-statistics tables from pandas DataFrames.

- ``summarize``: one row per variable, one column per statistic
- ``summarize_by``: the same, stacked in one row block per group value
- ``tabulate``: frequency table of a single variable
"""

import logging
from collections.abc import Mapping
from typing import Any, Callable, List, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from .core.merge import append_table
from .core.table import IndexedTable

logger = logging.getLogger(__name__)

StatFunctions = Union[Mapping, Sequence[Tuple[str, Callable[[pd.Series], Any]]]]


def _quantile(q: float) -> Callable[[pd.Series], float]:
    def stat(s: pd.Series) -> float:
        return float(s.quantile(q))

    return stat


DEFAULT_SUMMARY_STATS: Tuple[Tuple[str, Callable[[pd.Series], Any]], ...] = (
    ("Obs", lambda s: int(s.count())),
    ("Mean", lambda s: float(s.mean())),
    ("Std. Dev.", lambda s: float(s.std())),
    ("Min", lambda s: float(s.min())),
    ("Max", lambda s: float(s.max())),
)

DETAIL_SUMMARY_STATS = DEFAULT_SUMMARY_STATS[:-1] + tuple(
    (f"p{int(q * 100)}", _quantile(q)) for q in (0.10, 0.25, 0.50, 0.75, 0.90)
) + DEFAULT_SUMMARY_STATS[-1:]


def _columns(df: pd.DataFrame, cols: Any) -> List[Any]:
    if cols is None:
        return list(df.columns)
    if isinstance(cols, str):
        return [cols]
    return list(cols)


def _stat_items(stats: StatFunctions) -> List[Tuple[str, Callable[[pd.Series], Any]]]:
    if isinstance(stats, Mapping):
        return list(stats.items())
    return list(stats)


def summarize(
    df: pd.DataFrame,
    cols: Any = None,
    detail: bool = False,
    stats: Optional[StatFunctions] = None,
) -> IndexedTable:
    """
    Summary statistics, one row per variable.

    Args:
        df: Source data
        cols: Column name or names to summarize (default: all columns)
        detail: Add the 10th, 25th, 50th, 75th and 90th percentiles
        stats: Ordered (name, function) pairs replacing the default
            statistics; each function receives the non-missing values

    Returns:
        An IndexedTable. Non-numeric variables get a row with no values.
    """
    if stats is None:
        stats = DETAIL_SUMMARY_STATS if detail else DEFAULT_SUMMARY_STATS
    items = _stat_items(stats)
    if not items:
        raise ValueError("summarize needs at least one statistic")

    table = IndexedTable()
    for name, _ in items:
        table.add_column(name)

    for col in _columns(df, cols):
        if col not in df.columns:
            raise KeyError(f"Column {col!r} not in DataFrame")
        series = df[col]
        if pd.api.types.is_bool_dtype(series):
            series = series.astype(int)
        if not pd.api.types.is_numeric_dtype(series):
            logger.info(f"Skipping non-numeric column {col!r} ({series.dtype})")
            table.add_row(col)
            continue
        values = series.dropna()
        for name, fn in items:
            table.set_cell(col, name, fn(values))

    return table


def summarize_by(df: pd.DataFrame, by: Any, cols: Any = None, **kwargs: Any) -> IndexedTable:
    """``summarize`` within each value of ``by``, stacked into row groups.

    Groups appear in sorted order; missing group values are dropped.
    """
    if by not in df.columns:
        raise KeyError(f"Column {by!r} not in DataFrame")
    if cols is None:
        cols = [c for c in df.columns if c != by]

    groups = [
        (str(value), summarize(group, cols, **kwargs))
        for value, group in df.groupby(by, sort=True)
    ]
    if not groups:
        raise ValueError(f"No non-missing values in {by!r}")
    return append_table(*groups)


def tabulate(df: pd.DataFrame, col: Any) -> IndexedTable:
    """Frequency table: count, percent and cumulative percent per value,
    followed by a Total row."""
    if col not in df.columns:
        raise KeyError(f"Column {col!r} not in DataFrame")

    counts = df[col].value_counts().sort_index()
    total = int(counts.sum())
    if total == 0:
        raise ValueError(f"No non-missing values in {col!r}")
    percent = 100 * counts.to_numpy(dtype=float) / total
    cumulative = np.cumsum(percent)

    body = IndexedTable()
    for value, freq, pct, cum in zip(counts.index, counts.to_numpy(), percent, cumulative):
        body.set_cell(value, "Freq.", int(freq))
        body.set_cell(value, "Percent", float(pct))
        body.set_cell(value, "Cum.", float(cum))

    footer = IndexedTable()
    footer.set_cell("Total", "Freq.", total)
    footer.set_cell("Total", "Percent", 100.0)

    return append_table(body, footer)
