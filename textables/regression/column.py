"""
Regression columns.

A ``RegCol`` is a single-column table whose rows fall into three blocks, always
shown in this order:

- coefficients: estimates with standard errors and significance stars
- metadata: per-model notes such as the estimator used (empty by default)
- fit statistics: N, R^2, ...

Each block can be split into sub-blocks with the ``level`` (ordering) and
``name`` (heading) keywords of the ``set_*`` methods. Columns built this way
line up block by block when concatenated with ``hcat``.
"""

import logging
from collections.abc import Mapping
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np
from scipy import stats

from ..config.formats import DEFAULT_FORMATS, FormatConfig
from ..constants import (
    COEF_BLOCK,
    META_BLOCK,
    REGRESSION_BLOCKS,
    STAR_THRESHOLDS,
    STATS_BLOCK,
)
from ..core.index import IndexKey, Level, make_level
from ..core.table import TableCol, ordered_items
from ..utils.errors import TableKeyError
from .models import RegressionModel

logger = logging.getLogger(__name__)

ModelFunctions = Union[Mapping, Sequence[Tuple[str, Callable[[Any], Any]]]]


# Default statistics return None for models without the method; those rows are skipped
def _nobs(model: Any) -> Optional[int]:
    nobs = getattr(model, "nobs", None)
    return None if nobs is None else int(nobs())


def _r2(model: Any) -> Optional[float]:
    r2 = getattr(model, "r2", None)
    return None if r2 is None else float(r2())


DEFAULT_STATS: Tuple[Tuple[str, Callable[[Any], Any]], ...] = (
    ("N", _nobs),
    ("$R^2$", _r2),
)


def two_tailed_pvalue(estimate: float, se: float, dof: Optional[float] = None) -> float:
    """Two-sided p-value of ``estimate / se`` under a t (or normal) reference.

    Returns NaN when the standard error is not a positive finite number.
    """
    if se is None or not np.isfinite(se) or se <= 0:
        logger.warning(f"Standard error {se!r} gives no p-value for estimate {estimate!r}")
        return float("nan")
    t_stat = abs(estimate / se)
    if dof is None or not np.isfinite(dof):
        return float(2 * stats.norm.sf(t_stat))
    return float(2 * stats.t.sf(t_stat, dof))


def assign_stars(p_value: Optional[float]) -> int:
    """Stars for a p-value: <=0.01 -> 3, <=0.05 -> 2, <=0.10 -> 1, else 0."""
    if p_value is None or np.isnan(p_value):
        return 0
    for threshold, n_stars in STAR_THRESHOLDS:
        if p_value <= threshold:
            return n_stars
    return 0


class RegCol(TableCol):
    """A regression column with coefficient, metadata and fit-statistic blocks."""

    def __init__(self, header: Any, formats: FormatConfig = DEFAULT_FORMATS):
        super().__init__(header, formats=formats)
        self._rows.depth = 3

    def _block_key(self, block: str, key: Any, level: int, name: str) -> IndexKey:
        return (
            Level(REGRESSION_BLOCKS[block], block),
            Level(int(level), str(name)),
            make_level(key),
        )

    def _set_block(
        self,
        block: str,
        key: Any,
        value: Any,
        se: Optional[float],
        stars: int,
        level: int,
        name: str,
    ) -> None:
        if value is None:
            if isinstance(key, str):
                raise ValueError(f"No value given for {key!r}")
            if se is not None or stars:
                raise TypeError(
                    "se and stars apply to a single key; give (value, se) items instead"
                )
            for item_key, item_value in ordered_items(key):
                self.set(self._block_key(block, item_key, level, name), item_value)
            return
        self.set(self._block_key(block, key, level, name), value, se=se, stars=stars)

    def set_coef(
        self,
        key: Any,
        value: Any = None,
        se: Optional[float] = None,
        *,
        stars: int = 0,
        level: int = 1,
        name: str = "",
    ) -> None:
        """Add coefficients.

        Either ``set_coef("x", 1.32, 0.89)`` or a mapping / list of pairs whose
        values are scalars or ``(value, se)`` tuples:
        ``set_coef({"x": (1.32, 0.89), "y": (-0.21, 0.01)})``.
        """
        self._set_block(COEF_BLOCK, key, value, se, stars, level, name)

    def set_meta(
        self,
        key: Any,
        value: Any = None,
        se: Optional[float] = None,
        *,
        stars: int = 0,
        level: int = 1,
        name: str = "",
    ) -> None:
        """Add model metadata, same call forms as ``set_coef``."""
        self._set_block(META_BLOCK, key, value, se, stars, level, name)

    def set_stats(
        self,
        key: Any,
        value: Any = None,
        se: Optional[float] = None,
        *,
        stars: int = 0,
        level: int = 1,
        name: str = "",
    ) -> None:
        """Add fit statistics, same call forms as ``set_coef``."""
        self._set_block(STATS_BLOCK, key, value, se, stars, level, name)

    def _row(self, key: Any) -> IndexKey:
        # Plain labels are looked up across blocks; full keys resolve directly
        if isinstance(key, tuple):
            return self._rows.resolve(key)
        label = make_level(key).label
        matches = [k for k in self._rows.keys if k[-1].label == label]
        if not matches:
            raise TableKeyError(f"Row {label!r} not in regression column")
        if len(matches) > 1:
            raise TableKeyError(f"Row {label!r} appears in {len(matches)} blocks")
        return matches[0]

    def __setitem__(self, key: Any, value: Any) -> None:
        if isinstance(key, tuple):
            self.set(key, value)
        else:
            self.set_coef(key, value)


def _functions(source: ModelFunctions) -> Iterable[Tuple[str, Callable[[Any], Any]]]:
    if isinstance(source, Mapping):
        return list(source.items())
    return list(source)


def _evaluate(source: ModelFunctions, model: Any) -> List[Tuple[str, Any]]:
    """(name, value) pairs for the functions in ``source``, dropping None results."""
    rows = []
    for name, fn in _functions(source):
        value = fn(model)
        if value is None:
            logger.debug(f"No {name!r} for {type(model).__name__}, row skipped")
            continue
        rows.append((name, value))
    return rows


def reg_col(
    header: Any,
    model: RegressionModel,
    stats: ModelFunctions = DEFAULT_STATS,
    meta: ModelFunctions = (),
    stderror: Optional[Callable[[Any], Sequence[float]]] = None,
    pvalue: Callable[[float, float, Optional[float]], float] = two_tailed_pvalue,
    formats: FormatConfig = DEFAULT_FORMATS,
) -> RegCol:
    """Build a regression column from a fitted model.

    Args:
        header: Column heading
        model: Object implementing the RegressionModel interface
        stats: Ordered (name, function) pairs evaluated on the model for the
            fit-statistics block; a function returning None adds no row
        meta: Ordered (name, function) pairs for the metadata block
        stderror: Replacement standard-error function (e.g. robust errors)
        pvalue: Function of (estimate, se, dof) giving a two-sided p-value
        formats: Default cell formats

    Returns:
        The populated RegCol, with stars set from the p-values
    """
    if not isinstance(model, RegressionModel):
        raise TypeError(f"{type(model).__name__} does not implement RegressionModel")

    names = list(model.coefnames())
    estimates = np.asarray(model.coef(), dtype=float)
    ses = np.asarray(stderror(model) if stderror else model.stderror(), dtype=float)
    if not len(names) == len(estimates) == len(ses):
        raise ValueError(
            f"Model returned {len(names)} names, {len(estimates)} estimates "
            f"and {len(ses)} standard errors"
        )
    dof = model.dof_residual()

    col = RegCol(header, formats=formats)
    for name, estimate, se in zip(names, estimates, ses):
        stars = assign_stars(pvalue(estimate, se, dof))
        col.set_coef(name, estimate, se, stars=stars)

    col.set_stats(_evaluate(stats, model))
    col.set_meta(_evaluate(meta, model))
    return col
