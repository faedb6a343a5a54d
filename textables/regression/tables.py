"""Multi-model regression tables."""

import itertools
import logging
from collections.abc import Mapping
from typing import Any, Iterator, List, Sequence, Tuple

from ..core.merge import hcat, join_table
from ..core.table import IndexedTable
from .column import RegCol, reg_col

logger = logging.getLogger(__name__)


def _as_models(models: Any) -> List[Any]:
    if isinstance(models, (list, tuple)):
        return list(models)
    return [models]


def _split_groups(args: Tuple[Any, ...]) -> Tuple[bool, List[Tuple[str, List[Any]]]]:
    """Return (grouped, [(label, models), ...])."""
    if len(args) == 1 and isinstance(args[0], Mapping):
        return True, [(str(label), _as_models(m)) for label, m in args[0].items()]

    is_group = [
        isinstance(arg, tuple) and len(arg) == 2 and isinstance(arg[0], str) for arg in args
    ]
    if all(is_group):
        return True, [(label, _as_models(models)) for label, models in args]
    if any(is_group):
        raise TypeError("regtable expects either models or (label, models) groups, not both")
    return False, [("", list(args))]


def regtable(*models_or_groups: Any, **reg_col_options: Any) -> IndexedTable:
    """Side-by-side regression table, one numbered column per model.

    Columns are headed (1), (2), ... in argument order, including across
    groups:

        regtable(m1, m2, m3)
        regtable(("Group 1", (m1, m2, m3)), ("Group 2", (m4, m5)))
        regtable({"Group 1": (m1, m2, m3), "Group 2": (m4, m5)})

    Keyword options are passed to ``reg_col`` for every model.
    """
    if not models_or_groups:
        raise ValueError("regtable needs at least one model")

    grouped, groups = _split_groups(models_or_groups)
    numbers: Iterator[int] = itertools.count(1)

    def columns(models: Sequence[Any]) -> List[RegCol]:
        return [reg_col(f"({next(numbers)})", model, **reg_col_options) for model in models]

    if not grouped:
        return hcat(*columns(groups[0][1]))

    for label, models in groups:
        if not models:
            raise ValueError(f"Group {label!r} has no models")
    logger.debug(f"regtable: {len(groups)} groups")
    return join_table(*((label, hcat(*columns(models))) for label, models in groups))
