"""
Key-based concatenation of indexed tables.

Tables are merged on their keys, not their positions:

- ``hcat`` takes the ordered union of the row indices and concatenates the
  column indices. A row missing from one input is blank in that input's
  columns.
- ``vcat`` is the mirror image. Stacking two columns with *different* headers
  therefore does not put them on top of each other: each input's rows stay
  under its own column and the other column is blank for them.
- ``join_table`` / ``append_table`` first wrap each input's columns / rows in a
  new outer level carrying the group label, then concatenate.

Inputs must agree on both ranks and are never modified.
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Sequence, Tuple

from ..utils.errors import RankMismatchError
from .index import IndexKey, MultiIndex, common_depth, concat_offsets, shift_key
from .table import CellMap, IndexedTable

logger = logging.getLogger(__name__)


def _check_tables(tables: Sequence[Any], op: str) -> List[IndexedTable]:
    if not tables:
        raise ValueError(f"{op} needs at least one table")
    for table in tables:
        if not isinstance(table, IndexedTable):
            raise TypeError(f"{op} expects IndexedTable inputs, got {type(table).__name__}")

    for axis, attr in (("row", "row_rank"), ("column", "col_rank")):
        ranks = {getattr(t, attr) for t in tables if getattr(t, attr) is not None}
        if len(ranks) > 1:
            raise RankMismatchError(
                f"{op}: inputs have different {axis} ranks {sorted(ranks)}"
            )
    return list(tables)


def hcat(*tables: IndexedTable) -> IndexedTable:
    """Combine tables side by side, merging rows on their keys."""
    tables_ = _check_tables(tables, "hcat")

    rows = MultiIndex.union(*(t.row_index for t in tables_))
    col_indices = [t.col_index for t in tables_]
    cols: List[IndexKey] = []
    cells: CellMap = {}
    for table, index, offset in zip(tables_, col_indices, concat_offsets(col_indices)):
        shifted = {key: shift_key(key, offset) for key in index}
        cols.extend(shifted.values())
        for (r, c), cell in table.cells.items():
            cells[(r, shifted[c])] = cell

    result = IndexedTable(
        rows, MultiIndex(cols, depth=common_depth(col_indices)), cells, tables_[0].formats
    )
    logger.debug(f"hcat: {len(tables_)} tables -> shape {result.shape}")
    return result


def vcat(*tables: IndexedTable) -> IndexedTable:
    """Stack tables vertically, merging columns on their keys."""
    tables_ = _check_tables(tables, "vcat")

    cols = MultiIndex.union(*(t.col_index for t in tables_))
    row_indices = [t.row_index for t in tables_]
    rows: List[IndexKey] = []
    cells: CellMap = {}
    for table, index, offset in zip(tables_, row_indices, concat_offsets(row_indices)):
        shifted = {key: shift_key(key, offset) for key in index}
        rows.extend(shifted.values())
        for (r, c), cell in table.cells.items():
            cells[(shifted[r], c)] = cell

    result = IndexedTable(
        MultiIndex(rows, depth=common_depth(row_indices)), cols, cells, tables_[0].formats
    )
    logger.debug(f"vcat: {len(tables_)} tables -> shape {result.shape}")
    return result


def _groups(args: Tuple[Any, ...], op: str) -> List[Tuple[str, IndexedTable]]:
    """Normalize group arguments to (label, table) pairs.

    Accepts a single dict of label -> table, ``(label, table)`` tuples, or bare
    tables (which get a hidden empty label).
    """
    if len(args) == 1 and isinstance(args[0], Mapping):
        return [(str(label), table) for label, table in args[0].items()]

    groups = []
    for arg in args:
        if isinstance(arg, IndexedTable):
            groups.append(("", arg))
        elif isinstance(arg, tuple) and len(arg) == 2 and isinstance(arg[1], IndexedTable):
            groups.append((str(arg[0]), arg[1]))
        else:
            raise TypeError(
                f"{op} expects tables or (label, table) pairs, got {type(arg).__name__}"
            )
    return groups


def _wrap(table: IndexedTable, label: str, axis: str) -> IndexedTable:
    rows, cols = table.row_index, table.col_index
    if axis == "row":
        rows = rows.append_level(label)
        mapping: Dict[IndexKey, IndexKey] = dict(zip(table.row_index, rows))
        cells = {(mapping[r], c): v for (r, c), v in table.cells.items()}
    else:
        cols = cols.append_level(label)
        mapping = dict(zip(table.col_index, cols))
        cells = {(r, mapping[c]): v for (r, c), v in table.cells.items()}
    return IndexedTable(rows, cols, cells, table.formats)


def join_table(*groups: Any) -> IndexedTable:
    """Group tables under column headings and concatenate them horizontally.

        join_table(("Regular", t1), ("Detail", t2))
        join_table({"Regular": t1, "Detail": t2})
        join_table(t1, t2)   # column blocks without a visible heading
    """
    pairs = _groups(groups, "join_table")
    return hcat(*(_wrap(table, label, "column") for label, table in pairs))


def append_table(*groups: Any) -> IndexedTable:
    """Group tables under row headings and concatenate them vertically."""
    pairs = _groups(groups, "append_table")
    return vcat(*(_wrap(table, label, "row") for label, table in pairs))
