"""
Indexed tables: cells keyed by a row index entry and a column index entry.

``IndexedTable`` is the general two-axis table produced by merges.
``TableCol`` is the single-column building block most tables start from.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Optional, Tuple

import pandas as pd

from ..config.formats import DEFAULT_FORMATS, FormatConfig
from ..utils.errors import TableKeyError
from .cells import CellValue, as_cell
from .index import (
    IndexKey,
    MultiIndex,
    format_key,
    has_positions,
    insert_ordered,
    make_key,
    match_key,
)

logger = logging.getLogger(__name__)

CellMap = Dict[Tuple[IndexKey, IndexKey], CellValue]


class _Axis:
    """Mutable ordered key list backing one table axis."""

    def __init__(self, name: str, keys: Iterable[Any] = (), depth: Optional[int] = None):
        index = MultiIndex(keys, depth=depth)
        self.name = name
        self.keys: List[IndexKey] = list(index)
        self.depth = index.depth
        self._members = set(self.keys)

    def to_index(self) -> MultiIndex:
        return MultiIndex(self.keys, depth=self.depth)

    def find(self, key: Any) -> Optional[IndexKey]:
        return match_key(self.keys, self._members, key)

    def resolve(self, key: Any) -> IndexKey:
        found = self.find(key)
        if found is None:
            raise TableKeyError(
                f"{self.name.capitalize()} key {format_key(make_key(key))!r} not in table"
            )
        return found

    def ensure(self, key: Any) -> IndexKey:
        """Return the existing entry for ``key``, adding it if it is new.

        A key given with explicit positions only reuses an identical entry.
        """
        found = match_key(self.keys, self._members, key, by_labels=not has_positions(key))
        if found is not None:
            return found
        entry = make_key(key, self.depth)
        if self.depth is None:
            self.depth = len(entry)
        insert_ordered(self.keys, entry)
        self._members.add(entry)
        return entry

    def copy(self) -> "_Axis":
        return _Axis(self.name, self.keys, self.depth)


class IndexedTable:
    """
    A table of CellValues keyed by (row entry, column entry).

    The row and column indices fix iteration and rendering order. An index
    entry may have no stored cells; it renders blank. Merge operations build
    new tables and never modify their inputs.
    """

    def __init__(
        self,
        row_index: Iterable[Any] = (),
        col_index: Iterable[Any] = (),
        cells: Optional[Mapping] = None,
        formats: FormatConfig = DEFAULT_FORMATS,
    ):
        self.formats = formats
        self._rows = _Axis("row", row_index, getattr(row_index, "depth", None))
        self._cols = _Axis("column", col_index, getattr(col_index, "depth", None))
        self._cells: CellMap = {}
        for (row, col), value in (cells or {}).items():
            key = (self._rows.resolve(row), self._cols.resolve(col))
            self._cells[key] = as_cell(value, formats)

    @property
    def row_index(self) -> MultiIndex:
        return self._rows.to_index()

    @property
    def col_index(self) -> MultiIndex:
        return self._cols.to_index()

    @property
    def row_rank(self) -> Optional[int]:
        return self._rows.depth

    @property
    def col_rank(self) -> Optional[int]:
        return self._cols.depth

    @property
    def shape(self) -> Tuple[int, int]:
        return len(self._rows.keys), len(self._cols.keys)

    @property
    def cells(self) -> "MappingProxyType[Tuple[IndexKey, IndexKey], CellValue]":
        """Read-only view of the stored cells."""
        return MappingProxyType(self._cells)

    def __getitem__(self, key: Tuple[Any, Any]) -> CellValue:
        row, col = key
        return self._lookup(self._rows.resolve(row), self._cols.resolve(col))

    def _lookup(self, r: IndexKey, c: IndexKey) -> CellValue:
        try:
            return self._cells[(r, c)]
        except KeyError:
            raise TableKeyError(
                f"No value at ({format_key(r)!r}, {format_key(c)!r})"
            ) from None

    def __setitem__(self, key: Tuple[Any, Any], value: Any) -> None:
        row, col = key
        self.set_cell(row, col, value)

    def __contains__(self, key: Tuple[Any, Any]) -> bool:
        return self.get(*key) is not None

    def get(self, row: Any, col: Any, default: Optional[CellValue] = None) -> Optional[CellValue]:
        r, c = self._rows.find(row), self._cols.find(col)
        if r is None or c is None:
            return default
        return self._cells.get((r, c), default)

    def set_cell(
        self,
        row: Any,
        col: Any,
        value: Any,
        se: Optional[float] = None,
        stars: int = 0,
        fmt: Optional[str] = None,
    ) -> CellValue:
        """Insert or overwrite the cell at (row, col).

        New keys are added to their index; an existing row keeps its position.
        """
        if isinstance(value, CellValue) and se is None and not stars and fmt is None:
            cell = value
        elif se is None and not stars and fmt is None:
            cell = as_cell(value, self.formats)
        else:
            cell = CellValue.create(value, se=se, stars=stars, fmt=fmt, formats=self.formats)

        r, c = self._rows.ensure(row), self._cols.ensure(col)
        self._cells[(r, c)] = cell
        return cell

    def add_row(self, key: Any) -> IndexKey:
        """Add a row entry with no values (rendered blank)."""
        return self._rows.ensure(key)

    def add_column(self, key: Any) -> IndexKey:
        """Add a column entry with no values (rendered blank)."""
        return self._cols.ensure(key)

    def star(self, row: Any, col: Any, stars: int) -> CellValue:
        """Replace the star count of a stored cell."""
        r, c = self._rows.resolve(row), self._cols.resolve(col)
        cell = self._lookup(r, c).with_stars(stars)
        self._cells[(r, c)] = cell
        return cell

    def reformat(self, row: Any, col: Any, fmt: str) -> CellValue:
        """Replace the format string of a stored cell."""
        r, c = self._rows.resolve(row), self._cols.resolve(col)
        cell = self._lookup(r, c).with_format(fmt)
        self._cells[(r, c)] = cell
        return cell

    def copy(self) -> "IndexedTable":
        table = object.__new__(type(self))
        table.__dict__.update(self.__dict__)
        table._rows = self._rows.copy()
        table._cols = self._cols.copy()
        table._cells = dict(self._cells)
        return table

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IndexedTable):
            return NotImplemented
        return (
            self._rows.keys == other._rows.keys
            and self._cols.keys == other._cols.keys
            and self._cells == other._cells
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        ranks = f"{self.row_rank or 0},{self.col_rank or 0}"
        return f"{type(self).__name__}{{{ranks}}} of size {self.shape}"

    def to_ascii(self, config: Any = None, **options: Any) -> str:
        from ..render.ascii import to_ascii

        return to_ascii(self, config, **options)

    def to_latex(self, config: Any = None, **options: Any) -> str:
        from ..render.latex import to_latex

        return to_latex(self, config, **options)

    to_tex = to_latex


def ordered_items(source: Any) -> List[Tuple[Any, Any]]:
    if isinstance(source, pd.Series):
        return list(source.items())
    if isinstance(source, Mapping):
        return list(source.items())
    if isinstance(source, (set, frozenset)):
        raise TypeError("Unordered collections cannot define row order; use a list or dict")
    return [tuple(item) for item in source]


def _sequence(source: Any, name: str) -> List[Any]:
    if isinstance(source, (set, frozenset, Mapping)):
        raise TypeError(f"{name} must be an ordered sequence, got {type(source).__name__}")
    return list(source)


class TableCol(IndexedTable):
    """
    A single-column table.

    Construct it empty and fill it by key, or pass the data up front:

        TableCol("Column")
        TableCol("Column", keys, values)            # parallel lists or arrays
        TableCol("Column", keys, values, ses)
        TableCol("Column", {"a": 1.0, "b": (2.0, 0.5)})
        TableCol("Column", values_by_key, ses_by_key)
        TableCol("Column", ("N", 30), ("Mean", 64.6, 1.2))

    Tuples are always (key, value[, se]) items; parallel data must be lists,
    arrays or Series. Rows appear in the order the data is iterated.
    """

    def __init__(self, header: Any, *data: Any, formats: FormatConfig = DEFAULT_FORMATS):
        super().__init__(col_index=[header], formats=formats)
        self._header = self._cols.keys[0]
        if data:
            self._load(data)

    @property
    def header(self) -> IndexKey:
        return self._header

    def _load(self, data: Tuple[Any, ...]) -> None:
        first = data[0]
        if isinstance(first, (Mapping, pd.Series)):
            if len(data) > 2:
                raise TypeError("Pass at most a value mapping and a standard-error mapping")
            ses = dict(ordered_items(data[1])) if len(data) == 2 else {}
            for key, value in ordered_items(first):
                self.set(key, value, se=ses.get(key))
        elif all(isinstance(item, tuple) for item in data):
            for item in data:
                self._set_item(item)
        elif len(data) == 1:
            for item in ordered_items(first):
                self._set_item(item)
        elif len(data) in (2, 3):
            columns = [_sequence(d, name) for d, name in zip(data, ("keys", "values", "ses"))]
            lengths = {len(c) for c in columns}
            if len(lengths) > 1:
                raise ValueError(f"Keys, values and ses must have equal lengths, got {lengths}")
            ses = columns[2] if len(columns) == 3 else [None] * len(columns[0])
            for key, value, se in zip(columns[0], columns[1], ses):
                self.set(key, value, se=se)
        else:
            raise TypeError(f"Cannot build a TableCol from {len(data)} positional arguments")

        logger.debug(f"Built column {format_key(self._header)!r} with {self.shape[0]} rows")

    def _set_item(self, item: Tuple[Any, ...]) -> None:
        if len(item) == 2:
            self.set(item[0], item[1])
        elif len(item) == 3:
            self.set(item[0], item[1], se=item[2])
        else:
            raise ValueError(f"Items must be (key, value) or (key, value, se), got {item!r}")

    def set(
        self,
        key: Any,
        value: Any,
        se: Optional[float] = None,
        stars: int = 0,
        fmt: Optional[str] = None,
    ) -> CellValue:
        """Insert or overwrite the value stored under ``key``."""
        return self.set_cell(key, self._header, value, se=se, stars=stars, fmt=fmt)

    def _row(self, key: Any) -> IndexKey:
        return self._rows.resolve(key)

    def __getitem__(self, key: Any) -> CellValue:  # type: ignore[override]
        return self._lookup(self._row(key), self._header)

    def __setitem__(self, key: Any, value: Any) -> None:  # type: ignore[override]
        self.set(key, value)

    def __contains__(self, key: Any) -> bool:  # type: ignore[override]
        try:
            return (self._row(key), self._header) in self._cells
        except TableKeyError:
            return False

    def star(self, key: Any, stars: int) -> CellValue:  # type: ignore[override]
        """Replace the star count of the value stored under ``key``."""
        return IndexedTable.star(self, self._row(key), self._header, stars)

    def reformat(self, key: Any, fmt: str) -> CellValue:  # type: ignore[override]
        """Replace the format string of the value stored under ``key``."""
        return IndexedTable.reformat(self, self._row(key), self._header, fmt)
