"""Core table model: cells, multi-indices, indexed tables and merges."""

from .cells import CellValue, as_cell, classify
from .index import IndexKey, Level, MultiIndex, is_hidden, make_key
from .table import IndexedTable, TableCol
from .merge import append_table, hcat, join_table, vcat

__all__ = [
    "CellValue",
    "as_cell",
    "classify",
    "IndexKey",
    "Level",
    "MultiIndex",
    "is_hidden",
    "make_key",
    "IndexedTable",
    "TableCol",
    "hcat",
    "vcat",
    "join_table",
    "append_table",
]
