"""Tests for IndexedTable and TableCol construction and access."""

import numpy as np
import pandas as pd
import pytest

from textables import (
    CellValue,
    FormatError,
    IndexedTable,
    Level,
    RankMismatchError,
    TableCol,
    TableKeyError,
)


class TestTableColConstruction:
    """The documented ways of building a column."""

    def test_empty(self) -> None:
        col = TableCol("Column")
        assert col.shape == (0, 1)
        assert col.row_rank is None
        assert col.col_rank == 1

    def test_parallel_sequences(self) -> None:
        col = TableCol("Column", ["a", "b"], [1.0, 2.0])
        assert col.row_index.labels(0) == ["a", "b"]
        assert col["b"].value == 2.0

    def test_parallel_with_standard_errors(self) -> None:
        col = TableCol("Column", ["a", "b"], np.array([1.0, 2.0]), np.array([0.1, 0.2]))
        assert col["a"].se == 0.1
        assert col["b"].format_se() == "(0.200)"

    def test_parallel_length_mismatch(self) -> None:
        with pytest.raises(ValueError, match="equal lengths"):
            TableCol("Column", ["a", "b"], [1.0])

    def test_mapping(self) -> None:
        col = TableCol("Column", {"a": 1.0, "b": (2.0, 0.5)})
        assert col.row_index.labels(0) == ["a", "b"]
        assert col["a"].se is None
        assert col["b"].se == 0.5

    def test_mapping_with_se_mapping(self) -> None:
        col = TableCol("Column", {"a": 1.0, "b": 2.0}, {"b": 0.3})
        assert col["a"].se is None
        assert col["b"].se == 0.3

    def test_series(self) -> None:
        col = TableCol("Column", pd.Series([1.5, 2.5], index=["x", "y"]))
        assert col.row_index.labels(0) == ["x", "y"]
        assert col["y"].value == 2.5

    def test_tuple_items(self) -> None:
        col = TableCol("Column", ("N", 30), ("Mean", 64.6, 1.2))
        assert col["N"].format_value() == "30"
        assert col["Mean"].se == 1.2

    def test_iterable_of_pairs(self) -> None:
        col = TableCol("Column", [("a", 1), ("b", 2)])
        assert col.row_index.labels(0) == ["a", "b"]

    def test_unordered_input_rejected(self) -> None:
        with pytest.raises(TypeError, match="Unordered"):
            TableCol("Column", {("a", 1), ("b", 2)})
        with pytest.raises(TypeError):
            TableCol("Column", {"a", "b"}, [1, 2])

    def test_bad_item(self) -> None:
        with pytest.raises(ValueError):
            TableCol("Column", ("a", 1, 2, 3))

    def test_parallel_equals_repeated_insertion(self) -> None:
        keys, values, ses = ["x", "y", "z"], [1.0, -2.0, 3.5], [0.1, 0.2, 0.3]
        built = TableCol("Column", keys, values, ses)

        manual = TableCol("Column")
        for key, value, se in zip(keys, values, ses):
            manual.set(key, value, se=se)

        assert built == manual


class TestTableColAccess:
    """Assignment, lookup and in-place cell updates."""

    def test_overwrite_keeps_position(self) -> None:
        col = TableCol("Column", ["a", "b"], [1.0, 2.0])
        col["a"] = 5.0
        assert col.row_index.labels(0) == ["a", "b"]
        assert col["a"].value == 5.0

    def test_assign_value_and_se(self) -> None:
        col = TableCol("Column")
        col["a"] = (1.0, 0.25)
        assert col["a"].se == 0.25

    def test_missing_key(self) -> None:
        col = TableCol("Column", ["a"], [1.0])
        with pytest.raises(TableKeyError):
            col["z"]
        with pytest.raises(KeyError):
            col["z"]
        assert "a" in col
        assert "z" not in col

    def test_star_and_reformat(self) -> None:
        col = TableCol("Column", ["a"], [1.32], [0.89])
        col.star("a", 2)
        assert col["a"].format_value() == "1.320**"

        col.reformat("a", "{:.1f}")
        assert col["a"].format_value() == "1.3**"
        assert col["a"].format_se() == "(0.9)"

    def test_reformat_validates(self) -> None:
        col = TableCol("Column", ["a"], ["text"])
        with pytest.raises(FormatError):
            col.reformat("a", "{:.2f}")

    def test_set_with_format(self) -> None:
        col = TableCol("Column")
        col.set("a", 1.23456, fmt="{:.1f}")
        assert col["a"].format_value() == "1.2"
        with pytest.raises(FormatError):
            col.set("b", 1.5, fmt="{:d}")

    def test_header(self) -> None:
        col = TableCol("Column")
        assert col.header[0].label == "Column"
        assert col.col_index.labels(0) == ["Column"]

    def test_repr(self) -> None:
        col = TableCol("Column", ["a", "b"], [1.0, 2.0])
        assert repr(col) == "TableCol{1,1} of size (2, 1)"


class TestIndexedTable:
    """Two-axis tables."""

    def test_set_cell_and_lookup(self) -> None:
        table = IndexedTable()
        table.set_cell(("g", "a"), "x", 1.0)
        table.set_cell(("g", "b"), "y", 2.0, se=0.5, stars=1)
        assert table.shape == (2, 2)
        assert table.row_rank == 2
        assert table[("g", "b"), "y"].format_value() == "2.000*"
        assert table[("g", "a"), "x"] == CellValue.create(1.0)

    def test_missing_cell_is_blank(self) -> None:
        table = IndexedTable()
        table.set_cell("a", "x", 1.0)
        table.set_cell("b", "y", 2.0)
        assert table.get("a", "y") is None
        assert ("a", "y") not in table
        with pytest.raises(TableKeyError):
            table["a", "y"]

    def test_rank_is_fixed_by_first_insertion(self) -> None:
        table = IndexedTable()
        table.set_cell("a", "x", 1.0)
        with pytest.raises(RankMismatchError):
            table.set_cell(("g", "b"), "x", 2.0)

    def test_positioned_keys_match_exactly(self) -> None:
        table = IndexedTable()
        table.set_cell((Level(2, "a"),), "x", 1.0)
        table.set_cell("a", "x", 2.0)
        assert table.shape == (1, 1)

        table.set_cell((Level(1, "a"),), "x", 3.0)
        assert table.shape == (2, 1)
        assert list(table.row_index) == [(Level(1, "a"),), (Level(2, "a"),)]
        assert table[(Level(1, "a"),), "x"].value == 3.0
        assert table[(Level(2, "a"),), "x"].value == 2.0

    def test_index_entries_without_cells(self) -> None:
        table = IndexedTable()
        table.add_column("x")
        table.add_row("empty")
        assert table.shape == (1, 1)
        assert not table.cells

    def test_constructor_checks_cells(self) -> None:
        with pytest.raises(TableKeyError):
            IndexedTable(["a"], ["x"], {("b", "x"): 1.0})

    def test_cells_view_is_read_only(self) -> None:
        table = IndexedTable(["a"], ["x"], {("a", "x"): 1.0})
        with pytest.raises(TypeError):
            table.cells[("a", "x")] = 2.0  # type: ignore[index]

    def test_copy_is_independent(self) -> None:
        col = TableCol("Column", ["a"], [1.0])
        copied = col.copy()
        copied["b"] = 2.0

        assert isinstance(copied, TableCol)
        assert col.shape == (1, 1)
        assert copied.shape == (2, 1)
        assert copied["a"] == col["a"]

    def test_equality_depends_on_order(self) -> None:
        assert TableCol("c", ["a", "b"], [1, 2]) == TableCol("c", ["a", "b"], [1, 2])
        assert TableCol("c", ["a", "b"], [1, 2]) != TableCol("c", ["b", "a"], [2, 1])
        assert TableCol("c", ["a"], [1]) != TableCol("c", ["a"], [2])
        assert TableCol("c", ["a"], [1]) != TableCol("d", ["a"], [1])
