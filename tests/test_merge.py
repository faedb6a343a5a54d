"""Tests for key-based concatenation and grouping."""

import pytest

from textables import (
    IndexedTable,
    Level,
    RankMismatchError,
    TableCol,
    TableKeyError,
    append_table,
    hcat,
    join_table,
    vcat,
)


def snapshot(table: IndexedTable) -> IndexedTable:
    return table.copy()


class TestHcat:
    """Horizontal concatenation."""

    def test_rows_are_ordered_union(self) -> None:
        left = TableCol("A", ["a", "b"], [1.0, 2.0])
        right = TableCol("B", ["c", "b"], [3.0, 4.0])
        table = hcat(left, right)

        assert table.shape == (3, 2)
        assert table.row_index.labels(0) == ["a", "b", "c"]
        assert table.col_index.labels(0) == ["A", "B"]
        assert table["b", "B"].value == 4.0
        assert table.get("c", "A") is None
        assert table.get("a", "B") is None

    def test_duplicate_headers_stay_distinct(self) -> None:
        table = hcat(TableCol("X", ["a"], [1.0]), TableCol("X", ["a"], [2.0]))
        assert table.shape == (1, 2)
        assert table.col_index.labels(0) == ["X", "X"]
        values = [table.cells[(table.row_index[0], c)].value for c in table.col_index]
        assert values == [1.0, 2.0]
        # the second "X" was moved to the next outer position
        assert table["a", Level(2, "X")].value == 2.0

    def test_ambiguous_labels(self) -> None:
        table = hcat(
            TableCol("X", ["a"], [1.0]),
            TableCol("X", ["a"], [2.0]),
            TableCol("X", ["a"], [3.0]),
        )
        with pytest.raises(TableKeyError, match="ambiguous"):
            table["a", Level(5, "X")]
        assert table["a", "X"].value == 1.0

    def test_inputs_not_modified(self) -> None:
        left = TableCol("A", ["a"], [1.0])
        right = TableCol("B", ["b"], [2.0])
        before = (snapshot(left), snapshot(right))
        hcat(left, right)
        assert (left, right) == before

    def test_row_rank_mismatch(self) -> None:
        nested = TableCol("A", [("g", "a")], [1.0])
        flat = TableCol("B", ["a"], [1.0])
        with pytest.raises(RankMismatchError):
            hcat(nested, flat)

    def test_bad_arguments(self) -> None:
        with pytest.raises(ValueError):
            hcat()
        with pytest.raises(TypeError):
            hcat(TableCol("A", ["a"], [1.0]), "not a table")  # type: ignore[arg-type]

    def test_single_table(self) -> None:
        col = TableCol("A", ["a"], [1.0])
        assert hcat(col) == col


class TestVcat:
    """Vertical concatenation, including the blank-fill behaviour."""

    def test_different_headers_do_not_stack(self) -> None:
        top = TableCol("A", ["a"], [1.0])
        bottom = TableCol("B", ["b"], [2.0])
        table = vcat(top, bottom)

        assert table.col_index.labels(0) == ["A", "B"]
        assert table.row_index.labels(0) == ["a", "b"]
        assert table["a", "A"].value == 1.0
        assert table["b", "B"].value == 2.0
        assert table.get("a", "B") is None
        assert table.get("b", "A") is None

    def test_same_header_stacks(self) -> None:
        table = vcat(TableCol("A", ["a"], [1.0]), TableCol("A", ["b"], [2.0]))
        assert table.shape == (2, 1)

    def test_duplicate_rows_stay_distinct(self) -> None:
        col = TableCol("A", ["a", "b"], [1.0, 2.0])
        table = vcat(col, col)
        assert table.shape == (4, 1)
        assert table.row_index.labels(0) == ["a", "b", "a", "b"]

    def test_column_rank_mismatch(self) -> None:
        grouped = join_table(("G", TableCol("A", ["a"], [1.0])))
        with pytest.raises(RankMismatchError):
            vcat(grouped, TableCol("A", ["b"], [2.0]))


class TestGrouping:
    """join_table and append_table."""

    def test_join_table_levels(self) -> None:
        t1 = hcat(TableCol("x", ["a"], [1.0]), TableCol("y", ["a"], [2.0]))
        t2 = TableCol("z", ["a"], [3.0])
        table = join_table(("G1", t1), ("G2", t2))

        assert table.col_rank == 2
        assert table.col_index.labels(0) == ["G1", "G1", "G2"]
        assert table.col_index.labels(1) == ["x", "y", "z"]
        assert table["a", ("G2", "z")].value == 3.0

    def test_join_table_dict_form(self) -> None:
        t1 = TableCol("x", ["a"], [1.0])
        t2 = TableCol("y", ["a"], [2.0])
        assert join_table({"G1": t1, "G2": t2}) == join_table(("G1", t1), ("G2", t2))

    def test_join_table_same_leaf_headers(self) -> None:
        t = TableCol("(1)", ["a"], [1.0])
        table = join_table(("G1", t), ("G2", t))
        assert table.col_index.labels(1) == ["(1)", "(1)"]
        assert table["a", ("G1", "(1)")] == table["a", ("G2", "(1)")]

    def test_unnamed_groups_are_hidden(self) -> None:
        table = join_table(TableCol("x", ["a"], [1.0]), TableCol("y", ["a"], [2.0]))
        assert table.col_rank == 2
        assert table.col_index.labels(0) == ["", ""]
        assert all(key[0].hidden for key in table.col_index)
        # still two separate groups
        assert table.col_index.spans(0) == [(0, 1), (1, 2)]

    def test_append_table(self) -> None:
        col = TableCol("Obs", ["x", "y"], [50, 50])
        table = append_table(("setosa", col), ("virginica", col))

        assert table.row_rank == 2
        assert table.row_index.labels(0) == ["setosa", "setosa", "virginica", "virginica"]
        assert table.row_index.labels(1) == ["x", "y", "x", "y"]
        assert table[("virginica", "y"), "Obs"].value == 50

    def test_group_arguments_validated(self) -> None:
        with pytest.raises(TypeError):
            join_table("G1")
        with pytest.raises(TypeError):
            append_table(("G1", "not a table"))

    def test_grouped_tables_merge_further(self) -> None:
        col = TableCol("x", ["a"], [1.0])
        grouped = join_table(("G1", col), ("G2", col))
        wider = hcat(grouped, join_table(("G3", col)))
        assert wider.col_index.labels(0) == ["G1", "G2", "G3"]
