"""Tests for summary-statistics tables."""

import pandas as pd
import pytest

from textables import summarize, summarize_by, tabulate
from textables.config import CellKind


class TestSummarize:
    """One row per variable."""

    def test_default_statistics(self, species_frame: pd.DataFrame) -> None:
        table = summarize(species_frame, ["length", "width"])
        assert table.col_index.labels(0) == ["Obs", "Mean", "Std. Dev.", "Min", "Max"]
        assert table.row_index.labels(0) == ["length", "width"]

        assert table["length", "Obs"].value == 12
        assert table["length", "Obs"].kind is CellKind.INTEGER
        assert table["length", "Mean"].value == pytest.approx(species_frame["length"].mean())
        assert table["width", "Std. Dev."].value == pytest.approx(
            species_frame["width"].std(ddof=1)
        )
        assert table["width", "Max"].value == species_frame["width"].max()

    def test_single_column_name(self, species_frame: pd.DataFrame) -> None:
        assert summarize(species_frame, "length").shape == (1, 5)

    def test_detail(self, species_frame: pd.DataFrame) -> None:
        table = summarize(species_frame, "length", detail=True)
        assert table.col_index.labels(0) == [
            "Obs",
            "Mean",
            "Std. Dev.",
            "Min",
            "p10",
            "p25",
            "p50",
            "p75",
            "p90",
            "Max",
        ]
        assert table["length", "p50"].value == pytest.approx(species_frame["length"].median())

    def test_custom_statistics(self, species_frame: pd.DataFrame) -> None:
        table = summarize(species_frame, ["length"], stats=[("p50", lambda s: s.median())])
        assert table.col_index.labels(0) == ["p50"]

    def test_non_numeric_rows_are_blank(self, species_frame: pd.DataFrame) -> None:
        table = summarize(species_frame, ["length", "name"])
        assert table.shape == (2, 5)
        assert table.get("name", "Obs") is None
        last = table.to_ascii().split("\n")[-1]
        assert last.split("|")[0].strip() == "name"
        assert set(last.split("|", 1)[1]) <= {" ", "|"}

    def test_missing_values_dropped(self) -> None:
        df = pd.DataFrame({"x": [1.0, None, 3.0]})
        table = summarize(df)
        assert table["x", "Obs"].value == 2
        assert table["x", "Mean"].value == 2.0

    def test_boolean_columns(self) -> None:
        table = summarize(pd.DataFrame({"flag": [True, False, True, True]}))
        assert table["flag", "Mean"].value == 0.75

    def test_unknown_column(self, species_frame: pd.DataFrame) -> None:
        with pytest.raises(KeyError):
            summarize(species_frame, ["nope"])


@pytest.mark.integration
class TestSummarizeBy:
    """Grouped summaries."""

    def test_groups_are_sorted_row_blocks(self, species_frame: pd.DataFrame) -> None:
        table = summarize_by(species_frame, "species", ["length", "width"])
        assert table.row_rank == 2
        assert table.row_index.labels(0) == [
            "setosa",
            "setosa",
            "versicolor",
            "versicolor",
            "virginica",
            "virginica",
        ]
        setosa = species_frame[species_frame["species"] == "setosa"]
        assert table[("setosa", "length"), "Obs"].value == len(setosa)
        assert table[("setosa", "width"), "Mean"].value == pytest.approx(setosa["width"].mean())

    def test_rules_between_groups(self, species_frame: pd.DataFrame) -> None:
        lines = summarize_by(species_frame, "species", ["length"]).to_ascii().split("\n")
        rules = [line for line in lines if set(line) == {"-"}]
        assert len(rules) == 3
        assert lines[2].lstrip().startswith("setosa")

    def test_unknown_group_column(self, species_frame: pd.DataFrame) -> None:
        with pytest.raises(KeyError):
            summarize_by(species_frame, "genus")


class TestTabulate:
    """Frequency tables."""

    def test_frequencies(self, species_frame: pd.DataFrame) -> None:
        table = tabulate(species_frame, "species")
        assert table.col_index.labels(0) == ["Freq.", "Percent", "Cum."]
        assert table.row_index.labels(1) == ["setosa", "versicolor", "virginica", "Total"]

        assert table[("", "setosa"), "Freq."].value == 4
        assert table[("", "setosa"), "Percent"].format_value() == "33.333"
        assert table[("", "virginica"), "Cum."].value == pytest.approx(100.0)
        assert table[("", "Total"), "Freq."].value == 12
        assert table.get(("", "Total"), "Cum.") is None

    def test_total_in_its_own_block(self, species_frame: pd.DataFrame) -> None:
        lines = tabulate(species_frame, "species").to_ascii().split("\n")
        assert set(lines[-2]) == {"-"}
        assert lines[-1].strip().startswith("Total")
        assert lines[-1].rstrip().endswith("100.000 |")

    def test_unknown_column(self, species_frame: pd.DataFrame) -> None:
        with pytest.raises(KeyError):
            tabulate(species_frame, "genus")
