"""
Structure shared by the ASCII and LaTeX renderers.

Everything that decides *where* things go lives here: which index levels are
printed, how columns group under their headings, where row blocks break, and
the text of every body cell. The renderers only decide how it looks, so the
two backends cannot disagree about a group boundary.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from ..config.render import RenderConfig
from ..core.index import MultiIndex
from ..core.table import IndexedTable

# (label, start, stop) for one heading over columns [start, stop)
Span = Tuple[str, int, int]


def visible_levels(index: MultiIndex) -> List[int]:
    """Levels with at least one printable label. The leaf level is always kept."""
    depth = index.depth or 0
    if depth == 0:
        return []
    levels = [
        level
        for level in range(depth - 1)
        if any(not key[level].hidden for key in index)
    ]
    return levels + [depth - 1]


def level_spans(index: MultiIndex, level: int) -> List[Span]:
    """Runs of entries sharing levels ``0..level``, with their printable label."""
    spans = []
    for start, stop in index.spans(level):
        label = index[start][level]
        spans.append(("" if label.hidden else label.label, start, stop))
    return spans


def group_boundaries(index: MultiIndex) -> List[int]:
    """Positions ``j > 0`` where a new column group starts before entry ``j``."""
    depth = index.depth or 0
    if depth < 2:
        return []
    return [start for start, _ in index.spans(depth - 2) if start > 0]


def block_ends(index: MultiIndex) -> List[int]:
    """Rows after which the next row belongs to a different row block."""
    depth = index.depth or 0
    if depth < 2:
        return []
    return [stop - 1 for _, stop in index.spans(depth - 2)][:-1]


def span_width(widths: Sequence[int], start: int, stop: int, sep_width: int) -> int:
    return sum(widths[start:stop]) + (stop - start - 1) * sep_width


def fit_spans(
    widths: Sequence[int], spans: Sequence[Tuple[str, int, int]], sep_width: int
) -> List[int]:
    """Widen columns so every span's text fits over its columns.

    Extra space is shared evenly across the span, the remainder going to the
    rightmost columns.
    """
    fitted = list(widths)
    for text, start, stop in spans:
        missing = len(text) - span_width(fitted, start, stop, sep_width)
        if missing <= 0:
            continue
        n = stop - start
        share, rest = divmod(missing, n)
        for offset, j in enumerate(range(start, stop)):
            fitted[j] += share + (1 if offset >= n - rest else 0)
    return fitted


def center(text: str, width: int) -> str:
    extra = max(width - len(text), 0)
    left = extra // 2
    return " " * left + text + " " * (extra - left)


@dataclass
class Layout:
    """Resolved structure of a table for one render configuration."""

    rows: MultiIndex
    cols: MultiIndex
    row_levels: List[int]
    col_levels: List[int]
    values: List[List[str]]
    errors: List[Optional[List[str]]]
    block_ends: List[int]
    boundaries: List[int]

    @property
    def empty(self) -> bool:
        return not len(self.rows) or not len(self.cols)

    def lines_in_row(self, i: int) -> int:
        return 1 if self.errors[i] is None else 2

    def cell_widths(self) -> List[int]:
        """Widest body text per column (leaf headings not included)."""
        widths = [0] * len(self.cols)
        for i, values in enumerate(self.values):
            texts = [values] if self.errors[i] is None else [values, self.errors[i]]
            for line in texts:
                for j, text in enumerate(line):
                    widths[j] = max(widths[j], len(text))
        return widths

    def header_spans(self, level: int) -> List[Span]:
        return level_spans(self.cols, level)

    def row_label(self, i: int, level: int) -> str:
        """Label of row ``i`` at ``level``, empty unless it starts its span."""
        key = self.rows[i]
        leaf = level == len(key) - 1
        if not leaf and i > 0 and self.rows[i - 1][: level + 1] == key[: level + 1]:
            return ""
        return "" if key[level].hidden else key[level].label

    def row_span_lines(self, i: int, level: int) -> int:
        """Physical lines covered by the span of rows starting at ``i`` at ``level``."""
        prefix = self.rows[i][: level + 1]
        lines = 0
        for k in range(i, len(self.rows)):
            if self.rows[k][: level + 1] != prefix:
                break
            lines += self.lines_in_row(k)
        return lines

    def gutter_widths(self, label_text: Callable[[int, int], str]) -> List[int]:
        widths = []
        for level in self.row_levels:
            texts = [label_text(i, level) for i in range(len(self.rows))]
            widths.append(max((len(t) for t in texts), default=0))
        return widths


def build_layout(table: IndexedTable, config: RenderConfig) -> Layout:
    """Resolve levels, groups, blocks and cell text for ``table``."""
    rows, cols = table.row_index, table.col_index
    cells = table.cells

    values: List[List[str]] = []
    errors: List[Optional[List[str]]] = []
    for r in rows:
        main_line, se_line = [], []
        for c in cols:
            cell = cells.get((r, c))
            main, se = cell.render(config.star, config.se_pos) if cell else ("", "")
            main_line.append(main)
            se_line.append(se)
        values.append(main_line)
        errors.append(se_line if any(se_line) else None)

    return Layout(
        rows=rows,
        cols=cols,
        row_levels=visible_levels(rows),
        col_levels=visible_levels(cols),
        values=values,
        errors=errors,
        block_ends=block_ends(rows),
        boundaries=group_boundaries(cols),
    )
