"""LaTeX ``tabular`` rendering of indexed tables."""

import logging
from typing import Any, List, Optional

from ..config.render import RenderConfig, resolve_render_config
from ..core.table import IndexedTable
from .layout import Layout, Span, build_layout, fit_spans, span_width

logger = logging.getLogger(__name__)

LINE_END = " \\\\"
HLINE = " \\hline"


def multicolumn(label: str, n: int) -> str:
    return f"\\multicolumn{{{n}}}{{c}}{{{label}}}"


def multirow(label: str, n: int) -> str:
    return f"\\multirow{{{n}}}{{*}}{{{label}}}"


def column_spec(layout: Layout) -> str:
    """One ``r`` per row-label column, then a ``c`` per column with a bar
    before every column group."""
    spec = "r" * len(layout.row_levels) + "|"
    for j in range(len(layout.cols)):
        if j in layout.boundaries:
            spec += "|"
        spec += "c"
    return spec


def _group_headings(layout: Layout, level: int) -> List[Span]:
    return [
        (multicolumn(label, stop - start) if stop - start > 1 else label, start, stop)
        for label, start, stop in layout.header_spans(level)
    ]


def _row_label(layout: Layout, i: int, level: int) -> str:
    label = layout.row_label(i, level)
    if not label or level == layout.row_levels[-1]:
        return label
    lines = layout.row_span_lines(i, level)
    return multirow(label, lines) if lines > 1 else label


def to_latex(
    table: IndexedTable, config: Optional[RenderConfig] = None, **options: Any
) -> str:
    """
    Render ``table`` as a LaTeX ``tabular`` environment.

    Column groups become ``\\multicolumn`` headings separated by vertical
    bars; row groups spanning several lines become ``\\multirow`` labels.
    Row blocks are separated by ``\\hline``. Labels are not escaped, so math
    such as ``$R^2$`` passes through. The output needs the booktabs and
    multirow packages.

    Args:
        table: Table to render; it is not modified
        config: Base render options
        **options: Overrides for ``pad``, ``se_pos`` and ``star``

    Returns:
        The tabular environment, without a trailing newline
    """
    config = resolve_render_config(config, **options)
    layout = build_layout(table, config)
    if layout.empty:
        logger.debug("Nothing to render: table has no rows or no columns")
        return ""

    sep = " " * config.pad + "&" + " " * config.pad
    headings = {level: _group_headings(layout, level) for level in layout.col_levels}

    widths = layout.cell_widths()
    for label, j, _ in headings[layout.col_levels[-1]]:
        widths[j] = max(widths[j], len(label))
    groups = [span for level in reversed(layout.col_levels[:-1]) for span in headings[level]]
    widths = fit_spans(widths, groups, len(sep))

    gutter = layout.gutter_widths(lambda i, level: _row_label(layout, i, level))
    blank_gutter = [" " * w for w in gutter]

    lines = [f"\\begin{{tabular}}{{{column_spec(layout)}}}", "\\toprule"]
    for level in layout.col_levels:
        cells = [
            text.ljust(span_width(widths, start, stop, len(sep)))
            for text, start, stop in headings[level]
        ]
        end = LINE_END + HLINE if level == layout.col_levels[-1] else LINE_END
        lines.append(sep.join(blank_gutter + cells) + end)

    for i, values in enumerate(layout.values):
        row = [
            _row_label(layout, i, level).rjust(w)
            for level, w in zip(layout.row_levels, gutter)
        ]
        row_lines = [sep.join(row + [v.rjust(w) for v, w in zip(values, widths)]) + LINE_END]
        errors = layout.errors[i]
        if errors is not None:
            row_lines.append(
                sep.join(blank_gutter + [e.rjust(w) for e, w in zip(errors, widths)]) + LINE_END
            )
        if i in layout.block_ends:
            row_lines[-1] += HLINE
        lines.extend(row_lines)

    lines += ["\\bottomrule", "\\end{tabular}"]
    return "\n".join(lines)


to_tex = to_latex
