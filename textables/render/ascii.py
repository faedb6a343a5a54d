"""Plain-text rendering of indexed tables."""

import logging
from typing import Any, List, Optional

from ..config.render import RenderConfig, resolve_render_config
from ..core.table import IndexedTable
from .layout import Layout, build_layout, center, fit_spans, span_width

logger = logging.getLogger(__name__)


def _column_widths(layout: Layout, sep_width: int) -> List[int]:
    widths = layout.cell_widths()
    for label, j, _ in layout.header_spans(layout.col_levels[-1]):
        widths[j] = max(widths[j], len(label))
    groups = [
        span
        for level in reversed(layout.col_levels[:-1])
        for span in layout.header_spans(level)
    ]
    return fit_spans(widths, groups, sep_width)


def to_ascii(
    table: IndexedTable, config: Optional[RenderConfig] = None, **options: Any
) -> str:
    """
    Render ``table`` as aligned text.

    Column headings are centered over their columns, one line per printed
    column level, followed by a rule. Row labels and values are right-aligned.
    A rule also separates row blocks (e.g. coefficients from fit statistics).

    Args:
        table: Table to render; it is not modified
        config: Base render options
        **options: Overrides for ``pad``, ``se_pos`` and ``star``

    Returns:
        The table text, without a trailing newline
    """
    config = resolve_render_config(config, **options)
    layout = build_layout(table, config)
    if layout.empty:
        logger.debug("Nothing to render: table has no rows or no columns")
        return ""

    sep = " " * config.pad + "|" + " " * config.pad
    widths = _column_widths(layout, len(sep))
    gutter = layout.gutter_widths(layout.row_label)
    blank_gutter = [" " * w for w in gutter]

    content = sum(gutter) + len(sep) * (len(gutter) - 1)
    content += sum(w + len(sep) for w in widths)
    rule = "-" * (content + config.pad)

    lines = []
    for level in layout.col_levels:
        headings = [
            center(label, span_width(widths, start, stop, len(sep)))
            for label, start, stop in layout.header_spans(level)
        ]
        lines.append(sep.join(blank_gutter + headings))
    lines.append(rule)

    for i, values in enumerate(layout.values):
        labels = [
            layout.row_label(i, level).rjust(w) for level, w in zip(layout.row_levels, gutter)
        ]
        lines.append(sep.join(labels + [v.rjust(w) for v, w in zip(values, widths)]))
        errors = layout.errors[i]
        if errors is not None:
            lines.append(sep.join(blank_gutter + [e.rjust(w) for e, w in zip(errors, widths)]))
        if i in layout.block_ends:
            lines.append(rule)

    return "\n".join(line.rstrip() for line in lines)
