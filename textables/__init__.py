"""TexTables: hierarchical ASCII and LaTeX tables.

Build small tables (columns of values, regression columns, summary
statistics), combine them by key, and render the result as aligned text or a
LaTeX tabular:
- Cells keep their value, standard error, stars and display format
- Rows and columns are keyed by multi-level indices
- Merges align on keys, never on positions
- ASCII and LaTeX output share one layout

Example:
    from textables import ModelSummary, join_table, regtable

    m1 = ModelSummary(names=["x"], estimates=[0.69], standard_errors=[0.18],
                      dof=28, n_obs=30, r_squared=0.35)

    # One numbered column per model, grouped under headings
    table = regtable(("Group 1", [m1, m2]), ("Group 2", [m3]))

    print(table.to_ascii())
    print(table.to_latex(se_pos="inline"))
"""

__version__ = "0.1.0"

# Configuration
from .config import (
    DEFAULT_FORMATS,
    CellKind,
    FormatConfig,
    RenderConfig,
    TableSettings,
)

# Core data model and merges
from .core import (
    CellValue,
    IndexedTable,
    Level,
    MultiIndex,
    TableCol,
    append_table,
    hcat,
    join_table,
    vcat,
)

# Regression columns
from .regression import (
    ModelSummary,
    RegCol,
    RegressionModel,
    assign_stars,
    reg_col,
    regtable,
    two_tailed_pvalue,
)

# Rendering
from .render import to_ascii, to_latex, to_tex

# Summary statistics
from .summary import summarize, summarize_by, tabulate

# Errors
from .utils.errors import (
    ConfigError,
    FormatError,
    RankMismatchError,
    TableKeyError,
    TexTablesError,
)

__all__ = [
    "__version__",
    # Configuration
    "DEFAULT_FORMATS",
    "CellKind",
    "FormatConfig",
    "RenderConfig",
    "TableSettings",
    # Core
    "CellValue",
    "IndexedTable",
    "Level",
    "MultiIndex",
    "TableCol",
    "append_table",
    "hcat",
    "join_table",
    "vcat",
    # Regression
    "ModelSummary",
    "RegCol",
    "RegressionModel",
    "assign_stars",
    "reg_col",
    "regtable",
    "two_tailed_pvalue",
    # Rendering
    "to_ascii",
    "to_latex",
    "to_tex",
    # Summary
    "summarize",
    "summarize_by",
    "tabulate",
    # Errors
    "ConfigError",
    "FormatError",
    "RankMismatchError",
    "TableKeyError",
    "TexTablesError",
]
