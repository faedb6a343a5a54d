"""Shared constants for table construction and rendering."""

# Labels starting with this prefix (or empty labels) are never printed
HIDDEN_PREFIX = "__"

# Row blocks of a regression column, in display order
COEF_BLOCK = "__coef"
META_BLOCK = "__meta"
STATS_BLOCK = "__stats"
REGRESSION_BLOCKS = {COEF_BLOCK: 1, META_BLOCK: 2, STATS_BLOCK: 3}

# Tightest threshold first: (p-value upper bound, number of stars)
STAR_THRESHOLDS = ((0.01, 3), (0.05, 2), (0.10, 1))
MAX_STARS = 3

DEFAULT_REAL_FORMAT = "{:.3f}"
DEFAULT_SCIENTIFIC_FORMAT = "{:.3e}"
DEFAULT_INTEGER_FORMAT = "{:d}"
DEFAULT_BOOL_FORMAT = "{}"
DEFAULT_TEXT_FORMAT = "{}"
SCIENTIFIC_LOWER = 1e-3
SCIENTIFIC_UPPER = 1e5
