"""
Exception hierarchy for textables.
"""


class TexTablesError(Exception):
    """Base exception for textables errors."""

    pass


class RankMismatchError(TexTablesError, ValueError):
    """Raised when index entries or merged tables disagree on depth."""

    pass


class FormatError(TexTablesError, ValueError):
    """Raised when a format specifier cannot format the value it is attached to."""

    pass


class TableKeyError(TexTablesError, KeyError):
    """Raised when a row or column key is not present in a table."""

    pass


class ConfigError(TexTablesError):
    """Configuration-related errors."""

    pass
