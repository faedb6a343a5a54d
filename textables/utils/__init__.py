"""Utility helpers for textables."""

from .errors import (
    TexTablesError,
    RankMismatchError,
    FormatError,
    TableKeyError,
    ConfigError,
)

__all__ = [
    "TexTablesError",
    "RankMismatchError",
    "FormatError",
    "TableKeyError",
    "ConfigError",
]
