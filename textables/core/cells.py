"""Formatted scalar values stored in table cells."""

import numbers
from dataclasses import dataclass, replace
from typing import Any, Optional, Tuple, Union

import numpy as np

from ..config.formats import DEFAULT_FORMATS, CellKind, FormatConfig, apply_format
from ..constants import MAX_STARS

Scalar = Union[float, int, bool, str]


def classify(value: Any) -> Tuple[Scalar, CellKind]:
    """Normalize a scalar (including numpy scalars) and report its kind."""
    if value is None:
        raise ValueError("Cell values cannot be None; leave the cell unset instead")
    if isinstance(value, (bool, np.bool_)):
        return bool(value), CellKind.BOOLEAN
    if isinstance(value, numbers.Integral):
        return int(value), CellKind.INTEGER
    if isinstance(value, numbers.Real):
        return float(value), CellKind.REAL
    if isinstance(value, str):
        return value, CellKind.TEXT
    raise TypeError(f"Unsupported cell value type: {type(value).__name__}")


@dataclass(frozen=True)
class CellValue:
    """
    An immutable formatted scalar.

    Holds the value, an optional standard error, a significance star count and
    the format string used to display it. Stars are never derived from the
    value; whoever builds the cell decides them.
    """

    value: Scalar
    kind: CellKind
    fmt: str
    se: Optional[float] = None
    se_fmt: Optional[str] = None
    stars: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.stars <= MAX_STARS:
            raise ValueError(f"Star count must be in [0, {MAX_STARS}], got {self.stars}")
        if self.se is not None and self.se_fmt is None:
            object.__setattr__(self, "se_fmt", self.fmt)
        # Bad specifiers fail here, not when the table is rendered
        apply_format(self.fmt, self.value)
        if self.se is not None:
            apply_format(self.se_fmt, self.se)

    @classmethod
    def create(
        cls,
        value: Any,
        se: Optional[float] = None,
        stars: int = 0,
        fmt: Optional[str] = None,
        formats: FormatConfig = DEFAULT_FORMATS,
    ) -> "CellValue":
        """Build a cell, resolving the default format for the value's kind."""
        value, kind = classify(value)
        if fmt is None:
            fmt = formats.format_for(kind, value)

        se_value = se_fmt = None
        if se is not None:
            se_value = float(se)
            if kind is CellKind.REAL:
                se_fmt = fmt
            else:
                se_fmt = formats.format_for(CellKind.REAL, se_value)

        return cls(
            value=value,
            kind=kind,
            fmt=fmt,
            se=se_value,
            se_fmt=se_fmt,
            stars=int(stars),
        )

    def with_stars(self, stars: int) -> "CellValue":
        """Return a copy carrying ``stars`` significance stars."""
        return replace(self, stars=int(stars))

    def with_format(self, fmt: str) -> "CellValue":
        """Return a copy displayed with ``fmt``."""
        se_fmt = fmt if self.kind is CellKind.REAL else self.se_fmt
        return replace(self, fmt=fmt, se_fmt=se_fmt)

    def format_value(self, star: bool = True) -> str:
        text = apply_format(self.fmt, self.value)
        if star and self.stars:
            text += "*" * self.stars
        return text

    def format_se(self) -> str:
        if self.se is None:
            return ""
        return f"({apply_format(self.se_fmt, self.se)})"

    def render(self, star: bool = True, se_pos: str = "below") -> Tuple[str, str]:
        """Render as (main line, standard-error line).

        With ``se_pos="inline"`` the standard error follows the value on the
        main line; with ``"none"`` it is dropped. The second element is empty
        unless the standard error goes on its own line.
        """
        main = self.format_value(star=star)
        if self.se is None or se_pos == "none":
            return main, ""
        if se_pos == "inline":
            return f"{main} {self.format_se()}", ""
        return main, self.format_se()

    def __str__(self) -> str:
        return self.format_value()


def as_cell(obj: Any, formats: FormatConfig = DEFAULT_FORMATS) -> CellValue:
    """Coerce a scalar, ``(value, se)`` or ``(value, se, stars)`` to a CellValue."""
    if isinstance(obj, CellValue):
        return obj
    if isinstance(obj, tuple):
        if len(obj) == 2:
            return CellValue.create(obj[0], se=obj[1], formats=formats)
        if len(obj) == 3:
            return CellValue.create(obj[0], se=obj[1], stars=obj[2], formats=formats)
        raise ValueError(
            f"Cell tuples must be (value, se) or (value, se, stars), got {len(obj)} items"
        )
    return CellValue.create(obj, formats=formats)
