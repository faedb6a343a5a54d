"""
Default display formats for table cells.

Formats are Python ``str.format`` specifiers ("{:.3f}", "{:,d}", ...). A
``FormatConfig`` is immutable: overriding a format returns a new config, so the
process-wide ``DEFAULT_FORMATS`` never changes underneath a renderer.
"""

import math
from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants import (
    DEFAULT_BOOL_FORMAT,
    DEFAULT_INTEGER_FORMAT,
    DEFAULT_REAL_FORMAT,
    DEFAULT_SCIENTIFIC_FORMAT,
    DEFAULT_TEXT_FORMAT,
    SCIENTIFIC_LOWER,
    SCIENTIFIC_UPPER,
)
from ..utils.errors import FormatError


class CellKind(Enum):
    """Scalar kinds a cell can hold, each with its own default format."""

    REAL = "real"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    TEXT = "text"


def apply_format(fmt: str, value: Any) -> str:
    """Format ``value`` with ``fmt``, raising FormatError on a bad specifier."""
    try:
        return fmt.format(value)
    except (ValueError, TypeError, IndexError, KeyError) as e:
        raise FormatError(f"Cannot format {value!r} with {fmt!r}: {e}") from e


class FormatConfig(BaseModel):
    """Default format per cell kind, plus the scientific-notation fallback range."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    real: str = Field(DEFAULT_REAL_FORMAT, description="Format for real numbers")
    real_scientific: str = Field(
        DEFAULT_SCIENTIFIC_FORMAT,
        description="Format for reals outside [sci_lower, sci_upper)",
    )
    integer: str = Field(DEFAULT_INTEGER_FORMAT, description="Format for integers")
    boolean: str = Field(DEFAULT_BOOL_FORMAT, description="Format for booleans")
    text: str = Field(DEFAULT_TEXT_FORMAT, description="Format for strings")
    sci_lower: float = Field(
        SCIENTIFIC_LOWER, ge=0, description="Nonzero magnitudes below this use scientific"
    )
    sci_upper: float = Field(
        SCIENTIFIC_UPPER, gt=0, description="Magnitudes at or above this use scientific"
    )

    @field_validator("real", "real_scientific")
    def validate_real_format(cls, v: str) -> str:
        apply_format(v, 1.5)
        return v

    @field_validator("integer")
    def validate_integer_format(cls, v: str) -> str:
        apply_format(v, 1)
        return v

    @field_validator("boolean")
    def validate_boolean_format(cls, v: str) -> str:
        apply_format(v, True)
        return v

    @field_validator("text")
    def validate_text_format(cls, v: str) -> str:
        apply_format(v, "text")
        return v

    def use_scientific(self, value: float) -> bool:
        magnitude = abs(value)
        if math.isnan(magnitude):
            return False
        return 0 < magnitude < self.sci_lower or magnitude >= self.sci_upper

    def format_for(self, kind: CellKind, value: Any = None) -> str:
        """Pick the default format for a value of the given kind."""
        if kind is CellKind.REAL and value is not None and self.use_scientific(value):
            return self.real_scientific
        return str(getattr(self, kind.value))

    def with_format(self, kind: Union[CellKind, str], fmt: str) -> "FormatConfig":
        """Return a new config with the default format for ``kind`` replaced.

        ``kind`` is a CellKind or one of the field names ("real",
        "real_scientific", "integer", "boolean", "text").
        """
        name = kind.value if isinstance(kind, CellKind) else str(kind)
        if name not in {"real", "real_scientific", "integer", "boolean", "text"}:
            raise ValueError(f"Unknown cell kind: {kind}")
        data = self.model_dump()
        data[name] = fmt
        return FormatConfig(**data)


DEFAULT_FORMATS = FormatConfig()
