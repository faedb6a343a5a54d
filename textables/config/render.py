"""Renderer options shared by the ASCII and LaTeX backends."""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

SePosition = Literal["below", "inline", "none"]


class RenderConfig(BaseModel):
    """Layout options for ``to_ascii`` and ``to_latex``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    pad: int = Field(1, ge=0, description="Spaces on each side of a column separator")
    se_pos: SePosition = Field(
        "below",
        description="Standard errors on the next line, inline in parentheses, or hidden",
    )
    star: bool = Field(True, description="Append significance stars to values")

    def updated(self, **options: Any) -> "RenderConfig":
        """Return a validated copy with ``options`` overridden."""
        return RenderConfig(**{**self.model_dump(), **options})


def resolve_render_config(
    config: Optional[RenderConfig] = None, **options: Any
) -> RenderConfig:
    """Combine an optional base config with keyword overrides."""
    base = config or RenderConfig()
    return base.updated(**options) if options else base
