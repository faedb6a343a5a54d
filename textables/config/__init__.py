"""
Configuration for textables.

Default cell formats, renderer options, and a YAML-loadable bundle of both.
"""

from .formats import CellKind, FormatConfig, DEFAULT_FORMATS, apply_format
from .render import RenderConfig, SePosition, resolve_render_config
from .settings import TableSettings

__all__ = [
    "CellKind",
    "FormatConfig",
    "DEFAULT_FORMATS",
    "apply_format",
    "RenderConfig",
    "SePosition",
    "resolve_render_config",
    "TableSettings",
]
