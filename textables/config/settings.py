"""
Settings bundle for table construction and rendering.

A settings file is plain YAML:

    render:
      pad: 2
      se_pos: inline
    formats:
      real: "{:.2f}"
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import ValidationError

from ..utils.errors import ConfigError
from .formats import FormatConfig
from .render import RenderConfig

logger = logging.getLogger(__name__)

_SECTIONS = {"render", "formats"}


@dataclass
class TableSettings:
    """Render options and default cell formats."""

    render: RenderConfig = field(default_factory=RenderConfig)
    formats: FormatConfig = field(default_factory=FormatConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TableSettings":
        unknown = set(data) - _SECTIONS
        if unknown:
            raise ConfigError(f"Unknown settings sections: {sorted(unknown)}")
        try:
            return cls(
                render=RenderConfig(**(data.get("render") or {})),
                formats=FormatConfig(**(data.get("formats") or {})),
            )
        except ValidationError as e:
            raise ConfigError(f"Invalid table settings: {e}") from e

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "TableSettings":
        """Load settings from a YAML file."""
        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Cannot parse settings file {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Settings file {path} must contain a mapping")

        settings = cls.from_dict(data)
        logger.info(f"Loaded table settings from {path}")
        return settings

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "render": self.render.model_dump(),
            "formats": self.formats.model_dump(),
        }
