"""
Configuration module for the vectypes command line.

Loads configuration from a YAML file with Pydantic validation.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

from .constants import ElementType


class VectypesConfig(BaseModel):
    element_type: ElementType = ElementType.INT32  # used when --type is not given
    debug: bool = False

    @classmethod
    def from_yaml(cls, path: Path | str | None = None) -> "VectypesConfig":
        """Load ``element_type`` and ``debug`` from a YAML mapping.

        Keys left out of the file, an empty file, or no path at all fall back
        to the defaults (``int32``, logging at INFO).

        Raises:
            FileNotFoundError: If ``path`` does not exist.
            ValueError: If the document is not a mapping.
            ValidationError: If a value is invalid, e.g. an unknown element type.
        """
        if path is None:
            return cls()

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, encoding="utf-8") as f:
            data: Any = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(
                f"Config file {config_path} must contain a mapping, got {type(data).__name__}"
            )
        return cls.model_validate(data)
