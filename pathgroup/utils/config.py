"""Host pipeline configuration."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from pathgroup.models.classification import OutputMode

logger = logging.getLogger(__name__)

DEFAULT_HEADER_NAME = "x-path-group"

# RFC 9110 token characters
_HEADER_NAME_RE = re.compile(r"[!#$%&'*+.^_`|~0-9a-z-]+")


class ConfigError(ValueError):
    """Raised when a pathgroup config file cannot be loaded."""


class PathGroupConfig(BaseModel):
    """Settings for the request header pipeline and path grouping."""

    header_name: str = DEFAULT_HEADER_NAME
    mode: OutputMode = OutputMode.LABELS
    max_examples: int = Field(default=3, ge=0)

    @field_validator("header_name", mode="before")
    @classmethod
    def _default_blank_header(cls, value: Any) -> Any:
        # A blank header name falls back to the default instead of failing.
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_HEADER_NAME
        return value

    @field_validator("header_name")
    @classmethod
    def _normalize_header(cls, value: str) -> str:
        name = value.strip().lower()
        if not _HEADER_NAME_RE.fullmatch(name):
            raise ValueError(f"invalid HTTP header name: {value!r}")
        return name


def load_config(path: str | Path) -> PathGroupConfig:
    """Load a YAML config file.

    Args:
        path: YAML file with a top-level mapping. An empty file yields defaults.

    Returns:
        Validated PathGroupConfig

    Raises:
        ConfigError: If the file is missing, malformed, or fails validation
    """
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        payload = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    if not isinstance(payload, dict):
        raise ConfigError(f"Expected YAML mapping in {config_path}")

    try:
        config = PathGroupConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config in {config_path}: {exc}") from exc

    logger.debug("Loaded pathgroup config from %s: %s", config_path, config.model_dump())
    return config
