"""Config resolution shared by CLI commands."""

from __future__ import annotations

import click

from pathgroup.models.classification import OutputMode
from pathgroup.utils.config import ConfigError, PathGroupConfig, load_config


def load_cli_config(config_path: str | None, mode: str | None) -> PathGroupConfig:
    """Load the optional config file and apply command line overrides.

    An explicit ``--mode`` wins over the file's ``mode``.
    """
    try:
        config = load_config(config_path) if config_path else PathGroupConfig()
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    if mode is not None:
        config = config.model_copy(update={"mode": OutputMode(mode)})
    return config
