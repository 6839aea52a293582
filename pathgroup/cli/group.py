"""Group command implementation."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable

import click

from pathgroup.cli.settings import load_cli_config
from pathgroup.core.normalize.aggregator import PathGroupAggregator
from pathgroup.core.normalize.path_normalizer import PathNormalizer, split_url
from pathgroup.ui.console import err_console, out_console
from pathgroup.ui.tables import path_group_table

logger = logging.getLogger(__name__)


def run_group(
    *,
    lines: Iterable[str],
    config_path: str | None,
    mode: str | None,
    as_url: bool,
    limit: int | None,
    output_format: str,
    verbose: bool,
) -> None:
    """Bucket input paths by template and print the groups."""
    config = load_cli_config(config_path, mode)
    aggregator = PathGroupAggregator(
        normalizer=PathNormalizer(mode=config.mode),
        max_examples=config.max_examples,
    )

    total = 0
    for line in lines:
        path = line.strip()
        if not path:
            continue
        if as_url:
            _, path = split_url(path)
        if aggregator.add(path) is not None:
            total += 1

    logger.debug("Grouped %d path(s) into %d template(s)", total, len(aggregator))

    groups = aggregator.groups()
    if limit is not None:
        groups = groups[:limit]

    if output_format == "json":
        payload = {
            "total": total,
            "templates": len(aggregator),
            "groups": [group.model_dump(mode="json") for group in groups],
        }
        click.echo(json.dumps(payload, indent=2))
        return

    if not groups:
        err_console.print("[warning]No paths to group.[/warning]")
        return

    out_console.print(path_group_table(groups, show_examples=config.max_examples > 0))
    if verbose:
        err_console.print(
            f"[muted]{total} path(s) -> {len(aggregator)} template(s)[/muted]"
        )
