"""Normalize and classify command implementations."""

from __future__ import annotations

import json
from typing import Any

import click

from pathgroup.cli.settings import load_cli_config
from pathgroup.core.normalize.classifier import classify_segment
from pathgroup.core.normalize.path_normalizer import PathNormalizer, split_url
from pathgroup.ui.console import err_console, out_console
from pathgroup.ui.tables import segment_table


def run_normalize(
    *,
    paths: list[str],
    config_path: str | None,
    mode: str | None,
    as_url: bool,
    explain: bool,
    output_format: str,
    verbose: bool,
) -> None:
    """Print one template per input path."""
    config = load_cli_config(config_path, mode)
    normalizer = PathNormalizer(mode=config.mode)

    if not paths:
        paths = [line.strip() for line in click.get_text_stream("stdin") if line.strip()]

    records: list[dict[str, Any]] = []
    for raw in paths:
        host, path = split_url(raw) if as_url else ("", raw)

        if not explain and output_format == "text":
            click.echo(normalizer.normalize(path))
            continue

        explained = normalizer.explain(path)
        if output_format == "text":
            click.echo(explained.template)
            out_console.print(segment_table(explained.segments))
            continue

        record: dict[str, Any] = {"path": raw, "template": explained.template}
        if as_url:
            record["host"] = host
        if explain:
            record["segments"] = [s.model_dump(mode="json") for s in explained.segments]
        records.append(record)

    if output_format == "json":
        click.echo(json.dumps(records, indent=2))

    if verbose:
        err_console.print(f"[muted]Normalized {len(paths)} path(s) in {config.mode.value} mode[/muted]")


def run_classify(*, segments: list[str], output_format: str) -> None:
    """Print the identifier kind of each segment."""
    results = [{"segment": segment, "kind": classify_segment(segment).value} for segment in segments]

    if output_format == "json":
        click.echo(json.dumps(results, indent=2))
        return

    for result in results:
        click.echo(f"{result['segment']}\t{result['kind']}")

