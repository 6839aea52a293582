"""Main CLI entry point for pathgroup."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import click

from pathgroup import __version__
from pathgroup.models.classification import OutputMode

CLI_PRIMARY_COMMAND = "pathgroup"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_MODE_CHOICE = click.Choice([mode.value for mode in OutputMode])

_FORMAT_OPTION = click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Output format",
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format=LOG_FORMAT,
    )


@click.group()
@click.version_option(version=__version__, prog_name=CLI_PRIMARY_COMMAND)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    envvar="PATHGROUP_CONFIG",
    default=None,
    help="YAML config file (same as PATHGROUP_CONFIG)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: str | None) -> None:
    """Collapse concrete request paths into stable path templates."""
    _configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config_path


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@cli.command("normalize")
@click.argument("paths", nargs=-1)
@click.option("--mode", type=_MODE_CHOICE, default=None, help="Template output mode")
@click.option("--url", "as_url", is_flag=True, help="Treat inputs as URLs and drop host/query")
@click.option("--explain", is_flag=True, help="Show how each segment was classified")
@_FORMAT_OPTION
@click.pass_context
def normalize_cmd(
    ctx: click.Context,
    paths: tuple[str, ...],
    mode: str | None,
    as_url: bool,
    explain: bool,
    output_format: str,
) -> None:
    """Print the path template for each PATH.

    Reads one path per line from stdin when no PATH is given.
    """
    from pathgroup.cli.normalize import run_normalize

    run_normalize(
        paths=list(paths),
        config_path=ctx.obj.get("config_path"),
        mode=mode,
        as_url=as_url,
        explain=explain,
        output_format=output_format,
        verbose=ctx.obj.get("verbose", False),
    )


@cli.command("classify")
@click.argument("segments", nargs=-1, required=True)
@_FORMAT_OPTION
def classify_cmd(segments: tuple[str, ...], output_format: str) -> None:
    """Print the identifier kind of each SEGMENT."""
    from pathgroup.cli.normalize import run_classify

    run_classify(segments=list(segments), output_format=output_format)


@cli.command("group")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--mode", type=_MODE_CHOICE, default=None, help="Template output mode")
@click.option("--url", "as_url", is_flag=True, help="Treat lines as URLs and drop host/query")
@click.option("--limit", type=click.IntRange(min=1), default=None, help="Show only the N largest groups")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    show_default=True,
    help="Output format",
)
@click.pass_context
def group_cmd(
    ctx: click.Context,
    source: TextIO,
    mode: str | None,
    as_url: bool,
    limit: int | None,
    output_format: str,
) -> None:
    """Group paths from SOURCE (one per line, default stdin) by template."""
    from pathgroup.cli.group import run_group

    run_group(
        lines=source,
        config_path=ctx.obj.get("config_path"),
        mode=mode,
        as_url=as_url,
        limit=limit,
        output_format=output_format,
        verbose=ctx.obj.get("verbose", False),
    )


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
