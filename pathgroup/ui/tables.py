"""Reusable Rich table formatters."""

from __future__ import annotations

from rich.markup import escape
from rich.table import Table

from pathgroup.models.classification import ClassificationResult, PathGroup


def path_group_table(groups: list[PathGroup], *, show_examples: bool = True) -> Table:
    """Build a Rich Table of templates ordered by request count."""
    table = Table(title="Path Groups", show_lines=False, pad_edge=False)
    table.add_column("Count", justify="right", style="bold")
    table.add_column("Template", no_wrap=True)
    table.add_column("Kinds", style="kind.label")
    if show_examples:
        table.add_column("Examples", style="muted", overflow="fold")

    for group in groups:
        row = [
            str(group.count),
            escape(group.template),
            ", ".join(kind.value for kind in group.kinds) or "-",
        ]
        if show_examples:
            row.append(escape("\n".join(group.examples)))
        table.add_row(*row)

    return table


def segment_table(results: list[ClassificationResult]) -> Table:
    """Build a Rich Table showing how each segment was classified."""
    table = Table(title="Segments", show_lines=False, pad_edge=False)
    table.add_column("Segment", no_wrap=True)
    table.add_column("Kind")
    table.add_column("Token")

    for result in results:
        style = "kind.literal" if result.kind.is_literal else "kind.label"
        table.add_row(
            escape(result.segment),
            f"[{style}]{result.kind.value}[/{style}]",
            escape(result.token),
        )

    return table
