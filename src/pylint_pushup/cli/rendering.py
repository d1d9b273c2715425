# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Rich table rendering for catalog and audit results."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from ..models import AuditOutput, PluginConfig


def build_catalog_table(plugin: PluginConfig) -> Table:
    """Return a table listing every audit with the group it belongs to."""

    membership = {ref.slug: str(group.slug) for group in plugin.groups for ref in group.refs}
    table = Table(title=f"{plugin.title} audits ({len(plugin.audits)})")
    table.add_column("Audit", style="bold")
    table.add_column("Title")
    table.add_column("Group")
    for audit in plugin.audits:
        table.add_row(audit.slug, audit.title, membership.get(audit.slug, "-"))
    return table


def build_outputs_table(outputs: Sequence[AuditOutput], *, show_passing: bool) -> Table:
    """Return a table of audit results, failing audits first."""

    rows = sorted(outputs, key=lambda output: (output.score, -output.value, output.slug))
    table = Table(title="Audit results")
    table.add_column("Audit", style="bold")
    table.add_column("Issues", justify="right")
    table.add_column("Summary")
    for output in rows:
        if output.score and not show_passing:
            continue
        style = "green" if output.score else "red"
        table.add_row(output.slug, str(output.value), output.display_value, style=style)
    return table


def print_table(table: Table) -> None:
    Console(highlight=False, soft_wrap=True).print(table)


__all__ = ["build_catalog_table", "build_outputs_table", "print_table"]
