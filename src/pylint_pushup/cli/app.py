# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application exposing catalog discovery, lint runs and core config output."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer

from ..config import PushupSettings
from ..core_config import build_core_config, core_config_to_dict
from ..errors import PushupError
from ..models import PluginConfig
from ..plugin import pylint_plugin
from .rendering import build_catalog_table, build_outputs_table, print_table
from .shared import (
    DEBUG_OPTION,
    EMOJI_OPTION,
    ERROR_EXIT_CODE,
    ISSUES_EXIT_CODE,
    PATTERNS_ARGUMENT,
    PYTHON_OPTION,
    ROOT_OPTION,
    TIMEOUT_OPTION,
    CLIError,
    CLILogger,
    CommandContext,
    load_context,
)


class OutputFormat(StrEnum):
    JSON = "json"
    TABLE = "table"


FORMAT_OPTION = Annotated[OutputFormat, typer.Option("--format", "-f", help="Output format.")]

app = typer.Typer(
    name="pylint-pushup",
    help="Expose pylint messages and findings as Code PushUp audits.",
    no_args_is_help=True,
    add_completion=False,
)


def _resolve(
    *,
    root: Path,
    patterns: list[str] | None,
    python: str | None,
    timeout: float | None,
    emoji: bool,
    debug: bool,
) -> CommandContext:
    try:
        return load_context(
            root=root, patterns=patterns, python=python, timeout=timeout, emoji=emoji, debug=debug
        )
    except CLIError as exc:
        CLILogger(use_emoji=emoji).fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc


def _discover(settings: PushupSettings, logger: CLILogger) -> PluginConfig:
    try:
        return pylint_plugin(
            settings.patterns,
            python=settings.python,
            cwd=settings.cwd,
            timeout=settings.timeout,
        )
    except PushupError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=ERROR_EXIT_CODE) from exc


@app.command("catalog")
def catalog_command(
    patterns: PATTERNS_ARGUMENT = None,
    root: ROOT_OPTION = Path("."),
    python: PYTHON_OPTION = None,
    timeout: TIMEOUT_OPTION = None,
    output_format: FORMAT_OPTION = OutputFormat.JSON,
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """List the audits and groups derived from pylint's enabled messages."""

    context = _resolve(root=root, patterns=patterns, python=python, timeout=timeout, emoji=emoji, debug=debug)
    plugin = _discover(context.settings, context.logger)
    if not plugin.audits:
        context.logger.warn("pylint reported no enabled messages")
    if output_format is OutputFormat.TABLE:
        print_table(build_catalog_table(plugin))
        return
    context.logger.echo_json(
        {
            "audits": [audit.to_json_dict() for audit in plugin.audits],
            "groups": [group.to_json_dict() for group in plugin.groups],
        }
    )


@app.command("run")
def run_audits_command(
    patterns: PATTERNS_ARGUMENT = None,
    root: ROOT_OPTION = Path("."),
    python: PYTHON_OPTION = None,
    timeout: TIMEOUT_OPTION = None,
    output_format: FORMAT_OPTION = OutputFormat.JSON,
    fail_on_issues: Annotated[
        bool,
        typer.Option("--fail-on-issues", help="Exit with status 1 when any audit has issues."),
    ] = False,
    show_passing: Annotated[
        bool,
        typer.Option("--show-passing", help="Include passing audits in table output."),
    ] = False,
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Run pylint and print one result per audit."""

    context = _resolve(root=root, patterns=patterns, python=python, timeout=timeout, emoji=emoji, debug=debug)
    plugin = _discover(context.settings, context.logger)
    try:
        outputs = plugin.runner()
    except PushupError as exc:
        context.logger.fail(str(exc))
        raise typer.Exit(code=ERROR_EXIT_CODE) from exc

    failing = [output for output in outputs if output.score == 0]
    if output_format is OutputFormat.TABLE:
        print_table(build_outputs_table(outputs, show_passing=show_passing))
        if not failing:
            context.logger.ok(f"All {len(outputs)} audits passed")
    else:
        context.logger.echo_json([output.to_json_dict() for output in outputs])

    if fail_on_issues and failing:
        raise typer.Exit(code=ISSUES_EXIT_CODE)


@app.command("config")
def config_command(
    patterns: PATTERNS_ARGUMENT = None,
    root: ROOT_OPTION = Path("."),
    python: PYTHON_OPTION = None,
    timeout: TIMEOUT_OPTION = None,
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Print the core configuration (plugin, categories, upload) as JSON."""

    context = _resolve(root=root, patterns=patterns, python=python, timeout=timeout, emoji=emoji, debug=debug)
    settings = context.settings
    plugin = _discover(settings, context.logger)
    core = build_core_config(plugin, categories=settings.categories, upload=settings.upload)
    context.logger.echo_json(core_config_to_dict(core))


def run() -> None:  # pragma: no cover - thin wrapper for console scripts
    app()


__all__ = ["app", "run"]
