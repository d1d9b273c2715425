# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (options, logging, errors, settings)."""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any, Final

import typer

from ..config import ConfigLoader, PushupSettings
from ..errors import ConfigError
from ..logging import configure_logging, fail, ok, warn

CONFIG_EXIT_CODE: Final[int] = 2
ERROR_EXIT_CODE: Final[int] = 2
ISSUES_EXIT_CODE: Final[int] = 1

PATTERNS_ARGUMENT = Annotated[
    list[str] | None,
    typer.Argument(help="Modules, packages or paths passed to pylint. Defaults to configured patterns."),
]
ROOT_OPTION = Annotated[
    Path,
    typer.Option("--root", "-r", help="Project root used to locate configuration.", file_okay=False),
]
PYTHON_OPTION = Annotated[
    str | None,
    typer.Option("--python", help="Interpreter used to run `python -m pylint`."),
]
TIMEOUT_OPTION = Annotated[
    float | None,
    typer.Option("--timeout", help="Seconds to wait for each pylint invocation.", min=0.0),
]
EMOJI_OPTION = Annotated[bool, typer.Option("--emoji/--no-emoji", help="Toggle emoji in console messages.")]
DEBUG_OPTION = Annotated[bool, typer.Option("--debug", help="Emit debug logging.")]


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around console helpers respecting CLI emoji settings."""

    use_emoji: bool

    def fail(self, message: str) -> None:
        fail(message, use_emoji=self.use_emoji)

    def warn(self, message: str) -> None:
        warn(message, use_emoji=self.use_emoji)

    def ok(self, message: str) -> None:
        ok(message, use_emoji=self.use_emoji)

    def echo_json(self, payload: Any) -> None:
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def build_cli_logger(*, emoji: bool, debug: bool = False) -> CLILogger:
    """Configure logging for the command and return its console logger."""

    configure_logging(debug=debug)
    return CLILogger(use_emoji=emoji)


@dataclass(slots=True, frozen=True)
class CommandContext:
    """Settings and logger resolved for one CLI invocation."""

    settings: PushupSettings
    logger: CLILogger


def load_context(
    *,
    root: Path,
    patterns: Sequence[str] | None,
    python: str | None,
    timeout: float | None,
    emoji: bool,
    debug: bool,
) -> CommandContext:
    """Load settings for ``root`` and apply command-line overrides.

    Raises:
        CLIError: If configuration is invalid or no patterns are available.
    """

    logger = build_cli_logger(emoji=emoji, debug=debug)
    try:
        settings = ConfigLoader.for_root(root).load()
        settings = settings.with_overrides(patterns=list(patterns or []), python=python, timeout=timeout)
    except ConfigError as exc:
        raise CLIError(str(exc), exit_code=CONFIG_EXIT_CODE) from exc
    if settings.cwd is None:
        settings = settings.with_overrides(cwd=root.resolve())
    if not settings.patterns:
        raise CLIError(
            "No pylint targets given; pass PATTERNS or set `patterns` in [tool.pylint-pushup].",
            exit_code=CONFIG_EXIT_CODE,
        )
    return CommandContext(settings=settings, logger=logger)


__all__ = [
    "CLIError",
    "CLILogger",
    "CommandContext",
    "DEBUG_OPTION",
    "EMOJI_OPTION",
    "ERROR_EXIT_CODE",
    "ISSUES_EXIT_CODE",
    "PATTERNS_ARGUMENT",
    "PYTHON_OPTION",
    "ROOT_OPTION",
    "TIMEOUT_OPTION",
    "build_cli_logger",
    "load_context",
]
