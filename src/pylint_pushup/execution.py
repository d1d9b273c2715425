# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run pylint in ``json2`` mode and validate its findings document."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Final

from pydantic import ValidationError

from .errors import LintExecutionError, ReportParseError
from .models import PylintReport
from .process_utils import run_command

LOGGER = logging.getLogger(__name__)

OUTPUT_FORMAT_FLAG: Final[str] = "--output-format=json2"


def build_lint_command(python: str, patterns: Sequence[str]) -> list[str]:
    return [python, "-m", "pylint", OUTPUT_FORMAT_FLAG, *patterns]


def parse_report(stdout: str) -> PylintReport:
    """Validate ``stdout`` as a pylint ``json2`` document.

    Raises:
        ReportParseError: If the text is not JSON or does not match the schema.
    """

    try:
        return PylintReport.model_validate_json(stdout)
    except ValidationError as exc:
        raise ReportParseError(f"Invalid pylint json2 output: {exc}") from exc


def run_lint(
    patterns: Sequence[str],
    *,
    python: str,
    cwd: Path | None = None,
    timeout: float | None = None,
) -> PylintReport:
    """Execute pylint against ``patterns`` and return the parsed report.

    Pylint exits non-zero whenever it reports a message, so the exit status is
    not inspected. Any stderr output means pylint could not run.

    Raises:
        LintExecutionError: If pylint cannot be started or wrote to stderr.
        ReportParseError: If stdout is not a valid ``json2`` document.
    """

    try:
        completed = run_command(build_lint_command(python, patterns), cwd=cwd, timeout=timeout, check=False)
    except FileNotFoundError as exc:
        raise LintExecutionError(str(exc)) from exc
    if completed.stderr:
        raise LintExecutionError(completed.stderr)

    report = parse_report(completed.stdout or "")
    if report.statistics is not None:
        LOGGER.debug(
            "pylint linted %d modules score=%s messages=%d",
            report.statistics.modules_linted,
            report.statistics.score,
            len(report.messages),
        )
    return report


__all__ = ["OUTPUT_FORMAT_FLAG", "build_lint_command", "parse_report", "run_lint"]
