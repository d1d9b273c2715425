# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Assemble the pylint plugin descriptor for the reporting framework."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Final

from .aggregation import aggregate
from .catalog import build_catalog
from .core_config import PLUGIN_SLUG
from .discovery import find_enabled_rules
from .execution import run_lint
from .models import Audit, AuditOutput, PluginConfig

LOGGER = logging.getLogger(__name__)

PLUGIN_TITLE: Final[str] = "PyLint"
PLUGIN_ICON: Final[str] = "python"


class LintRunner:
    """Deferred findings run bound to the patterns and audits of one catalog."""

    def __init__(
        self,
        patterns: Sequence[str],
        audits: Sequence[Audit],
        *,
        python: str,
        cwd: Path | None = None,
        timeout: float | None = None,
    ) -> None:
        self.patterns = tuple(patterns)
        self.audits = tuple(audits)
        self.python = python
        self.cwd = cwd
        self.timeout = timeout

    def __call__(self) -> list[AuditOutput]:
        report = run_lint(self.patterns, python=self.python, cwd=self.cwd, timeout=self.timeout)
        outputs = aggregate(report, self.audits)
        failed = sum(1 for output in outputs if output.score == 0)
        LOGGER.debug("aggregated audits=%d failed=%d", len(outputs), failed)
        return outputs


def pylint_plugin(
    patterns: Sequence[str],
    *,
    python: str | None = None,
    cwd: Path | None = None,
    timeout: float | None = None,
) -> PluginConfig:
    """Discover enabled pylint messages and return the plugin descriptor.

    Discovery runs immediately; the returned ``runner`` executes pylint only
    when called.

    Args:
        patterns: Modules, packages or paths passed to pylint.
        python: Interpreter used as ``<python> -m pylint``; defaults to the
            current interpreter.
        cwd: Working directory for both pylint invocations.
        timeout: Optional per-invocation timeout in seconds.

    Returns:
        PluginConfig: Audits, groups and a zero-argument runner.

    Raises:
        RuleDiscoveryError: If pylint cannot list its enabled messages.
    """

    interpreter = python or sys.executable
    rules = find_enabled_rules(patterns, python=interpreter, cwd=cwd, timeout=timeout)
    catalog = build_catalog(rules)
    return PluginConfig(
        slug=PLUGIN_SLUG,
        title=PLUGIN_TITLE,
        icon=PLUGIN_ICON,
        audits=tuple(catalog.audits),
        groups=tuple(catalog.groups),
        runner=LintRunner(patterns, catalog.audits, python=interpreter, cwd=cwd, timeout=timeout),
    )


__all__ = ["LintRunner", "PLUGIN_ICON", "PLUGIN_TITLE", "pylint_plugin"]
