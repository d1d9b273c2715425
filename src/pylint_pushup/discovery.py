# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Discovery of the pylint messages enabled for a set of targets."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Final

from .errors import RuleDiscoveryError
from .models import EnabledRule
from .process_utils import SubprocessExecutionError, run_command

LOGGER = logging.getLogger(__name__)

ENABLED_HEADER: Final[str] = "Enabled messages:"
SECTION_INDENT: Final[str] = "  "
LIST_ENABLED_FLAG: Final[str] = "--list-msgs-enabled"
_RULE_LINE_RE: Final[re.Pattern[str]] = re.compile(r"^  ([\w-]+) \(([A-Z]\d+)\)$")


def _enabled_section(lines: Sequence[str]) -> Iterable[str]:
    """Yield the indented lines following the enabled-messages header."""

    try:
        start = lines.index(ENABLED_HEADER)
    except ValueError:
        return
    for line in lines[start + 1 :]:
        if not line.startswith(SECTION_INDENT):
            return
        yield line


def parse_enabled_rules(stdout: str) -> list[EnabledRule]:
    """Parse ``pylint --list-msgs-enabled`` output into enabled rules.

    Args:
        stdout: Text emitted by pylint.

    Returns:
        list[EnabledRule]: Rules in order of first appearance, one per symbol.
        Empty when the enabled-messages header is missing.
    """

    rules: list[EnabledRule] = []
    seen: set[str] = set()
    for line in _enabled_section(stdout.splitlines()):
        match = _RULE_LINE_RE.match(line)
        if match is None:
            continue
        symbol, rule_id = match.groups()
        if symbol in seen:
            continue
        seen.add(symbol)
        rules.append(EnabledRule(symbol=symbol, rule_id=rule_id))
    return rules


def build_discovery_command(python: str, patterns: Sequence[str]) -> list[str]:
    return [python, "-m", "pylint", LIST_ENABLED_FLAG, *patterns]


def find_enabled_rules(
    patterns: Sequence[str],
    *,
    python: str,
    cwd: Path | None = None,
    timeout: float | None = None,
) -> list[EnabledRule]:
    """Run pylint in listing mode and return the enabled rules.

    Raises:
        RuleDiscoveryError: If pylint cannot be started or exits unsuccessfully.
    """

    command = build_discovery_command(python, patterns)
    try:
        completed = run_command(command, cwd=cwd, timeout=timeout, check=True)
    except (SubprocessExecutionError, FileNotFoundError) as exc:
        raise RuleDiscoveryError(f"Unable to list enabled pylint messages: {exc}") from exc

    rules = parse_enabled_rules(completed.stdout or "")
    if not rules:
        LOGGER.warning("pylint reported no enabled messages for patterns=%s", list(patterns))
    else:
        LOGGER.debug("discovered %d enabled pylint messages", len(rules))
    return rules


__all__ = [
    "ENABLED_HEADER",
    "build_discovery_command",
    "find_enabled_rules",
    "parse_enabled_rules",
]
