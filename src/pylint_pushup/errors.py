# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised while discovering, running and reporting pylint."""

from __future__ import annotations


class PushupError(RuntimeError):
    """Base class for failures surfaced to the plugin caller."""


class RuleDiscoveryError(PushupError):
    """Raised when pylint cannot list the enabled messages."""


class LintExecutionError(PushupError):
    """Raised when the findings run writes to stderr."""

    def __init__(self, stderr: str) -> None:
        super().__init__(stderr.strip() or "pylint reported an error")
        self.stderr = stderr


class ReportParseError(PushupError):
    """Raised when pylint's ``json2`` output does not match the expected schema."""


class ConfigError(PushupError):
    """Raised when configuration input is invalid."""


__all__ = [
    "ConfigError",
    "LintExecutionError",
    "PushupError",
    "ReportParseError",
    "RuleDiscoveryError",
]
