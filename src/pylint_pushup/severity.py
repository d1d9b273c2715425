# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Pylint message categories and their reduction to report severities."""

from __future__ import annotations

from enum import StrEnum
from typing import Final


class DiagnosticType(StrEnum):
    """Message categories reported by pylint."""

    FATAL = "fatal"
    ERROR = "error"
    WARNING = "warning"
    REFACTOR = "refactor"
    CONVENTION = "convention"
    INFO = "info"


class ReportSeverity(StrEnum):
    """Issue severities understood by the reporting framework."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


_CATEGORY_CODES: Final[dict[str, DiagnosticType]] = {
    "F": DiagnosticType.FATAL,
    "E": DiagnosticType.ERROR,
    "W": DiagnosticType.WARNING,
    "R": DiagnosticType.REFACTOR,
    "C": DiagnosticType.CONVENTION,
    "I": DiagnosticType.INFO,
}

_TYPE_TO_SEVERITY: Final[dict[DiagnosticType, ReportSeverity]] = {
    DiagnosticType.FATAL: ReportSeverity.ERROR,
    DiagnosticType.ERROR: ReportSeverity.ERROR,
    DiagnosticType.WARNING: ReportSeverity.WARNING,
    DiagnosticType.REFACTOR: ReportSeverity.INFO,
    DiagnosticType.CONVENTION: ReportSeverity.INFO,
    DiagnosticType.INFO: ReportSeverity.INFO,
}

_SEVERITY_RANK: Final[dict[ReportSeverity, int]] = {
    ReportSeverity.INFO: 0,
    ReportSeverity.WARNING: 1,
    ReportSeverity.ERROR: 2,
}


def category_code_to_type(code: str | None) -> DiagnosticType | None:
    """Return the category encoded by the first character of a message id.

    Args:
        code: Pylint message id (``W0611``) or its bare category letter.

    Returns:
        DiagnosticType | None: Matching category, or ``None`` when the code is
        empty or uses an unknown letter.
    """

    if not code:
        return None
    return _CATEGORY_CODES.get(code[0])


def type_to_severity(diagnostic_type: DiagnosticType | str) -> ReportSeverity:
    """Reduce a pylint category to the three-level report severity."""

    return _TYPE_TO_SEVERITY[DiagnosticType(diagnostic_type)]


def severity_rank(severity: ReportSeverity | str) -> int:
    """Return a sortable rank where ``error`` outranks ``warning`` and ``info``."""

    return _SEVERITY_RANK[ReportSeverity(severity)]


__all__ = [
    "DiagnosticType",
    "ReportSeverity",
    "category_code_to_type",
    "severity_rank",
    "type_to_severity",
]
