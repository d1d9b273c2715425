# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Fold pylint findings into per-audit scores and summaries."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from typing import Final

from .models import (
    Audit,
    AuditDetails,
    AuditOutput,
    Issue,
    IssuePosition,
    IssueSource,
    PylintMessage,
    PylintReport,
)
from .severity import ReportSeverity, severity_rank, type_to_severity

MAX_ISSUE_MESSAGE_LENGTH: Final[int] = 1024
ELLIPSIS: Final[str] = "..."
PASSED_LABEL: Final[str] = "passed"


def escape_message(message: str) -> str:
    """Escape underscores so messages render literally in markdown reports."""

    return message.replace("_", "\\_")


def truncate_issue_message(message: str, max_length: int = MAX_ISSUE_MESSAGE_LENGTH) -> str:
    if len(message) <= max_length:
        return message
    return message[: max_length - len(ELLIPSIS)] + ELLIPSIS


def pluralize(token: str) -> str:
    if token.endswith("y"):
        return f"{token[:-1]}ies"
    if token.endswith("s"):
        return f"{token}es"
    return f"{token}s"


def pluralize_token(token: str, count: int) -> str:
    """Return ``"<count> <token>"`` with the token pluralised unless the count is one."""

    return f"{count} {token if abs(count) == 1 else pluralize(token)}"


def message_to_issue(message: PylintMessage) -> Issue:
    """Convert a pylint message into an issue with one-based columns.

    Args:
        message: Validated pylint message.

    Returns:
        Issue: Issue whose severity derives from the message's own type. The end
        of the range is included only when pylint reported it.
    """

    position = IssuePosition(
        start_line=message.line,
        start_column=message.column + 1,
        end_line=message.end_line,
        end_column=message.end_column + 1 if message.end_column is not None else None,
    )
    return Issue(
        message=truncate_issue_message(escape_message(message.message)),
        severity=type_to_severity(message.type),
        source=IssueSource(file=message.path, position=position),
    )


def bucket_issues(messages: Iterable[PylintMessage]) -> dict[str, list[Issue]]:
    """Group converted issues by the symbol of the message that produced them."""

    buckets: dict[str, list[Issue]] = {}
    for message in messages:
        buckets.setdefault(message.symbol, []).append(message_to_issue(message))
    return buckets


def summarize_issues(issues: Sequence[Issue]) -> str:
    """Return a summary such as ``"2 errors, 1 warning"`` or ``"passed"``.

    Severities are listed from most to least severe; absent severities are
    left out.
    """

    counts: Counter[ReportSeverity] = Counter(issue.severity for issue in issues)
    ordered = sorted(counts.items(), key=lambda item: severity_rank(item[0]), reverse=True)
    phrases = [pluralize_token(severity.value, count) for severity, count in ordered]
    return ", ".join(phrases) or PASSED_LABEL


def audit_output(slug: str, issues: Sequence[Issue]) -> AuditOutput:
    return AuditOutput(
        slug=slug,
        score=1 if not issues else 0,
        value=len(issues),
        display_value=summarize_issues(issues),
        details=AuditDetails(issues=tuple(issues)),
    )


def aggregate(report: PylintReport, audits: Sequence[Audit]) -> list[AuditOutput]:
    """Produce one output per audit, in audit order.

    Findings for symbols that have no audit are ignored.
    """

    buckets: Mapping[str, list[Issue]] = bucket_issues(report.messages)
    return [audit_output(audit.slug, buckets.get(audit.slug, [])) for audit in audits]


__all__ = [
    "MAX_ISSUE_MESSAGE_LENGTH",
    "aggregate",
    "audit_output",
    "bucket_issues",
    "escape_message",
    "message_to_issue",
    "pluralize",
    "pluralize_token",
    "summarize_issues",
    "truncate_issue_message",
]
