# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for folding pylint findings into audit outputs."""

from __future__ import annotations

import json

import pytest

from pylint_pushup.aggregation import (
    MAX_ISSUE_MESSAGE_LENGTH,
    aggregate,
    audit_output,
    bucket_issues,
    message_to_issue,
    pluralize_token,
    summarize_issues,
    truncate_issue_message,
)
from pylint_pushup.execution import parse_report
from pylint_pushup.models import Audit, Issue, IssuePosition, IssueSource
from pylint_pushup.severity import ReportSeverity


def _issue(severity: ReportSeverity) -> Issue:
    return Issue(
        message="m",
        severity=severity,
        source=IssueSource(file="pkg/mod.py", position=IssuePosition(start_line=1, start_column=1)),
    )


def test_message_to_issue_converts_columns_to_one_based(message_factory, report_factory) -> None:
    report = parse_report(report_factory([message_factory(line=7, column=4, endLine=8, endColumn=9)]))

    issue = message_to_issue(report.messages[0])

    assert issue.to_json_dict() == {
        "message": "Unused import os",
        "severity": "warning",
        "source": {
            "file": "pkg/mod.py",
            "position": {"startLine": 7, "startColumn": 5, "endLine": 8, "endColumn": 10},
        },
    }


def test_message_to_issue_omits_missing_end_position(message_factory, report_factory) -> None:
    report = parse_report(report_factory([message_factory(column=0, endLine=None, endColumn=None)]))

    position = message_to_issue(report.messages[0]).to_json_dict()["source"]["position"]

    assert position == {"startLine": 1, "startColumn": 1}


def test_message_to_issue_uses_message_type_for_severity(message_factory, report_factory) -> None:
    # The message id says convention but pylint resolved the type to error.
    report = parse_report(report_factory([message_factory(type="fatal", messageId="C0001")]))

    assert message_to_issue(report.messages[0]).severity is ReportSeverity.ERROR


def test_message_to_issue_escapes_underscores(message_factory, report_factory) -> None:
    report = parse_report(report_factory([message_factory(message="Unused variable 'my_var_name'")]))

    assert message_to_issue(report.messages[0]).message == "Unused variable 'my\\_var\\_name'"


def test_truncate_issue_message_bounds_length() -> None:
    short = "x" * MAX_ISSUE_MESSAGE_LENGTH
    long = "y" * (MAX_ISSUE_MESSAGE_LENGTH + 1)

    assert truncate_issue_message(short) == short
    truncated = truncate_issue_message(long)
    assert len(truncated) == MAX_ISSUE_MESSAGE_LENGTH
    assert truncated.endswith("...")


@pytest.mark.parametrize(
    ("token", "count", "expected"),
    [
        ("error", 1, "1 error"),
        ("error", 2, "2 errors"),
        ("info", 3, "3 infos"),
        ("policy", 2, "2 policies"),
        ("class", 2, "2 classes"),
    ],
)
def test_pluralize_token(token: str, count: int, expected: str) -> None:
    assert pluralize_token(token, count) == expected


def test_summarize_issues_orders_by_severity_and_omits_absent() -> None:
    issues = [
        _issue(ReportSeverity.INFO),
        _issue(ReportSeverity.WARNING),
        _issue(ReportSeverity.INFO),
        _issue(ReportSeverity.ERROR),
    ]

    assert summarize_issues(issues) == "1 error, 1 warning, 2 infos"
    assert summarize_issues([_issue(ReportSeverity.INFO), _issue(ReportSeverity.ERROR)]) == "1 error, 1 info"
    assert summarize_issues([]) == "passed"


@pytest.mark.parametrize("count", [0, 1, 2, 7])
def test_score_is_one_only_without_issues(count: int) -> None:
    output = audit_output("unused-import", [_issue(ReportSeverity.WARNING)] * count)

    assert output.value == count
    assert (output.score == 1) is (count == 0)


def test_aggregate_passes_every_audit_without_findings(report_factory) -> None:
    audits = [Audit(slug="unused-import", title="unused-import (W0611)"), Audit(slug="no-member", title="t")]

    outputs = aggregate(parse_report(report_factory()), audits)

    assert [output.to_json_dict() for output in outputs] == [
        {"slug": "unused-import", "score": 1, "value": 0, "displayValue": "passed", "details": {"issues": []}},
        {"slug": "no-member", "score": 1, "value": 0, "displayValue": "passed", "details": {"issues": []}},
    ]


def test_aggregate_counts_mixed_severities_for_one_rule(message_factory, report_factory) -> None:
    messages = [
        message_factory(type="error", symbol="no-member", messageId="E1101", line=3),
        message_factory(type="warning", symbol="no-member", messageId="E1101", line=4),
        message_factory(type="error", symbol="no-member", messageId="E1101", line=5),
    ]
    audits = [Audit(slug="no-member", title="no-member (E1101)")]

    (output,) = aggregate(parse_report(report_factory(messages)), audits)

    assert output.score == 0
    assert output.value == 3
    assert output.display_value == "2 errors, 1 warning"
    assert [issue.source.position.start_line for issue in output.details.issues] == [3, 4, 5]


def test_aggregate_ignores_findings_without_audit(message_factory, report_factory) -> None:
    report = parse_report(report_factory([message_factory(symbol="not-catalogued")]))

    outputs = aggregate(report, [Audit(slug="unused-import", title="t")])

    assert [(output.slug, output.value) for output in outputs] == [("unused-import", 0)]
    assert "not-catalogued" in bucket_issues(report.messages)


def test_aggregate_preserves_audit_order(message_factory, report_factory) -> None:
    report = parse_report(report_factory([message_factory(symbol="b"), message_factory(symbol="a")]))
    audits = [Audit(slug=slug, title=slug) for slug in ("c", "a", "b")]

    assert [output.slug for output in aggregate(report, audits)] == ["c", "a", "b"]


def test_aggregate_is_idempotent(message_factory, report_factory) -> None:
    stdout = report_factory(
        [
            message_factory(type="convention", symbol="invalid-name", messageId="C0103"),
            message_factory(type="warning"),
            message_factory(type="warning", line=9),
        ]
    )
    audits = [Audit(slug="unused-import", title="t"), Audit(slug="invalid-name", title="t")]

    first = json.dumps([output.to_json_dict() for output in aggregate(parse_report(stdout), audits)])
    second = json.dumps([output.to_json_dict() for output in aggregate(parse_report(stdout), audits)])

    assert first == second
