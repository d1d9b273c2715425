# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build audits and category groups from the enabled pylint messages."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final, NamedTuple

from .models import Audit, EnabledRule, Group, GroupRef
from .severity import DiagnosticType, category_code_to_type

DOCS_BASE_URL: Final[str] = "https://pylint.readthedocs.io/en/stable/user_guide/messages"

# Wording follows pylint's own help formatter.
GROUP_DESCRIPTIONS: Final[dict[DiagnosticType, str]] = {
    DiagnosticType.INFO: "for informational messages",
    DiagnosticType.CONVENTION: "for programming standard violation",
    DiagnosticType.REFACTOR: "for bad code smell",
    DiagnosticType.WARNING: "for python specific problems",
    DiagnosticType.ERROR: "for probable bugs in the code",
    DiagnosticType.FATAL: "if an error occurred which prevented pylint from doing further processing",
}


class Catalog(NamedTuple):
    """Audits and groups derived from one discovery run."""

    audits: list[Audit]
    groups: list[Group]


def audit_docs_url(diagnostic_type: DiagnosticType, symbol: str) -> str:
    return f"{DOCS_BASE_URL}/{diagnostic_type}/{symbol}.html"


def group_docs_url(diagnostic_type: DiagnosticType) -> str:
    return f"{DOCS_BASE_URL}/messages_overview.html#{diagnostic_type}"


def list_audits(rules: Sequence[EnabledRule]) -> list[Audit]:
    """Return one audit per enabled rule, linking docs when the category is known."""

    audits: list[Audit] = []
    for rule in rules:
        diagnostic_type = category_code_to_type(rule.rule_id)
        audits.append(
            Audit(
                slug=rule.symbol,
                title=f"{rule.symbol} ({rule.rule_id})",
                docs_url=audit_docs_url(diagnostic_type, rule.symbol) if diagnostic_type else None,
            )
        )
    return audits


def list_groups(rules: Sequence[EnabledRule]) -> list[Group]:
    """Partition rules by category into equally weighted groups.

    Rules with an unknown category letter are left out of every group. Groups
    appear in the order their first member was listed.
    """

    members: dict[DiagnosticType, list[str]] = {}
    for rule in rules:
        diagnostic_type = category_code_to_type(rule.rule_id)
        if diagnostic_type is None:
            continue
        members.setdefault(diagnostic_type, []).append(rule.symbol)

    return [
        Group(
            slug=diagnostic_type,
            title=diagnostic_type.value.capitalize(),
            description=GROUP_DESCRIPTIONS[diagnostic_type],
            docs_url=group_docs_url(diagnostic_type),
            refs=tuple(GroupRef(slug=symbol, weight=1) for symbol in symbols),
        )
        for diagnostic_type, symbols in members.items()
    ]


def build_catalog(rules: Sequence[EnabledRule]) -> Catalog:
    return Catalog(audits=list_audits(rules), groups=list_groups(rules))


__all__ = [
    "Catalog",
    "DOCS_BASE_URL",
    "GROUP_DESCRIPTIONS",
    "audit_docs_url",
    "build_catalog",
    "group_docs_url",
    "list_audits",
    "list_groups",
]
