# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data models for pylint output and the reporting framework's audit schema."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .severity import DiagnosticType, ReportSeverity

PylintMessageType = Literal["fatal", "error", "warning", "refactor", "convention", "info"]


class PushupModel(BaseModel):
    """Immutable model serialised with the reporting framework's camelCase keys."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    def to_json_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping that omits unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class EnabledRule(PushupModel):
    """A pylint message enabled for the configured targets."""

    symbol: str
    rule_id: str


class Audit(PushupModel):
    """Scoreable unit representing one pylint message."""

    slug: str
    title: str
    docs_url: str | None = None


class GroupRef(PushupModel):
    """Weighted reference from a group to one of its audits."""

    slug: str
    weight: int = 1


class Group(PushupModel):
    """Audits bundled by pylint message category."""

    slug: DiagnosticType
    title: str
    description: str
    docs_url: str
    refs: tuple[GroupRef, ...] = ()


class IssuePosition(PushupModel):
    """One-based source range of an issue."""

    start_line: int
    start_column: int
    end_line: int | None = None
    end_column: int | None = None


class IssueSource(PushupModel):
    file: str
    position: IssuePosition


class Issue(PushupModel):
    """Normalised finding attached to an audit output."""

    message: str
    severity: ReportSeverity
    source: IssueSource


class AuditDetails(PushupModel):
    issues: tuple[Issue, ...] = ()


class AuditOutput(PushupModel):
    """Result of one audit for a single lint run."""

    slug: str
    score: Literal[0, 1]
    value: int
    display_value: str
    details: AuditDetails = Field(default_factory=AuditDetails)


class PylintModel(PushupModel):
    """Base for pylint payload models; strict so mismatches are rejected, not coerced."""

    model_config = ConfigDict(strict=True, extra="ignore")


class PylintMessage(PylintModel):
    """Single message from ``pylint --output-format=json2``."""

    type: PylintMessageType
    symbol: str
    message: str
    message_id: str
    line: int
    column: int
    end_line: int | None = None
    end_column: int | None = None
    path: str
    confidence: str = ""
    module: str = ""
    obj: str = ""
    absolute_path: str = ""


class PylintStatistics(PylintModel):
    """Run statistics reported alongside the messages."""

    message_type_count: dict[str, int] = Field(default_factory=dict)
    modules_linted: int = 0
    score: float | None = None


class PylintReport(PylintModel):
    """Top-level ``json2`` document."""

    messages: tuple[PylintMessage, ...]
    statistics: PylintStatistics | None = None


AuditRunner = Callable[[], list[AuditOutput]]


class PluginConfig(PushupModel):
    """Plugin descriptor handed to the reporting framework."""

    slug: str
    title: str
    icon: str
    audits: tuple[Audit, ...] = ()
    groups: tuple[Group, ...] = ()
    runner: AuditRunner = Field(exclude=True)

    def audit_slugs(self) -> Sequence[str]:
        """Return audit slugs in catalog order."""
        return tuple(audit.slug for audit in self.audits)

    def group_slugs(self) -> Sequence[str]:
        return tuple(str(group.slug) for group in self.groups)


__all__ = [
    "Audit",
    "AuditDetails",
    "AuditOutput",
    "AuditRunner",
    "EnabledRule",
    "Group",
    "GroupRef",
    "Issue",
    "IssuePosition",
    "IssueSource",
    "PluginConfig",
    "PushupModel",
    "PylintModel",
    "PylintMessage",
    "PylintMessageType",
    "PylintReport",
    "PylintStatistics",
]
