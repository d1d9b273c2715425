# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
import subprocess
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

import pytest

PYTHON = "/usr/bin/python3"

LISTING = """\
Enabled messages:
  unused-import (W0611)
  missing-docstring (C0111)

Disabled messages:
  locally-disabled (I0011)
"""


def make_message(**overrides: Any) -> dict[str, Any]:
    """Return a json2 message mapping with sensible defaults."""

    message: dict[str, Any] = {
        "type": "warning",
        "symbol": "unused-import",
        "message": "Unused import os",
        "messageId": "W0611",
        "confidence": "UNDEFINED",
        "module": "pkg.mod",
        "obj": "",
        "line": 1,
        "column": 0,
        "endLine": 1,
        "endColumn": 9,
        "path": "pkg/mod.py",
        "absolutePath": "/work/pkg/mod.py",
    }
    message.update(overrides)
    return message


def make_report(messages: Sequence[dict[str, Any]] = ()) -> str:
    """Serialise ``messages`` as a pylint json2 document."""

    return json.dumps(
        {
            "messages": list(messages),
            "statistics": {
                "messageTypeCount": {
                    "fatal": 0,
                    "error": 0,
                    "warning": 0,
                    "refactor": 0,
                    "convention": 0,
                    "info": 0,
                },
                "modulesLinted": 1,
                "score": 10.0,
            },
        }
    )


@dataclass
class FakePylint:
    """Stand-in for ``subprocess.run`` answering both pylint modes."""

    listing: str = LISTING
    listing_returncode: int = 0
    report: str = field(default_factory=make_report)
    lint_returncode: int = 0
    stderr: str = ""
    calls: list[list[str]] = field(default_factory=list)

    def __call__(self, command: Sequence[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        self.calls.append(list(command))
        if "--list-msgs-enabled" in command:
            return subprocess.CompletedProcess(command, self.listing_returncode, stdout=self.listing, stderr="")
        return subprocess.CompletedProcess(command, self.lint_returncode, stdout=self.report, stderr=self.stderr)


@pytest.fixture
def fake_pylint(monkeypatch: pytest.MonkeyPatch) -> FakePylint:
    fake = FakePylint()
    monkeypatch.setattr("pylint_pushup.process_utils.subprocess.run", fake)
    return fake


@pytest.fixture
def message_factory() -> Callable[..., dict[str, Any]]:
    return make_message


@pytest.fixture
def report_factory() -> Callable[..., str]:
    return make_report
