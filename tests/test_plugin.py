# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""End-to-end tests for the plugin descriptor and its deferred runner."""

from __future__ import annotations

from pathlib import Path

import pytest

from pylint_pushup.errors import LintExecutionError
from pylint_pushup.plugin import pylint_plugin

PYTHON = "/usr/bin/python3"


def test_plugin_descriptor_from_discovery(fake_pylint) -> None:
    plugin = pylint_plugin(["pkg"], python=PYTHON)

    assert (plugin.slug, plugin.title, plugin.icon) == ("pylint", "PyLint", "python")
    assert plugin.audit_slugs() == ("unused-import", "missing-docstring")
    assert plugin.group_slugs() == ("warning", "convention")
    assert [len(group.refs) for group in plugin.groups] == [1, 1]
    assert len(fake_pylint.calls) == 1


def test_runner_is_deferred_until_called(fake_pylint) -> None:
    plugin = pylint_plugin(["pkg"], python=PYTHON, cwd=Path("/work"))
    assert all("--output-format=json2" not in call for call in fake_pylint.calls)

    plugin.runner()

    assert fake_pylint.calls[-1] == [PYTHON, "-m", "pylint", "--output-format=json2", "pkg"]


def test_runner_passes_clean_run(fake_pylint) -> None:
    outputs = pylint_plugin(["pkg"], python=PYTHON).runner()

    assert [(output.slug, output.score, output.value, output.display_value) for output in outputs] == [
        ("unused-import", 1, 0, "passed"),
        ("missing-docstring", 1, 0, "passed"),
    ]


def test_runner_reports_findings(fake_pylint, message_factory, report_factory) -> None:
    fake_pylint.report = report_factory(
        [
            message_factory(type="error", symbol="unused-import"),
            message_factory(type="error", symbol="unused-import", line=2),
            message_factory(type="warning", symbol="unused-import", line=3),
        ]
    )
    fake_pylint.lint_returncode = 6

    unused_import, missing_docstring = pylint_plugin(["pkg"], python=PYTHON).runner()

    assert (unused_import.score, unused_import.value, unused_import.display_value) == (0, 3, "2 errors, 1 warning")
    assert (missing_docstring.score, missing_docstring.display_value) == (1, "passed")


def test_runner_propagates_execution_failure(fake_pylint) -> None:
    plugin = pylint_plugin(["pkg"], python=PYTHON)
    fake_pylint.stderr = "usage: pylint [options]"

    with pytest.raises(LintExecutionError):
        plugin.runner()


def test_plugin_with_empty_discovery(fake_pylint) -> None:
    fake_pylint.listing = "No config file found, using default configuration\n"

    plugin = pylint_plugin(["pkg"], python=PYTHON)

    assert plugin.audits == ()
    assert plugin.groups == ()
    assert plugin.runner() == []


def test_plugin_serialisation_omits_runner(fake_pylint) -> None:
    payload = pylint_plugin(["pkg"], python=PYTHON).to_json_dict()

    assert "runner" not in payload
    assert payload["audits"][0]["slug"] == "unused-import"
