# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the core configuration built around the plugin."""

from __future__ import annotations

from pylint_pushup.catalog import build_catalog
from pylint_pushup.core_config import (
    Category,
    CategoryRef,
    UploadConfig,
    build_core_config,
    core_config_to_dict,
    default_categories,
)
from pylint_pushup.models import EnabledRule, PluginConfig


def _plugin(*pairs: tuple[str, str]) -> PluginConfig:
    catalog = build_catalog([EnabledRule(symbol=symbol, rule_id=rule_id) for symbol, rule_id in pairs])
    return PluginConfig(
        slug="pylint",
        title="PyLint",
        icon="python",
        audits=tuple(catalog.audits),
        groups=tuple(catalog.groups),
        runner=lambda: [],
    )


def test_default_categories_weights() -> None:
    weights = {
        category.slug: [(ref.slug, ref.weight) for ref in category.refs] for category in default_categories()
    }

    assert weights == {
        "bug-prevention": [("error", 5), ("warning", 1)],
        "code-style": [("refactor", 1), ("convention", 1), ("info", 0)],
    }


def test_build_core_config_drops_refs_to_missing_groups() -> None:
    plugin = _plugin(("no-member", "E1101"), ("invalid-name", "C0103"))

    core = build_core_config(plugin)

    refs = {category.slug: [ref.slug for ref in category.refs] for category in core.categories}
    assert refs == {"bug-prevention": ["error"], "code-style": ["convention"]}


def test_build_core_config_drops_empty_categories() -> None:
    core = build_core_config(_plugin(("unused-import", "W0611")))

    assert [category.slug for category in core.categories] == ["bug-prevention"]


def test_build_core_config_accepts_audit_refs() -> None:
    category = Category(
        slug="imports",
        title="Imports",
        refs=(
            CategoryRef(type="audit", slug="unused-import", weight=2),
            CategoryRef(type="audit", slug="wildcard-import", weight=1),
        ),
    )

    core = build_core_config(_plugin(("unused-import", "W0611")), categories=[category])

    assert [ref.slug for ref in core.categories[0].refs] == ["unused-import"]


def test_core_config_dict_redacts_api_key() -> None:
    upload = UploadConfig(server="https://api.example.dev/graphql", api_key="secret", organization="o", project="p")

    payload = core_config_to_dict(build_core_config(_plugin(("no-member", "E1101")), upload=upload))

    assert payload["upload"] == {
        "server": "https://api.example.dev/graphql",
        "apiKey": "***",
        "organization": "o",
        "project": "p",
    }
    assert payload["plugins"][0]["slug"] == "pylint"
    assert "runner" not in payload["plugins"][0]
    assert payload["categories"][0]["refs"] == [{"type": "group", "plugin": "pylint", "slug": "error", "weight": 5}]


def test_core_config_without_upload() -> None:
    payload = core_config_to_dict(build_core_config(_plugin(("no-member", "E1101"))))

    assert "upload" not in payload
