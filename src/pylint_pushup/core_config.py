# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core configuration consumed by the reporting framework: plugins, categories, upload."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Final, Literal

from pydantic import Field

from .models import PluginConfig, PushupModel
from .severity import DiagnosticType

LOGGER = logging.getLogger(__name__)

PLUGIN_SLUG: Final[str] = "pylint"
REDACTED: Final[str] = "***"


class CategoryRef(PushupModel):
    """Weighted reference from a category to a plugin group."""

    type: Literal["group", "audit"] = "group"
    plugin: str = PLUGIN_SLUG
    slug: str
    weight: int = Field(ge=0)


class Category(PushupModel):
    slug: str
    title: str
    refs: tuple[CategoryRef, ...] = ()


class UploadConfig(PushupModel):
    """Connection details for the reporting portal."""

    server: str
    api_key: str
    organization: str
    project: str

    def redacted(self) -> UploadConfig:
        return self.model_copy(update={"api_key": REDACTED})


class CoreConfig(PushupModel):
    plugins: tuple[PluginConfig, ...]
    categories: tuple[Category, ...] = ()
    upload: UploadConfig | None = None


def _group_ref(slug: DiagnosticType, weight: int) -> CategoryRef:
    return CategoryRef(type="group", plugin=PLUGIN_SLUG, slug=slug.value, weight=weight)


def default_categories() -> list[Category]:
    """Return the bug-prevention and code-style rollups of pylint's groups."""

    return [
        Category(
            slug="bug-prevention",
            title="Bug prevention",
            refs=(
                _group_ref(DiagnosticType.ERROR, 5),
                _group_ref(DiagnosticType.WARNING, 1),
            ),
        ),
        Category(
            slug="code-style",
            title="Code style",
            refs=(
                _group_ref(DiagnosticType.REFACTOR, 1),
                _group_ref(DiagnosticType.CONVENTION, 1),
                _group_ref(DiagnosticType.INFO, 0),
            ),
        ),
    ]


def _resolve_category(category: Category, plugins: Sequence[PluginConfig]) -> Category:
    groups = {(plugin.slug, group) for plugin in plugins for group in plugin.group_slugs()}
    audits = {(plugin.slug, audit) for plugin in plugins for audit in plugin.audit_slugs()}
    kept: list[CategoryRef] = []
    for ref in category.refs:
        known = groups if ref.type == "group" else audits
        if (ref.plugin, ref.slug) in known:
            kept.append(ref)
        else:
            LOGGER.debug("dropping category ref category=%s %s=%s", category.slug, ref.type, ref.slug)
    return category.model_copy(update={"refs": tuple(kept)})


def build_core_config(
    plugin: PluginConfig,
    *,
    categories: Sequence[Category] | None = None,
    upload: UploadConfig | None = None,
) -> CoreConfig:
    """Assemble the core configuration for ``plugin``.

    Category references to groups or audits the plugin does not provide are
    dropped, as are categories left without references.
    """

    plugins = (plugin,)
    resolved = [
        _resolve_category(category, plugins)
        for category in (categories if categories is not None else default_categories())
    ]
    return CoreConfig(
        plugins=plugins,
        categories=tuple(category for category in resolved if category.refs),
        upload=upload,
    )


def core_config_to_dict(config: CoreConfig, *, redact: bool = True) -> dict[str, Any]:
    """Serialise ``config`` for display; plugin runners are omitted."""

    if redact and config.upload is not None:
        config = config.model_copy(update={"upload": config.upload.redacted()})
    return config.to_json_dict()


__all__ = [
    "Category",
    "CategoryRef",
    "CoreConfig",
    "PLUGIN_SLUG",
    "UploadConfig",
    "build_core_config",
    "core_config_to_dict",
    "default_categories",
]
