# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Settings for the pylint plugin with layered TOML and environment sources."""

from __future__ import annotations

import logging
import os
import sys
import tomllib
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Final, Protocol

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .core_config import Category, UploadConfig, default_categories
from .errors import ConfigError

LOGGER = logging.getLogger(__name__)

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
STANDALONE_FILENAME: Final[str] = "pylint-pushup.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "pylint-pushup"
UPLOAD_KEY: Final[str] = "upload"
API_KEY_FIELD: Final[str] = "api_key"

UPLOAD_ENV_VARS: Final[dict[str, str]] = {
    "CP_API_KEY": "api_key",
    "CP_SERVER": "server",
    "CP_ORGANIZATION": "organization",
    "CP_PROJECT": "project",
}


class PushupSettings(BaseModel):
    """Resolved plugin settings."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    patterns: list[str] = Field(default_factory=list)
    python: str = Field(default_factory=lambda: sys.executable)
    cwd: Path | None = None
    timeout: float | None = Field(default=None, gt=0)
    categories: list[Category] = Field(default_factory=default_categories)
    upload: UploadConfig | None = None

    def with_overrides(self, **overrides: Any) -> PushupSettings:
        """Return a copy with every non-``None``, non-empty override applied."""

        updates = {key: value for key, value in overrides.items() if value not in (None, [], ())}
        if not updates:
            return self
        try:
            return PushupSettings.model_validate({**self.model_dump(), **updates})
        except ValidationError as exc:
            raise ConfigError(f"Invalid settings override: {exc}") from exc


class ConfigSource(Protocol):
    """Provide one layer of raw configuration data."""

    name: str

    def load(self) -> Mapping[str, Any]: ...


def _normalise_keys(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {str(key).replace("-", "_"): _normalise_keys(entry) for key, entry in value.items()}
    if isinstance(value, list):
        return [_normalise_keys(entry) for entry in value]
    return value


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class TomlConfigSource:
    """Load settings from a standalone TOML document."""

    def __init__(self, path: Path, *, name: str | None = None) -> None:
        self.path = path
        self.name = name or str(path)

    def _read(self) -> dict[str, Any]:
        if not self.path.is_file():
            return {}
        try:
            with self.path.open("rb") as handle:
                return tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {self.path}: {exc}") from exc

    def load(self) -> Mapping[str, Any]:
        return _normalise_keys(self._read())


class PyProjectConfigSource(TomlConfigSource):
    """Read settings from ``[tool.pylint-pushup]`` within ``pyproject.toml``."""

    def load(self) -> Mapping[str, Any]:
        tool_section = self._read().get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        section = tool_section.get(PYPROJECT_SECTION_KEY)
        if section is None:
            return {}
        if not isinstance(section, Mapping):
            raise ConfigError(f"[{PYPROJECT_TOOL_KEY}.{PYPROJECT_SECTION_KEY}] in {self.path} must be a table")
        return _normalise_keys(section)


class EnvironmentConfigSource:
    """Read upload credentials from ``CP_*`` environment variables."""

    name = "environment"

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self._env = os.environ if env is None else env

    def load(self) -> Mapping[str, Any]:
        upload = {field: self._env[var] for var, field in UPLOAD_ENV_VARS.items() if self._env.get(var)}
        return {UPLOAD_KEY: upload} if upload else {}


class ConfigLoader:
    """Merge configuration sources in increasing order of precedence."""

    def __init__(self, *, project_root: Path, sources: Sequence[ConfigSource]) -> None:
        if not sources:
            raise ValueError("at least one configuration source is required")
        self._project_root = project_root.resolve()
        self._sources = list(sources)

    @classmethod
    def for_root(cls, project_root: Path, *, env: Mapping[str, str] | None = None) -> ConfigLoader:
        """Build a loader reading ``pyproject.toml``, ``pylint-pushup.toml`` and the environment."""

        return cls(
            project_root=project_root,
            sources=[
                PyProjectConfigSource(project_root / PYPROJECT_FILENAME),
                TomlConfigSource(project_root / STANDALONE_FILENAME),
                EnvironmentConfigSource(env),
            ],
        )

    def load(self) -> PushupSettings:
        """Return validated settings.

        Raises:
            ConfigError: If any source is unreadable or the merged data is invalid.
        """

        merged: dict[str, Any] = {}
        for source in self._sources:
            fragment = source.load()
            if fragment:
                LOGGER.debug("loaded configuration source=%s keys=%s", source.name, sorted(fragment))
            merged = _deep_merge(merged, fragment)

        merged = self._resolve_upload(merged)
        cwd = merged.get("cwd")
        if cwd is not None:
            path = Path(str(cwd))
            merged["cwd"] = path if path.is_absolute() else self._project_root / path
        python = merged.get("python")
        if python is not None:
            interpreter = Path(str(python))
            # Bare names are looked up on PATH; only relative paths are anchored.
            if len(interpreter.parts) > 1 and not interpreter.is_absolute():
                merged["python"] = str(self._project_root / interpreter)

        try:
            return PushupSettings.model_validate(merged)
        except ValidationError as exc:
            raise ConfigError(f"Invalid pylint-pushup configuration: {exc}") from exc

    @staticmethod
    def _resolve_upload(data: dict[str, Any]) -> dict[str, Any]:
        upload = data.get(UPLOAD_KEY)
        if upload is None:
            return data
        if not isinstance(upload, Mapping):
            raise ConfigError("upload settings must be a table")
        if not upload.get(API_KEY_FIELD):
            LOGGER.debug("upload disabled: no API key configured")
            return {key: value for key, value in data.items() if key != UPLOAD_KEY}
        return data


__all__ = [
    "ConfigLoader",
    "ConfigSource",
    "EnvironmentConfigSource",
    "PushupSettings",
    "PyProjectConfigSource",
    "TomlConfigSource",
]
