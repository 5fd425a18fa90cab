# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Layered configuration: packaged defaults, project files, profiles, env vars."""

from __future__ import annotations

import importlib.resources
import os
import re
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, ValidationError

M = TypeVar("M", bound=BaseModel)

_PLACEHOLDER_RE = re.compile(r"\$\{([^}]+)\}")
_MAX_PLACEHOLDER_DEPTH = 10

_CONFIG_PROPERTIES_ATTR = "__gqlprojection_config_prefix__"

_ROOT_KEY = "gqlprojection"
_ENV_PREFIX = "GQLPROJECTION_"


def config_properties(prefix: str) -> Callable[[type[M]], type[M]]:
    """Mark a pydantic model as bindable to a configuration prefix.

    Usage:
        @config_properties(prefix="gqlprojection.projection")
        class ProjectionProperties(BaseModel):
            typename_field: str = Field(default="__typename", alias="typename-field")
    """

    def decorator(cls: type[M]) -> type[M]:
        setattr(cls, _CONFIG_PROPERTIES_ATTR, prefix)
        return cls

    return decorator


def env_key(key: str) -> str:
    """Environment variable that overrides a dot-notation key.

    ``gqlprojection.projection.on-fragment-cycle`` maps to
    ``GQLPROJECTION_PROJECTION_ON_FRAGMENT_CYCLE``.
    """
    base = key.removeprefix(f"{_ROOT_KEY}.")
    return _ENV_PREFIX + base.upper().replace(".", "_").replace("-", "_")


class Config:
    """Hierarchical configuration with dot-notation access.

    Priority (highest wins):
    1. Environment variables (see :func:`env_key`)
    2. The project YAML/TOML file and its profile overlays
    3. Packaged defaults, then model defaults
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}
        self._loaded_sources: list[str] = []

    @property
    def loaded_sources(self) -> list[str]:
        """Config sources that were loaded, in merge order."""
        return list(self._loaded_sources)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        active_profiles: list[str] | None = None,
        load_defaults: bool = True,
    ) -> Config:
        """Load configuration from a YAML or TOML file.

        A missing *path* is not an error: the packaged defaults still apply.
        Profile overlays named <stem>-<profile><suffix> next to *path*
        are merged on top, in the order given.
        """
        path = Path(path)
        data: dict[str, Any] = {}
        sources: list[str] = []

        if load_defaults:
            data = cls._load_packaged_defaults()
            sources.append("gqlprojection-defaults.yaml (packaged defaults)")

        if path.exists():
            data = cls._deep_merge(data, cls._load_config_data(path))
            sources.append(str(path))

            for profile in active_profiles or []:
                profile_path = path.parent / f"{path.stem}-{profile}{path.suffix}"
                if profile_path.exists():
                    data = cls._deep_merge(data, cls._load_config_data(profile_path))
                    sources.append(f"{profile_path} (profile: {profile})")

        instance = cls(data)
        instance._loaded_sources = sources
        return instance

    @staticmethod
    def _load_config_data(path: Path) -> dict[str, Any]:
        if path.suffix == ".toml":
            with open(path, "rb") as f:
                return tomllib.load(f) or {}
        with open(path) as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def _load_packaged_defaults() -> dict[str, Any]:
        defaults_file = importlib.resources.files("gqlprojection.resources").joinpath(
            "gqlprojection-defaults.yaml"
        )
        with importlib.resources.as_file(defaults_file) as p, open(p) as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Recursively merge override into base, with override values winning."""
        merged = dict(base)
        for key, value in override.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = Config._deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key; its environment variable wins.

        String values, including those nested in mappings and lists, may
        hold placeholders:
        - ``${ENV_VAR}`` resolved from environment variables
        - ``${config.key}`` resolved from other config values
        - ``${key:default}`` uses default if key/env not found
        """
        env_val = os.environ.get(env_key(key))
        if env_val is not None:
            return env_val

        value = self._lookup(key)
        if value is None:
            return default
        return self._resolve(value)

    def bind(self, model: type[M]) -> M:
        """Validate a @config_properties model against its section.

        Every field is read through :meth:`get`, under its alias and then
        its attribute name, so env overrides and placeholders reach the
        bound model. Invalid values fail here with a ``ValueError``.
        """
        prefix = getattr(model, _CONFIG_PROPERTIES_ATTR, None)
        if prefix is None:
            raise ValueError(f"{model.__name__} is not decorated with @config_properties")

        values: dict[str, Any] = {}
        for name, field in model.model_fields.items():
            key = field.alias or name
            value = self.get(f"{prefix}.{key}")
            if value is None and key != name:
                value = self.get(f"{prefix}.{name}")
            if value is not None:
                values[key] = value

        try:
            return model.model_validate(values)
        except ValidationError as exc:
            raise ValueError(
                f"Configuration validation failed for '{model.__name__}' (prefix='{prefix}'):\n{exc}"
            ) from exc

    def _lookup(self, key: str) -> Any:
        current: Any = self._data
        for part in key.split("."):
            if not isinstance(current, dict):
                return None
            current = current.get(part)
        return current

    def _resolve(self, value: Any) -> Any:
        if isinstance(value, str) and "${" in value:
            return self._resolve_placeholders(value)
        if isinstance(value, dict):
            return {k: self._resolve(v) for k, v in value.items()}
        if isinstance(value, list):
            return [self._resolve(v) for v in value]
        return value

    def _resolve_placeholders(self, value: str, _depth: int = 0) -> str:
        if _depth > _MAX_PLACEHOLDER_DEPTH:
            raise ValueError(
                f"Max recursion depth exceeded resolving placeholders in '{value}'. Check for circular references."
            )

        def _replace(match: re.Match[str]) -> str:
            inner = match.group(1)
            ref_key, has_default, default_val = inner.partition(":")

            env_val = os.environ.get(ref_key)
            if env_val is not None:
                return env_val

            found = self._lookup(ref_key)
            if found is not None:
                resolved = str(found)
                if "${" in resolved:
                    resolved = self._resolve_placeholders(resolved, _depth + 1)
                return resolved

            if has_default:
                return default_val

            raise ValueError(f"Cannot resolve placeholder '${{{inner}}}': not found in environment or config")

        return _PLACEHOLDER_RE.sub(_replace, value)
