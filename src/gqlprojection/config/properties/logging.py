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
"""Logging configuration properties."""

from __future__ import annotations

import logging
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from gqlprojection.core.config import config_properties

ROOT_LOGGER = "root"


@config_properties(prefix="gqlprojection.logging")
class LoggingProperties(BaseModel):
    """Configuration for logging (gqlprojection.logging.*).

    ``level`` maps logger names to level names; the ``root`` key sets the
    root level. A bare level name, as given by
    ``GQLPROJECTION_LOGGING_LEVEL=debug``, sets the root level only.
    """

    level: dict[str, str] = Field(default_factory=lambda: {ROOT_LOGGER: "INFO"})
    format: Literal["console", "json"] = "console"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_levels(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = {ROOT_LOGGER: value}
        if not isinstance(value, dict):
            return value
        known = logging.getLevelNamesMapping()
        levels = {str(name): str(level).upper() for name, level in value.items()}
        for name, level in levels.items():
            if level not in known:
                raise ValueError(f"Unknown log level '{level}' for logger '{name}'")
        return levels

    @property
    def root_level(self) -> int:
        return logging.getLevelNamesMapping()[self.level.get(ROOT_LOGGER, "INFO")]

    @property
    def module_levels(self) -> dict[str, int]:
        known = logging.getLevelNamesMapping()
        return {name: known[level] for name, level in self.level.items() if name != ROOT_LOGGER}
