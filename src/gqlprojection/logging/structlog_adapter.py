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
"""Apply LoggingProperties to structlog and stdlib logging."""

from __future__ import annotations

import logging
import sys

import structlog

from gqlprojection.config.properties.logging import LoggingProperties
from gqlprojection.core.config import Config

_SHARED_PROCESSORS: tuple[structlog.types.Processor, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
)


class StructlogAdapter:
    """Route gqlprojection's structlog events through stdlib logging.

    Events go to stderr so projections printed on stdout stay parseable.
    """

    def __init__(self, properties: LoggingProperties | None = None) -> None:
        self._properties = properties if properties is not None else LoggingProperties()

    @classmethod
    def from_config(cls, config: Config) -> StructlogAdapter:
        return cls(config.bind(LoggingProperties))

    @property
    def properties(self) -> LoggingProperties:
        return self._properties

    def configure(self) -> None:
        renderer: structlog.types.Processor
        if self._properties.format == "json":
            renderer = structlog.processors.JSONRenderer()
        else:
            renderer = structlog.dev.ConsoleRenderer()

        structlog.configure(
            processors=[*_SHARED_PROCESSORS, renderer],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(
            format="%(message)s",
            stream=sys.stderr,
            level=self._properties.root_level,
            force=True,
        )
        for name, level in self._properties.module_levels.items():
            logging.getLogger(name).setLevel(level)
