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
"""Tests for StructlogAdapter."""

import logging

import structlog

from gqlprojection.config.properties.logging import LoggingProperties
from gqlprojection.core.config import Config
from gqlprojection.logging.structlog_adapter import StructlogAdapter


class TestStructlogAdapterFromConfig:
    def test_defaults(self):
        adapter = StructlogAdapter.from_config(Config({}))
        assert adapter.properties.root_level == logging.INFO
        assert adapter.properties.format == "console"

    def test_reads_root_level_and_format(self):
        config = Config({"gqlprojection": {"logging": {"level": {"root": "debug"}, "format": "json"}}})
        adapter = StructlogAdapter.from_config(config)
        assert adapter.properties.root_level == logging.DEBUG
        assert adapter.properties.format == "json"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("GQLPROJECTION_LOGGING_FORMAT", "json")
        adapter = StructlogAdapter.from_config(Config({}))
        assert adapter.properties.format == "json"


class TestStructlogAdapterConfigure:
    def test_sets_root_level(self):
        StructlogAdapter(LoggingProperties(level={"root": "WARNING"})).configure()
        assert logging.getLogger().level == logging.WARNING

    def test_sets_per_module_levels(self):
        properties = LoggingProperties(level={"root": "INFO", "gqlprojection.projection": "DEBUG"})
        StructlogAdapter(properties).configure()
        assert logging.getLogger("gqlprojection.projection").level == logging.DEBUG

    def test_json_format_installs_json_renderer(self):
        StructlogAdapter(LoggingProperties(format="json")).configure()
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_format_installs_console_renderer(self):
        StructlogAdapter().configure()
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
