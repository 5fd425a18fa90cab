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
"""Tests for the log_on_error decorator."""

from __future__ import annotations

from typing import Any

import pytest
from structlog.testing import capture_logs

from gqlprojection.kernel.exceptions import FragmentNotFoundException, SchemaMismatchException
from gqlprojection.logging.decorators import log_on_error


class RecordingLogger:
    def __init__(self) -> None:
        self.records: list[tuple[str, str, dict[str, Any]]] = []

    def error(self, event: str, **kwargs: Any) -> None:
        self.records.append(("error", event, kwargs))

    def exception(self, event: str, **kwargs: Any) -> None:
        self.records.append(("exception", event, kwargs))


class TestLogOnError:
    def test_returns_result_without_logging(self):
        logger = RecordingLogger()

        @log_on_error(logger)
        def compile_ok() -> dict[str, int]:
            return {"a": 1}

        assert compile_ok() == {"a": 1}
        assert logger.records == []

    def test_logs_projection_exception_and_reraises(self):
        logger = RecordingLogger()

        @log_on_error(logger)
        def compile_bad() -> None:
            raise SchemaMismatchException("unknown field", context={"field": "x"})

        with pytest.raises(SchemaMismatchException):
            compile_bad()

        level, event, fields = logger.records[0]
        assert level == "error"
        assert event == "projection_compilation_failed"
        assert fields["kind"] == "SCHEMA_MISMATCH"
        assert fields["code"] == "PROJECTION_SCHEMA"
        assert fields["field"] == "x"

    def test_logs_unexpected_exception_with_traceback(self):
        logger = RecordingLogger()

        @log_on_error(logger, event="custom_event")
        def explode() -> None:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            explode()

        assert logger.records[0][0] == "exception"
        assert logger.records[0][1] == "custom_event"

    def test_preserves_function_metadata(self):
        @log_on_error(RecordingLogger())
        def documented() -> None:
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."

    def test_defaults_to_module_logger(self):
        @log_on_error()
        def expand() -> None:
            raise FragmentNotFoundException("Fragment 'F' not found", context={"fragment": "F"})

        with capture_logs() as logs, pytest.raises(FragmentNotFoundException):
            expand()

        assert logs[0]["event"] == "projection_compilation_failed"
        assert logs[0]["log_level"] == "error"
        assert logs[0]["kind"] == "FRAGMENT_NOT_FOUND"
        assert logs[0]["fragment"] == "F"
