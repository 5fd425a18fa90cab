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
"""Exception hierarchy for gqlprojection.

All compiler errors inherit from ProjectionException so callers can catch a
single type, or a specific subclass for targeted handling. Each class carries
an ErrorKind discriminator in addition to the error code and context.

Categories:
- ContractViolationException: arguments not shaped like a resolve info or type
- SchemaMismatchException: a requested field is unknown to the type metadata
- FragmentNotFoundException: a fragment spread names an undefined fragment
- FragmentCycleException: a fragment transitively spreads itself
"""

from __future__ import annotations

from typing import ClassVar

from gqlprojection.kernel.types import ErrorKind


class ProjectionException(Exception):
    """Base exception for all gqlprojection errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "PROJECTION_SCHEMA").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    kind: ClassVar[ErrorKind | None] = None
    default_code: ClassVar[str | None] = None

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code if code is not None else self.default_code
        self.context: dict = context if context is not None else {}


class ContractViolationException(ProjectionException):
    """An argument does not satisfy the compiler's input contract."""

    kind = ErrorKind.CONTRACT_VIOLATION
    default_code = "PROJECTION_CONTRACT"


class SchemaMismatchException(ProjectionException):
    """The selection references something the type metadata does not describe."""

    kind = ErrorKind.SCHEMA_MISMATCH
    default_code = "PROJECTION_SCHEMA"


class FragmentNotFoundException(ProjectionException):
    """A fragment spread names a fragment with no definition."""

    kind = ErrorKind.FRAGMENT_NOT_FOUND
    default_code = "PROJECTION_FRAGMENT"


class FragmentCycleException(ProjectionException):
    """A fragment spreads itself, directly or through other fragments."""

    kind = ErrorKind.FRAGMENT_CYCLE
    default_code = "PROJECTION_FRAGMENT_CYCLE"
