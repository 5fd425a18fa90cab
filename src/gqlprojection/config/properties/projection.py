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
"""Projection compiler configuration properties."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gqlprojection.core.config import config_properties


class FragmentCyclePolicy(str, Enum):
    """What to do when a fragment spread re-enters a fragment being expanded."""

    REJECT = "reject"
    BREAK = "break"


@config_properties(prefix="gqlprojection.projection")
class ProjectionProperties(BaseModel):
    """Configuration for the projection compiler (gqlprojection.projection.*)."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    typename_field: str = Field(default="__typename", alias="typename-field", min_length=1)
    on_fragment_cycle: FragmentCyclePolicy = Field(
        default=FragmentCyclePolicy.REJECT, alias="on-fragment-cycle",
    )
    excluded_fields: tuple[str, ...] = Field(default=(), alias="excluded-fields")

    @field_validator("excluded_fields", mode="before")
    @classmethod
    def _split_excluded_fields(cls, value: Any) -> Any:
        # GQLPROJECTION_PROJECTION_EXCLUDED_FIELDS=password,token
        if isinstance(value, str):
            return tuple(name.strip() for name in value.split(",") if name.strip())
        return value
