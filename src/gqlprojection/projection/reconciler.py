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
"""Merge a lowered projection with the storage paths computed fields depend on."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from gqlprojection.projection.graph import INCLUDE, MongoDbProjection
from gqlprojection.projection.lowerer import PATH_SEPARATOR


def merge_projection_and_resolve_dependencies(
    projection: Mapping[str, int],
    dependencies: Iterable[str],
) -> MongoDbProjection:
    """Add each dependency path to a copy of *projection* under subsumption.

    A path already present, or covered by an ancestor key, is skipped.
    Otherwise its descendant keys are dropped and the path is added, so no
    key in the result is a dot-prefix of another.
    """
    merged: MongoDbProjection = dict(projection)

    for dependency in dependencies:
        if dependency in merged:
            continue
        if any(dependency.startswith(key + PATH_SEPARATOR) for key in merged):
            continue

        descendant_prefix = dependency + PATH_SEPARATOR
        for key in [key for key in merged if key.startswith(descendant_prefix)]:
            del merged[key]
        merged[dependency] = INCLUDE

    return merged
